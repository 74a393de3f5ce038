"""
Game engine controller for Tres, Uno, Dos.

This module composes the move processor and the termination checker into
the operations a presenter calls: start a game, try a move, and read the
outcome. It also provides move logging and simple usage counters.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .evaluation.win_detector import WinDetector
from .game.move_processor import MoveProcessor, ValidationResult
from .game.state import GameState
from .game.termination import TerminationChecker
from .models.enums import Outcome, PatternSet
from .models.position import Position
from .models.win_pattern import WinPattern, WinResult


class GameEngine:
    """
    Stateless rules engine; every call takes an explicit GameState.

    Features:
    - Configurable winning line list
    - Termination checked automatically after every accepted move
    - Logging of accepted and rejected moves
    """

    DEFAULT_PATTERN_SET = PatternSet.CANONICAL

    def __init__(self, patterns: Union[PatternSet, Iterable[WinPattern]] = DEFAULT_PATTERN_SET,
                 enable_logging: bool = True):
        """
        Initialize the game engine.

        Args:
            patterns: Named pattern set or explicit list of winning lines
            enable_logging: Whether to log moves and game results
        """
        self.enable_logging = enable_logging

        self.win_detector = WinDetector(patterns)
        self.move_processor = MoveProcessor()
        self.termination_checker = TerminationChecker(self.win_detector)

        self.games_started = 0
        self.accepted_moves = 0
        self.rejected_moves = 0
        self.games_finished = 0

        self.logger = logging.getLogger('tresunodos')
        if self.enable_logging:
            self._setup_logging()

    def _setup_logging(self):
        """Set up logging for move tracking."""
        self.logger.setLevel(logging.INFO)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def new_game(self) -> GameState:
        """Create a game with every cell free and Tres to move."""
        self.games_started += 1
        return GameState()

    def validate_move(self, state: GameState, pos: Position) -> ValidationResult:
        return self.move_processor.validate(state, pos)

    def try_move(self, state: GameState, pos: Position) -> bool:
        """
        Apply a move and check for the end of the game.

        Args:
            state: Game to update
            pos: Target cell

        Returns:
            True if the move was applied, False if it was rejected (state unchanged)
        """
        role = state.current_role
        result = self.move_processor.validate(state, pos)
        if not result.is_valid:
            self.rejected_moves += 1
            if self.enable_logging:
                self.logger.warning(f"Rejected {role.name.title()} at {pos}: {result.error_message}")
            return False

        self.move_processor.apply(state, pos)
        self.accepted_moves += 1
        if self.enable_logging:
            self.logger.info(f"Ply {len(state.move_history)} - {state.move_history[-1]}")

        outcome = self.termination_checker.check(state)
        if outcome is not Outcome.IN_PROGRESS:
            self.games_finished += 1
            if self.enable_logging:
                self.logger.info(f"Game over after {len(state.move_history)} plies: {outcome.value}")
        return True

    def outcome(self, state: GameState) -> Outcome:
        """Outcome of the game, re-derived from the stored sets."""
        return self.termination_checker.evaluate(state)

    def winning_result(self, state: GameState) -> Optional[WinResult]:
        return self.termination_checker.winning_result(state)

    def legal_moves(self, state: GameState) -> List[Position]:
        """Cells the current role may choose."""
        return self.move_processor.legal_moves(state)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get counters of engine usage.

        Returns:
            Dictionary with game and move counts
        """
        attempts = self.accepted_moves + self.rejected_moves
        return {
            'games_started': self.games_started,
            'games_finished': self.games_finished,
            'accepted_moves': self.accepted_moves,
            'rejected_moves': self.rejected_moves,
            'rejection_rate': self.rejected_moves / attempts if attempts else 0.0,
            'patterns': len(self.win_detector),
        }

    def reset_statistics(self):
        """Reset all usage counters."""
        self.games_started = 0
        self.accepted_moves = 0
        self.rejected_moves = 0
        self.games_finished = 0


_default_engine: Optional[GameEngine] = None


def _engine() -> GameEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = GameEngine(enable_logging=False)
    return _default_engine


def new_game() -> GameState:
    """Start a game using the default canonical engine."""
    return _engine().new_game()


def try_move(state: GameState, pos: Position) -> bool:
    """Apply a move using the default canonical engine."""
    return _engine().try_move(state, pos)
