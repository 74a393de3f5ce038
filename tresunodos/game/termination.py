"""
End-of-game detection.
"""
from typing import Optional

from ..evaluation.win_detector import WinDetector
from ..models.enums import Outcome, Role
from ..models.win_pattern import WinResult
from .state import GameState


class TerminationChecker:
    """
    Decides whether a game has ended and who won.

    Priority: Uno line, then Tres line, then exhaustion of free cells
    (a win for Dos).
    """

    def __init__(self, win_detector: Optional[WinDetector] = None):
        self.win_detector = win_detector if win_detector is not None else WinDetector()

    def evaluate(self, state: GameState) -> Outcome:
        """Derive the outcome from the stored sets without mutating the state."""
        if self.win_detector.has_line(state.owned_by_first):
            return Outcome.UNO_WINS
        if self.win_detector.has_line(state.owned_by_second):
            return Outcome.TRES_WINS
        if state.free.is_empty():
            return Outcome.DOS_WINS
        return Outcome.IN_PROGRESS

    def check(self, state: GameState) -> Outcome:
        """Evaluate the outcome and mark the state terminal if the game is over."""
        outcome = self.evaluate(state)
        if outcome is not Outcome.IN_PROGRESS:
            state.terminal = True
        return outcome

    def winning_result(self, state: GameState) -> Optional[WinResult]:
        """Name the role and line that won, if the game was won by a line."""
        for role in (Role.UNO, Role.TRES):
            pattern = self.win_detector.find_line(state.pieces_of(role))
            if pattern is not None:
                return WinResult(winner=role, winning_pattern=pattern)
        return None
