"""
Tres, Uno, Dos: a three-role placement and removal game on a 4x4 grid.
"""
from .models import Role, Phase, Outcome, PatternSet, MoveRejection, Position, Move, WinPattern, WinResult
from .game import PositionSet, GameState, MoveProcessor, ValidationResult, TerminationChecker
from .evaluation import WinDetector, CANONICAL_PATTERNS, REDUCED_PATTERNS
from .engine import GameEngine, new_game, try_move

__version__ = "1.0.0"

__all__ = [
    'Role', 'Phase', 'Outcome', 'PatternSet', 'MoveRejection', 'Position', 'Move',
    'WinPattern', 'WinResult', 'PositionSet', 'GameState', 'MoveProcessor',
    'ValidationResult', 'TerminationChecker', 'WinDetector', 'CANONICAL_PATTERNS',
    'REDUCED_PATTERNS', 'GameEngine', 'new_game', 'try_move',
]
