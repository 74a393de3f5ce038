# Board state and rules
from .position_set import PositionSet
from .state import GameState, CorruptionReport
from .move_processor import MoveProcessor, ValidationResult
from .termination import TerminationChecker

__all__ = [
    'PositionSet', 'GameState', 'CorruptionReport',
    'MoveProcessor', 'ValidationResult', 'TerminationChecker',
]
