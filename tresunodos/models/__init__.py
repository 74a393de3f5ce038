# Data models and enums
from .enums import Role, Phase, Outcome, WinPatternType, PatternSet, MoveRejection
from .position import Position, GRID_SIZE, TOTAL_POSITIONS, all_positions
from .move import Move
from .win_pattern import WinPattern, WinResult

__all__ = [
    'Role', 'Phase', 'Outcome', 'WinPatternType', 'PatternSet', 'MoveRejection',
    'Position', 'GRID_SIZE', 'TOTAL_POSITIONS', 'all_positions',
    'Move', 'WinPattern', 'WinResult',
]
