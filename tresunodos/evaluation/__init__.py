# Win detection
from .win_detector import (
    WinDetector,
    CANONICAL_PATTERNS,
    REDUCED_PATTERNS,
    PATTERN_SETS,
    TOP_ROW,
    MAIN_DIAGONAL,
    ANTI_DIAGONAL,
    RIGHT_COLUMN,
)

__all__ = [
    'WinDetector', 'CANONICAL_PATTERNS', 'REDUCED_PATTERNS', 'PATTERN_SETS',
    'TOP_ROW', 'MAIN_DIAGONAL', 'ANTI_DIAGONAL', 'RIGHT_COLUMN',
]
