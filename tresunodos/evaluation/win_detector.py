"""
Win detection for the Tres, Uno, Dos game.
"""
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..models.enums import PatternSet, WinPatternType
from ..models.position import Position, GRID_SIZE
from ..models.win_pattern import WinPattern


def _line(pattern_type: WinPatternType, description: str, cells) -> WinPattern:
    return WinPattern(
        type=pattern_type,
        positions=tuple(Position(x, y) for x, y in cells),
        description=description,
    )


TOP_ROW = _line(WinPatternType.ROW, "Top row", [(1, y) for y in range(1, GRID_SIZE + 1)])
MAIN_DIAGONAL = _line(WinPatternType.DIAGONAL, "Main diagonal", [(i, i) for i in range(1, GRID_SIZE + 1)])
ANTI_DIAGONAL = _line(
    WinPatternType.ANTI_DIAGONAL, "Anti-diagonal",
    [(i, GRID_SIZE + 1 - i) for i in range(1, GRID_SIZE + 1)],
)
RIGHT_COLUMN = _line(WinPatternType.COLUMN, "Right column", [(GRID_SIZE, y) for y in range(1, GRID_SIZE + 1)])

CANONICAL_PATTERNS: Tuple[WinPattern, ...] = (TOP_ROW, MAIN_DIAGONAL, ANTI_DIAGONAL, RIGHT_COLUMN)

# Same lines without the main diagonal.
REDUCED_PATTERNS: Tuple[WinPattern, ...] = (TOP_ROW, ANTI_DIAGONAL, RIGHT_COLUMN)

PATTERN_SETS: Dict[PatternSet, Tuple[WinPattern, ...]] = {
    PatternSet.CANONICAL: CANONICAL_PATTERNS,
    PatternSet.REDUCED: REDUCED_PATTERNS,
}


class WinDetector:
    """
    Detects completed winning lines in a collection of positions.

    The pattern list is fixed at construction. It is either one of the
    named PatternSet lists or any iterable of WinPattern objects.
    """

    def __init__(self, patterns: Union[PatternSet, Iterable[WinPattern]] = PatternSet.CANONICAL):
        """Initialize the win detector with its winning patterns."""
        if isinstance(patterns, PatternSet):
            self._winning_patterns: Tuple[WinPattern, ...] = PATTERN_SETS[patterns]
        else:
            self._winning_patterns = tuple(patterns)

        for pattern in self._winning_patterns:
            if not isinstance(pattern, WinPattern):
                raise ValueError(f"Expected WinPattern, got {type(pattern).__name__}")

    def has_line(self, positions: Iterable[Position]) -> bool:
        """
        Check if the collection fully contains any winning pattern.

        Args:
            positions: Cells held by one role (a PositionSet or any iterable)

        Returns:
            True if at least one pattern is complete
        """
        return self.find_line(positions) is not None

    def find_line(self, positions: Iterable[Position]) -> Optional[WinPattern]:
        """Return the first complete pattern in configuration order, or None."""
        owned = frozenset(positions)
        for pattern in self._winning_patterns:
            if pattern.is_completed_by(owned):
                return pattern
        return None

    def get_all_winning_patterns(self) -> List[WinPattern]:
        """Get all configured winning patterns."""
        return list(self._winning_patterns)

    def __len__(self) -> int:
        return len(self._winning_patterns)
