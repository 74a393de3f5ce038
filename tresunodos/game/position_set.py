"""
Unordered collection of unique grid positions.
"""
from typing import Iterable, Iterator, List, Optional, Set

from ..models.position import Position


class PositionSet:
    """
    A set of Positions with total insert/remove operations.

    Duplicate insertion and removal of an absent position are no-ops, so the
    collection never holds the same cell twice.
    """

    def __init__(self, positions: Optional[Iterable[Position]] = None):
        self._positions: Set[Position] = set(positions) if positions is not None else set()

    def contains(self, pos: Position) -> bool:
        """Check if an equal position is a member."""
        return pos in self._positions

    def insert(self, pos: Position) -> None:
        """Add a position; does nothing if it is already present."""
        self._positions.add(pos)

    def remove(self, pos: Position) -> None:
        """Drop a position; does nothing if it is absent."""
        self._positions.discard(pos)

    def contains_all(self, positions: Iterable[Position]) -> bool:
        return all(pos in self._positions for pos in positions)

    def is_empty(self) -> bool:
        return not self._positions

    def sorted(self) -> List[Position]:
        """Members in display order: by row, then column."""
        return sorted(self._positions, key=lambda p: (p.y, p.x))

    def as_frozenset(self) -> frozenset:
        return frozenset(self._positions)

    def copy(self) -> 'PositionSet':
        return PositionSet(self._positions)

    def __contains__(self, pos: object) -> bool:
        return pos in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionSet):
            return NotImplemented
        return self._positions == other._positions

    def __repr__(self) -> str:
        return f"PositionSet({self.sorted()!r})"

    def __str__(self) -> str:
        return " ".join(str(pos) for pos in self.sorted())
