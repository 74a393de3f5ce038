"""
Win pattern models for the Tres, Uno, Dos game.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple
from .enums import Role, WinPatternType
from .position import Position


@dataclass(frozen=True)
class WinPattern:
    """
    Represents a winning line on the grid.

    Attributes:
        type: Kind of line (row, column, diagonal, anti-diagonal)
        positions: The four cells that form this line
        description: Human-readable description of the pattern
    """
    type: WinPatternType
    positions: Tuple[Position, ...]
    description: str = ""

    def __post_init__(self):
        """Validate pattern parameters."""
        if len(self.positions) != 4:
            raise ValueError(f"Win pattern must have exactly 4 positions, got {len(self.positions)}")

        for pos in self.positions:
            if not pos.is_on_board():
                raise ValueError(f"Win pattern position must be on the board, got {pos}")

        if len(set(self.positions)) != 4:
            raise ValueError("Win pattern positions must be distinct")

    def is_completed_by(self, occupied: Iterable[Position]) -> bool:
        """Check if every cell of this pattern is in the given collection."""
        owned = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
        return all(pos in owned for pos in self.positions)

    def __str__(self) -> str:
        cells = " ".join(str(pos) for pos in self.positions)
        return f"{self.description or self.type.value}: {cells}"


@dataclass(frozen=True)
class WinResult:
    """
    Represents a completed line.

    Attributes:
        winner: Placing role that owns the line
        winning_pattern: The pattern that created the win
    """
    winner: Role
    winning_pattern: WinPattern

    def __post_init__(self):
        if self.winner is Role.DOS:
            raise ValueError("Only placing roles can win with a line")

    def __str__(self) -> str:
        return f"{self.winner.name.title()} wins with {self.winning_pattern}"
