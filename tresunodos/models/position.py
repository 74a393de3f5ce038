"""
Position model for the 4x4 game grid.
"""
from dataclasses import dataclass
from typing import Iterator

GRID_SIZE = 4
TOTAL_POSITIONS = GRID_SIZE * GRID_SIZE


@dataclass(frozen=True)
class Position:
    """
    Represents a cell coordinate on the grid.

    Attributes:
        x: Column coordinate, 1-4 for cells on the board
        y: Row coordinate, 1-4 for cells on the board

    Positions off the board can be constructed so that callers are able to
    hand raw input to the engine, which rejects them as moves. Coordinates
    must be plain ints; bools and floats raise ValueError.
    """
    x: int
    y: int

    def __post_init__(self):
        """Validate position parameters."""
        for name, value in (('x', self.x), ('y', self.y)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Position {name} must be an integer, got {value!r}")

    def is_on_board(self) -> bool:
        """Check if both coordinates lie inside the grid."""
        return 1 <= self.x <= GRID_SIZE and 1 <= self.y <= GRID_SIZE

    @property
    def index(self) -> int:
        """Row-major cell number (0-15), rows ordered by y."""
        if not self.is_on_board():
            raise ValueError(f"Position {self} is not on the board")
        return (self.y - 1) * GRID_SIZE + (self.x - 1)

    @classmethod
    def from_index(cls, index: int) -> 'Position':
        """Build the position for a row-major cell number."""
        if not (0 <= index < TOTAL_POSITIONS):
            raise ValueError(f"Cell index must be between 0 and {TOTAL_POSITIONS - 1}, got {index}")
        return cls(x=index % GRID_SIZE + 1, y=index // GRID_SIZE + 1)

    @classmethod
    def parse(cls, text: str) -> 'Position':
        """
        Parse user input of the form "x y" or "x,y".

        Raises:
            ValueError: If the text does not hold exactly two integers
        """
        if ',' in text:
            parts = [part.strip() for part in text.split(',')]
        else:
            parts = text.split()
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Expected two coordinates, got {text!r}")
        try:
            return cls(x=int(parts[0]), y=int(parts[1]))
        except ValueError:
            raise ValueError(f"Coordinates must be integers, got {text!r}") from None

    def __str__(self) -> str:
        return f"[{self.x},{self.y}]"


def all_positions() -> Iterator[Position]:
    """Iterates over every cell of the grid."""
    for x in range(1, GRID_SIZE + 1):
        for y in range(1, GRID_SIZE + 1):
            yield Position(x, y)
