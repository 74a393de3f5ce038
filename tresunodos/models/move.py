"""
Move model for the Tres, Uno, Dos game.
"""
from dataclasses import dataclass
import time
from .enums import Role, Phase
from .position import Position


@dataclass
class Move:
    """
    Represents an accepted ply.

    Attributes:
        position: Cell that was placed on or cleared
        role: Role that made the move
        phase: Phase the move was made in
        timestamp: Time when the move was made
    """
    position: Position
    role: Role
    phase: Phase
    timestamp: float = None

    def __post_init__(self):
        """Set timestamp if not provided and validate parameters."""
        if self.timestamp is None:
            self.timestamp = time.time()

        if not self.position.is_on_board():
            raise ValueError(f"Move position must be on the board, got {self.position}")

        if self.role is not self.phase.role:
            raise ValueError(f"{self.role.name} cannot move during {self.phase.value}")

    @property
    def is_removal(self) -> bool:
        return self.phase is Phase.THIRD_REMOVES

    def __str__(self) -> str:
        """String representation of the move."""
        action = "removes" if self.is_removal else "places"
        return f"{self.role.name.title()} {action} {self.position}"
