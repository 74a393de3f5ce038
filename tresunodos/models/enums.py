"""
Core enums for the Tres, Uno, Dos game.
"""
from enum import Enum


class Role(Enum):
    """Represents the three participants in the game."""
    UNO = 'U'
    TRES = 'T'
    DOS = 'D'


class Phase(Enum):
    """Which role is entitled to move next."""
    SECOND_PLACES = 'second_places'
    FIRST_PLACES = 'first_places'
    THIRD_REMOVES = 'third_removes'

    @property
    def role(self) -> Role:
        """Role that acts during this phase."""
        return _PHASE_ROLES[self]

    @property
    def is_placement(self) -> bool:
        return self is not Phase.THIRD_REMOVES


_PHASE_ROLES = {
    Phase.SECOND_PLACES: Role.TRES,
    Phase.FIRST_PLACES: Role.UNO,
    Phase.THIRD_REMOVES: Role.DOS,
}


class Outcome(Enum):
    """Represents the current result of the game."""
    IN_PROGRESS = 'in_progress'
    UNO_WINS = 'uno_wins'
    TRES_WINS = 'tres_wins'
    DOS_WINS = 'dos_wins'


class WinPatternType(Enum):
    """Types of winning lines on the 4x4 grid."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"
    ANTI_DIAGONAL = "anti_diagonal"


class PatternSet(Enum):
    """Named lists of winning lines the engine can be configured with."""
    CANONICAL = "canonical"
    REDUCED = "reduced"


class MoveRejection(Enum):
    """Reasons a move can be refused."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    NOT_FREE = "not_free"
    NOT_OCCUPIED = "not_occupied"
