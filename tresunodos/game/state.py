"""
Mutable game state for the Tres, Uno, Dos game.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..models.enums import Role, Phase
from ..models.move import Move
from ..models.position import Position, TOTAL_POSITIONS, all_positions
from .position_set import PositionSet


@dataclass
class CorruptionReport:
    """Report of partition invariant violations."""
    is_corrupted: bool
    issues: List[str]


@dataclass
class GameState:
    """
    The single mutable aggregate of a game.

    The three position sets partition the 16 grid cells: every cell is in
    exactly one of them before and after every accepted move.

    Attributes:
        owned_by_first: Cells held by Uno
        owned_by_second: Cells held by Tres
        free: Unoccupied cells
        phase: Whose move it is
        terminal: True once the game has ended
        move_history: Accepted moves in the order they were played
    """
    owned_by_first: PositionSet = field(default_factory=PositionSet)
    owned_by_second: PositionSet = field(default_factory=PositionSet)
    free: PositionSet = field(default_factory=lambda: PositionSet(all_positions()))
    phase: Phase = Phase.SECOND_PLACES
    terminal: bool = False
    move_history: List[Move] = field(default_factory=list)

    @property
    def current_role(self) -> Role:
        """Role entitled to the next move."""
        return self.phase.role

    def is_free(self, pos: Position) -> bool:
        return pos in self.free

    def pieces_of(self, role: Role) -> PositionSet:
        """Get the set of cells held by a placing role."""
        if role is Role.UNO:
            return self.owned_by_first
        if role is Role.TRES:
            return self.owned_by_second
        raise ValueError(f"{role.name} does not hold pieces")

    def owner_of(self, pos: Position) -> Optional[Role]:
        """Get the role holding a cell, or None if the cell is free or off the board."""
        if pos in self.owned_by_first:
            return Role.UNO
        if pos in self.owned_by_second:
            return Role.TRES
        return None

    def occupied(self) -> List[Position]:
        """Cells held by either placing role, in display order."""
        return sorted(
            list(self.owned_by_first) + list(self.owned_by_second),
            key=lambda p: (p.y, p.x),
        )

    def board_string(self) -> str:
        """16 characters, row-major: 'U', 'T' or '_' per cell."""
        chars = []
        for index in range(TOTAL_POSITIONS):
            owner = self.owner_of(Position.from_index(index))
            chars.append(owner.value if owner is not None else '_')
        return ''.join(chars)

    def copy(self) -> 'GameState':
        """Create an independent copy of the state."""
        return GameState(
            owned_by_first=self.owned_by_first.copy(),
            owned_by_second=self.owned_by_second.copy(),
            free=self.free.copy(),
            phase=self.phase,
            terminal=self.terminal,
            move_history=list(self.move_history),
        )

    def detect_corruption(self) -> CorruptionReport:
        """
        Check the partition invariant.

        Returns:
            CorruptionReport listing overlaps, off-board cells and missing cells
        """
        issues = []
        sets = {
            'Uno': self.owned_by_first,
            'Tres': self.owned_by_second,
            'free': self.free,
        }

        for name, cells in sets.items():
            for pos in cells:
                if not pos.is_on_board():
                    issues.append(f"{name} holds off-board position {pos}")

        names = list(sets)
        for i, first in enumerate(names):
            for second in names[i + 1:]:
                overlap = sets[first].as_frozenset() & sets[second].as_frozenset()
                for pos in sorted(overlap, key=lambda p: (p.y, p.x)):
                    issues.append(f"{pos} is in both {first} and {second}")

        covered = self.owned_by_first.as_frozenset() | self.owned_by_second.as_frozenset() | self.free.as_frozenset()
        for pos in all_positions():
            if pos not in covered:
                issues.append(f"{pos} is missing from every set")

        total = len(self.owned_by_first) + len(self.owned_by_second) + len(self.free)
        if total != TOTAL_POSITIONS:
            issues.append(f"Expected {TOTAL_POSITIONS} cells across all sets, found {total}")

        return CorruptionReport(is_corrupted=len(issues) > 0, issues=issues)

    def validate_board_state(self) -> bool:
        """True if the partition invariant holds."""
        return not self.detect_corruption().is_corrupted
