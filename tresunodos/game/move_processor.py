"""
Turn-phase state machine: validates and applies one ply.
"""
from dataclasses import dataclass
from typing import List, Optional

from ..models.enums import Phase, MoveRejection
from ..models.move import Move
from ..models.position import Position
from .state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[MoveRejection] = None
    error_message: Optional[str] = None


_NEXT_PHASE = {
    Phase.SECOND_PLACES: Phase.FIRST_PLACES,
    Phase.FIRST_PLACES: Phase.THIRD_REMOVES,
    Phase.THIRD_REMOVES: Phase.SECOND_PLACES,
}


class MoveProcessor:
    """
    Applies moves to a GameState.

    Phases cycle Tres places -> Uno places -> Dos removes -> Tres places.
    A rejected move leaves the state untouched.
    """

    def validate(self, state: GameState, pos: Position) -> ValidationResult:
        """
        Validate if a move is legal for the current phase.

        Args:
            state: Game to validate against
            pos: Target cell

        Returns:
            ValidationResult indicating if the move is valid and why not
        """
        if state.terminal:
            return ValidationResult(False, MoveRejection.GAME_OVER, "The game is over")

        if not pos.is_on_board():
            return ValidationResult(
                False, MoveRejection.OUT_OF_RANGE,
                f"Position {pos} is off the board",
            )

        if state.phase.is_placement:
            if pos not in state.free:
                return ValidationResult(
                    False, MoveRejection.NOT_FREE,
                    f"Position {pos} is already occupied",
                )
        elif pos not in state.owned_by_first and pos not in state.owned_by_second:
            return ValidationResult(
                False, MoveRejection.NOT_OCCUPIED,
                f"Position {pos} holds no piece to remove",
            )

        return ValidationResult(True)

    def apply(self, state: GameState, pos: Position) -> bool:
        """
        Validate then apply one ply and advance the phase.

        Returns:
            True if the move was applied, False if it was rejected
        """
        if not self.validate(state, pos).is_valid:
            return False

        phase = state.phase
        if phase is Phase.SECOND_PLACES:
            state.owned_by_second.insert(pos)
            state.free.remove(pos)
        elif phase is Phase.FIRST_PLACES:
            state.owned_by_first.insert(pos)
            state.free.remove(pos)
        else:
            state.owned_by_first.remove(pos)
            state.owned_by_second.remove(pos)
            state.free.insert(pos)

        state.move_history.append(Move(position=pos, role=phase.role, phase=phase))
        state.phase = _NEXT_PHASE[phase]
        return True

    def legal_moves(self, state: GameState) -> List[Position]:
        """Cells the current role may move on, in display order."""
        if state.terminal:
            return []
        if state.phase.is_placement:
            return state.free.sorted()
        return state.occupied()

    @staticmethod
    def next_phase(phase: Phase) -> Phase:
        return _NEXT_PHASE[phase]
