"""
Text rendering of a game for the console.
"""
import os
from typing import List

from .engine import GameEngine
from .game.state import GameState
from .models.enums import Outcome, Phase, Role
from .models.position import GRID_SIZE, Position

RESET = "\033[0m"
COLORS = {
    Role.UNO: "\033[1;95m",
    Role.TRES: "\033[1;94m",
    Role.DOS: "\033[1;91m",
}

STATUS_MESSAGES = {
    Outcome.UNO_WINS: "Game Over - Uno Wins!",
    Outcome.TRES_WINS: "Game Over - Tres Wins!",
    Outcome.DOS_WINS: "Game Over - Dos Wins!",
}

TURN_MESSAGES = {
    Phase.FIRST_PLACES: "Uno's Turn (Place a piece)",
    Phase.SECOND_PLACES: "Tres's Turn (Place a piece)",
    Phase.THIRD_REMOVES: "Dos' Turn (Remove a U or T piece)",
}


def paint(text: str, role: Role, color: bool = True) -> str:
    if not color:
        return text
    return f"{COLORS[role]}{text}{RESET}"


def clear_screen():
    """Clear the terminal with the platform's own command."""
    os.system('cls' if os.name == 'nt' else 'clear')


def title_banner(color: bool = True) -> str:
    return ", ".join(
        paint(name, role, color)
        for name, role in (("Tres", Role.TRES), ("Uno", Role.UNO), ("Dos", Role.DOS))
    )


def render_board(state: GameState, color: bool = True) -> str:
    """Grid with column numbers on top and row numbers on the left."""
    lines = ["      GAME GRID", ""]
    lines.append("    " + "".join(f"{x}   " for x in range(1, GRID_SIZE + 1)).rstrip())
    for y in range(1, GRID_SIZE + 1):
        cells = []
        for x in range(1, GRID_SIZE + 1):
            owner = state.owner_of(Position(x, y))
            if owner is None:
                cells.append("[ ]")
            else:
                cells.append(paint(f"[{owner.value}]", owner, color))
        lines.append(f"{y}  " + " ".join(cells))
        lines.append("")
    return "\n".join(lines)


def render_status(state: GameState, engine: GameEngine, color: bool = True) -> str:
    outcome = engine.outcome(state)
    if state.terminal and outcome in STATUS_MESSAGES:
        return f"Game Status: {STATUS_MESSAGES[outcome]}"
    return f"Game Status: {paint(TURN_MESSAGES[state.phase], state.current_role, color)}"


def _format_cells(cells: List[Position], per_line: int = 8) -> str:
    rows = []
    for start in range(0, len(cells), per_line):
        rows.append(" ".join(str(pos) for pos in cells[start:start + per_line]))
    return "\n".join(rows)


def render_available(state: GameState, engine: GameEngine) -> str:
    """List the cells the current role may pick; empty once the game is over."""
    if state.terminal:
        return ""
    cells = engine.legal_moves(state)
    if state.phase.is_placement:
        return "Available positions:\n" + _format_cells(cells)
    return "Removable positions: " + (" ".join(str(pos) for pos in cells) if cells else "None")


def render_game(state: GameState, engine: GameEngine, color: bool = True) -> str:
    parts = [render_board(state, color), render_status(state, engine, color)]
    available = render_available(state, engine)
    if available:
        parts.append(available)
    return "\n".join(parts)
