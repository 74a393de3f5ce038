#!/usr/bin/env python3
"""
Console front end for Tres, Uno, Dos.

Plays an interactive game in the terminal, or replays a scripted list of
moves and prints the resulting state.

Usage:
    tresunodos [options]
    tresunodos --moves "<x,y> <x,y> ..." [--format human|json]

Example:
    tresunodos --patterns reduced
    tresunodos --moves "2,2 1,1 2,2" --format json
"""

import sys
import argparse
import json
from typing import Any, Callable, Dict, List, Optional

from .display import clear_screen, render_game, title_banner
from .engine import GameEngine
from .game.state import GameState
from .models.enums import PatternSet
from .models.position import GRID_SIZE, Position


def parse_moves(moves_text: str) -> List[Position]:
    """
    Parse a scripted move list.

    Args:
        moves_text: Moves as "x,y" pairs separated by spaces or semicolons

    Returns:
        Positions in the order given

    Raises:
        ValueError: If any move is not a pair of integers
    """
    tokens = moves_text.replace(';', ' ').split()
    if not tokens:
        raise ValueError("No moves given")
    return [Position.parse(token) for token in tokens]


def state_to_dict(state: GameState, engine: GameEngine) -> Dict[str, Any]:
    win = engine.winning_result(state)
    return {
        'board': state.board_string(),
        'phase': state.phase.value,
        'current_role': state.current_role.name.lower(),
        'terminal': state.terminal,
        'outcome': engine.outcome(state).value,
        'winning_line': win.winning_pattern.description if win else None,
        'moves': [
            {
                'role': move.role.name.lower(),
                'action': 'remove' if move.is_removal else 'place',
                'x': move.position.x,
                'y': move.position.y,
            }
            for move in state.move_history
        ],
    }


def format_output(state: GameState, engine: GameEngine, format_type: str = 'human',
                  color: bool = False) -> str:
    """
    Format a game state for printing.

    Args:
        state: Game to describe
        engine: Engine the game was played with
        format_type: Output format ('human' or 'json')
        color: Whether to use ANSI colours in human output

    Returns:
        Formatted output string
    """
    if format_type == 'json':
        return json.dumps(state_to_dict(state, engine), indent=2)

    output = [render_game(state, engine, color)]
    if state.move_history:
        output.append("")
        output.append("Moves played:")
        for number, move in enumerate(state.move_history, start=1):
            output.append(f"  {number}. {move}")
    win = engine.winning_result(state)
    if win is not None:
        output.append("")
        output.append(str(win))
    return "\n".join(output)


def replay(engine: GameEngine, moves: List[Position]) -> GameState:
    """
    Apply scripted moves to a fresh game.

    Raises:
        ValueError: On the first move the engine rejects
    """
    state = engine.new_game()
    for number, pos in enumerate(moves, start=1):
        result = engine.validate_move(state, pos)
        if not engine.try_move(state, pos):
            raise ValueError(f"Move {number} {pos} rejected: {result.error_message}")
    return state


def play(engine: GameEngine, input_fn: Callable[[str], str] = input,
         output: Callable[[str], None] = print, clear: bool = True,
         color: bool = True) -> GameState:
    """
    Run the interactive game loop until the game ends.

    Args:
        engine: Rules engine to play with
        input_fn: Source of user input
        output: Sink for rendered text
        clear: Whether to clear the screen before each redraw
        color: Whether to use ANSI colours

    Returns:
        The finished game
    """
    output(title_banner(color))
    input_fn("Press Enter to Continue")
    state = engine.new_game()

    while not state.terminal:
        if clear:
            clear_screen()
        output(render_game(state, engine, color))

        text = input_fn("Enter coordinates (x y): ")
        try:
            pos = Position.parse(text)
        except ValueError:
            output("Invalid input! Please enter coordinates as two numbers (e.g., 1 2).")
            input_fn("Press Enter to continue...")
            continue

        if not pos.is_on_board():
            output(f"Invalid position! Coordinates must be between 1 and {GRID_SIZE}.")
            input_fn("Press Enter to continue...")
            continue

        if not engine.try_move(state, pos):
            output("Invalid move! Try again.")
            input_fn("Press Enter to continue...")
            continue

    if clear:
        clear_screen()
    output(render_game(state, engine, color))
    input_fn("Game Over! Press Enter to exit...")
    return state


def main(argv: Optional[List[str]] = None):
    """Main function to handle command line arguments and run the game."""
    parser = argparse.ArgumentParser(
        description="Play Tres, Uno, Dos on a 4x4 grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive game with the four canonical winning lines
  tresunodos

  # Interactive game without the main diagonal
  tresunodos --patterns reduced

  # Replay moves and print the result as JSON
  tresunodos --moves "2,2 1,1 2,2" --format json
        """
    )

    parser.add_argument(
        '--patterns',
        choices=[p.value for p in PatternSet],
        default=GameEngine.DEFAULT_PATTERN_SET.value,
        help='Winning line set (default: canonical)'
    )

    parser.add_argument(
        '--moves',
        help='Replay these moves ("x,y" pairs) instead of playing interactively'
    )

    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format for --moves (default: human)'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable ANSI colours'
    )

    parser.add_argument(
        '--no-clear',
        action='store_true',
        help='Do not clear the screen between turns'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable move logging'
    )

    args = parser.parse_args(argv)
    engine = GameEngine(patterns=PatternSet(args.patterns), enable_logging=args.verbose)

    if args.moves is not None:
        try:
            state = replay(engine, parse_moves(args.moves))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(format_output(state, engine, args.format, color=not args.no_color))
        return

    try:
        play(engine, clear=not args.no_clear, color=not args.no_color)
    except (KeyboardInterrupt, EOFError):
        print("\nGame abandoned.")


if __name__ == "__main__":
    main()
