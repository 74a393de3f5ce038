import logging
from contextlib import contextmanager

from tresunodos import GameEngine
from tresunodos.models import Position, all_positions

# Odd rows for Tres, even rows for Uno: no winning line is single-parity.
TRES_CELLS = [p for p in sorted(all_positions(), key=lambda p: (p.y, p.x)) if p.y % 2 == 1]
UNO_CELLS = [p for p in sorted(all_positions(), key=lambda p: (p.y, p.x)) if p.y % 2 == 0]


def P(x, y):
    return Position(x, y)


def play(engine, state, moves):
    """Apply (x, y) moves, asserting each is accepted."""
    for x, y in moves:
        assert engine.try_move(state, Position(x, y)), f"move ({x},{y}) rejected"
    return state


def play_to_exhaustion(engine):
    """Fill the board without either placer completing a line."""
    state = engine.new_game()

    def first_free(candidates):
        return next(p for p in candidates if state.is_free(p))

    for cycle in range(14):
        tres = first_free(TRES_CELLS)
        assert engine.try_move(state, tres)
        uno = first_free(UNO_CELLS)
        assert engine.try_move(state, uno)
        assert not state.terminal
        # alternate which placement survives the removal
        assert engine.try_move(state, uno if cycle % 2 == 0 else tres)

    assert engine.try_move(state, first_free(TRES_CELLS))
    assert engine.try_move(state, first_free(UNO_CELLS))
    return state


@contextmanager
def logging_engine(**kwargs):
    """Engine with logging on; the 'tresunodos' logger is put back on exit."""
    logger = logging.getLogger('tresunodos')
    handlers, level = list(logger.handlers), logger.level
    try:
        yield GameEngine(enable_logging=True, **kwargs)
    finally:
        for handler in logger.handlers[:]:
            if handler not in handlers:
                logger.removeHandler(handler)
        logger.setLevel(level)
