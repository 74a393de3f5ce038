import pytest

from tresunodos.evaluation import (
    ANTI_DIAGONAL,
    CANONICAL_PATTERNS,
    MAIN_DIAGONAL,
    REDUCED_PATTERNS,
    RIGHT_COLUMN,
    TOP_ROW,
    WinDetector,
)
from tresunodos.game import PositionSet
from tresunodos.models import PatternSet, Position, WinPattern, WinPatternType


def cells(*pairs):
    return PositionSet(Position(x, y) for x, y in pairs)


def test_pattern_set_sizes():
    assert len(WinDetector(PatternSet.CANONICAL)) == 4
    assert len(WinDetector(PatternSet.REDUCED)) == 3
    assert MAIN_DIAGONAL not in REDUCED_PATTERNS
    assert set(REDUCED_PATTERNS) < set(CANONICAL_PATTERNS)


def test_top_row_detected():
    detector = WinDetector()
    assert detector.has_line(cells((1, 1), (1, 2), (1, 3), (1, 4)))


@pytest.mark.parametrize("pattern", CANONICAL_PATTERNS, ids=lambda p: p.description)
def test_every_canonical_line_wins_and_missing_any_cell_does_not(pattern):
    detector = WinDetector(PatternSet.CANONICAL)
    assert detector.has_line(PositionSet(pattern.positions))
    for missing in pattern.positions:
        partial = PositionSet(p for p in pattern.positions if p != missing)
        assert not detector.has_line(partial)


def test_main_diagonal_depends_on_configuration():
    diagonal = cells((1, 1), (2, 2), (3, 3), (4, 4))
    assert WinDetector(PatternSet.CANONICAL).has_line(diagonal)
    assert not WinDetector(PatternSet.REDUCED).has_line(diagonal)


def test_extra_cells_do_not_hide_a_line():
    held = cells((4, 1), (4, 2), (4, 3), (4, 4), (2, 2), (3, 1))
    detector = WinDetector()
    assert detector.has_line(held)
    assert detector.find_line(held) is RIGHT_COLUMN


def test_empty_and_scattered_sets_have_no_line():
    detector = WinDetector()
    assert not detector.has_line(PositionSet())
    assert detector.find_line(cells((1, 1), (2, 1), (3, 1), (2, 3))) is None


def test_plain_iterables_are_accepted():
    detector = WinDetector()
    assert detector.has_line([Position(1, 4), Position(2, 3), Position(3, 2), Position(4, 1)])


def test_custom_pattern_list():
    bottom = WinPattern(
        type=WinPatternType.ROW,
        positions=tuple(Position(4, y) for y in range(1, 5)),
        description="custom",
    )
    second = WinPattern(
        type=WinPatternType.COLUMN,
        positions=tuple(Position(x, 2) for x in range(1, 5)),
    )
    detector = WinDetector([bottom, second])
    assert detector.get_all_winning_patterns() == [bottom, second]
    assert detector.has_line(cells((1, 2), (2, 2), (3, 2), (4, 2)))
    assert not detector.has_line(cells((1, 1), (1, 2), (1, 3), (1, 4)))


def test_custom_pattern_list_rejects_non_patterns():
    with pytest.raises(ValueError):
        WinDetector([((1, 1), (1, 2), (1, 3), (1, 4))])


@pytest.mark.parametrize("positions", [
    (Position(1, 1), Position(1, 2), Position(1, 3)),
    (Position(1, 1), Position(1, 2), Position(1, 3), Position(1, 5)),
    (Position(1, 1), Position(1, 1), Position(1, 3), Position(1, 4)),
])
def test_malformed_patterns_raise(positions):
    with pytest.raises(ValueError):
        WinPattern(type=WinPatternType.ROW, positions=positions)


def test_pattern_str_names_the_line():
    assert str(ANTI_DIAGONAL) == "Anti-diagonal: [1,4] [2,3] [3,2] [4,1]"


def test_named_pattern_sets_keep_their_order():
    assert WinDetector().get_all_winning_patterns() == [TOP_ROW, MAIN_DIAGONAL, ANTI_DIAGONAL, RIGHT_COLUMN]
    assert WinDetector(PatternSet.REDUCED).get_all_winning_patterns() == [TOP_ROW, ANTI_DIAGONAL, RIGHT_COLUMN]
