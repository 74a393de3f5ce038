from tresunodos.game import PositionSet
from tresunodos.models import Position


def test_empty_set():
    s = PositionSet()
    assert len(s) == 0
    assert s.is_empty()
    assert not s.contains(Position(1, 1))


def test_insert_is_idempotent():
    s = PositionSet()
    s.insert(Position(2, 2))
    s.insert(Position(2, 2))
    assert len(s) == 1
    assert s.contains(Position(2, 2))
    assert Position(2, 2) in s


def test_remove_absent_is_noop():
    s = PositionSet([Position(1, 1)])
    s.remove(Position(3, 3))
    assert len(s) == 1
    s.remove(Position(1, 1))
    assert s.is_empty()
    s.remove(Position(1, 1))
    assert s.is_empty()


def test_prepopulated_set_drops_duplicates():
    s = PositionSet([Position(1, 1), Position(1, 1), Position(2, 1)])
    assert len(s) == 2
    assert s.contains_all([Position(1, 1), Position(2, 1)])
    assert not s.contains_all([Position(1, 1), Position(4, 4)])


def test_sorted_lists_by_row_then_column():
    s = PositionSet([Position(1, 2), Position(2, 1), Position(1, 1)])
    assert s.sorted() == [Position(1, 1), Position(2, 1), Position(1, 2)]
    assert str(s) == "[1,1] [2,1] [1,2]"


def test_copy_is_independent_and_equal():
    s = PositionSet([Position(1, 1)])
    c = s.copy()
    assert c == s
    c.insert(Position(4, 4))
    assert c != s
    assert Position(4, 4) not in s
