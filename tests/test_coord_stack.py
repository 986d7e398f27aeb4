import pytest

from planargeom.coord_stack import CoordStack

DATA = [1, 1, 1, 0, 0, 0, 2, 2, 2, 6, 6, 6]


def _push(stack, i):
    coord = stack.push(DATA, i)
    assert coord == DATA[i : i + 3]


def test_basic_stack_functionality():
    stack = CoordStack(3)
    assert len(stack) == 0

    _push(stack, 0)
    assert len(stack) == 1

    _push(stack, 0)
    _push(stack, 3)
    _push(stack, 9)
    _push(stack, 6)
    assert len(stack) == 5

    for expected_size, expected_coord in [
        (4, [2, 2, 2]),
        (3, [6, 6, 6]),
        (2, [0, 0, 0]),
        (1, [1, 1, 1]),
        (0, [1, 1, 1]),
    ]:
        assert stack.peek() == expected_coord
        coord, size = stack.pop()
        assert size == expected_size
        assert coord == expected_coord


def test_data_holds_flat_ordinates_in_push_order():
    stack = CoordStack(2)
    stack.push([5, 6, 7, 8], 2)
    stack.push([5, 6, 7, 8], 0)
    assert stack.data == [7, 8, 5, 6]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CoordStack(2).pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        CoordStack(2).peek()