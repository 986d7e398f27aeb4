import math

import pytest

from planargeom.cga import (
    distance_2d,
    do_lines_overlap,
    equal,
    is_point_within_line_bounds,
    is_same_sign_and_non_zero,
    min4,
    orientation_index,
)
from planargeom.enums import Orientation

DATA = [0, 0, 0, 0, 1, 1, 1, 0, 0, 1, 1, 1, 1, 0, 0, 0, 2, 2]


@pytest.mark.parametrize(
    "c1, c2, expected",
    [
        (0, 2, True),
        (0, 4, False),
        (0, 6, False),
        (4, 6, False),
        (2, 8, False),
        (4, 10, True),
        (6, 12, True),
        (2, 14, True),
        (2, 16, False),
        (4, 16, False),
    ],
)
def test_equal(c1, c2, expected):
    assert equal(DATA, c1, DATA, c2) is expected


def test_equal_across_offsets_example():
    coords = [10, 30, 30, 10]
    assert equal(coords, 0, coords, 1) is False


@pytest.mark.parametrize(
    "l1a, l1b, l2a, l2b, expected",
    [
        ((0, 0), (1, 0), (2, 0), (3, 0), False),
        ((0, 0), (2, 0), (2, 0), (3, 0), True),
        ((0, 0), (2, 2), (2, 0), (3, 0), True),
        ((0, 0), (0, 0), (0.1, 0), (3, 0), False),
        ((0, 0), (0, 0), (0, 0), (3, 0), True),
        ((0, 0), (10, 10), (0, -10), (10, 5), True),
    ],
)
def test_do_lines_overlap(l1a, l1b, l2a, l2b, expected):
    assert do_lines_overlap(l1a, l1b, l2a, l2b) is expected


@pytest.mark.parametrize(
    "pt, a, b, expected",
    [
        ((0, 0), (0, 0), (2, 2), True),
        ((-0.001, 0), (0, 0), (2, 2), False),
        ((1, 0), (0, 0), (2, 2), True),
        ((1, -0.0001), (0, 0), (2, 2), False),
        ((1.5, 1), (0, 0), (2, 2), True),
        ((0, 0), (-10, -10), (0, -10), False),
    ],
)
def test_is_point_within_line_bounds(pt, a, b, expected):
    assert is_point_within_line_bounds(pt, a, b) is expected


DIAG = 1.4142135623730951


@pytest.mark.parametrize(
    "src, other, expected",
    [
        ((0, 0), (1, 0), 1),
        ((0, 0), (0, 1), 1),
        ((0, 0), (-1, 0), 1),
        ((0, 0), (0, -1), 1),
        ((0, 0), (1, 1), DIAG),
        ((0, 0), (1, -1), DIAG),
        ((0, 0), (-1, -1), DIAG),
        ((0, 0), (-1, 1), DIAG),
        ((0, 0), (0, 0), 0),
        ((-100, 23), (1, 2), 103.16006979447037),
        ((10, 10), (10, -10), 20),
    ],
)
def test_distance_2d(src, other, expected):
    assert distance_2d(src, other) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 0, False),
        (0, 1, False),
        (1, 1, True),
        (math.inf, 1, True),
        (math.inf, math.inf, True),
        (-math.inf, math.inf, False),
        (math.inf, -1, False),
        (1, -1, False),
        (-1, -1, True),
        (-math.inf, -math.inf, True),
    ],
)
def test_is_same_sign_and_non_zero(a, b, expected):
    assert is_same_sign_and_non_zero(a, b) is expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ((0, 0, 0, 0), 0),
        ((-1, 0, 0, 0), -1),
        ((-1, 2, 3, -math.inf), -math.inf),
    ],
)
def test_min4(values, expected):
    assert min4(*values) == expected


def test_orientation_index_counter_clockwise():
    assert orientation_index((10.0, 10.0), (20.0, 20.0), (10.0, 20.0)) is Orientation.COUNTER_CLOCKWISE


def test_orientation_index_reversed_vector_is_clockwise():
    assert orientation_index((20.0, 20.0), (10.0, 10.0), (10.0, 20.0)) is Orientation.CLOCKWISE


def test_orientation_index_collinear():
    assert orientation_index((10.0, 10.0), (20.0, 20.0), (30.0, 30.0)) is Orientation.COLLINEAR


def test_orientation_index_is_exact_for_near_collinear_points():
    a = (0.1, 0.1)
    b = (0.3, 0.3)
    c = (0.7, 0.7)
    first = orientation_index(a, b, c)
    assert orientation_index(b, a, c) == -first