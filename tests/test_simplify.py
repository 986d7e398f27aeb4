import pytest

from planargeom.simplify import simplify_flat_coords

ZIGZAG = [0, 0, 0, 1, -1, 2, 0, 3, 0, 4, 1, 4, 2, 4.5, 3, 4, 3.5, 4, 4, 4]


@pytest.mark.parametrize(
    "coords,threshold,expected",
    [
        ([0, 0, 1, 0, 1, 1, 0, 1], 0.1, [0, 1, 2, 3]),
        (ZIGZAG, 0.4999, [0, 2, 4, 6, 9]),
        (ZIGZAG, 0.5, [0, 2, 4, 9]),
    ],
)
def test_simplify(coords, threshold, expected):
    assert simplify_flat_coords(coords, threshold, 2) == expected


def test_example_points():
    indexes = simplify_flat_coords(ZIGZAG, 0.4, 2)
    points = [v for i in indexes for v in ZIGZAG[i * 2 : i * 2 + 2]]
    assert points == [0, 0, 0, 1, -1, 2, 0, 3, 0, 4, 2, 4.5, 4, 4]


def test_short_input_keeps_all():
    assert simplify_flat_coords([0, 0, 5, 5], 10, 2) == [0, 1]