"""Radial ordering of coordinates around a focal point."""

from functools import cmp_to_key
from typing import List, Sequence

from planargeom.cga import orientation_index
from planargeom.enums import Orientation

Coord = Sequence[float]


def radial_less(focal_point: Coord, v1: Coord, v2: Coord) -> bool:
    """Return True if v1 sorts before v2 radially around the focal point.

    A coordinate lies before another when the other is clockwise of it.
    Collinear coordinates are ordered by distance from the focal point.
    """
    orient = orientation_index(focal_point, v1, v2)
    if orient == Orientation.COUNTER_CLOCKWISE:
        return False
    if orient == Orientation.CLOCKWISE:
        return True
    dxp = v1[0] - focal_point[0]
    dyp = v1[1] - focal_point[1]
    dxq = v2[0] - focal_point[0]
    dyq = v2[1] - focal_point[1]
    return dxp * dxp + dyp * dyp < dxq * dxq + dyq * dyq


def radial_sort(coords: Sequence[float], stride: int, focal_point: Coord) -> List[float]:
    """Return the flat coordinates sorted radially around the focal point."""
    points = [list(coords[i : i + stride]) for i in range(0, len(coords), stride)]

    def compare(a: List[float], b: List[float]) -> int:
        if radial_less(focal_point, a, b):
            return -1
        if radial_less(focal_point, b, a):
            return 1
        return 0

    points.sort(key=cmp_to_key(compare))
    return [v for p in points for v in p]