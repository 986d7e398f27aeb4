"""Basic computational-geometry helpers on planar coordinates.

Coordinates are sequences whose first two items are x and y.
"""

import math
from fractions import Fraction
from typing import Sequence

from planargeom.enums import Orientation

Coord = Sequence[float]


def is_point_within_line_bounds(p: Coord, line_endpoint1: Coord, line_endpoint2: Coord) -> bool:
    """Return True if p lies within the bounding box of the segment."""
    minx = min(line_endpoint1[0], line_endpoint2[0])
    maxx = max(line_endpoint1[0], line_endpoint2[0])
    miny = min(line_endpoint1[1], line_endpoint2[1])
    maxy = max(line_endpoint1[1], line_endpoint2[1])
    return minx <= p[0] <= maxx and miny <= p[1] <= maxy


def do_lines_overlap(
    line1_end1: Coord, line1_end2: Coord, line2_end1: Coord, line2_end2: Coord
) -> bool:
    """Return True if the bounding boxes of the two segments overlap."""
    min1x = min(line1_end1[0], line1_end2[0])
    max1x = max(line1_end1[0], line1_end2[0])
    min1y = min(line1_end1[1], line1_end2[1])
    max1y = max(line1_end1[1], line1_end2[1])

    min2x = min(line2_end1[0], line2_end2[0])
    max2x = max(line2_end1[0], line2_end2[0])
    min2y = min(line2_end1[1], line2_end2[1])
    max2y = max(line2_end1[1], line2_end2[1])

    if min1x > max2x or max1x < min2x:
        return False
    if min1y > max2y or max1y < min2y:
        return False
    return True


def equal(coords1: Sequence[float], start1: int, coords2: Sequence[float], start2: int) -> bool:
    """Compare the x and y of the points starting at the given flat offsets."""
    return coords1[start1] == coords2[start2] and coords1[start1 + 1] == coords2[start2 + 1]


def distance_2d(c1: Coord, c2: Coord) -> float:
    """Return the planar distance between two coordinates."""
    dx = c1[0] - c2[0]
    dy = c1[1] - c2[1]
    return math.sqrt(dx * dx + dy * dy)


def is_same_sign_and_non_zero(a: float, b: float) -> bool:
    """Return True if a and b are both strictly positive or both strictly negative."""
    if a == 0 or b == 0:
        return False
    return (a < 0 and b < 0) or (a > 0 and b > 0)


def min4(v1: float, v2: float, v3: float, v4: float) -> float:
    """Return the smallest of four values."""
    return min(v1, v2, v3, v4)


def orientation_index(vector_origin: Coord, vector_end: Coord, point: Coord) -> Orientation:
    """Return which side of the vector origin->end the point lies on.

    The determinant is evaluated in exact rational arithmetic, so the
    result is never affected by rounding.
    """
    ox, oy = Fraction(vector_origin[0]), Fraction(vector_origin[1])
    ex, ey = Fraction(vector_end[0]), Fraction(vector_end[1])
    px, py = Fraction(point[0]), Fraction(point[1])
    det = (ex - ox) * (py - ey) - (ey - oy) * (px - ex)
    if det > 0:
        return Orientation.COUNTER_CLOCKWISE
    if det < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR