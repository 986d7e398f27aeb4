"""Segment intersection using homogeneous coordinates."""

import math
from typing import Sequence, Tuple

Coord = Sequence[float]


class IntersectionError(ValueError):
    """Raised when an intersection point cannot be computed."""


def hcoords_intersection(
    line1_end1: Coord, line1_end2: Coord, line2_end1: Coord, line2_end2: Coord
) -> Tuple[float, float]:
    """Return the approximate intersection point of the two lines.

    The computation is not numerically stable: the result may lie outside
    the envelopes of the segments. Raises IntersectionError when the lines
    are parallel or the result is not finite.
    """
    line1_xdiff = line1_end1[1] - line1_end2[1]
    line1_ydiff = line1_end2[0] - line1_end1[0]
    line1_w = line1_end1[0] * line1_end2[1] - line1_end2[0] * line1_end1[1]

    line2_x = line2_end1[1] - line2_end2[1]
    line2_y = line2_end2[0] - line2_end1[0]
    line2_w = line2_end1[0] * line2_end2[1] - line2_end2[0] * line2_end1[1]

    x = line1_ydiff * line2_w - line2_y * line1_w
    y = line2_x * line1_w - line1_xdiff * line2_w
    w = line1_xdiff * line2_y - line2_x * line1_ydiff

    if w == 0:
        raise IntersectionError(
            "intersection cannot be calculated using the h-coords implementation"
        )
    x_intersection = x / w
    y_intersection = y / w
    if not (math.isfinite(x_intersection) and math.isfinite(y_intersection)):
        raise IntersectionError(
            "intersection cannot be calculated using the h-coords implementation"
        )
    return (x_intersection, y_intersection)