"""Operations on coordinates in three-dimensional space.

Coordinates are sequences whose first three items are x, y and z.
"""

import math
from typing import Sequence, Tuple

from planargeom.cga import distance_2d

Coord = Sequence[float]


def _ieee_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def vector_dot(v1_start: Coord, v1_end: Coord, v2_start: Coord, v2_end: Coord) -> float:
    """Return the dot product of the vectors v1_start->v1_end and v2_start->v2_end."""
    v1x = v1_end[0] - v1_start[0]
    v1y = v1_end[1] - v1_start[1]
    v1z = v1_end[2] - v1_start[2]
    v2x = v2_end[0] - v2_start[0]
    v2y = v2_end[1] - v2_start[1]
    v2z = v2_end[2] - v2_start[2]
    return v1x * v2x + v1y * v2y + v1z * v2z


def vector_length(vector: Coord) -> float:
    """Return the length of the vector from the origin to ``vector``."""
    return math.sqrt(vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2])


def vector_normalize(vector: Coord) -> Tuple[float, float, float]:
    """Return the unit vector in the direction of ``vector``."""
    length = vector_length(vector)
    return (
        _ieee_div(vector[0], length),
        _ieee_div(vector[1], length),
        _ieee_div(vector[2], length),
    )


def distance(point1: Coord, point2: Coord) -> float:
    """Return the distance between two points; planar if either z is NaN."""
    if math.isnan(point1[2]) or math.isnan(point2[2]):
        return distance_2d(point1, point2)
    dx = point1[0] - point2[0]
    dy = point1[1] - point2[1]
    dz = point1[2] - point2[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def equals(point1: Coord, other: Coord) -> bool:
    """Return True if the points are equal in 3D; two NaN z values count as equal."""
    return (
        point1[0] == other[0]
        and point1[1] == other[1]
        and (point1[2] == other[2] or (math.isnan(point1[2]) and math.isnan(other[2])))
    )


def distance_point_to_line(point: Coord, line_start: Coord, line_end: Coord) -> float:
    """Return the distance from a point to the segment line_start-line_end.

    Raises ValueError if the segment's ordinates are NaN.
    """
    if equals(line_start, line_end):
        return distance(point, line_start)

    ex = line_end[0] - line_start[0]
    ey = line_end[1] - line_start[1]
    ez = line_end[2] - line_start[2]
    len2 = ex * ex + ey * ey + ez * ez
    if math.isnan(len2):
        raise ValueError("Ordinates must not be NaN")
    r = _ieee_div(
        (point[0] - line_start[0]) * ex
        + (point[1] - line_start[1]) * ey
        + (point[2] - line_start[2]) * ez,
        len2,
    )

    if r <= 0.0:
        return distance(point, line_start)
    if r >= 1.0:
        return distance(point, line_end)

    # closest point on the segment
    qx = line_start[0] + r * ex
    qy = line_start[1] + r * ey
    qz = line_start[2] + r * ez
    dx = point[0] - qx
    dy = point[1] - qy
    dz = point[2] - qz
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance_line_to_line(
    line1_start: Coord, line1_end: Coord, line2_start: Coord, line2_end: Coord
) -> float:
    """Return the distance between two 3D segments.

    Susceptible to round-off with large ordinate values. Raises ValueError
    if the ordinates are NaN.
    """
    if equals(line1_start, line1_end):
        return distance_point_to_line(line1_start, line2_start, line2_end)
    if equals(line2_start, line1_end):
        return distance_point_to_line(line2_start, line1_start, line1_end)

    a = vector_dot(line1_start, line1_end, line1_start, line1_end)
    b = vector_dot(line1_start, line1_end, line2_start, line2_end)
    c = vector_dot(line2_start, line2_end, line2_start, line2_end)
    d = vector_dot(line1_start, line1_end, line2_start, line1_start)
    e = vector_dot(line2_start, line2_end, line2_start, line1_start)

    denom = a * c - b * b
    if math.isnan(denom):
        raise ValueError("Ordinates must not be NaN")

    if denom <= 0.0:
        # parallel lines: fix s at 0 and use the better-conditioned denominator
        s = 0.0
        t = _ieee_div(d, b) if b > c else _ieee_div(e, c)
    else:
        s = (b * e - c * d) / denom
        t = (a * e - b * d) / denom

    if s < 0:
        return distance_point_to_line(line1_start, line2_start, line2_end)
    if s > 1:
        return distance_point_to_line(line1_end, line2_start, line2_end)
    if t < 0:
        return distance_point_to_line(line2_start, line1_start, line1_end)
    if t > 1:
        return distance_point_to_line(line2_end, line1_start, line1_end)

    # closest points lie in the interiors of both segments
    x1 = line1_start[0] + s * (line1_end[0] - line1_start[0])
    y1 = line1_start[1] + s * (line1_end[1] - line1_start[1])
    z1 = line1_start[2] + s * (line1_end[2] - line1_start[2])

    x2 = line2_start[0] + t * (line2_end[0] - line2_start[0])
    y2 = line2_start[1] + t * (line2_end[1] - line2_start[1])
    z2 = line2_start[2] + t * (line2_end[2] - line2_start[2])

    return distance((x1, y1, z1), (x2, y2, z2))