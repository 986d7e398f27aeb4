"""Intersection of a point with a segment and of two segments.

Two strategies are provided: a fast one that works directly with the line
equations, and a robust one built on exact orientation tests.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from planargeom.central_endpoint import central_endpoint_intersection
from planargeom.cga import (
    do_lines_overlap,
    equal,
    is_point_within_line_bounds,
    is_same_sign_and_non_zero,
    orientation_index,
)
from planargeom.enums import IntersectionType, Orientation
from planargeom.hcoords import IntersectionError, hcoords_intersection

Coord = Sequence[float]

_COLLINEAR = Orientation.COLLINEAR


@dataclass(frozen=True)
class IntersectionResult:
    """The kind of intersection of two segments and the point(s) involved.

    For a point intersection ``intersection`` holds one coordinate; for a
    collinear intersection it holds the two ends of the shared part.
    """

    type: IntersectionType
    intersection: Tuple[Tuple[float, ...], ...] = ()

    def has_intersection(self) -> bool:
        """Return True if the segments intersect at all."""
        return self.type is not IntersectionType.NO_INTERSECTION


@dataclass
class _IntersectorData:
    points: List[List[float]] = field(default_factory=lambda: [[0.0, 0.0], [0.0, 0.0]])
    intersection_type: IntersectionType = IntersectionType.NO_INTERSECTION
    is_proper: bool = False


class Strategy(ABC):
    """A line intersection algorithm."""

    @abstractmethod
    def _point_on_line(
        self, data: _IntersectorData, point: Coord, line_start: Coord, line_end: Coord
    ) -> None:
        """Classify the intersection of a point with a segment into ``data``."""

    @abstractmethod
    def _line_on_line(
        self,
        data: _IntersectorData,
        line1_start: Coord,
        line1_end: Coord,
        line2_start: Coord,
        line2_end: Coord,
    ) -> None:
        """Classify the intersection of two segments into ``data``."""


def point_intersects_line(
    strategy: Strategy, point: Coord, line_start: Coord, line_end: Coord
) -> bool:
    """Return True if the point lies on the segment line_start-line_end."""
    data = _IntersectorData()
    strategy._point_on_line(data, point, line_start, line_end)
    return data.intersection_type is not IntersectionType.NO_INTERSECTION


def line_intersects_line(
    strategy: Strategy,
    line1_start: Coord,
    line1_end: Coord,
    line2_start: Coord,
    line2_end: Coord,
) -> IntersectionResult:
    """Compute how, and where, the two segments intersect."""
    data = _IntersectorData()
    strategy._line_on_line(data, line1_start, line1_end, line2_start, line2_end)
    count = {
        IntersectionType.NO_INTERSECTION: 0,
        IntersectionType.POINT_INTERSECTION: 1,
        IntersectionType.COLLINEAR_INTERSECTION: 2,
    }[data.intersection_type]
    points = tuple(tuple(float(v) for v in p) for p in data.points[:count])
    return IntersectionResult(data.intersection_type, points)


def _ieee_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _r_parameter(p1: Coord, p2: Coord, p: Coord) -> float:
    """Position of p along p1-p2, measured on the dominant axis."""
    dx = abs(p2[0] - p1[0])
    dy = abs(p2[1] - p1[1])
    if dx > dy:
        return _ieee_div(p[0] - p1[0], p2[0] - p1[0])
    return _ieee_div(p[1] - p1[1], p2[1] - p1[1])


def _copy_xy(dst: List[float], src: Coord) -> None:
    dst[0] = src[0]
    dst[1] = src[1]


class NonRobustLineIntersector(Strategy):
    """Fast intersection from the line equations; not robust near degeneracy."""

    def _point_on_line(self, data, point, line_start, line_end):
        data.is_proper = False
        a1 = line_end[1] - line_start[1]
        b1 = line_start[0] - line_end[0]
        c1 = line_end[0] * line_start[1] - line_start[0] * line_end[1]

        if a1 * point[0] + b1 * point[1] + c1 != 0:
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        dist = _r_parameter(line_start, line_end, point)
        if dist < 0.0 or dist > 1.0:
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        data.is_proper = not (equal(point, 0, line_start, 0) or equal(point, 0, line_end, 0))
        data.intersection_type = IntersectionType.POINT_INTERSECTION

    def _line_on_line(self, data, line1_start, line1_end, line2_start, line2_end):
        data.is_proper = False

        a1 = line1_end[1] - line1_start[1]
        b1 = line1_start[0] - line1_end[0]
        c1 = line1_end[0] * line1_start[1] - line1_start[0] * line1_end[1]

        r3 = a1 * line2_start[0] + b1 * line2_start[1] + c1
        r4 = a1 * line2_end[0] + b1 * line2_end[1] + c1
        # both ends of line 2 on the same side of line 1
        if r3 != 0 and r4 != 0 and is_same_sign_and_non_zero(r3, r4):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        a2 = line2_end[1] - line2_start[1]
        b2 = line2_start[0] - line2_end[0]
        c2 = line2_end[0] * line2_start[1] - line2_start[0] * line2_end[1]

        r1 = a2 * line1_start[0] + b2 * line1_start[1] + c2
        r2 = a2 * line1_end[0] + b2 * line1_end[1] + c2
        if r1 != 0 and r2 != 0 and is_same_sign_and_non_zero(r1, r2):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        denom = a1 * b2 - a2 * b1
        if denom == 0:
            self._collinear(data, line1_start, line1_end, line2_start, line2_end)
            return

        pa = data.points[0]
        pa[0] = (b1 * c2 - b2 * c1) / denom
        pa[1] = (a2 * c1 - a1 * c2) / denom

        data.is_proper = not any(
            equal(pa, 0, c, 0) for c in (line1_start, line1_end, line2_start, line2_end)
        )
        data.intersection_type = IntersectionType.POINT_INTERSECTION

    @staticmethod
    def _collinear(data, line1_start, line1_end, line2_start, line2_end):
        r3 = _r_parameter(line1_start, line1_end, line2_start)
        r4 = _r_parameter(line1_start, line1_end, line2_end)
        # orient line 2 in the same direction as line 1
        if r3 < r4:
            q3, t3, q4, t4 = line2_start, r3, line2_end, r4
        else:
            q3, t3, q4, t4 = line2_end, r4, line2_start, r3

        if t3 > 1.0 or t4 < 0.0:
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        pa, pb = data.points
        _copy_xy(pa, q3 if t3 > 0.0 else line1_start)
        _copy_xy(pb, q4 if t4 < 1.0 else line1_end)
        data.intersection_type = IntersectionType.COLLINEAR_INTERSECTION


class RobustLineIntersector(Strategy):
    """Slower intersection with consistent results in extreme cases."""

    def _point_on_line(self, data, point, line_start, line_end):
        data.is_proper = False
        # the envelope test is cheaper than the orientation test
        if (
            is_point_within_line_bounds(point, line_start, line_end)
            and orientation_index(line_start, line_end, point) == _COLLINEAR
            and orientation_index(line_end, line_start, point) == _COLLINEAR
        ):
            data.is_proper = not (
                equal(point, 0, line_start, 0) or equal(point, 0, line_end, 0)
            )
            data.intersection_type = IntersectionType.POINT_INTERSECTION
            return
        data.intersection_type = IntersectionType.NO_INTERSECTION

    def _line_on_line(self, data, line1_start, line1_end, line2_start, line2_end):
        data.is_proper = False

        if not do_lines_overlap(line1_start, line1_end, line2_start, line2_end):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        o2s = orientation_index(line1_start, line1_end, line2_start)
        o2e = orientation_index(line1_start, line1_end, line2_end)
        if (o2s > _COLLINEAR and o2e > _COLLINEAR) or (o2s < _COLLINEAR and o2e < _COLLINEAR):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        o1s = orientation_index(line2_start, line2_end, line1_start)
        o1e = orientation_index(line2_start, line2_end, line1_end)
        if (o1s > _COLLINEAR and o1e > _COLLINEAR) or (o1s < _COLLINEAR and o1e < _COLLINEAR):
            data.intersection_type = IntersectionType.NO_INTERSECTION
            return

        if o2s == o2e == o1s == o1e == _COLLINEAR:
            data.intersection_type = _collinear_intersection(
                data, line1_start, line1_end, line2_start, line2_end
            )
            return

        # a single intersection point; prefer an exact endpoint when one lies
        # on the other segment, for robustness
        if _COLLINEAR in (o2s, o2e, o1s, o1e):
            data.is_proper = False
            pa = data.points[0]
            if equal(line1_start, 0, line2_start, 0) or equal(line1_start, 0, line2_end, 0):
                _copy_xy(pa, line1_start)
            elif equal(line1_end, 0, line2_start, 0) or equal(line1_end, 0, line2_end, 0):
                _copy_xy(pa, line1_end)
            elif o2s == _COLLINEAR:
                _copy_xy(pa, line2_start)
            elif o2e == _COLLINEAR:
                _copy_xy(pa, line2_end)
            elif o1s == _COLLINEAR:
                _copy_xy(pa, line1_start)
            else:
                _copy_xy(pa, line1_end)
        else:
            data.is_proper = True
            data.points[0] = _intersection(line1_start, line1_end, line2_start, line2_end)

        data.intersection_type = IntersectionType.POINT_INTERSECTION


def _collinear_intersection(data, line1_start, line1_end, line2_start, line2_end):
    l2s_in_l1 = is_point_within_line_bounds(line2_start, line1_start, line1_end)
    l2e_in_l1 = is_point_within_line_bounds(line2_end, line1_start, line1_end)
    l1s_in_l2 = is_point_within_line_bounds(line1_start, line2_start, line2_end)
    l1e_in_l2 = is_point_within_line_bounds(line1_end, line2_start, line2_end)

    if l1s_in_l2 and l1e_in_l2:
        data.points[:] = [list(line1_start), list(line1_end)]
        return IntersectionType.COLLINEAR_INTERSECTION
    if l2s_in_l1 and l2e_in_l1:
        data.points[:] = [list(line2_start), list(line2_end)]
        return IntersectionType.COLLINEAR_INTERSECTION

    cases = (
        (l2s_in_l1 and l1s_in_l2, line2_start, line1_start, l2e_in_l1, l1e_in_l2),
        (l2s_in_l1 and l1e_in_l2, line2_start, line1_end, l2e_in_l1, l1s_in_l2),
        (l2e_in_l1 and l1s_in_l2, line2_end, line1_start, l2s_in_l1, l1e_in_l2),
        (l2e_in_l1 and l1e_in_l2, line2_end, line1_end, l2s_in_l1, l1s_in_l2),
    )
    for matches, start, end, other1, other2 in cases:
        if matches:
            data.points[:] = [list(start), list(end)]
            if equal(start, 0, end, 0) and not other1 and not other2:
                return IntersectionType.POINT_INTERSECTION
            return IntersectionType.COLLINEAR_INTERSECTION

    return IntersectionType.NO_INTERSECTION


def _intersection(line1_start, line1_end, line2_start, line2_end) -> List[float]:
    point = _intersection_with_normalization(line1_start, line1_end, line2_start, line2_end)
    # rounding can put the computed point outside the segment envelopes
    if not (
        is_point_within_line_bounds(point, line2_start, line2_end)
        and is_point_within_line_bounds(point, line1_start, line1_end)
    ):
        point = list(
            central_endpoint_intersection(line1_start, line1_end, line2_start, line2_end)[:2]
        )
    return point


def _lo(a: float, b: float) -> float:
    return a if a < b else b


def _hi(a: float, b: float) -> float:
    return a if a > b else b


def _intersection_with_normalization(line1_start, line1_end, line2_start, line2_end):
    # shift to the centre of the envelopes' intersection to keep precision
    int_min_x = _hi(_lo(line1_start[0], line1_end[0]), _lo(line2_start[0], line2_end[0]))
    int_max_x = _lo(_hi(line1_start[0], line1_end[0]), _hi(line2_start[0], line2_end[0]))
    int_min_y = _hi(_lo(line1_start[1], line1_end[1]), _lo(line2_start[1], line2_end[1]))
    int_max_y = _lo(_hi(line1_start[1], line1_end[1]), _hi(line2_start[1], line2_end[1]))
    mid_x = (int_min_x + int_max_x) / 2.0
    mid_y = (int_min_y + int_max_y) / 2.0

    normalized = [
        [c[0] - mid_x, c[1] - mid_y] for c in (line1_start, line1_end, line2_start, line2_end)
    ]
    try:
        x, y = hcoords_intersection(*normalized)
    except IntersectionError:
        x, y = central_endpoint_intersection(*normalized)[:2]
    return [x + mid_x, y + mid_y]