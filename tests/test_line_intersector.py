import pytest

from planargeom.enums import IntersectionType
from planargeom.line_intersector import (
    IntersectionResult,
    NonRobustLineIntersector,
    RobustLineIntersector,
    line_intersects_line,
    point_intersects_line,
)

NO = IntersectionType.NO_INTERSECTION
POINT = IntersectionType.POINT_INTERSECTION
COLLINEAR = IntersectionType.COLLINEAR_INTERSECTION

STRATEGIES = [NonRobustLineIntersector(), RobustLineIntersector()]

POINT_ON_LINE = [
    ((0, 0), (-1, 0), (1, 0), True),
    ((0, 1), (-1, 1), (1, 1), True),
    ((0, 0), (-1, 1), (1, 0), False),
    ((0, 0), (-1, -1), (1, 1), True),
    ((-1, -1), (-1, -1), (1, 1), True),
    ((1, 1), (-1, -1), (1, 1), True),
]

LINE_ON_LINE = [
    ("A perfect X at 0", (-1, 0), (1, 0), (0, -1), (0, 1), POINT, ((0, 0),)),
    ("A perfect X at 15, 15", (10, 10), (20, 20), (10, 20), (20, 10), POINT, ((15, 15),)),
    (
        "Same coordinates opposite vectors",
        (10, 10), (20, 20), (20, 20), (10, 10),
        COLLINEAR, ((10, 10), (20, 20)),
    ),
    ("Parallel opposite directions", (10, 10), (20, 20), (30, 20), (20, 10), NO, ()),
    ("Parallel disjointed bounds", (10, 10), (20, 20), (-30, -20), (-20, -10), NO, ()),
    ("Disjointed, line2 in line1 bounds", (1, 1), (5, 5), (0, 0), (1, 2), NO, ()),
    ("Disjointed, partly in bounds", (0, 0), (5, 5), (0, 1), (5, 6), NO, ()),
    ("Collinear disjointed lines", (1, 1), (5, 5), (-1, -1), (-5, -5), NO, ()),
    ("Shared start, diverging", (0, 0), (5, 5), (0, 0), (4, 5), POINT, ((0, 0),)),
    ("Connected line1 -> line2", (0, 0), (5, 5), (5, 5), (0, 1), POINT, ((5, 5),)),
    ("line2End1 on line1", (0, 0), (5, 5), (1, 1), (4, 5), POINT, ((1, 1),)),
    ("line2End2 on line1", (0, 0), (5, 5), (0, 1), (4, 4), POINT, ((4, 4),)),
    ("line1End1 on line2", (1, 1), (4, 5), (0, 0), (5, 5), POINT, ((1, 1),)),
    ("line1End2 on line2", (0, 1), (4, 4), (0, 0), (5, 5), POINT, ((4, 4),)),
]

ROBUST_ONLY = [
    ("Collinear, shared start/start", (1, 1), (5, 5), (1, 1), (-5, -5), POINT, ((1, 1),)),
    ("Collinear, shared start/end", (1, 1), (5, 5), (-5, -5), (1, 1), POINT, ((1, 1),)),
    ("Collinear, shared end/start", (1, 1), (5, 5), (5, 5), (10, 10), POINT, ((5, 5),)),
    ("Collinear, shared end/end", (1, 1), (5, 5), (10, 10), (5, 5), POINT, ((5, 5),)),
    (
        "Large coordinates",
        (2089426.5233462777, 1180182.3877339689),
        (2085646.6891757075, 1195618.7333999649),
        (1889281.8148903656, 1997547.0560044837),
        (2259977.3672235999, 483675.17050843034),
        POINT,
        ((2087536.6062609926, 1187900.560566967),),
    ),
]


@pytest.mark.parametrize("strategy", STRATEGIES, ids=lambda s: type(s).__name__)
@pytest.mark.parametrize("point,start,end,expected", POINT_ON_LINE)
def test_point_intersects_line(strategy, point, start, end, expected):
    assert point_intersects_line(strategy, point, start, end) is expected


@pytest.mark.parametrize("strategy", STRATEGIES, ids=lambda s: type(s).__name__)
@pytest.mark.parametrize("desc,p1,p2,p3,p4,kind,points", LINE_ON_LINE)
def test_line_intersects_line(strategy, desc, p1, p2, p3, p4, kind, points):
    result = line_intersects_line(strategy, p1, p2, p3, p4)
    assert result == IntersectionResult(kind, points), desc


@pytest.mark.parametrize("desc,p1,p2,p3,p4,kind,points", ROBUST_ONLY)
def test_robust_line_intersects_line_extra(desc, p1, p2, p3, p4, kind, points):
    result = line_intersects_line(RobustLineIntersector(), p1, p2, p3, p4)
    assert result.type is kind, desc
    assert result.intersection == points, desc


@pytest.mark.parametrize("strategy", STRATEGIES, ids=lambda s: type(s).__name__)
def test_collinear_overlap(strategy):
    result = line_intersects_line(strategy, (0, 0), (10, 0), (5, 0), (15, 0))
    assert result.type is COLLINEAR
    assert result.intersection == ((5.0, 0.0), (10.0, 0.0))


@pytest.mark.parametrize("strategy", STRATEGIES, ids=lambda s: type(s).__name__)
def test_has_intersection(strategy):
    crossing = line_intersects_line(strategy, (-1, 0), (1, 0), (0, -1), (0, 1))
    apart = line_intersects_line(strategy, (10, 10), (20, 20), (-30, -20), (-20, -10))
    assert crossing.has_intersection() is True
    assert apart.has_intersection() is False
    assert apart.intersection == ()


def test_point_off_segment_extension():
    assert point_intersects_line(RobustLineIntersector(), (2, 2), (-1, -1), (1, 1)) is False
    assert point_intersects_line(NonRobustLineIntersector(), (2, 2), (-1, -1), (1, 1)) is False