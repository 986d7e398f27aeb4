"""Convex hull of a set of points by the Graham scan."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from planargeom.cga import equal, orientation_index
from planargeom.coord_stack import CoordStack
from planargeom.enums import Orientation
from planargeom.radial import radial_sort
from planargeom.ray_crossing import is_point_in_ring


class HullKind(Enum):
    """Geometry type of a computed hull."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"


@dataclass(frozen=True)
class ConvexHull:
    """A hull geometry: its kind and flat coordinates."""

    kind: HullKind
    coords: Tuple[float, ...]
    stride: int


def _chunks(coords: Sequence[float], stride: int) -> List[List[float]]:
    return [list(coords[i : i + stride]) for i in range(0, len(coords), stride)]


def _flatten(points) -> List[float]:
    return [v for p in points for v in p]


def convex_hull(coords: Sequence[float], stride: int) -> Optional[ConvexHull]:
    """Return the smallest convex geometry containing all points, or None if empty."""
    n = len(coords) // stride
    if n == 0:
        return None
    if n == 1:
        return ConvexHull(HullKind.POINT, tuple(coords), stride)
    if n == 2:
        return ConvexHull(HullKind.LINE_STRING, tuple(coords), stride)

    unique: Dict[Tuple[float, float], List[float]] = {}
    for p in _chunks(coords, stride):
        unique.setdefault((p[0], p[1]), p)
    reduced = _flatten(unique.values())
    if n > 50:
        reduced = reduce_points(coords, stride)
    ordered = pre_sort(reduced, stride)
    return _line_or_polygon(graham_scan(ordered, stride), stride)


def _line_or_polygon(coords: List[float], stride: int) -> ConvexHull:
    clean = _clean_ring(coords, stride)
    if len(clean) == 3 * stride:
        return ConvexHull(HullKind.LINE_STRING, tuple(clean[: len(clean) - stride]), stride)
    return ConvexHull(HullKind.POLYGON, tuple(clean), stride)


def _clean_ring(original: List[float], stride: int) -> List[float]:
    points = _chunks(original, stride)
    cleaned: List[float] = []
    previous = None
    for current, following in zip(points, points[1:]):
        if equal(current, 0, following, 0):
            continue
        if previous is not None and _is_between(previous, current, following):
            continue
        cleaned.extend(current)
        previous = current
    cleaned.extend(points[-1])
    return cleaned


def _is_between(c1, c2, c3) -> bool:
    if orientation_index(c1, c2, c3) != Orientation.COLLINEAR:
        return False
    if c1[0] != c3[0]:
        if c1[0] <= c2[0] <= c3[0] or c3[0] <= c2[0] <= c1[0]:
            return True
    if c1[1] != c3[1]:
        if c1[1] <= c2[1] <= c3[1] or c3[1] <= c2[1] <= c1[1]:
            return True
    return False


def pre_sort(coords: Sequence[float], stride: int) -> List[float]:
    """Move the lowest (then leftmost) point first and sort the rest radially around it."""
    points = _chunks(coords, stride)
    for i in range(1, len(points)):
        p, first = points[i], points[0]
        if p[1] < first[1] or (p[1] == first[1] and p[0] < first[0]):
            points[0], points[i] = points[i], points[0]
    focal = (points[0][0], points[0][1])
    return radial_sort(_flatten(points), stride, focal)


def graham_scan(coords: Sequence[float], stride: int) -> List[float]:
    """Run the Graham scan over radially sorted points; return the closed hull ring."""
    stack = CoordStack(stride)
    stack.push(coords, 0)
    stack.push(coords, stride)
    stack.push(coords, 2 * stride)
    for i in range(3 * stride, len(coords), stride):
        current = coords[i : i + stride]
        p, remaining = stack.pop()
        while remaining > 0 and orientation_index(stack.peek(), p, current) > 0:
            p, _ = stack.pop()
        stack.push(p, 0)
        stack.push(coords, i)
    stack.push(coords, 0)
    return list(stack.data)


def reduce_points(coords: Sequence[float], stride: int) -> List[float]:
    """Drop points lying inside the octagon of extreme points; result sorted by x, y."""
    ring = compute_oct_ring(coords, stride)
    if ring is None:
        return list(coords)
    kept: Dict[Tuple[float, float], List[float]] = {}
    for p in _chunks(ring, stride):
        kept.setdefault((p[0], p[1]), p)
    for p in _chunks(coords, stride):
        if not is_point_in_ring(stride, p, ring):
            kept.setdefault((p[0], p[1]), p)
    reduced = _flatten(kept[k] for k in sorted(kept))
    if len(reduced) < 3 * stride:
        # pads with the first ordinate, as the reference algorithm does
        reduced = reduced + [reduced[0]] * (3 * stride - len(reduced))
    return reduced


def compute_oct_ring(coords: Sequence[float], stride: int) -> Optional[List[float]]:
    """Return the closed ring of distinct extreme points, or None if they are degenerate."""
    points = _chunks(compute_oct_points(coords, stride), stride)
    distinct = [points[0]]
    for prev, p in zip(points, points[1:]):
        if not equal(prev, 0, p, 0):
            distinct.append(p)
    if (len(distinct) - 1) * stride < 6:
        return None
    return _flatten(distinct + [distinct[0]])


def compute_oct_points(coords: Sequence[float], stride: int) -> List[float]:
    """Return the extreme points in the eight cardinal directions."""
    points = _chunks(coords, stride)
    oct_pts = [list(points[0]) for _ in range(8)]
    for p in points[1:]:
        x, y = p[0], p[1]
        if x < oct_pts[0][0]:
            oct_pts[0] = list(p)
        if x - y < oct_pts[1][0] - oct_pts[1][1]:
            oct_pts[1] = list(p)
        if y > oct_pts[2][1]:
            oct_pts[2] = list(p)
        if x + y > oct_pts[3][0] + oct_pts[3][1]:
            oct_pts[3] = list(p)
        if x > oct_pts[4][0]:
            oct_pts[4] = list(p)
        if x - y > oct_pts[5][0] - oct_pts[5][1]:
            oct_pts[5] = list(p)
        if y < oct_pts[6][1]:
            oct_pts[6] = list(p)
        if x + y < oct_pts[7][0] + oct_pts[7][1]:
            oct_pts[7] = list(p)
    return _flatten(oct_pts)