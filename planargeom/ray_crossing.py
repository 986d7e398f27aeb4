"""Point-in-ring location by counting crossings of a horizontal ray."""

from dataclasses import dataclass
from typing import Sequence

from planargeom.enums import Location
from planargeom.robust_determinant import sign_of_det2x2

Coord = Sequence[float]


@dataclass
class _RayCrossingCounter:
    p: Coord
    crossing_count: int = 0
    point_on_segment: bool = False

    @property
    def location(self) -> Location:
        if self.point_on_segment:
            return Location.BOUNDARY
        if self.crossing_count % 2 == 1:
            return Location.INTERIOR
        return Location.EXTERIOR

    def count_segment(self, p1: Coord, p2: Coord) -> None:
        px, py = self.p[0], self.p[1]

        # segment strictly to the left of the test point
        if p1[0] < px and p2[0] < px:
            return

        if px == p2[0] and py == p2[1]:
            self.point_on_segment = True
            return

        # horizontal segments only matter if the point lies on them
        if p1[1] == py and p2[1] == py:
            minx, maxx = sorted((p1[0], p2[0]))
            if minx <= px <= maxx:
                self.point_on_segment = True
            return

        # upward edges include their start and exclude their end,
        # downward edges the reverse, so shared vertices count once
        if (p1[1] > py >= p2[1]) or (p2[1] > py >= p1[1]):
            x1 = p1[0] - px
            y1 = p1[1] - py
            x2 = p2[0] - px
            y2 = p2[1] - py
            x_int_sign = int(sign_of_det2x2(x1, y1, x2, y2))
            if x_int_sign == 0:
                self.point_on_segment = True
                return
            if y2 < y1:
                x_int_sign = -x_int_sign
            if x_int_sign > 0:
                self.crossing_count += 1


def locate_point_in_ring(stride: int, p: Coord, ring: Sequence[float]) -> Location:
    """Return where point p lies relative to the ring given as flat coordinates."""
    counter = _RayCrossingCounter(p)
    for i in range(stride, len(ring), stride):
        counter.count_segment(ring[i : i + 2], ring[i - stride : i - stride + 2])
        if counter.point_on_segment:
            break
    return counter.location


def is_point_in_ring(stride: int, p: Coord, ring: Sequence[float]) -> bool:
    """Return True if p lies inside or on the ring."""
    return locate_point_in_ring(stride, p, ring) is not Location.EXTERIOR