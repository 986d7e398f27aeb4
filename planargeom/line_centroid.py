"""Centroid of linear geometries, weighted by segment length."""

import math
from typing import Iterable, List, Sequence

from planargeom.cga import distance_2d


class LineCentroidCalculator:
    """Accumulates lines and rings and reports their length-weighted centroid."""

    def __init__(self, stride: int) -> None:
        self.stride = stride
        self._sum_x = 0.0
        self._sum_y = 0.0
        self._total_length = 0.0

    def centroid(self) -> List[float]:
        """Return the centroid so far; NaN ordinates if nothing has length."""
        cent = [0.0] * self.stride
        if self._total_length == 0:
            cent[0] = cent[1] = math.nan
        else:
            cent[0] = self._sum_x / self._total_length
            cent[1] = self._sum_y / self._total_length
        return cent

    def add_polygon(self, rings: Iterable[Sequence[float]]) -> "LineCentroidCalculator":
        """Add every ring of a polygon, each given as flat coordinates."""
        for ring in rings:
            self.add_linear_ring(ring)
        return self

    def add_line(self, coords: Sequence[float]) -> "LineCentroidCalculator":
        """Add a line string given as flat coordinates."""
        self._add(coords, 0, len(coords))
        return self

    def add_linear_ring(self, coords: Sequence[float]) -> "LineCentroidCalculator":
        """Add a linear ring given as flat coordinates."""
        self._add(coords, 0, len(coords))
        return self

    def _add(self, line: Sequence[float], start: int, end: int) -> None:
        s = self.stride
        for i in range(start, end - s, s):
            seg = distance_2d(line[i : i + 2], line[i + s : i + s + 2])
            self._total_length += seg
            self._sum_x += seg * ((line[i] + line[i + s]) / 2)
            self._sum_y += seg * ((line[i + 1] + line[i + s + 1]) / 2)


def lines_centroid(stride: int, line: Sequence[float], *args: Sequence[float]) -> List[float]:
    """Return the centroid of the given line strings."""
    calc = LineCentroidCalculator(stride)
    for item in (line, *args):
        calc.add_line(item)
    return calc.centroid()


def linear_rings_centroid(stride: int, ring: Sequence[float], *args: Sequence[float]) -> List[float]:
    """Return the centroid of the given linear rings."""
    calc = LineCentroidCalculator(stride)
    for item in (ring, *args):
        calc.add_linear_ring(item)
    return calc.centroid()


def multi_line_centroid(stride: int, flat_coords: Sequence[float], ends: Sequence[int]) -> List[float]:
    """Return the centroid of a multi line string given as flat coordinates and ends."""
    calc = LineCentroidCalculator(stride)
    start = 0
    for end in ends:
        calc._add(flat_coords, start, end)
        start = end
    return calc.centroid()