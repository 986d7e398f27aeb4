"""Centroid of points: the average of their coordinates."""

import math
from typing import Sequence, Tuple


class PointCentroidCalculator:
    """Accumulates coordinates and reports their average."""

    def __init__(self) -> None:
        self._count = 0
        self._sum_x = 0.0
        self._sum_y = 0.0

    def add_coord(self, coord: Sequence[float]) -> None:
        """Add one coordinate."""
        self._count += 1
        self._sum_x += coord[0]
        self._sum_y += coord[1]

    def centroid(self) -> Tuple[float, float]:
        """Return the centroid so far; NaN ordinates if nothing was added."""
        if self._count == 0:
            return (math.nan, math.nan)
        return (self._sum_x / self._count, self._sum_y / self._count)


def points_centroid(point: Sequence[float], *args: Sequence[float]) -> Tuple[float, float]:
    """Return the average of the given coordinates."""
    calc = PointCentroidCalculator()
    for p in (point, *args):
        calc.add_coord(p)
    return calc.centroid()


def points_centroid_flat(stride: int, point_data: Sequence[float]) -> Tuple[float, float]:
    """Return the average of the points in flat coordinates."""
    calc = PointCentroidCalculator()
    for i in range(0, len(point_data), stride):
        calc.add_coord(point_data[i : i + 2])
    return calc.centroid()