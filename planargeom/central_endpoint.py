"""Approximate segment intersection by choosing the most central endpoint."""

from typing import Sequence

from planargeom.cga import distance_2d

Coord = Sequence[float]


def central_endpoint_intersection(
    line1_end1: Coord, line1_end2: Coord, line2_end1: Coord, line2_end2: Coord
) -> Coord:
    """Return the endpoint nearest to the centroid of all four endpoints.

    Useful as a last resort for ill-conditioned, nearly parallel segments;
    the result always lies within the envelope of the segments.
    """
    points = (line1_end1, line1_end2, line2_end1, line2_end2)
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    centroid = (cx, cy)
    # min() keeps the first of equally near points
    return min(points, key=lambda p: distance_2d(centroid, p))