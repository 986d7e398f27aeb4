"""Enumerations for orientation, topological location and intersection kind."""

from enum import IntEnum


class Orientation(IntEnum):
    """Angular relationship of a point or vector relative to a base vector."""

    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1

    def __str__(self) -> str:
        return _ORIENTATION_LABELS[self]


class Location(IntEnum):
    """Topological location relative to a geometry.

    The values double as DE-9IM row and column indices.
    """

    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2
    NONE = 3

    def __str__(self) -> str:
        return _LOCATION_LABELS[self]

    def symbol(self) -> str:
        """Return the single-character location symbol: 'i', 'b', 'e' or '-'."""
        return _LOCATION_SYMBOLS[self]


class IntersectionType(IntEnum):
    """The kind of intersection two line segments have."""

    NO_INTERSECTION = 0
    POINT_INTERSECTION = 1
    COLLINEAR_INTERSECTION = 2

    def __str__(self) -> str:
        return _INTERSECTION_LABELS[self]


_ORIENTATION_LABELS = {
    Orientation.CLOCKWISE: "Clockwise",
    Orientation.COLLINEAR: "Collinear",
    Orientation.COUNTER_CLOCKWISE: "CounterClockwise",
}

_LOCATION_LABELS = {
    Location.INTERIOR: "Interior",
    Location.BOUNDARY: "Boundary",
    Location.EXTERIOR: "Exterior",
    Location.NONE: "None",
}

_LOCATION_SYMBOLS = {
    Location.INTERIOR: "i",
    Location.BOUNDARY: "b",
    Location.EXTERIOR: "e",
    Location.NONE: "-",
}

_INTERSECTION_LABELS = {
    IntersectionType.NO_INTERSECTION: "NoIntersection",
    IntersectionType.POINT_INTERSECTION: "PointIntersection",
    IntersectionType.COLLINEAR_INTERSECTION: "CollinearIntersection",
}