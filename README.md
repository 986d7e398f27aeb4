# planargeom

Computational geometry on flat coordinate sequences. It uses only the
standard library.

Points are stored as flat sequences of floats. A `stride` gives the number of
ordinates in each point, so with `stride=2` the sequence `[x0, y0, x1, y1, ...]`
holds plain XY points. X and Y are always the first two ordinates. Any further
ordinates, such as Z or M, stay with their point but take no part in planar
calculations.

## Installation

```
pip install planargeom
```

## Modules

### Convex hull: `planargeom.convex_hull`

- `convex_hull(coords, stride)` computes the hull with a Graham scan.
  - It returns `None` for empty input.
  - Otherwise it returns a frozen `ConvexHull` with fields `kind` (a `HullKind`: `POINT`, `LINE_STRING` or `POLYGON`), `coords` and `stride`.
  - A polygon hull is a closed ring.
  - Input with more than 50 points is first thinned by `reduce_points`.
- The individual steps are public as well:
  - `pre_sort` puts the lowest point first and sorts the rest radially around it.
  - `graham_scan` runs the scan.
  - `reduce_points` drops the points that lie inside the octagon of extreme points.
  - `compute_oct_points` finds the extreme points in eight directions.
  - `compute_oct_ring` returns the closed ring of those points, or `None` when they are degenerate.

### Segment intersection: `planargeom.line_intersector`

- `point_intersects_line(strategy, point, line_start, line_end)` returns a bool.
- `line_intersects_line(strategy, line1_start, line1_end, line2_start, line2_end)` returns a frozen `IntersectionResult`.
  - `type` is an `IntersectionType`.
  - `intersection` is a tuple holding one point for a point intersection, or two points (the ends of the shared part) for a collinear intersection.
  - `has_intersection()` says whether the segments intersect at all.
- There are two strategies:
  - `RobustLineIntersector` uses exact orientation tests.
  - `NonRobustLineIntersector` works from the line equations. It is faster but can give inconsistent results near degenerate cases.

### Point in ring: `planargeom.ray_crossing`

- `locate_point_in_ring(stride, p, ring)` returns a `Location`: `INTERIOR`, `BOUNDARY` or `EXTERIOR`.
- `is_point_in_ring(stride, p, ring)` is true for a point inside the ring or on its boundary.

### Simplification: `planargeom.simplify`

- `simplify_flat_coords(flat_coords, threshold, stride)` applies Douglas–Peucker simplification.
- It returns the indexes of the points it keeps.

### Centroids: `planargeom.line_centroid` and `planargeom.point_centroid`

- `LineCentroidCalculator(stride)` gives a centroid weighted by segment length.
  - Add geometry with `add_line`, `add_linear_ring` or `add_polygon`. `add_polygon` takes an iterable of rings.
  - `centroid()` returns the result. Its X and Y are NaN when nothing with length has been added.
- The helpers `lines_centroid`, `linear_rings_centroid` and `multi_line_centroid` wrap the calculator.
- `PointCentroidCalculator` averages the coordinates passed to `add_coord`.
- The helpers `points_centroid` and `points_centroid_flat` wrap it.

### Radial ordering: `planargeom.radial`

- `radial_less(focal_point, v1, v2)` compares two points by angle around the focal point. Collinear points are ordered by distance.
- `radial_sort(coords, stride, focal_point)` returns a new sorted flat list.

### Planar predicates: `planargeom.cga`

- `orientation_index` returns an `Orientation`. It is computed in exact rational arithmetic.
- Also provided: `do_lines_overlap`, `is_point_within_line_bounds`, `equal`, `distance_2d`, `is_same_sign_and_non_zero` and `min4`.

### Other modules

- `planargeom.robust_determinant`: `sign_of_det2x2(x1, y1, x2, y2)` returns the sign of a 2x2 determinant as a `Sign`. It is computed robustly.
- `planargeom.hcoords`: `hcoords_intersection` intersects two lines using homogeneous coordinates. It raises `IntersectionError`, a subclass of `ValueError`, when the lines are parallel or the result is not finite.
- `planargeom.central_endpoint`: `central_endpoint_intersection` returns the endpoint nearest the centroid of all four endpoints.
- `planargeom.coord_stack`: `CoordStack` is a stack of fixed-stride coordinates with `push`, `pop`, `peek` and `len()`.
- `planargeom.enums` defines three enumerations:
  - `Orientation`.
  - `Location`, whose `symbol()` returns `'i'`, `'b'`, `'e'` or `'-'`.
  - `IntersectionType`.
- `planargeom.xyz` works in 3D:
  - vector helpers `vector_dot`, `vector_length` and `vector_normalize`;
  - `distance`, which falls back to a planar distance when either Z is NaN;
  - `equals`;
  - `distance_point_to_line` and `distance_line_to_line`, which raise `ValueError` on NaN ordinates.

## Example

```python
from planargeom.convex_hull import convex_hull
from planargeom.simplify import simplify_flat_coords
from planargeom.line_intersector import RobustLineIntersector, line_intersects_line

hull = convex_hull([1, 1, 3, 3, 4, 4, 2, 5], 2)
print(hull.kind, hull.coords)  # a closed polygon ring through (1,1), (2,5), (4,4)

kept = simplify_flat_coords([0, 0, 0, 1, -1, 2, 0, 3, 0, 4], 0.5, 2)

result = line_intersects_line(RobustLineIntersector(), (-1, 0), (1, 0), (0, -1), (0, 1))
print(result.has_intersection(), result.intersection)  # True ((0.0, 0.0),)
```

## What it does not do

This is a library of algorithms and nothing more:

- It has no geometry object model. Geometries are plain flat coordinate sequences and strides.
- It does not read or write any geometry format, such as WKT, WKB or GeoJSON.
- It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```