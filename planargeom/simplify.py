"""Douglas-Peucker simplification of flat coordinates."""

from typing import List, Sequence


def simplify_flat_coords(flat_coords: Sequence[float], threshold: float, stride: int) -> List[int]:
    """Return the indexes of the points kept by Douglas-Peucker simplification."""
    size = len(flat_coords) // stride
    if size < 3:
        return list(range(size))
    keep = [False] * size
    keep[0] = keep[-1] = True
    limit = threshold * threshold

    def point(i: int) -> Sequence[float]:
        return flat_coords[i * stride : i * stride + stride]

    stack = [(0, size - 1)]
    while stack:
        start, end = stack.pop()
        a, b = point(start), point(end)
        max_dist, max_index = 0.0, 0
        for i in range(start + 1, end):
            dist = _distance_from_segment_squared(a, b, point(i))
            if dist > max_dist:
                max_dist, max_index = dist, i
        if max_dist > limit:
            keep[max_index] = True
            stack.append((start, max_index))
            stack.append((max_index, end))
    return [i for i, k in enumerate(keep) if k]


def _distance_from_segment_squared(a, b, p) -> float:
    x, y = a[0], a[1]
    dx, dy = b[0] - x, b[1] - y
    if dx != 0 or dy != 0:
        t = ((p[0] - x) * dx + (p[1] - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = b[0], b[1]
        elif t > 0:
            x += dx * t
            y += dy * t
    dx, dy = p[0] - x, p[1] - y
    return dx * dx + dy * dy