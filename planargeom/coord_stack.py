"""A stack of fixed-stride coordinates stored in one flat list."""

from typing import List, Sequence, Tuple


class CoordStack:
    """Stack of coordinates; ``data`` holds the ordinates, newest last."""

    def __init__(self, stride: int) -> None:
        self.stride = stride
        self.data: List[float] = []

    def push(self, data: Sequence[float], idx: int) -> List[float]:
        """Push the coordinate starting at ``idx`` in ``data`` and return it."""
        coord = list(data[idx : idx + self.stride])
        self.data.extend(coord)
        return coord

    def pop(self) -> Tuple[List[float], int]:
        """Remove the newest coordinate; return it with the remaining size."""
        if not self.data:
            raise IndexError("pop from empty coordinate stack")
        start = len(self.data) - self.stride
        coord = self.data[start:]
        del self.data[start:]
        return coord, len(self)

    def peek(self) -> List[float]:
        """Return the newest coordinate without removing it."""
        if not self.data:
            raise IndexError("peek at empty coordinate stack")
        return self.data[len(self.data) - self.stride :]

    def __len__(self) -> int:
        return len(self.data) // self.stride