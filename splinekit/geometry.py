from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Control point of a spline.

    Equality is exact on both coordinates. ``i`` and ``j`` are usually integral
    (the spline floors them on insertion) but every distance computation treats
    them as reals.
    """

    i: float
    j: float

    def dist(self, other: "Point") -> float:
        """Euclidean distance from this point to ``other``."""

        return math.hypot(self.i - other.i, self.j - other.j)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.i, self.j)

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.i
        if axis == 1:
            return self.j
        raise IndexError(f"Point axis must be 0 or 1, got {axis}")


def floored(i: float, j: float) -> Point:
    return Point(math.floor(i), math.floor(j))
