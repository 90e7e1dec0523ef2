from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Coord:
    """Integer grid location (x, y). Signed, so differences are Coords too."""
    x: int
    y: int

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean length of the vector from the origin to this point."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
