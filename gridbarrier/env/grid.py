from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterator, List, Optional, Tuple

import numpy as np

from gridbarrier.env.coord import Coord


class CellState(IntEnum):
    """Cell markers. Values strictly between EMPTY and BARRIER are occupant indices."""
    EMPTY = 0
    BARRIER = 0xFFFF


@dataclass
class GridWorld:
    """2D simulation grid indexed cells[x, y], plus the current barrier records."""
    size_x: int
    size_y: int
    cells: 'Optional[np.ndarray]' = None  # uint16[size_x, size_y]
    barrier_locations: List[Coord] = field(default_factory=list, repr=False)
    barrier_centers: List[Coord] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.cells is None:
            self.cells = np.zeros((self.size_x, self.size_y), dtype=np.uint16)
        assert self.cells.shape == (self.size_x, self.size_y)

    def in_bounds(self, loc: Coord) -> bool:
        return 0 <= loc.x < self.size_x and 0 <= loc.y < self.size_y

    def at(self, loc: Coord) -> int:
        return int(self.cells[loc.x, loc.y])

    def set(self, loc: Coord, value: int) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(loc):
            raise IndexError(f"{loc} is outside the {self.size_x}x{self.size_y} grid")
        self.cells[loc.x, loc.y] = value

    def is_empty_at(self, loc: Coord) -> bool:
        return self.at(loc) == CellState.EMPTY

    def is_barrier_at(self, loc: Coord) -> bool:
        return self.at(loc) == CellState.BARRIER

    def is_occupied_at(self, loc: Coord) -> bool:
        """True if an occupant (not a barrier) sits at loc."""
        value = self.at(loc)
        return value != CellState.EMPTY and value != CellState.BARRIER

    def is_border(self, loc: Coord) -> bool:
        return loc.x == 0 or loc.x == self.size_x - 1 or loc.y == 0 or loc.y == self.size_y - 1

    def zero_fill(self) -> None:
        """Reset every cell to EMPTY. Barrier records are reset by create_barrier."""
        self.cells.fill(CellState.EMPTY)

    def barrier_mask(self) -> np.ndarray:
        return self.cells == CellState.BARRIER

    def get_barrier_locations(self) -> Tuple[Coord, ...]:
        return tuple(self.barrier_locations)

    def get_barrier_centers(self) -> Tuple[Coord, ...]:
        return tuple(self.barrier_centers)

    def neighborhood(self, center: Coord, radius: float) -> Iterator[Coord]:
        """
        Yield every in-bounds cell within `radius` of `center`, column by column.

        Each column dx spans dy in [-extent, extent] with
        extent = int(sqrt(radius^2 - dx^2)), clipped at the grid edges.
        """
        r = int(radius)
        for dx in range(-min(r, center.x), min(r, self.size_x - center.x - 1) + 1):
            x = center.x + dx
            extent = int(math.sqrt(radius * radius - dx * dx))
            for dy in range(-min(extent, center.y), min(extent, self.size_y - center.y - 1) + 1):
                yield Coord(x, center.y + dy)

    def visit_neighborhood(self, center: Coord, radius: float, fn: Callable[[Coord], None]) -> None:
        for loc in self.neighborhood(center, radius):
            fn(loc)

    def find_empty_location(self, rng: np.random.Generator, max_attempts: int = 10000) -> Coord:
        """Random EMPTY cell, by rejection sampling."""
        for _ in range(max_attempts):
            loc = Coord(int(rng.integers(0, self.size_x)), int(rng.integers(0, self.size_y)))
            if self.is_empty_at(loc):
                return loc
        raise ValueError(f"No empty cell found after {max_attempts} attempts.")
