from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

import numpy as np

from gridbarrier.env.coord import Coord
from gridbarrier.env.grid import CellState, GridWorld
from gridbarrier.utils.rng import random_uint


class BarrierType(IntEnum):
    NONE = 0
    VERTICAL_BAR_CONSTANT = 1
    VERTICAL_BAR_RANDOM = 2
    FIVE_BLOCKS_STAGGERED = 3
    HORIZONTAL_BAR_CONSTANT = 4
    FLOATING_ISLANDS = 5
    SPOTS = 6


RANDOMIZED_TYPES = (BarrierType.VERTICAL_BAR_RANDOM, BarrierType.FLOATING_ISLANDS)


class UnknownBarrierTypeError(ValueError):
    pass


class BarrierPlacementError(RuntimeError):
    pass


def _mark(grid: GridWorld, loc: Coord) -> None:
    grid.set(loc, CellState.BARRIER)
    grid.barrier_locations.append(loc)


def _draw_box(grid: GridWorld, x0: int, y0: int, x1: int, y1: int) -> None:
    """Inclusive box, x outer, y inner."""
    for x in range(x0, x1 + 1):
        for y in range(y0, y1 + 1):
            _mark(grid, Coord(x, y))


def _vertical_bar_constant(grid: GridWorld) -> None:
    min_x = grid.size_x // 2
    min_y = grid.size_y // 4
    _draw_box(grid, min_x, min_y, min_x + 1, min_y + grid.size_y // 2)


def _vertical_bar_random(grid: GridWorld, rng: np.random.Generator) -> None:
    W, H = grid.size_x, grid.size_y
    mid_x = random_uint(rng, W // 10, W - W // 10)
    # top end is one short so that mid_y + H // 4 stays on the grid
    mid_y = random_uint(rng, H // 4, H - H // 4 - 1)
    grid.barrier_centers.append(Coord(mid_x, mid_y))
    _draw_box(grid, mid_x - 1, mid_y - H // 4, mid_x + 1, mid_y + H // 4)


def _five_blocks_staggered(grid: GridWorld) -> None:
    W, H = grid.size_x, grid.size_y
    block_x = 2
    block_y = W // 3  # height follows the width

    x0 = W // 4 - block_x // 2
    y0 = H // 4 - block_y // 2
    y1 = y0 + block_y
    _draw_box(grid, x0, y0, x0 + block_x, y1)

    x0 += W // 2
    _draw_box(grid, x0, y0, x0 + block_x, y1)

    y0 += H // 2
    y1 = y0 + block_y
    _draw_box(grid, x0, y0, x0 + block_x, y1)

    x0 -= W // 2
    _draw_box(grid, x0, y0, x0 + block_x, y1)

    x0 = W // 2 - block_x // 2
    y0 = H // 2 - block_y // 2
    _draw_box(grid, x0, y0, x0 + block_x, y0 + block_y)


def _horizontal_bar_constant(grid: GridWorld) -> None:
    min_x = grid.size_x // 4
    min_y = grid.size_y // 2 + grid.size_y // 4
    _draw_box(grid, min_x, min_y, min_x + grid.size_x // 2, min_y + 2)


def _placement_valid(centers: List[Coord], min_separation: float) -> bool:
    for a in range(len(centers) - 1):
        for b in range(a + 1, len(centers)):
            if (centers[a] - centers[b]).length() < min_separation:
                return False
    return True


def _floating_islands(
    grid: GridWorld,
    rng: np.random.Generator,
    island_count: int,
    radius: float,
    max_attempts: int,
) -> None:
    """
    Rejection-sample `island_count` centers at least `margin` apart, then stamp a
    disc of `radius` around each.

    margin = 4 * radius is both the distance kept from every edge and the minimum
    pairwise separation.
    """
    margin = int(radius * 4)
    W, H = grid.size_x, grid.size_y
    if margin > W - margin or margin > H - margin:
        raise BarrierPlacementError(
            f"Grid {W}x{H} has no room for islands with margin {margin}."
        )

    centers: List[Coord] = []
    for _ in range(max_attempts):
        centers = [
            Coord(random_uint(rng, margin, W - margin), random_uint(rng, margin, H - margin))
            for _ in range(island_count)
        ]
        if _placement_valid(centers, margin):
            break
    else:
        raise BarrierPlacementError(
            f"Could not place {island_count} islands {margin} cells apart on a "
            f"{W}x{H} grid in {max_attempts} attempts."
        )

    for center in centers:
        grid.barrier_centers.append(center)
        grid.visit_neighborhood(center, radius, lambda loc: _mark(grid, loc))


def _spots(grid: GridWorld, spot_count: int, radius: float) -> None:
    slice_y = grid.size_y // (spot_count + 1)
    for n in range(1, spot_count + 1):
        center = Coord(grid.size_x // 2, n * slice_y)
        grid.visit_neighborhood(center, radius, lambda loc: _mark(grid, loc))
        grid.barrier_centers.append(center)


def create_barrier(
    grid: GridWorld,
    barrier_type: int,
    rng: Optional[np.random.Generator] = None,
    island_count: int = 12,
    island_radius: float = 3.0,
    spot_count: int = 5,
    spot_radius: float = 5.0,
    max_placement_attempts: int = 10000,
) -> Tuple[List[Coord], List[Coord]]:
    """
    Stamp BARRIER cells for the selected layout and rebuild the barrier records.

    Assumes the grid is EMPTY where the layout lands. Both records are cleared
    first, whatever the outcome. Every stamped cell is appended to
    grid.barrier_locations, repeats included; cluster layouts also append one
    entry per cluster to grid.barrier_centers.

    Returns (grid.barrier_locations, grid.barrier_centers).
    """
    grid.barrier_locations.clear()
    grid.barrier_centers.clear()

    try:
        kind = BarrierType(barrier_type)
    except ValueError:
        raise UnknownBarrierTypeError(f"Unknown barrier type: {barrier_type}") from None

    if kind in RANDOMIZED_TYPES and rng is None:
        raise ValueError(f"Barrier type {kind.name} needs an rng.")

    if kind == BarrierType.VERTICAL_BAR_CONSTANT:
        _vertical_bar_constant(grid)
    elif kind == BarrierType.VERTICAL_BAR_RANDOM:
        _vertical_bar_random(grid, rng)
    elif kind == BarrierType.FIVE_BLOCKS_STAGGERED:
        _five_blocks_staggered(grid)
    elif kind == BarrierType.HORIZONTAL_BAR_CONSTANT:
        _horizontal_bar_constant(grid)
    elif kind == BarrierType.FLOATING_ISLANDS:
        _floating_islands(grid, rng, island_count, island_radius, max_placement_attempts)
    elif kind == BarrierType.SPOTS:
        _spots(grid, spot_count, spot_radius)

    return grid.barrier_locations, grid.barrier_centers


def unique_locations(locations: Iterable[Coord]) -> List[Coord]:
    """Drop repeated coordinates, keeping first-seen order."""
    seen = set()
    out: List[Coord] = []
    for loc in locations:
        if loc in seen:
            continue
        seen.add(loc)
        out.append(loc)
    return out
