from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from gridbarrier.env.coord import Coord
from gridbarrier.env.grid import GridWorld


def barriers_in_radius(grid: GridWorld, center: Coord, radius: float) -> int:
    """Number of BARRIER cells in the neighborhood of center."""
    return sum(1 for loc in grid.neighborhood(center, radius) if grid.is_barrier_at(loc))


def barrier_density(grid: GridWorld, center: Coord, radius: float) -> float:
    """Fraction of the (edge-clipped) neighborhood that is BARRIER, in [0, 1]."""
    total = 0
    hits = 0
    for loc in grid.neighborhood(center, radius):
        total += 1
        if grid.is_barrier_at(loc):
            hits += 1
    return 0.0 if total == 0 else hits / total


def nearest_barrier_center(grid: GridWorld, loc: Coord) -> Optional[Tuple[Coord, float]]:
    """
    Closest recorded cluster center and its Euclidean distance.

    Only cluster layouts record centers; returns None for the others.
    """
    centers = grid.get_barrier_centers()
    if not centers:
        return None
    pts = np.array([c.as_tuple() for c in centers], dtype=float)
    d = cdist(np.array([loc.as_tuple()], dtype=float), pts)[0]
    i = int(np.argmin(d))
    return centers[i], float(d[i])


def probe_barrier_distance(grid: GridWorld, loc: Coord, direction: Coord, probe_distance: int) -> int:
    """
    Walk from loc along direction and count free cells before the first BARRIER.

    Returns probe_distance when nothing is hit in range or the walk leaves the grid.
    """
    count = 0
    cur = loc + direction
    while count < probe_distance and grid.in_bounds(cur) and not grid.is_barrier_at(cur):
        cur = cur + direction
        count += 1
    if count < probe_distance and grid.in_bounds(cur):
        return count
    return probe_distance
