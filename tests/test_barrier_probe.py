from __future__ import annotations
import pytest
from gridbarrier.env.barriers import create_barrier
from gridbarrier.env.coord import Coord
from gridbarrier.env.grid import GridWorld
from gridbarrier.sensors.barrier_probe import (
    barrier_density,
    barriers_in_radius,
    nearest_barrier_center,
    probe_barrier_distance,
)


def test_barriers_in_radius_around_spot():
    grid = GridWorld(size_x=100, size_y=100)
    create_barrier(grid, 6)
    assert barriers_in_radius(grid, Coord(50, 16), 5.0) == 81
    assert barrier_density(grid, Coord(50, 16), 5.0) == pytest.approx(1.0)
    assert barriers_in_radius(grid, Coord(10, 10), 5.0) == 0
    assert barrier_density(grid, Coord(10, 10), 5.0) == 0.0


def test_nearest_barrier_center():
    grid = GridWorld(size_x=100, size_y=100)
    assert nearest_barrier_center(grid, Coord(0, 0)) is None

    create_barrier(grid, 6)
    center, dist = nearest_barrier_center(grid, Coord(50, 70))
    assert center == Coord(50, 64)
    assert dist == pytest.approx(6.0)


def test_probe_barrier_distance():
    grid = GridWorld(size_x=100, size_y=100)
    create_barrier(grid, 1)  # bar at x in {50, 51}, y in [25, 75]
    east = Coord(1, 0)
    assert probe_barrier_distance(grid, Coord(45, 40), east, 10) == 4
    assert probe_barrier_distance(grid, Coord(49, 40), east, 10) == 0
    # out of range
    assert probe_barrier_distance(grid, Coord(30, 40), east, 10) == 10
    # leaves the grid first
    assert probe_barrier_distance(grid, Coord(95, 40), east, 10) == 10
    # below the bar
    assert probe_barrier_distance(grid, Coord(45, 10), east, 10) == 10
