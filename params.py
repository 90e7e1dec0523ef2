from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridParams:
    size_x: int = 128
    size_y: int = 128
    barrier_type: int = 0  # see gridbarrier.env.barriers.BarrierType
    seed: int = 0


@dataclass(frozen=True)
class BarrierParams:
    island_count: int = 12
    island_radius: float = 3.0  # also sets the island margin (4 * radius)
    spot_count: int = 5
    spot_radius: float = 5.0
    # cap on full redraws of the island centers before giving up
    max_placement_attempts: int = 10000


@dataclass(frozen=True)
class RunParams:

    grid: GridParams = GridParams()
    barriers: BarrierParams = BarrierParams()
