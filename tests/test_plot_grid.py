from __future__ import annotations
import os
import numpy as np
from gridbarrier.env.barriers import create_barrier
from gridbarrier.env.grid import GridWorld
from gridbarrier.viz.plot_grid import plot_barriers


def test_plot_barriers_writes_png(tmp_path):
    grid = GridWorld(size_x=64, size_y=64)
    create_barrier(grid, 5, rng=np.random.default_rng(0), island_count=4)
    out = tmp_path / "plots" / "barriers.png"
    plot_barriers(grid, str(out))
    assert os.path.getsize(out) > 0
