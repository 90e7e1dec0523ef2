from __future__ import annotations
import os
from typing import Optional
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from gridbarrier.env.grid import GridWorld


def plot_barriers(grid: GridWorld, out_path: str, title: Optional[str] = None) -> None:
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.figure(figsize=(6, 6))
    # cells are [x, y]; transpose so x runs along the horizontal axis
    plt.imshow(grid.barrier_mask().T.astype(float), origin="lower", cmap="Greys")
    centers = grid.get_barrier_centers()
    if centers:
        plt.scatter([c.x for c in centers], [c.y for c in centers], s=16, marker="x", c="tab:red")
    plt.title(title or f"Barriers ({grid.size_x}x{grid.size_y})")
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
