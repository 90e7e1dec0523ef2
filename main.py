from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

from tqdm import trange

from params import RunParams
from gridbarrier.env.barriers import BarrierType, create_barrier, unique_locations
from gridbarrier.env.grid import GridWorld
from gridbarrier.viz.plot_grid import plot_barriers
from gridbarrier.utils.rng import make_rng
from gridbarrier.utils.logging_utils import log, set_quiet, StageTimer


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--barrier_type", type=int, default=None,
                   help="Layout selector: " + ", ".join(f"{b.value}={b.name}" for b in BarrierType))
    p.add_argument("--size_x", type=int, default=None)
    p.add_argument("--size_y", type=int, default=None)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--generations", type=int, default=1, help="Regenerate the layout this many times.")
    p.add_argument("--max_attempts", type=int, default=None, help="Island placement retry cap.")
    p.add_argument("--save_dir", type=str, default="runs/demo")
    p.add_argument("--no_plots", action="store_true")
    p.add_argument("--quiet", action="store_true")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    set_quiet(args.quiet)

    rp = RunParams()
    rp = RunParams(
        grid=type(rp.grid)(
            **{
                **asdict(rp.grid),
                "seed": args.seed,
                "size_x": args.size_x if args.size_x is not None else rp.grid.size_x,
                "size_y": args.size_y if args.size_y is not None else rp.grid.size_y,
                "barrier_type": args.barrier_type if args.barrier_type is not None else rp.grid.barrier_type,
            }
        ),
        barriers=type(rp.barriers)(
            **{
                **asdict(rp.barriers),
                "max_placement_attempts": args.max_attempts or rp.barriers.max_placement_attempts,
            }
        ),
    )

    log("===== Barrier layout =====")
    log(f"barrier_type={rp.grid.barrier_type}, grid={rp.grid.size_x}x{rp.grid.size_y}, seed={rp.grid.seed}")
    log(f"save_dir={args.save_dir}")

    os.makedirs(args.save_dir, exist_ok=True)
    with open(os.path.join(args.save_dir, "run_params.json"), "w", encoding="utf-8") as f:
        json.dump(asdict(rp), f, indent=2)

    rng = make_rng(rp.grid.seed)
    grid = GridWorld(size_x=rp.grid.size_x, size_y=rp.grid.size_y)

    records: List[Dict[str, Any]] = []
    with StageTimer(f"Create barriers for {args.generations} generation(s)"):
        for gen in trange(args.generations, desc="Generations", disable=args.quiet or args.generations <= 1):
            grid.zero_fill()
            locations, centers = create_barrier(
                grid,
                rp.grid.barrier_type,
                rng=rng,
                **asdict(rp.barriers),
            )
            records.append(
                {
                    "generation": gen,
                    "barrier_type": rp.grid.barrier_type,
                    "locations": [loc.as_tuple() for loc in locations],
                    "centers": [c.as_tuple() for c in centers],
                    "unique_cells": len(unique_locations(locations)),
                }
            )
        log(f"Last generation: {len(grid.barrier_locations)} barrier cells, {len(grid.barrier_centers)} centers")

    with open(os.path.join(args.save_dir, "barriers.json"), "w", encoding="utf-8") as f:
        json.dump(records, f)

    if not args.no_plots:
        plot_barriers(grid, os.path.join(args.save_dir, "barriers.png"))

    print("\n=== DONE ===")
    print(f"Saved to: {args.save_dir}")


if __name__ == "__main__":
    main()
