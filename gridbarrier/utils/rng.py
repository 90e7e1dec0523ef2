from __future__ import annotations
import numpy as np


def make_rng(seed: int) -> np.random.Generator:
    """Create a numpy RNG with a fixed seed."""
    return np.random.default_rng(int(seed))


def random_uint(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer draw, inclusive of both ends."""
    if low > high:
        raise ValueError(f"Empty range for random_uint: [{low}, {high}]")
    return int(rng.integers(low, high, endpoint=True))
