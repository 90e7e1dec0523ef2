from __future__ import annotations
import pytest
from gridbarrier.utils.rng import make_rng, random_uint


def test_random_uint_is_inclusive():
    rng = make_rng(0)
    draws = {random_uint(rng, 3, 5) for _ in range(500)}
    assert draws == {3, 4, 5}
    assert random_uint(rng, 7, 7) == 7


def test_random_uint_rejects_empty_range():
    with pytest.raises(ValueError):
        random_uint(make_rng(0), 5, 4)


def test_same_seed_same_draws():
    a = make_rng(42)
    b = make_rng(42)
    assert [random_uint(a, 0, 1000) for _ in range(10)] == [random_uint(b, 0, 1000) for _ in range(10)]
