"""Shared fixtures for polyconst tests."""

import random
import pytest
from polyconst.poly import poly_eval_low


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def make_samples(rng):
    """Factory: random integer polynomial of given degree sampled at distinct x.

    Returns (coeffs, points) with coeffs lowest degree first.
    """
    def _make(degree, count=None, coeff_bound=10**20, x_range=(-40, 40)):
        count = degree + 1 if count is None else count
        coeffs = [rng.randint(-coeff_bound, coeff_bound) for _ in range(degree + 1)]
        xs = rng.sample(range(*x_range), count)
        return coeffs, [(x, poly_eval_low(coeffs, x)) for x in xs]
    return _make


@pytest.fixture
def example_doc():
    """Four base-encoded points on f(x) = x^2 + 3."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }
