"""
Shared integrands with known integrals.

Every case here has a closed-form antiderivative, so the exact value of
the integral is available for any bounds.
"""
import numpy as np
import pytest


@pytest.fixture
def random_cubics():
    """Twenty random cubics with their antiderivatives."""
    rng = np.random.RandomState(42)
    cases = []
    for _ in range(20):
        p = np.polynomial.Polynomial(rng.uniform(-5, 5, 4))
        cases.append((p, p.integ()))
    return cases


@pytest.fixture
def smooth_cases():
    """(f, F, a, b) for smooth non-polynomial integrands."""
    return [
        (np.sin, lambda x: -np.cos(x), 0.0, np.pi),
        (np.exp, np.exp, -1.0, 2.0),
        (lambda x: 1.0 / (1.0 + x ** 2), np.arctan, -3.0, 3.0),
        (lambda x: x * np.exp(-x), lambda x: -(x + 1) * np.exp(-x), 0.0, 5.0),
    ]


@pytest.fixture
def non_uniform_grid():
    """Sorted random abscissas on [0, 4] with both endpoints included."""
    rng = np.random.RandomState(7)
    inner = np.sort(rng.uniform(0.0, 4.0, 39))
    return np.concatenate([[0.0], inner, [4.0]])
