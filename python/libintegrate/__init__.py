"""
libintegrate — composite Simpson quadrature.

Integrates callables on an interval and discretized functions given as
(x, y) samples or as uniformly spaced y samples. Containers only need
len() and integer indexing; scalars only need field arithmetic.

Usage:
    from libintegrate import simpson, simpson_samples, simpson_uniform

    simpson(lambda x: x * x, 0.0, 1.0, 16)
    simpson_samples([0.0, 1.0, 3.0], [0.0, 1.0, 9.0])
    simpson_uniform([0.0, 1.0, 4.0, 9.0], dx=1.0)

    # Or as a reusable rule with a fixed subdivision count:
    from libintegrate import SimpsonRule
    rule = SimpsonRule(n=64)
    rule(math.sin, 0.0, math.pi)

Set LIBINTEGRATE_CHECKED=1 (or pass checked=True) to validate
preconditions before integrating.
"""
__version__ = "0.1.0"

import logging

from libintegrate.one_d import (
    SimpsonRule,
    lagrange_at,
    lagrange_basis,
    simpson,
    simpson_samples,
    simpson_uniform,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SimpsonRule",
    "simpson",
    "simpson_samples",
    "simpson_uniform",
    "lagrange_at",
    "lagrange_basis",
]
