"""One-dimensional quadrature."""
from libintegrate.one_d.interpolation import lagrange_at, lagrange_basis
from libintegrate.one_d.simpson import (
    SimpsonRule,
    simpson,
    simpson_samples,
    simpson_uniform,
)

__all__ = [
    "SimpsonRule",
    "simpson",
    "simpson_samples",
    "simpson_uniform",
    "lagrange_at",
    "lagrange_basis",
]
