"""
Integration Configuration

Limits enforced by checked mode: how many samples and sub-intervals make a
valid request, and which properties of the abscissas are verified.

Usage:
    from libintegrate.config import INTEGRATE_CONFIG as cfg

    if len(y) < cfg.simpson.min_samples:
        raise ValueError(...)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SimpsonConfig:
    """Configuration for the composite Simpson rule."""

    # Smallest sample set that forms one Simpson triple
    min_samples: int = 3

    # Smallest number of sub-intervals for the callable form
    min_subdivisions: int = 1


@dataclass(frozen=True)
class CheckConfig:
    """What checked mode verifies on top of sizes and counts."""

    # Reject nan/inf bounds, step sizes and abscissas
    require_finite: bool = True

    # Reject abscissas that are not strictly increasing or decreasing
    require_strict_monotonic: bool = True


@dataclass(frozen=True)
class IntegrateConfig:
    """Master configuration for all integrators."""

    simpson: SimpsonConfig = SimpsonConfig()
    checks: CheckConfig = CheckConfig()


# Global singleton instance
INTEGRATE_CONFIG = IntegrateConfig()
