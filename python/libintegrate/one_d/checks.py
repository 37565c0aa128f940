"""
Precondition checks for checked mode.

The default integration path trusts its caller. These checks only run when
checked mode is requested per call or via LIBINTEGRATE_CHECKED=1.
"""

import logging
import numbers

import numpy as np

from libintegrate import _config
from libintegrate.config import INTEGRATE_CONFIG as cfg

logger = logging.getLogger(__name__)


def resolve_checked(checked):
    """Per-call flag wins; None falls back to the process-wide switch."""
    if checked is None:
        return _config.CHECKED
    return bool(checked)


def _as_float_array(values, name: str) -> np.ndarray:
    try:
        n = len(values)
    except TypeError:
        raise TypeError(f"{name} must support len(), got {type(values).__name__}") from None
    if not hasattr(values, "__getitem__"):
        raise TypeError(f"{name} must support indexing, got {type(values).__name__}")
    return np.array([float(values[i]) for i in range(n)], dtype=np.float64)


def _check_finite_scalar(value, name: str) -> None:
    if cfg.checks.require_finite and not np.isfinite(float(value)):
        raise ValueError(f"{name} must be finite, got {value}")


def check_integrand(f) -> None:
    if not callable(f):
        raise TypeError(f"integrand must be callable, got {type(f).__name__}")


def check_bounds(a, b) -> None:
    _check_finite_scalar(a, "a")
    _check_finite_scalar(b, "b")


def check_subdivisions(n) -> None:
    """n must be an integer >= min_subdivisions (bool excluded)."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < cfg.simpson.min_subdivisions:
        raise ValueError(
            f"n must be >= {cfg.simpson.min_subdivisions}, got {n}"
        )


def check_step(dx) -> None:
    _check_finite_scalar(dx, "dx")
    if dx == 0:
        raise ValueError("dx must be non-zero")


def check_uniform_samples(y) -> None:
    values = _as_float_array(y, "y")
    if len(values) < cfg.simpson.min_samples:
        raise ValueError(
            f"need at least {cfg.simpson.min_samples} samples, got {len(values)}"
        )
    logger.debug("checked uniform samples: n=%d", len(values))


def check_samples(x, y) -> None:
    """Sizes match, enough samples, x finite and strictly monotonic."""
    xs = _as_float_array(x, "x")
    ys = _as_float_array(y, "y")

    if len(xs) != len(ys):
        raise ValueError(f"x and y differ in length: {len(xs)} != {len(ys)}")
    if len(xs) < cfg.simpson.min_samples:
        raise ValueError(
            f"need at least {cfg.simpson.min_samples} samples, got {len(xs)}"
        )
    if cfg.checks.require_finite and not np.all(np.isfinite(xs)):
        raise ValueError("x contains non-finite values")
    if cfg.checks.require_strict_monotonic:
        steps = np.diff(xs)
        if not (np.all(steps > 0) or np.all(steps < 0)):
            raise ValueError("x must be strictly increasing or strictly decreasing")

    logger.debug("checked samples: n=%d, span=[%g, %g]", len(xs), xs[0], xs[-1])
