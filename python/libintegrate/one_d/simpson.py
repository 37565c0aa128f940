"""
Simpson's (1/3) Rule

Composite Simpson quadrature over one-dimensional domains:

- simpson          callable on [a, b] with n sub-intervals
- simpson_samples  discretized function, arbitrary (monotonic) x spacing
- simpson_uniform  discretized function, constant spacing dx
- SimpsonRule      callable object, optionally with a fixed n

Samples are consumed in triples. When the sample count is even the last
interval is closed with a parabola through the final three samples, so
every pair of neighbouring samples is covered exactly once.

Preconditions are the caller's responsibility unless checked mode is
enabled (``checked=True`` or LIBINTEGRATE_CHECKED=1).
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from libintegrate.one_d.checks import (
    check_bounds,
    check_integrand,
    check_samples,
    check_step,
    check_subdivisions,
    check_uniform_samples,
    resolve_checked,
)
from libintegrate.one_d.interpolation import lagrange_at
from libintegrate.protocols import Indexable, Integrand, Scalar


def simpson(
    f: Integrand,
    a: Scalar,
    b: Scalar,
    n: int,
    *,
    checked: Optional[bool] = None
) -> Scalar:
    """
    Integrate a callable over [a, b].

    Parameters
    ----------
    f : callable
        Integrand, called with one scalar
    a, b : scalar
        Bounds; b < a gives the negated integral over [b, a]
    n : int
        Number of equal sub-intervals (>= 1)
    checked : bool, optional
        Validate arguments first; None defers to LIBINTEGRATE_CHECKED

    Returns
    -------
    scalar
        Estimate of the definite integral

    Notes
    -----
    With dx = (b - a) / n, each sub-interval contributes
    f(x) + 4 f(x + dx/2) + f(x + dx) and the sum is scaled by dx/6.
    Exact for polynomials up to degree 3. f is called 3n times, in order.
    """
    if resolve_checked(checked):
        check_integrand(f)
        check_bounds(a, b)
        check_subdivisions(n)

    total = 0
    dx = (b - a) / n
    x = a
    for _ in range(n):
        total += f(x) + 4 * f(x + dx / 2) + f(x + dx)
        x += dx

    # 2h = dx
    return total * (dx / 6)


def simpson_samples(
    x: Indexable[Scalar],
    y: Indexable[Scalar],
    *,
    checked: Optional[bool] = None
) -> Scalar:
    """
    Integrate samples y(x) with arbitrary spacing.

    Parameters
    ----------
    x : indexable
        Strictly monotonic abscissas, at least 3
    y : indexable
        Ordinates, same length as x
    checked : bool, optional
        Validate arguments first; None defers to LIBINTEGRATE_CHECKED

    Returns
    -------
    scalar
        Estimate of the integral from x[0] to x[-1]

    Notes
    -----
    For each triple starting at an even index, the value at the true
    midpoint m = (x[i] + x[i+2]) / 2 is interpolated (x[i+1] need not be
    the midpoint) and (x[i+2] - x[i])/6 * (y[i] + 4 y_m + y[i+2]) is added.
    An even sample count leaves [x[-2], x[-1]] uncovered; that interval is
    integrated with the parabola through the last three samples.
    """
    if resolve_checked(checked):
        check_samples(x, y)

    size = len(x)
    total = 0

    for i in range(0, size - 2, 2):
        m = (x[i] + x[i + 2]) / 2
        ym = lagrange_at(m, (x[i], x[i + 1], x[i + 2]), (y[i], y[i + 1], y[i + 2]))
        total += (x[i + 2] - x[i]) / 6 * (y[i] + 4 * ym + y[i + 2])

    # Last index is odd: one interval left over
    if size % 2 == 0 and size > 2:
        i = size - 3
        m = (x[i + 1] + x[i + 2]) / 2
        ym = lagrange_at(m, (x[i], x[i + 1], x[i + 2]), (y[i], y[i + 1], y[i + 2]))
        total += (x[i + 2] - x[i + 1]) / 6 * (y[i + 1] + 4 * ym + y[i + 2])

    return total


def simpson_uniform(
    y: Indexable[Scalar],
    dx: Scalar = 1,
    *,
    checked: Optional[bool] = None
) -> Scalar:
    """
    Integrate uniformly spaced samples.

    Parameters
    ----------
    y : indexable
        Ordinates, at least 3
    dx : scalar
        Spacing between consecutive samples
    checked : bool, optional
        Validate arguments first; None defers to LIBINTEGRATE_CHECKED

    Returns
    -------
    scalar
        Estimate of the integral over (len(y) - 1) * dx

    Notes
    -----
    Full triples: dx/3 * sum(y[i] + 4 y[i+1] + y[i+2]).
    Even sample count: the last three samples are placed at local offsets
    0, dx, 2dx, interpolated at 3dx/2 and dx/6 * (y[-2] + 4 y_m + y[-1])
    is added on its own. Every product is formed before its division, so
    Fraction and Decimal samples keep their type with the default dx.
    """
    if resolve_checked(checked):
        check_step(dx)
        check_uniform_samples(y)

    size = len(y)
    total = 0

    for i in range(0, size - 2, 2):
        total += y[i] + 4 * y[i + 1] + y[i + 2]
    total = total * dx / 3

    if size % 2 == 0 and size > 2:
        i = size - 3
        # Half-step offsets 0, 2dx, 4dx put the target at 3dx
        ym = lagrange_at(3 * dx, (0, 2 * dx, 4 * dx), (y[i], y[i + 1], y[i + 2]))
        total += dx * (y[i + 1] + 4 * ym + y[i + 2]) / 6

    return total


def _is_indexable(obj) -> bool:
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    return hasattr(obj, "__len__") and hasattr(obj, "__getitem__")


@dataclass(frozen=True)
class SimpsonRule:
    """
    Simpson's (1/3) rule as a reusable callable.

    ``SimpsonRule()`` takes the subdivision count on every call of the
    callable form; ``SimpsonRule(n=64)`` fixes it and refuses a per-call
    count. Sample forms are identical for both.

    Calling conventions::

        rule(f, a, b, n)     # SimpsonRule()
        rule(f, a, b)        # SimpsonRule(n=...)
        rule(x, y)           # non-uniform samples
        rule(y)              # uniform samples, dx = 1
        rule(y, dx)          # uniform samples

    ``(x, y)`` and ``(y, dx)`` are told apart by whether the second
    argument is a container or a scalar. A first argument that is callable
    is integrated as a function when bounds follow it, even if it also
    supports len() and indexing; with one or two positionals such an
    object is read as samples.
    """

    n: Optional[int] = None
    checked: Optional[bool] = None

    def __post_init__(self):
        if self.n is not None and resolve_checked(self.checked):
            check_subdivisions(self.n)

    def __call__(self, first, *args, n: Optional[int] = None, dx=None):
        # Sample forms take at most two positionals; bounds mean a callable
        if callable(first) and (len(args) >= 2 or not _is_indexable(first)):
            if dx is not None:
                raise TypeError("dx only applies to uniform samples")
            return self._integrate_callable(first, args, n)

        if n is not None:
            raise TypeError("n only applies to callable integrands")

        if not args:
            return simpson_uniform(first, 1 if dx is None else dx, checked=self.checked)
        if len(args) == 1 and dx is None:
            second = args[0]
            if _is_indexable(second):
                return simpson_samples(first, second, checked=self.checked)
            return simpson_uniform(first, second, checked=self.checked)

        raise TypeError(
            f"expected rule(x, y) or rule(y, dx), got {1 + len(args)} positional "
            f"arguments{' and dx' if dx is not None else ''}"
        )

    def _integrate_callable(self, f, args, n):
        if len(args) == 3:
            if n is not None:
                raise TypeError("n given both positionally and by keyword")
            n = args[2]
        elif len(args) != 2:
            raise TypeError(f"expected rule(f, a, b[, n]), got {1 + len(args)} arguments")
        a, b = args[0], args[1]

        if self.n is None:
            if n is None:
                raise TypeError("this rule takes the subdivision count on each call")
            return simpson(f, a, b, n, checked=self.checked)

        if n is not None:
            raise TypeError(f"this rule has a fixed subdivision count (n={self.n})")
        return simpson(f, a, b, self.n, checked=self.checked)
