"""
Quadratic Lagrange Interpolation

Evaluates the parabola through three samples at a single point. Used by the
Simpson integrators to synthesize a midpoint value when the samples do not
provide one.
"""

from typing import Sequence


def lagrange_basis(x, a, b, c):
    """
    Lagrange basis term of node ``c`` for the node set {a, b, c}.

    Parameters
    ----------
    x : scalar
        Evaluation point
    a, b : scalar
        The two other nodes
    c : scalar
        Node whose basis polynomial is evaluated

    Returns
    -------
    scalar
        (x - a)(x - b) / ((c - a)(c - b))

    Notes
    -----
    Equals 1 at x = c and 0 at x = a, x = b. Coincident nodes divide by zero.
    """
    return (x - a) * (x - b) / (c - a) / (c - b)


def _weighted_basis(w, x, a, b, c):
    # Ordinate first so its scalar type survives integer nodes
    return w * (x - a) * (x - b) / (c - a) / (c - b)


def lagrange_at(x, xs: Sequence, ys: Sequence):
    """
    Value at ``x`` of the degree <= 2 polynomial through three points.

    Parameters
    ----------
    x : scalar
        Evaluation point
    xs : sequence of 3 scalars
        Distinct abscissas
    ys : sequence of 3 scalars
        Ordinates at ``xs``

    Returns
    -------
    scalar
        sum_k ys[k] * L_k(x)
    """
    x0, x1, x2 = xs[0], xs[1], xs[2]
    return (_weighted_basis(ys[0], x, x1, x2, x0)
            + _weighted_basis(ys[1], x, x0, x2, x1)
            + _weighted_basis(ys[2], x, x0, x1, x2))
