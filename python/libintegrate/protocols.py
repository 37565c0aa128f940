"""
Structural types accepted by the integrators.

Nothing here needs to be subclassed: any object with the right methods
qualifies (lists, tuples, numpy arrays, user containers, lambdas).
"""

from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)

# Field-like number: float, numpy.float64, Fraction, Decimal
Scalar = TypeVar("Scalar")


class Indexable(Protocol[T_co]):
    """Container exposing a size query and positional access."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> T_co: ...


class Integrand(Protocol):
    """Unary callable mapping a scalar to a scalar."""

    def __call__(self, x: Any) -> Any: ...
