"""Exception types raised by smoothopt."""

from __future__ import annotations

from typing import Optional


class SmoothOptError(Exception):
    """Base class for smoothopt errors."""


class InvalidInputError(SmoothOptError, ValueError):
    """Raised when an object cannot be built from the supplied data.

    The canonical case is a :class:`~smoothopt.optimize.Quadratic` whose
    matrix is not positive definite.
    """


class DimensionMismatchError(SmoothOptError, ValueError):
    """Raised when a vector's length disagrees with the expected dimension."""

    def __init__(
        self, expected: int, actual: int | tuple, message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Expected a vector of length {expected}, got {actual}."
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class LineSearchError(SmoothOptError, RuntimeError):
    """Raised when the Armijo search cannot produce an acceptable step."""

    def __init__(self, message: str, step: float = 0.0, nfev: int = 0) -> None:
        super().__init__(message)
        self.step = step
        self.nfev = nfev


__all__ = [
    "SmoothOptError",
    "InvalidInputError",
    "DimensionMismatchError",
    "LineSearchError",
]
