"""Smooth objective functions understood by the descent driver.

A :class:`SmoothFunction` maps a real vector to a scalar. Subclasses only
have to implement :meth:`SmoothFunction.evaluate`; those that know their
gradient in closed form also override :meth:`SmoothFunction.gradient`,
which makes them usable with ``analytic_gradient=True``.

Example
-------
>>> import numpy as np
>>> from smoothopt.optimize import Quadratic
>>> F = Quadratic(np.eye(2))
>>> F(np.array([1.0, 2.0]))
5.0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from ..exceptions import DimensionMismatchError, InvalidInputError
from .core import Array, Objective
from .utils import is_pos_def


class SmoothFunction(ABC):
    """Differentiable scalar function of a real vector.

    During a run the optimizer passes read-only views of its own buffers;
    evaluators that try to modify their argument raise ``ValueError``.
    """

    #: Expected input length; None accepts any length.
    dim: Optional[int] = None

    @abstractmethod
    def evaluate(self, x: Array) -> float:
        """Return the function value at ``x``."""

    def gradient(self, x: Array, out: Optional[Array] = None) -> Array:
        """Return the exact gradient at ``x``, written into ``out`` if given."""
        raise NotImplementedError(
            f"{type(self).__name__} does not provide an analytic gradient."
        )

    @property
    def has_analytic_gradient(self) -> bool:
        return type(self).gradient is not SmoothFunction.gradient

    def check_dimension(self, x: Array) -> Array:
        """Coerce ``x`` to a 1-D float array of length ``dim``."""
        x = np.asarray(x, dtype=float)
        if x.ndim != 1:
            raise DimensionMismatchError(
                self.dim if self.dim is not None else -1,
                x.shape,
                f"Expected a 1-D vector, got array of shape {x.shape}.",
            )
        if self.dim is not None and x.size != self.dim:
            raise DimensionMismatchError(self.dim, x.size)
        return x

    def __call__(self, x: Array) -> float:
        return float(self.evaluate(self.check_dimension(x)))


class Quadratic(SmoothFunction):
    """Positive-definite quadratic form ``F(x) = x^T Q x``.

    The matrix is copied and frozen on construction; a matrix that is not
    symmetric positive definite is rejected with :class:`InvalidInputError`.
    Symmetrizing Q is the caller's job.
    """

    def __init__(self, Q: Array) -> None:
        Q = np.array(Q, dtype=float)
        if not is_pos_def(Q):
            raise InvalidInputError("matrix is not positive definite")
        Q.flags.writeable = False
        self._Q = Q
        self.dim = Q.shape[0]

    @property
    def matrix(self) -> Array:
        return self._Q

    def evaluate(self, x: Array) -> float:
        return float(np.dot(x, self._Q @ x))

    def gradient(self, x: Array, out: Optional[Array] = None) -> Array:
        x = self.check_dimension(x)
        if out is None:
            return 2.0 * (self._Q @ x)
        np.matmul(self._Q, x, out=out)
        out *= 2.0
        return out

    def __repr__(self) -> str:
        return f"Quadratic(dim={self.dim})"


class CallableFunction(SmoothFunction):
    """Adapter turning a plain ``fun(x) -> float`` into a SmoothFunction.

    An optional ``grad(x) -> array`` enables the analytic gradient mode.
    """

    def __init__(
        self,
        fun: Objective,
        dim: Optional[int] = None,
        grad: Optional[Callable[[Array], Array]] = None,
    ) -> None:
        if not callable(fun):
            raise TypeError(f"fun must be callable, got {type(fun).__name__}.")
        self.fun = fun
        self.grad = grad
        self.dim = dim

    def evaluate(self, x: Array) -> float:
        return self.fun(x)

    def gradient(self, x: Array, out: Optional[Array] = None) -> Array:
        if self.grad is None:
            return super().gradient(x, out)
        x = self.check_dimension(x)
        value = np.asarray(self.grad(x), dtype=float)
        if value.shape != x.shape:
            raise DimensionMismatchError(x.size, value.shape)
        if out is None:
            return value
        out[:] = value
        return out

    @property
    def has_analytic_gradient(self) -> bool:
        return self.grad is not None

    def __repr__(self) -> str:
        name = getattr(self.fun, "__name__", type(self.fun).__name__)
        return f"CallableFunction({name}, dim={self.dim})"


def as_smooth_function(obj, dim: Optional[int] = None) -> SmoothFunction:
    """Return ``obj`` if it already is a SmoothFunction, else wrap a callable."""
    if isinstance(obj, SmoothFunction):
        return obj
    if callable(obj):
        return CallableFunction(obj, dim=dim)
    raise TypeError(
        f"Expected a SmoothFunction or a callable, got {type(obj).__name__}."
    )


__all__ = ["SmoothFunction", "Quadratic", "CallableFunction", "as_smooth_function"]
