"""Preallocated buffers reused by every iteration of a descent run."""

from __future__ import annotations

import numpy as np

from ..exceptions import DimensionMismatchError, InvalidInputError
from .core import Array

_BUFFERS = ("x", "x_predictor", "g", "x_plus_dx", "x_minus_dx", "d")


def frozen_view(buf: Array) -> Array:
    """Read-only view of a workspace buffer, handed to user evaluators."""
    view = buf.view()
    view.flags.writeable = False
    return view


class GradientWorkspace:
    """Mutable iteration state of one optimization run.

    Attributes:
        x: Current iterate.
        x_predictor: Trial point examined by the line search.
        g: Gradient at ``x``.
        x_plus_dx, x_minus_dx: Perturbed copies of ``x`` for finite differences.
        d: Descent direction.

    All six vectors share the length ``n`` given at construction. A
    workspace belongs to a single run; it is used as a context manager and
    :meth:`release` hands the final ``x`` over to the caller.

    Example:
        >>> import numpy as np
        >>> with GradientWorkspace.from_point(np.ones(3)) as ws:
        ...     float(ws.x.sum())
        3.0
    """

    def __init__(self, n: int) -> None:
        n = int(n)
        if n < 1:
            raise InvalidInputError(f"Workspace dimension must be >= 1, got {n}.")
        self.n = n
        self.x = np.zeros(n)
        self.x_predictor = np.zeros(n)
        self.g = np.zeros(n)
        self.x_plus_dx = np.zeros(n)
        self.x_minus_dx = np.zeros(n)
        self.d = np.zeros(n)
        self._released = False

    @classmethod
    def from_point(cls, x0: Array) -> "GradientWorkspace":
        x0 = np.asarray(x0, dtype=float)
        if x0.ndim != 1:
            raise DimensionMismatchError(
                -1, x0.shape, f"Starting point must be 1-D, got shape {x0.shape}."
            )
        ws = cls(x0.size)
        ws.load(x0)
        return ws

    def load(self, x0: Array) -> None:
        """Copy ``x0`` into the current iterate."""
        self._check_alive()
        x0 = np.asarray(x0, dtype=float)
        if x0.shape != (self.n,):
            raise DimensionMismatchError(self.n, x0.shape)
        self.x[:] = x0

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> Array:
        """Drop all buffers and return the final iterate."""
        self._check_alive()
        x = self.x
        for name in _BUFFERS:
            setattr(self, name, None)
        self._released = True
        return x

    def _check_alive(self) -> None:
        if self._released:
            raise RuntimeError("GradientWorkspace has already been released.")

    def __enter__(self) -> "GradientWorkspace":
        self._check_alive()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._released:
            self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"GradientWorkspace(n={self.n}, {state})"


__all__ = ["GradientWorkspace", "frozen_view"]
