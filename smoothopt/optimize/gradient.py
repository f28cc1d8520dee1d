"""Gradient strategies and the steepest-descent direction."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .core import GRAD_STEP, Array
from .functions import SmoothFunction
from .workspace import GradientWorkspace, frozen_view


class GradientMethod(Enum):
    """How the driver obtains gradients."""

    ANALYTIC = "analytic"
    FINITE_DIFFERENCE = "finite_difference"

    @classmethod
    def from_flag(cls, analytic: bool) -> "GradientMethod":
        return cls.ANALYTIC if analytic else cls.FINITE_DIFFERENCE


def analytic_gradient(fun: SmoothFunction, ws: GradientWorkspace) -> Array:
    """Closed-form gradient at ``ws.x``, stored in ``ws.g``."""
    if not fun.has_analytic_gradient:
        raise TypeError(
            f"{fun!r} has no analytic gradient; use the finite-difference mode."
        )
    fun.gradient(frozen_view(ws.x), out=ws.g)
    return ws.g


def numerical_gradient(
    fun: SmoothFunction, ws: GradientWorkspace, step: float = GRAD_STEP
) -> Array:
    """Central-difference gradient at ``ws.x``, stored in ``ws.g``.

    Costs ``2 * n`` evaluations. Each coordinate is perturbed alone; the
    scratch vectors are restored to ``x`` before moving to the next one.
    ``fun`` only sees read-only views of them.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    x = ws.x
    xp = ws.x_plus_dx
    xm = ws.x_minus_dx
    xp[:] = x
    xm[:] = x
    xp_ro = frozen_view(xp)
    xm_ro = frozen_view(xm)
    for i in range(ws.n):
        xp[i] += step
        xm[i] -= step
        ws.g[i] = (fun(xp_ro) - fun(xm_ro)) / (2.0 * step)
        xp[i] = x[i]
        xm[i] = x[i]
    return ws.g


def compute_gradient(
    fun: SmoothFunction,
    ws: GradientWorkspace,
    method: GradientMethod,
    step: float = GRAD_STEP,
) -> tuple[Array, int, int]:
    """Return gradient along with (nfev_increment, njev_increment)."""
    if method is GradientMethod.ANALYTIC:
        return analytic_gradient(fun, ws), 0, 1
    return numerical_gradient(fun, ws, step), 2 * ws.n, 0


def set_descent_direction(ws: GradientWorkspace) -> Array:
    """Store the antigradient ``-g`` in ``ws.d``."""
    np.negative(ws.g, out=ws.d)
    return ws.d


__all__ = [
    "GradientMethod",
    "analytic_gradient",
    "numerical_gradient",
    "compute_gradient",
    "set_descent_direction",
]
