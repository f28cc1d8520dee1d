"""Armijo backtracking line search.

From D. P. Bertsekas, *Constrained Optimization and Lagrange Multiplier
Methods* (1982): starting from the step ``s``, the step is contracted by
``beta`` until

    F(x + beta^m s d) - F(x) <= sigma beta^m s <g, d>.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..exceptions import LineSearchError
from .core import MAX_BACKTRACKS, ArmijoParams
from .functions import SmoothFunction
from .workspace import GradientWorkspace, frozen_view


def _predict(ws: GradientWorkspace, step: float) -> None:
    # x_predictor = x + step * d
    np.multiply(ws.d, step, out=ws.x_predictor)
    ws.x_predictor += ws.x


def armijo_rule(
    params: ArmijoParams,
    fun: SmoothFunction,
    ws: GradientWorkspace,
    max_backtracks: Optional[int] = MAX_BACKTRACKS,
) -> tuple[float, float, int]:
    """Move ``ws.x`` along ``ws.d`` by an Armijo-acceptable step.

    ``ws.g`` must hold the gradient at ``ws.x`` and ``ws.d`` a descent
    direction. Only ``ws.x`` and ``ws.x_predictor`` are modified.

    Args:
        params: Step scale, contraction factor and decrease fraction.
        fun: Objective.
        ws: Workspace of the running optimization.
        max_backtracks: Maximum number of contractions; None never gives up.

    Returns:
        ``(step, f_new, nfev)``: accepted step length ``beta^m * s``, the
        objective at the new point and the number of evaluations spent.

    Raises:
        LineSearchError: If ``<g, d>`` is not negative, or no step is
            accepted within ``max_backtracks`` contractions.
    """
    if max_backtracks is not None and max_backtracks < 0:
        raise ValueError("max_backtracks must be non-negative or None")
    slope = float(np.dot(ws.g, ws.d))
    if not slope < 0:
        raise LineSearchError(
            f"Search direction is not a descent direction (<g, d> = {slope})."
        )

    fxk = fun(frozen_view(ws.x))
    trial = frozen_view(ws.x_predictor)
    rhs = slope * params.s * params.sigma
    beta_m = 1.0
    _predict(ws, params.s)
    f_new = fun(trial)
    nfev = 2
    backtracks = 0
    # NaN trial values are rejected like insufficient decrease
    while not f_new - fxk <= beta_m * rhs:
        if max_backtracks is not None and backtracks >= max_backtracks:
            raise LineSearchError(
                f"No sufficient decrease after {backtracks} backtracking steps.",
                step=beta_m * params.s,
                nfev=nfev,
            )
        beta_m *= params.beta
        _predict(ws, beta_m * params.s)
        f_new = fun(trial)
        nfev += 1
        backtracks += 1

    ws.x[:] = ws.x_predictor
    return beta_m * params.s, f_new, nfev


__all__ = ["armijo_rule"]
