"""Steepest descent with the Armijo rule."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..exceptions import DimensionMismatchError
from ..logging import get_logger, verbose_logging
from .core import (
    DISP_ITER,
    GRAD_STEP,
    MAX_BACKTRACKS,
    MAX_ITER,
    MIN_GRAD,
    Array,
    ArmijoParams,
    Callback,
    OptimizeResult,
    Status,
    check_convergence,
)
from .functions import as_smooth_function
from .gradient import GradientMethod, compute_gradient, set_descent_direction
from .line_search import armijo_rule
from .utils import inf_norm
from .workspace import GradientWorkspace

logger = get_logger(__name__)


def gradient_method(
    fun,
    x0: Array,
    params: Optional[ArmijoParams] = None,
    analytic_gradient: bool = False,
    verbose: bool = False,
    maxiter: int = MAX_ITER,
    tol: float = MIN_GRAD,
    grad_step: float = GRAD_STEP,
    disp_iter: int = DISP_ITER,
    max_backtracks: Optional[int] = MAX_BACKTRACKS,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> OptimizeResult:
    """Minimize ``fun`` by steepest descent with Armijo step sizes.

    Each iteration computes the gradient at the current point, stops if its
    infinity norm is at most ``tol``, and otherwise moves along ``-g`` by
    the step chosen by :func:`~smoothopt.optimize.line_search.armijo_rule`.

    Args:
        fun: A :class:`SmoothFunction` or a plain callable ``f(x) -> float``.
        x0: Starting point.
        params: Armijo parameters; ``ArmijoParams()`` when None.
        analytic_gradient: Use ``fun.gradient`` instead of central
            differences.
        verbose: Log progress at INFO level every ``disp_iter`` iterations;
            shown even when the package logger is left at its default level.
        maxiter: Iteration budget.
        tol: Gradient infinity-norm tolerance.
        grad_step: Finite-difference step.
        disp_iter: Progress reporting cadence.
        max_backtracks: Cap on Armijo contractions per iteration.
        callback: Called as ``callback(x, f, g)`` after every step, with
            copies of the new point and of the gradient that produced it.
        history: Record every iterate in ``result.history``.

    Returns:
        OptimizeResult whose ``status`` tells convergence apart from an
        exhausted iteration budget.

    Raises:
        DimensionMismatchError: If ``x0`` does not match ``fun.dim``.
        TypeError: If ``analytic_gradient`` is requested for a function
            without one.
        LineSearchError: If a step cannot be found.
    """
    if params is None:
        params = ArmijoParams()
    if maxiter < 1:
        raise ValueError(f"maxiter must be >= 1, got {maxiter}.")
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}.")
    if grad_step <= 0:
        raise ValueError(f"grad_step must be positive, got {grad_step}.")
    if disp_iter < 1:
        raise ValueError(f"disp_iter must be >= 1, got {disp_iter}.")

    x0 = np.asarray(x0, dtype=float)
    F = as_smooth_function(fun, dim=x0.size if x0.ndim == 1 else None)
    if F.dim is not None and x0.shape != (F.dim,):
        raise DimensionMismatchError(F.dim, x0.shape)

    method = GradientMethod.from_flag(analytic_gradient)
    with verbose_logging(logger, verbose):
        level = logging.INFO if verbose else logging.DEBUG
        if method is GradientMethod.ANALYTIC:
            logger.log(level, "Computing with analytic gradient")
        else:
            logger.log(level, "Computing with numerically estimated gradient")

        hist: list[Array] = []
        nfev = 0
        njev = 0
        nit = 0
        grad_norm = float("inf")
        status = Status.MAX_ITER
        message = "Maximum iterations reached."

        with GradientWorkspace.from_point(x0) as ws:
            if history:
                hist.append(ws.x.copy())
            for k in range(1, maxiter + 1):
                nit = k
                g, grad_fev, grad_jev = compute_gradient(F, ws, method, grad_step)
                nfev += grad_fev
                njev += grad_jev
                grad_norm = inf_norm(g)
                if check_convergence(grad_norm, tol):
                    status = Status.CONVERGED
                    message = "Gradient tolerance satisfied."
                    break
                set_descent_direction(ws)
                _, fx, ls_evals = armijo_rule(params, F, ws, max_backtracks)
                nfev += ls_evals
                if callback is not None:
                    callback(ws.x.copy(), fx, ws.g.copy())
                if history:
                    hist.append(ws.x.copy())
                if verbose and k % disp_iter == 0:
                    logger.info(
                        "Iteration %d, function value=%.10g, gradient norm=%.6g",
                        k,
                        fx,
                        grad_norm,
                    )
            x = ws.release()

        fx = F(x)
        nfev += 1
        if status is Status.CONVERGED:
            logger.log(level, "Exiting because gradient is too small")
        else:
            logger.log(level, "Maximum iteration number reached")
        logger.log(level, "Iteration=%d, function value=%.10g", nit, fx)

    return OptimizeResult(
        x=x,
        fun=fx,
        nit=nit,
        status=status,
        success=status is Status.CONVERGED,
        message=message,
        grad_norm=grad_norm,
        nfev=nfev,
        njev=njev,
        history=hist,
    )


minimize = gradient_method


__all__ = ["gradient_method", "minimize"]
