"""Steepest-descent minimization of smooth functions.

Example
-------
>>> import numpy as np
>>> from smoothopt.optimize import ArmijoParams, Quadratic, gradient_method
>>> F = Quadratic(np.array([[2.0, 0.5], [0.5, 1.0]]))
>>> res = gradient_method(F, np.array([1.0, 1.0]), ArmijoParams(1.0, 0.5, 0.1))
>>> res.success
True
"""

from .core import (
    DISP_ITER,
    GRAD_STEP,
    MAX_BACKTRACKS,
    MAX_ITER,
    MIN_GRAD,
    ArmijoParams,
    OptimizeResult,
    Status,
    check_convergence,
)
from .functions import CallableFunction, Quadratic, SmoothFunction, as_smooth_function
from .gradient import (
    GradientMethod,
    analytic_gradient,
    compute_gradient,
    numerical_gradient,
    set_descent_direction,
)
from .line_search import armijo_rule
from .minimize import gradient_method, minimize
from .utils import inf_norm, is_pos_def
from .workspace import GradientWorkspace

__all__ = [
    "DISP_ITER",
    "GRAD_STEP",
    "MAX_BACKTRACKS",
    "MAX_ITER",
    "MIN_GRAD",
    "ArmijoParams",
    "CallableFunction",
    "GradientMethod",
    "GradientWorkspace",
    "OptimizeResult",
    "Quadratic",
    "SmoothFunction",
    "Status",
    "analytic_gradient",
    "armijo_rule",
    "as_smooth_function",
    "check_convergence",
    "compute_gradient",
    "gradient_method",
    "inf_norm",
    "is_pos_def",
    "minimize",
    "numerical_gradient",
    "set_descent_direction",
]
