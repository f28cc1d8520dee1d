"""smoothopt - steepest descent with Armijo line search for smooth functions."""

__version__ = "0.1.0"

from .exceptions import (
    DimensionMismatchError,
    InvalidInputError,
    LineSearchError,
    SmoothOptError,
)
from .io import load_quadratic, save_quadratic
from .optimize import (
    ArmijoParams,
    CallableFunction,
    GradientMethod,
    GradientWorkspace,
    OptimizeResult,
    Quadratic,
    SmoothFunction,
    Status,
    gradient_method,
    minimize,
)

__all__ = [
    "__version__",
    "ArmijoParams",
    "CallableFunction",
    "DimensionMismatchError",
    "GradientMethod",
    "GradientWorkspace",
    "InvalidInputError",
    "LineSearchError",
    "OptimizeResult",
    "Quadratic",
    "SmoothFunction",
    "SmoothOptError",
    "Status",
    "gradient_method",
    "load_quadratic",
    "minimize",
    "save_quadratic",
]
