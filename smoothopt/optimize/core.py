"""Constants, parameters and result types shared by the descent driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Callback = Callable[[Array, float, Array], None]

# Defaults for gradient_method; every one can be overridden per call.
MAX_ITER = 10_000
DISP_ITER = 100
MIN_GRAD = 1e-4
GRAD_STEP = 1e-4
MAX_BACKTRACKS = 100


@dataclass(frozen=True)
class ArmijoParams:
    """Parameters of the Armijo rule (Bertsekas' notation).

    Attributes:
        s: Initial step scale, ``s > 0``.
        beta: Contraction factor applied on every rejected trial step.
        sigma: Sufficient-decrease fraction of the directional derivative,
            conventionally below 0.5.
    """

    s: float = 1.0
    beta: float = 0.5
    sigma: float = 0.1

    def __post_init__(self) -> None:
        if not self.s > 0:
            raise ValueError(f"Armijo step scale s must be positive, got {self.s}.")
        if not (0 < self.beta < 1):
            raise ValueError(f"Armijo beta must lie in (0, 1), got {self.beta}.")
        if not (0 < self.sigma < 1):
            raise ValueError(f"Armijo sigma must lie in (0, 1), got {self.sigma}.")


class Status(Enum):
    """Terminal state of a descent run."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"


@dataclass
class OptimizeResult:
    """Outcome of :func:`~smoothopt.optimize.gradient_method`.

    Attributes:
        x: Final iterate; the workspace buffer itself, now owned by the caller.
        fun: Objective value at ``x``.
        nit: Number of iterations run, counting the one that detected
            convergence.
        status: Which terminal state was reached.
        success: ``status is Status.CONVERGED``.
        message: Human-readable exit reason.
        grad_norm: Infinity norm of the last gradient computed.
        nfev: Objective evaluations, line search and finite differences included.
        njev: Analytic gradient evaluations.
        history: Iterates, filled only when ``history=True``.
    """

    x: Array
    fun: float
    nit: int
    status: Status
    success: bool
    message: str
    grad_norm: float
    nfev: int
    njev: int
    history: List[Array] = field(default_factory=list)


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if the gradient infinity norm is within tolerance."""
    return grad_norm <= tol


__all__ = [
    "Array",
    "Objective",
    "Callback",
    "MAX_ITER",
    "DISP_ITER",
    "MIN_GRAD",
    "GRAD_STEP",
    "MAX_BACKTRACKS",
    "ArmijoParams",
    "Status",
    "OptimizeResult",
    "check_convergence",
]
