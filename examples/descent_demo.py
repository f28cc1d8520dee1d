"""
Example: Steepest descent with the Armijo rule

Minimizes a 3x3 positive-definite quadratic with both gradient modes,
saves the quadratic to JSON and minimizes the reloaded copy, then runs the
finite-difference mode on the Rosenbrock function.
"""

import logging
import os
import tempfile

import numpy as np

from smoothopt import (
    ArmijoParams,
    Quadratic,
    Status,
    gradient_method,
    load_quadratic,
    save_quadratic,
)
from smoothopt.logging import configure_logging

Q = np.array(
    [
        [2.25144, 0.94941, -0.972442],
        [0.94941, 2.51176, 1.57232],
        [-0.972442, 1.57232, 2.2813],
    ]
)
PARAMS = ArmijoParams(s=1.0, beta=0.5, sigma=0.1)


def example_quadratic():
    """Both gradient modes on the same quadratic."""
    print("=" * 60)
    print("Example 1: Quadratic form x^T Q x")
    print("=" * 60)
    F = Quadratic(Q)
    x0 = np.ones(3)
    for analytic in (True, False):
        result = gradient_method(F, x0, PARAMS, analytic_gradient=analytic, verbose=True)
        mode = "analytic" if analytic else "finite differences"
        print(f"[{mode}] status={result.status.value} nit={result.nit}")
        print(f"[{mode}] x = {result.x}, F(x) = {result.fun:.3e}")
    print()


def example_persistence():
    """Round trip through a JSON file."""
    print("=" * 60)
    print("Example 2: Save and reload a quadratic")
    print("=" * 60)
    F = Quadratic(Q)
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "quadratic.json")
        save_quadratic(F, path)
        G = load_quadratic(path)
    print(f"Matrices identical: {np.array_equal(F.matrix, G.matrix)}")
    result = gradient_method(G, np.ones(3), PARAMS, analytic_gradient=True)
    print(f"Reloaded function minimized to F(x) = {result.fun:.3e}")
    print()


def example_rosenbrock():
    """Finite differences on a non-quadratic function."""
    print("=" * 60)
    print("Example 3: Rosenbrock function")
    print("=" * 60)

    def rosen(x):
        return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2

    result = gradient_method(rosen, np.array([-1.2, 1.0]), PARAMS, maxiter=5_000, disp_iter=1_000, verbose=True)
    if result.status is Status.CONVERGED:
        print(f"Converged to x = {result.x} after {result.nit} iterations")
    else:
        print(f"Stopped after {result.nit} iterations at x = {result.x}")
    print()


if __name__ == "__main__":
    configure_logging(level=logging.INFO)
    example_quadratic()
    example_persistence()
    example_rosenbrock()
    print("Done.")
