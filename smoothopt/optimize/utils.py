"""Small numerical helpers used across the optimizer."""

from __future__ import annotations

import numpy as np

from .core import Array


def inf_norm(x: Array) -> float:
    """Return ``max(|x_i|)``, or 0.0 for an empty vector."""
    if x.size == 0:
        return 0.0
    return float(np.max(np.abs(x)))


def is_pos_def(mat: Array, rtol: float = 1e-10) -> bool:
    """Check that ``mat`` is symmetric positive definite.

    Symmetry is tested relative to the largest entry, then definiteness is
    decided by attempting a Cholesky factorization.
    """
    mat = np.asarray(mat, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1] or mat.shape[0] == 0:
        return False
    if not np.all(np.isfinite(mat)):
        return False
    scale = max(float(np.max(np.abs(mat))), 1.0)
    if not np.allclose(mat, mat.T, rtol=0.0, atol=rtol * scale):
        return False
    try:
        np.linalg.cholesky(mat)
    except np.linalg.LinAlgError:
        return False
    return True


__all__ = ["inf_norm", "is_pos_def"]
