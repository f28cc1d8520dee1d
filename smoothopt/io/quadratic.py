"""Saving and loading :class:`~smoothopt.optimize.Quadratic` functions.

The matrix is stored as JSON (see :mod:`smoothopt.io.schema`). Python
writes floats with their shortest round-trip representation, so a saved
matrix loads back bit-for-bit. Loading always goes through the Quadratic
constructor, which re-checks positive definiteness.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional, Union

import numpy as np

from smoothopt.logging import get_logger
from smoothopt.optimize import Quadratic

from .schema import SCHEMA_VERSION, validate_quadratic_json

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def quadratic_to_json(F: Quadratic, metadata: Optional[dict] = None) -> dict:
    """Convert a Quadratic to its JSON object."""
    Q = F.matrix
    result: Dict[str, Any] = {
        "version": SCHEMA_VERSION,
        "n": int(Q.shape[0]),
        "Q": [[float(v) for v in row] for row in Q],
    }
    if metadata:
        result["metadata"] = metadata
    return result


def json_to_quadratic(obj: dict) -> Quadratic:
    """Build a Quadratic from its JSON object.

    Raises
    ------
    ValueError
        If the layout is invalid.
    InvalidInputError
        If the stored matrix is not positive definite.
    """
    validate_quadratic_json(obj)
    return Quadratic(np.array(obj["Q"], dtype=float))


def save_quadratic(F: Quadratic, path: PathLike, metadata: Optional[dict] = None) -> None:
    """Write the matrix of ``F`` to ``path``."""
    obj = quadratic_to_json(F, metadata)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)
    logger.debug("Saved %r to %s", F, path)


def load_quadratic(path: PathLike) -> Quadratic:
    """Read a Quadratic previously written by :func:`save_quadratic`.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or has the wrong layout.
    InvalidInputError
        If the stored matrix is not positive definite.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Quadratic file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")
    F = json_to_quadratic(obj)
    logger.debug("Loaded %r from %s", F, path)
    return F


__all__ = ["quadratic_to_json", "json_to_quadratic", "save_quadratic", "load_quadratic"]
