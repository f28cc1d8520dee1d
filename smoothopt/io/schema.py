"""JSON layout of a persisted quadratic function.

Schema Structure:
    {
        "version": "smoothopt-quadratic-1.0",
        "n": <integer>,                     # dimension of Q
        "Q": [[<float>, ...], ...],         # n rows of n numbers
        "metadata": {...}                   # optional, free-form
    }
"""

from __future__ import annotations

from typing import Any, Dict

SCHEMA_VERSION = "smoothopt-quadratic-1.0"


def quadratic_json_schema() -> dict:
    """Return a structural description of the persisted-quadratic layout."""
    return {
        "version": {
            "type": "string",
            "description": f"Schema version identifier, '{SCHEMA_VERSION}'",
            "required": True,
        },
        "n": {
            "type": "integer",
            "description": "Dimension of the square matrix Q",
            "required": True,
            "minimum": 1,
        },
        "Q": {
            "type": "array",
            "description": "Row-major matrix entries, n rows of n numbers",
            "required": True,
        },
        "metadata": {
            "type": "object",
            "description": "Optional producer/notes information",
            "required": False,
        },
    }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_quadratic_json(obj: Dict[str, Any]) -> None:
    """Check that ``obj`` follows the persisted-quadratic layout.

    Only the layout is checked here; positive definiteness is left to the
    :class:`~smoothopt.optimize.Quadratic` constructor.

    Raises
    ------
    ValueError
        If a field is missing, has the wrong type or inconsistent size.
    """
    if not isinstance(obj, dict):
        raise ValueError(f"Quadratic JSON must be an object, got {type(obj).__name__}.")

    for key in ("version", "n", "Q"):
        if key not in obj:
            raise ValueError(f"Quadratic JSON is missing required field '{key}'.")

    if obj["version"] != SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported quadratic JSON version {obj['version']!r}; "
            f"expected {SCHEMA_VERSION!r}."
        )

    n = obj["n"]
    if not isinstance(n, int) or isinstance(n, bool) or n < 1:
        raise ValueError(f"Field 'n' must be a positive integer, got {n!r}.")

    rows = obj["Q"]
    if not isinstance(rows, list) or len(rows) != n:
        raise ValueError(f"Field 'Q' must be a list of {n} rows.")
    for i, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != n:
            raise ValueError(f"Row {i} of 'Q' must be a list of {n} numbers.")
        for value in row:
            if not _is_number(value):
                raise ValueError(f"Row {i} of 'Q' contains non-numeric entry {value!r}.")

    if "metadata" in obj and not isinstance(obj["metadata"], dict):
        raise ValueError("Field 'metadata' must be an object when present.")


__all__ = ["SCHEMA_VERSION", "quadratic_json_schema", "validate_quadratic_json"]
