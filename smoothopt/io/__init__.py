"""Persistence of quadratic functions."""

from .quadratic import json_to_quadratic, load_quadratic, quadratic_to_json, save_quadratic
from .schema import SCHEMA_VERSION, quadratic_json_schema, validate_quadratic_json

__all__ = [
    "SCHEMA_VERSION",
    "quadratic_to_json",
    "json_to_quadratic",
    "save_quadratic",
    "load_quadratic",
    "quadratic_json_schema",
    "validate_quadratic_json",
]
