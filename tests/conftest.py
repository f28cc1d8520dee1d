"""Pytest configuration and shared fixtures for smoothopt tests."""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def scenario_matrix() -> np.ndarray:
    """Symmetric positive-definite, but badly conditioned, 3x3 matrix."""
    return np.array(
        [
            [2.25144, 0.94941, -0.972442],
            [0.94941, 2.51176, 1.57232],
            [-0.972442, 1.57232, 2.2813],
        ]
    )


@pytest.fixture
def spd_matrix() -> np.ndarray:
    return np.array([[4.0, 1.0, 0.0], [1.0, 3.0, 1.0], [0.0, 1.0, 2.0]])
