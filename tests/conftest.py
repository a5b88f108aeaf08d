"""
Shared pytest fixtures and utilities for the linmat test suite.

This module provides:
- Settings cache isolation between tests
- Restoration of the package logger after logging tests
- Helpers for comparing matrices against nested literals
- Common operand factories
"""

import logging

import numpy as np
import pytest

from linmat import Matrix
from linmat.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes are picked up per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_package_logger():
    """Undo handler and propagation changes made by setup_logging()."""
    package_logger = logging.getLogger("linmat")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def assert_matrix_close():
    """Helper to assert a matrix matches a nested literal element-wise."""
    def _assert_close(actual: Matrix, expected, abs_tol: float = 1e-9) -> None:
        """
        Assert shapes match and every element is within ``abs_tol``.

        Args:
            actual: Matrix under test
            expected: Nested list or Matrix with the expected values
            abs_tol: Absolute tolerance per element
        """
        expected_matrix = expected if isinstance(expected, Matrix) else Matrix(expected)
        assert actual.shape == expected_matrix.shape
        for i in range(actual.rows):
            for j in range(actual.cols):
                assert actual[i, j] == pytest.approx(expected_matrix[i, j], abs=abs_tol), (
                    f"element ({i}, {j}): {actual[i, j]} != {expected_matrix[i, j]}"
                )
    return _assert_close


@pytest.fixture
def scenario_matrix() -> Matrix:
    """3x3 matrix with determinant 4 and a known inverse."""
    return Matrix([[2, 1, 5], [2, 2, 4], [1, 2, 3]])


@pytest.fixture
def two_three_matrix() -> Matrix:
    """3x3 matrix with 2 on the diagonal and 3 elsewhere."""
    return Matrix.make_eye(3, 3) * 2 + (Matrix.make_ones(3, 3) - Matrix.make_eye(3, 3)) * 3


@pytest.fixture
def random_matrix_factory():
    """Factory for seeded random matrices."""
    def _factory(rows: int, cols: int, seed: int = 0, low: float = -5.0, high: float = 5.0) -> Matrix:
        rng = np.random.default_rng(seed)
        return Matrix(rng.uniform(low, high, size=(rows, cols)))
    return _factory


@pytest.fixture
def spd_matrix_factory(random_matrix_factory):
    """Factory for seeded symmetric positive-definite matrices ``M M^T + n I``."""
    def _factory(n: int, seed: int = 0) -> Matrix:
        m = random_matrix_factory(n, n, seed=seed)
        return m.mult(m.transpose()) + Matrix.make_eye(n, n) * n
    return _factory
