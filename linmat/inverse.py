"""
Matrix inverses.

Closed-form adjugate inverses for 2x2 and 3x3 matrices, Newton-Schulz
iteration for any square size, and ``inv`` which dispatches by size.

Newton-Schulz never raises on non-convergence: ``inv_shulz`` silently
returns whatever the last iterate is. Callers that need to know should use
``newton_schulz``, which reports how the iteration ended.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .core.config import get_settings
from .core.errors import SingularMatrixError
from .core.logging import get_context_logger
from .determinant import det_2, det_3
from .matrix import Matrix
from .validation import require_fixed_size, require_square

logger = get_context_logger(__name__, routine="newton_schulz")


class IterationStatus(str, Enum):
    """How an iterative routine ended"""
    CONVERGED = "converged"
    ITERATION_LIMIT = "iteration_limit"
    DEGENERATE = "degenerate"


class InversionResult(BaseModel):
    """Outcome of a Newton-Schulz inversion"""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    inverse: Matrix = Field(..., description="Last iterate")
    status: IterationStatus
    iterations: int = Field(..., ge=0, description="Iterations performed")
    max_change: float = Field(..., description="Largest |relative change| in the last iteration")

    @property
    def converged(self) -> bool:
        return self.status == IterationStatus.CONVERGED


def _singular_tolerance(singular_tol: float | None) -> float:
    return get_settings().SINGULAR_TOL if singular_tol is None else singular_tol


def inv_2(matrix: Matrix, singular_tol: float | None = None) -> Matrix:
    """
    Inverse of a 2x2 matrix by the analytical formula.

    Args:
        matrix: 2x2 operand
        singular_tol: ``|det|`` at or below which the matrix is singular
            (defaults to Settings.SINGULAR_TOL, 0.0 meaning exactly zero)

    Raises:
        WrongFixedSizeError: If the matrix is not 2x2
        SingularMatrixError: If the determinant is zero
    """
    require_fixed_size("inv_2", matrix, 2)
    det = det_2(matrix)
    if abs(det) <= _singular_tolerance(singular_tol):
        raise SingularMatrixError("inv_2", det)

    a = matrix.values
    adjugate = Matrix(
        [[a[1, 1], -a[0, 1]],
         [-a[1, 0], a[0, 0]]],
        dtype=matrix.dtype,
    )
    return adjugate * (1 / det)


def inv_3(matrix: Matrix, singular_tol: float | None = None) -> Matrix:
    """
    Inverse of a 3x3 matrix by the analytical formula.

    Raises:
        WrongFixedSizeError: If the matrix is not 3x3
        SingularMatrixError: If the determinant is zero
    """
    require_fixed_size("inv_3", matrix, 3)
    det = det_3(matrix)
    if abs(det) <= _singular_tolerance(singular_tol):
        raise SingularMatrixError("inv_3", det)

    a = matrix.values
    adjugate = Matrix(
        [
            [
                a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1],
                -(a[0, 1] * a[2, 2] - a[0, 2] * a[2, 1]),
                a[0, 1] * a[1, 2] - a[0, 2] * a[1, 1],
            ],
            [
                -(a[1, 0] * a[2, 2] - a[1, 2] * a[2, 0]),
                a[0, 0] * a[2, 2] - a[0, 2] * a[2, 0],
                -(a[0, 0] * a[1, 2] - a[0, 2] * a[1, 0]),
            ],
            [
                a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0],
                -(a[0, 0] * a[2, 1] - a[0, 1] * a[2, 0]),
                a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0],
            ],
        ],
        dtype=matrix.dtype,
    )
    return adjugate / det


def newton_schulz(
    matrix: Matrix,
    max_iter: int | None = None,
    tol: float | None = None,
    rng: np.random.Generator | int | None = None,
) -> InversionResult:
    """
    Invert a square matrix by Newton-Schulz iteration.

    Starts from ``X0 = A^T / spectral_norm(A)^2`` and iterates
    ``X_{k+1} = (2I - X_k A) X_k``. After each step the element-wise
    relative change ``D = (X_{k+1} - X_k) / X_k`` is formed; the loop stops
    once no element has ``|D| > tol``. NaN entries of ``D`` (from 0/0) do
    not block convergence.

    Args:
        matrix: Square operand
        max_iter: Iteration cap (defaults to Settings.MAX_ITER)
        tol: Convergence threshold (defaults to Settings.CONV_TOL)
        rng: Random source for the spectral norm estimate

    Returns:
        InversionResult with the last iterate and how the loop ended

    Raises:
        NotSquareError: If the matrix is not square
    """
    require_square("inv_shulz", matrix)
    settings = get_settings()
    max_iter = settings.MAX_ITER if max_iter is None else max_iter
    tol = settings.CONV_TOL if tol is None else tol

    n = matrix.rows
    two_identity = Matrix.make_eye(n, n, dtype=matrix.dtype) * 2

    with np.errstate(all="ignore"):
        alpha = 1 / matrix.spectral_norm(rng=rng) ** 2
    x = matrix.transpose() * alpha

    status = IterationStatus.ITERATION_LIMIT
    max_change = float("inf")
    iterations = 0
    while iterations < max_iter:
        x_next = (two_identity - x.mult(matrix)).mult(x)
        change = np.abs(((x_next - x) / x).values)
        x = x_next
        iterations += 1

        max_change = float(np.max(change, initial=0.0, where=~np.isnan(change)))
        if not np.any(change > tol):
            status = IterationStatus.CONVERGED
            break

    if not np.all(np.isfinite(x.values)):
        status = IterationStatus.DEGENERATE

    logger.debug(
        "Newton-Schulz iteration finished",
        extra_data={
            "shape": matrix.shape,
            "status": status.value,
            "iterations": iterations,
            "max_change": max_change,
        },
    )
    return InversionResult(inverse=x, status=status, iterations=iterations, max_change=max_change)


def inv_shulz(
    matrix: Matrix,
    max_iter: int | None = None,
    tol: float | None = None,
    rng: np.random.Generator | int | None = None,
) -> Matrix:
    """Newton-Schulz inverse; returns the last iterate even if not converged."""
    return newton_schulz(matrix, max_iter=max_iter, tol=tol, rng=rng).inverse


def inv(matrix: Matrix) -> Matrix:
    """
    Inverse of a square matrix.

    Uses the exact formula for 2x2 and 3x3, Newton-Schulz otherwise.
    """
    require_square("inv", matrix)
    if matrix.rows == 2:
        return inv_2(matrix)
    if matrix.rows == 3:
        return inv_3(matrix)
    return inv_shulz(matrix)
