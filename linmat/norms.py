"""
Matrix norms: Frobenius (closed form) and spectral (power iteration).
"""

from __future__ import annotations

import numpy as np

from .core.config import get_settings
from .core.logging import get_context_logger
from .matrix import Matrix

logger = get_context_logger(__name__, routine="spectral_norm")


def frobenius_norm(matrix: Matrix) -> np.floating:
    """
    Calculate the Frobenius norm ``sqrt(sum |a[i][j]|^2)``.

    Returns:
        Scalar of the matrix dtype; 0 for a matrix without elements
    """
    with np.errstate(all="ignore"):
        return np.sqrt(np.sum(np.abs(matrix.values) ** 2))


def spectral_norm(
    matrix: Matrix,
    rng: np.random.Generator | int | None = None,
    max_iter: int | None = None,
) -> np.floating:
    """
    Estimate the spectral (l2) norm by power iteration on ``A^T A``.

    The seed column ``b0`` has ``cols`` uniform [0, 1) draws. Each of the
    ``max_iter`` steps computes ``b <- A^T (A (b / ||b||_F))``; there is no
    early exit. The largest eigenvalue of ``A^T A`` is then ``||b||_F`` and
    its square root is returned.

    Args:
        matrix: Operand of any shape
        rng: numpy Generator, integer seed, or None for fresh OS entropy
            (the estimate is then nondeterministic)
        max_iter: Number of iterations (defaults to Settings.MAX_ITER)

    Returns:
        Scalar of the matrix dtype

    Example:
        >>> A = Matrix([[2, 3, 3], [3, 2, 3], [3, 3, 2]])
        >>> round(float(spectral_norm(A, rng=0)), 9)
        8.0
    """
    if max_iter is None:
        max_iter = get_settings().MAX_ITER

    generator = np.random.default_rng(rng)
    b_k = Matrix(generator.random((matrix.cols, 1)), dtype=matrix.dtype)
    transposed = matrix.transpose()

    for _ in range(max_iter):
        b_k = transposed.mult(matrix.mult(b_k / b_k.frobenius_norm()))

    lambda_max = b_k.frobenius_norm()
    logger.debug(
        "Power iteration finished",
        extra_data={"shape": matrix.shape, "iterations": max_iter, "lambda_max": float(lambda_max)},
    )

    with np.errstate(all="ignore"):
        return np.sqrt(lambda_max)
