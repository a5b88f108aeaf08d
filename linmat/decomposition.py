"""
Triangular factorizations: LU (Doolittle) and Cholesky (Banachiewicz).

Neither routine pivots or validates numerical conditioning. A zero pivot
in LU or a matrix that is not positive-definite in Cholesky produces inf or
NaN entries instead of an error; both cases are logged at WARNING level.
"""

from __future__ import annotations

import numpy as np

from .core.config import get_settings
from .core.logging import get_context_logger
from .matrix import Matrix
from .validation import require_min_size, require_symmetric

logger = get_context_logger(__name__)


def lu_decomposition(matrix: Matrix) -> tuple[Matrix, Matrix]:
    """
    Factor ``A = L U`` by Doolittle elimination without pivoting.

    ``L`` starts as the identity and ``U`` as a copy of ``A``. For each
    pivot row ``i`` and each row ``j > i`` the multiplier
    ``L[j][i] = U[j][i] / U[i][i]`` is stored and ``L[j][i] * U[i]`` is
    subtracted from ``U[j]``. Matrices whose leading minors are singular
    yield inf/NaN; ill-conditioned ones lose accuracy.

    Args:
        matrix: Square operand of size 2 or more

    Returns:
        (L, U): unit lower-triangular and upper-triangular factors

    Raises:
        NotSquareError: If the matrix is not square
        DimensionTooSmallError: If the matrix is smaller than 2x2
    """
    require_min_size("lu_decomposition", matrix, 2)
    n = matrix.rows
    lower = np.eye(n, dtype=matrix.dtype)
    upper = matrix.to_numpy()

    with np.errstate(all="ignore"):
        for i in range(n):
            if i < n - 1 and upper[i, i] == 0:
                logger.warning(
                    "Zero pivot in LU decomposition",
                    extra_data={"routine": "lu_decomposition", "pivot": i},
                )
            for j in range(i + 1, n):
                lower[j, i] = upper[j, i] / upper[i, i]
                upper[j, :] -= lower[j, i] * upper[i, :]

    return Matrix(lower, dtype=matrix.dtype), Matrix(upper, dtype=matrix.dtype)


def cholesky_decomposition(matrix: Matrix, symmetry_tol: float | None = None) -> Matrix:
    """
    Factor a symmetric matrix as ``A = L L^T`` (Cholesky-Banachiewicz).

    Row by row, for ``j <= i`` with ``s = sum_{k<j} L[i][k] L[j][k]``:
    ``L[i][i] = sqrt(a[i][i] - s)`` and ``L[i][j] = (a[i][j] - s) / L[j][j]``.

    Args:
        matrix: Square symmetric operand of size 2 or more
        symmetry_tol: Absolute tolerance for the symmetry check (defaults
            to Settings.SYMMETRY_TOL, 0.0 meaning exact equality)

    Returns:
        Lower-triangular factor L

    Raises:
        NotSquareError: If the matrix is not square
        DimensionTooSmallError: If the matrix is smaller than 2x2
        NotHermitianError: If ``a[i][j] != a[j][i]`` for some ``i >= j``
    """
    require_min_size("cholesky_decomposition", matrix, 2)
    if symmetry_tol is None:
        symmetry_tol = get_settings().SYMMETRY_TOL
    require_symmetric(matrix, symmetry_tol)

    a = matrix.values
    n = matrix.rows
    scalar = matrix.dtype.type
    lower = np.zeros((n, n), dtype=matrix.dtype)

    with np.errstate(all="ignore"):
        for i in range(n):
            for j in range(i + 1):
                s = scalar(0)
                for k in range(j):
                    s += lower[i, k] * lower[j, k]
                if i == j:
                    lower[i, i] = np.sqrt(a[i, i] - s)
                else:
                    lower[i, j] = (a[i, j] - s) / lower[j, j]

    if np.isnan(lower).any():
        logger.warning(
            "Cholesky decomposition produced NaN; matrix is not positive-definite",
            extra_data={"routine": "cholesky_decomposition", "shape": matrix.shape},
        )

    return Matrix(lower, dtype=matrix.dtype)
