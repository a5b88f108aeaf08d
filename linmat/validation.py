"""
Shape assertions shared by every matrix operation.

Each helper raises the matching ``LinMatError`` subclass and returns nothing
when the operand is acceptable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.errors import (
    DimensionMismatchError,
    DimensionTooSmallError,
    NotHermitianError,
    NotSquareError,
    WrongFixedSizeError,
)
from .tolerance import is_close

if TYPE_CHECKING:
    from .matrix import Matrix


def require_same_shape(operation: str, left: Matrix, right: Matrix) -> None:
    """Element-wise operations need identical (rows, cols)."""
    if left.shape != right.shape:
        raise DimensionMismatchError(operation, left.shape, right.shape)


def require_inner_dimensions(left: Matrix, right: Matrix) -> None:
    """Matrix product needs ``left.cols == right.rows``."""
    if left.cols != right.rows:
        raise DimensionMismatchError(
            "mult",
            left.shape,
            right.shape,
            message="Rows in right matrix must match columns in left matrix.",
        )


def require_square(operation: str, matrix: Matrix) -> None:
    if matrix.rows != matrix.cols:
        raise NotSquareError(operation, matrix.shape)


def require_fixed_size(operation: str, matrix: Matrix, size: int) -> None:
    """
    Assert that ``matrix`` is exactly ``size`` x ``size``.

    Args:
        operation: Name of the calling routine, used in the error message
        matrix: Operand to check
        size: Expected number of rows and columns

    Raises:
        WrongFixedSizeError: If either dimension differs from ``size``
    """
    if matrix.rows != size or matrix.cols != size:
        raise WrongFixedSizeError(operation, size, matrix.shape)


def require_min_size(operation: str, matrix: Matrix, minimum: int) -> None:
    """Square-only routine that also needs at least ``minimum`` rows."""
    require_square(operation, matrix)
    if matrix.rows < minimum:
        raise DimensionTooSmallError(operation, minimum, matrix.shape)


def require_symmetric(matrix: Matrix, tolerance: float = 0.0) -> None:
    """
    Assert ``a[i][j] == a[j][i]`` for every ``i >= j``.

    With ``tolerance == 0.0`` the comparison is exact, which is only reliable
    for literal input; computed matrices usually need a small tolerance.

    Raises:
        NotHermitianError: On the first asymmetric pair found
    """
    for i in range(matrix.rows):
        for j in range(i + 1):
            if not is_close(matrix[i, j], matrix[j, i], tolerance):
                raise NotHermitianError(i, j)
