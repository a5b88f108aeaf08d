"""
Determinants: closed-form 2x2/3x3 and the general Leibniz expansion.
"""

from __future__ import annotations

import numpy as np

from .matrix import Matrix
from .permutations import heap_permutations
from .validation import require_fixed_size, require_square


def det_2(matrix: Matrix) -> np.floating:
    """Determinant of a 2x2 matrix by the analytical formula."""
    require_fixed_size("det_2", matrix, 2)
    a = matrix.values
    return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]


def det_3(matrix: Matrix) -> np.floating:
    """Determinant of a 3x3 matrix by cofactor expansion along the first row."""
    require_fixed_size("det_3", matrix, 3)
    a = matrix.values
    c0 = a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1]
    c1 = -(a[1, 0] * a[2, 2] - a[1, 2] * a[2, 0])
    c2 = a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0]
    return a[0, 0] * c0 + a[0, 1] * c1 + a[0, 2] * c2


def det_leibniz(matrix: Matrix) -> np.floating:
    """
    Determinant of any square matrix by the Leibniz formula.

    Sums ``sign(sigma) * prod_i a[i][sigma(i)]`` over all ``n!``
    permutations, so the cost is ``O(n! * n)``; only practical for small n.
    The determinant of the 0x0 matrix is 1.

    Raises:
        NotSquareError: If the matrix is not square
    """
    require_square("det_leibniz", matrix)
    a = matrix.values
    scalar = matrix.dtype.type

    total = scalar(0)
    with np.errstate(all="ignore"):
        for permutation, sign in heap_permutations(matrix.rows):
            term = scalar(1)
            for i, col in enumerate(permutation):
                term *= a[i, col]
            total += sign * term
    return total


def det(matrix: Matrix) -> np.floating:
    """Determinant, using the exact 2x2/3x3 formulas where they apply."""
    require_square("det", matrix)
    if matrix.rows == 2:
        return det_2(matrix)
    if matrix.rows == 3:
        return det_3(matrix)
    return det_leibniz(matrix)
