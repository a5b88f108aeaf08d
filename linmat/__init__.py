"""
linmat - dense real-valued matrix algebra

Matrix container over a numpy floating dtype with:
- Element-wise and scalar operators
- Matrix product, integer power, transpose, trace
- Frobenius and spectral norms
- Determinants (closed form and Leibniz expansion)
- Inverses (closed form and Newton-Schulz iteration)
- LU and Cholesky decompositions
"""

from .constants import CONV_TOL, MAX_ITER
from .core.config import Settings, get_settings
from .core.errors import (
    DimensionMismatchError,
    DimensionTooSmallError,
    LinMatError,
    NotHermitianError,
    NotSquareError,
    SingularMatrixError,
    WrongFixedSizeError,
)
from .core.logging import setup_logging
from .decomposition import cholesky_decomposition, lu_decomposition
from .determinant import det, det_2, det_3, det_leibniz
from .inverse import InversionResult, IterationStatus, inv, inv_2, inv_3, inv_shulz, newton_schulz
from .matrix import Matrix, make_eye, make_ones, make_zeros
from .norms import frobenius_norm, spectral_norm
from .permutations import heap_permutations
from .tolerance import ToleranceMode, fuzzy_compare
from .vector import ColumnVector, RowVector

__version__ = "1.0.0"

__all__ = [
    "Matrix",
    "make_zeros",
    "make_ones",
    "make_eye",
    "RowVector",
    "ColumnVector",
    "frobenius_norm",
    "spectral_norm",
    "det",
    "det_2",
    "det_3",
    "det_leibniz",
    "heap_permutations",
    "inv",
    "inv_2",
    "inv_3",
    "inv_shulz",
    "newton_schulz",
    "InversionResult",
    "IterationStatus",
    "lu_decomposition",
    "cholesky_decomposition",
    "ToleranceMode",
    "fuzzy_compare",
    "MAX_ITER",
    "CONV_TOL",
    "Settings",
    "get_settings",
    "setup_logging",
    "LinMatError",
    "DimensionMismatchError",
    "NotSquareError",
    "WrongFixedSizeError",
    "DimensionTooSmallError",
    "SingularMatrixError",
    "NotHermitianError",
]
