"""
Dense real-valued matrix.

The container owns a 2-D numpy array of a single floating-point dtype and
exposes element access, factory constructors, the element-wise operator
suite and the algebraic suite (product, power, transpose, trace). Norms,
determinants, inverses and decompositions live in their own modules and are
reachable as methods.

Every transforming operation returns a new Matrix; operands are never
mutated. Element assignment is the only mutation path.
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any, Callable, Iterable

import numpy as np

from .core.errors import DimensionMismatchError
from .tolerance import ToleranceMode, fuzzy_compare
from .validation import require_inner_dimensions, require_same_shape

if TYPE_CHECKING:
    from .inverse import InversionResult

DEFAULT_DTYPE = np.float64


def _resolve_dtype(dtype: Any) -> np.dtype:
    resolved = np.dtype(dtype)
    if not np.issubdtype(resolved, np.floating):
        raise TypeError(f"Matrix scalar type must be a floating-point dtype, got {resolved}")
    return resolved


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Matrix:
    """
    Real-valued matrix over a numpy floating dtype.

    Construction:
        Matrix(rows, cols)          zero-filled rows x cols
        Matrix([[1, 2], [3, 4]])    dimensions inferred from the literal
        Matrix(ndarray) / Matrix(other_matrix)   copied

    Operators ``+ - * /`` are element-wise (``*`` and ``/`` also broadcast a
    scalar in both orders); ``@`` and ``**`` are the matrix product and
    integer power.
    """

    # numpy defers binary operators with a Matrix operand to our reflected methods
    __array_ufunc__ = None

    def __init__(
        self,
        data: Iterable[Iterable[Any]] | np.ndarray | Matrix | int | None = None,
        cols: int | None = None,
        dtype: Any = DEFAULT_DTYPE,
    ) -> None:
        """
        Initialize a Matrix.

        Args:
            data: Number of rows (when ``cols`` is given), a nested row
                literal, a 2-D ndarray, another Matrix, or None for 0x0
            cols: Number of columns for the zero-filled form
            dtype: numpy floating dtype of the elements

        Raises:
            TypeError: If dtype is not floating or data is not row-iterable
            ValueError: If a dimension is negative
            DimensionMismatchError: If the literal is ragged or not 2-D
        """
        resolved = _resolve_dtype(dtype)
        if cols is not None:
            for dimension in (data, cols):
                if not isinstance(dimension, numbers.Integral) or isinstance(dimension, bool):
                    raise TypeError("Matrix(rows, cols) requires integer dimensions")
            if data < 0 or cols < 0:
                raise ValueError(f"Matrix dimensions must be non-negative, got {data}x{cols}")
            self._data = np.zeros((int(data), int(cols)), dtype=resolved)
        else:
            self._data = self._coerce_rows(data, resolved)

    @staticmethod
    def _coerce_rows(raw_rows: Any, dtype: np.dtype) -> np.ndarray:
        """Convert raw row iterables into an owned 2-D array."""
        if raw_rows is None:
            return np.zeros((0, 0), dtype=dtype)

        if isinstance(raw_rows, Matrix):
            return raw_rows._data.astype(dtype, copy=True)

        if isinstance(raw_rows, np.ndarray):
            if raw_rows.ndim != 2:
                raise DimensionMismatchError(
                    "construction",
                    raw_rows.shape,
                    message=f"Matrix requires a 2-D array, got {raw_rows.ndim} dimensions",
                )
            return np.array(raw_rows, dtype=dtype, copy=True)

        if isinstance(raw_rows, numbers.Number) or isinstance(raw_rows, str):
            raise TypeError("Matrix rows must be iterable sequences")

        rows = [list(row) for row in raw_rows]
        if not rows:
            return np.zeros((0, 0), dtype=dtype)

        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise DimensionMismatchError(
                    "construction",
                    (len(rows), width),
                    message="Matrix rows must all have same length",
                )
        return np.array(rows, dtype=dtype).reshape(len(rows), width)

    @classmethod
    def _from_array(cls, array: np.ndarray) -> Matrix:
        """Wrap a freshly computed array without copying it."""
        matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    # Factories

    @classmethod
    def make_zeros(cls, rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
        """Return a rows x cols matrix of zeros."""
        return cls(rows, cols, dtype=dtype)

    @classmethod
    def make_ones(cls, rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
        """Return a rows x cols matrix with every element equal to 1."""
        matrix = cls(rows, cols, dtype=dtype)
        matrix._data.fill(1)
        return matrix

    @classmethod
    def make_eye(cls, rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
        """Return a rows x cols matrix with ones on the main diagonal."""
        matrix = cls(rows, cols, dtype=dtype)
        for i in range(min(rows, cols)):
            matrix._data[i, i] = 1
        return matrix

    # Queries

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """Get matrix dimensions (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    # Element access

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col), or a writable view of a row."""
        if isinstance(index, tuple):
            row, col = index
            return self._data[row, col]
        return self._data[index]

    def __setitem__(self, index: tuple[int, int] | int, value: Any) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._data[row, col] = value
        else:
            self._data[index] = value

    def get(self, row: int, col: int) -> np.floating:
        return self._data[row, col]

    def set(self, row: int, col: int, value: float) -> None:
        self._data[row, col] = value

    def copy(self) -> Matrix:
        return Matrix._from_array(self._data.copy())

    # Conversion and rendering

    def to_python(self) -> list[list[float]]:
        """Convert to Python nested list of floats."""
        return [[float(el) for el in row] for row in self._data]

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the elements as an ndarray."""
        return self._data.copy()

    def to_string(self) -> str:
        rows_str = ", ".join(
            "[" + ", ".join(f"{float(el):g}" for el in row) + "]" for row in self._data
        )
        return f"[{rows_str}]"

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(
            " & ".join(f"{float(el):g}" for el in row) for row in self._data
        )
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{float(el):g} " for el in row) + "]\n" for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix({self.to_string()}, dtype={self.dtype.name})"

    # Comparison

    def __eq__(self, other: Any) -> bool:
        """Exact element-wise equality (NaN is never equal)."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def compare(
        self, other: Any, tolerance: float = 0.001, mode: str = ToleranceMode.ABSOLUTE
    ) -> bool:
        """
        Compare matrices element-wise with a tolerance.

        Args:
            other: Matrix to compare against
            tolerance: Tolerance for each element
            mode: Tolerance mode (exact, relative, absolute, sigfigs).
                Defaults to absolute; relative mode never accepts a nonzero
                element against an exact zero.

        Returns:
            True if shapes match and every element pair is within tolerance
        """
        if not isinstance(other, Matrix):
            return False

        if self.shape != other.shape:
            return False

        for el1, el2 in zip(self._data.flat, other._data.flat):
            if not fuzzy_compare(el1, el2, tolerance, mode):
                return False
        return True

    # Element-wise operator suite

    def _elementwise(
        self, other: Any, operation: str, op: Callable[[Any, Any], np.ndarray]
    ) -> Matrix:
        if isinstance(other, Matrix):
            require_same_shape(operation, self, other)
            with np.errstate(all="ignore"):
                return Matrix._from_array(op(self._data, other._data))
        if _is_scalar(other):
            scalar = self.dtype.type(other)
            with np.errstate(all="ignore"):
                return Matrix._from_array(op(self._data, scalar))
        return NotImplemented

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, "element-wise addition", np.add)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, "element-wise subtraction", np.subtract)

    def __mul__(self, other: Any) -> Matrix:
        """Element-wise product with a matrix, or broadcast with a scalar."""
        return self._elementwise(other, "element-wise multiplication", np.multiply)

    def __rmul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._elementwise(other, "element-wise multiplication", np.multiply)

    def __truediv__(self, other: Any) -> Matrix:
        """Element-wise quotient; division by zero gives inf or NaN."""
        return self._elementwise(other, "element-wise division", np.divide)

    def __rtruediv__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._elementwise(other, "element-wise division", lambda a, s: np.divide(s, a))

    def __neg__(self) -> Matrix:
        return Matrix._from_array(-self._data)

    def __pos__(self) -> Matrix:
        return self.copy()

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mult(other)

    def __pow__(self, other: Any) -> Matrix:
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            return NotImplemented
        return self.pow(other)

    # Algebraic suite

    def mult(self, other: Matrix) -> Matrix:
        """
        Matrix product.

        Accumulates ``result[i][j] += a[i][k] * b[k][j]`` with ``k``
        ascending, one rank-1 update per ``k``.

        Args:
            other: The matrix on the right side of the multiplication

        Returns:
            New rows x other.cols matrix

        Raises:
            DimensionMismatchError: If ``self.cols != other.rows``
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"mult requires a Matrix, got {type(other).__name__}")
        require_inner_dimensions(self, other)

        result = np.zeros((self.rows, other.cols), dtype=np.result_type(self.dtype, other.dtype))
        with np.errstate(all="ignore"):
            for k in range(self.cols):
                result += np.multiply.outer(self._data[:, k], other._data[k, :])
        return Matrix._from_array(result)

    def pow(self, n: int) -> Matrix:
        """
        Raise the matrix to an integer power by repeated multiplication.

        The result starts as the identity of this matrix's shape and is
        multiplied by the matrix ``n`` times, so ``pow(0)`` is the identity.
        A negative ``n`` raises the inverse to ``-n``.

        Raises:
            TypeError: If n is not an integer
            DimensionMismatchError: If n > 0 and the matrix is not square
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"Matrix power requires an integer exponent, got {type(n).__name__}")
        if n < 0:
            return self.inv().pow(-n)

        result = Matrix.make_eye(self.rows, self.cols, dtype=self.dtype)
        for _ in range(n):
            result = result.mult(self)
        return result

    def transpose(self) -> Matrix:
        """Return the cols x rows transpose."""
        return Matrix._from_array(self._data.T.copy())

    def trace(self) -> np.floating:
        """Sum of ``a[i][i]`` for ``i < min(rows, cols)``."""
        return self._data.trace()

    # Norm suite

    def frobenius_norm(self) -> np.floating:
        from .norms import frobenius_norm

        return frobenius_norm(self)

    def spectral_norm(
        self, rng: np.random.Generator | int | None = None, max_iter: int | None = None
    ) -> np.floating:
        from .norms import spectral_norm

        return spectral_norm(self, rng=rng, max_iter=max_iter)

    # Determinant suite

    def det(self) -> np.floating:
        from .determinant import det

        return det(self)

    def det_2(self) -> np.floating:
        from .determinant import det_2

        return det_2(self)

    def det_3(self) -> np.floating:
        from .determinant import det_3

        return det_3(self)

    def det_leibniz(self) -> np.floating:
        from .determinant import det_leibniz

        return det_leibniz(self)

    # Inverse suite

    def inv(self) -> Matrix:
        from .inverse import inv

        return inv(self)

    def inv_2(self, singular_tol: float | None = None) -> Matrix:
        from .inverse import inv_2

        return inv_2(self, singular_tol=singular_tol)

    def inv_3(self, singular_tol: float | None = None) -> Matrix:
        from .inverse import inv_3

        return inv_3(self, singular_tol=singular_tol)

    def inv_shulz(
        self,
        max_iter: int | None = None,
        tol: float | None = None,
        rng: np.random.Generator | int | None = None,
    ) -> Matrix:
        from .inverse import inv_shulz

        return inv_shulz(self, max_iter=max_iter, tol=tol, rng=rng)

    def newton_schulz(
        self,
        max_iter: int | None = None,
        tol: float | None = None,
        rng: np.random.Generator | int | None = None,
    ) -> InversionResult:
        from .inverse import newton_schulz

        return newton_schulz(self, max_iter=max_iter, tol=tol, rng=rng)

    # Decomposition suite

    def lu_decomposition(self) -> tuple[Matrix, Matrix]:
        from .decomposition import lu_decomposition

        return lu_decomposition(self)

    def cholesky_decomposition(self, symmetry_tol: float | None = None) -> Matrix:
        from .decomposition import cholesky_decomposition

        return cholesky_decomposition(self, symmetry_tol=symmetry_tol)


# Standalone factories


def make_zeros(rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
    return Matrix.make_zeros(rows, cols, dtype=dtype)


def make_ones(rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
    return Matrix.make_ones(rows, cols, dtype=dtype)


def make_eye(rows: int, cols: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
    return Matrix.make_eye(rows, cols, dtype=dtype)
