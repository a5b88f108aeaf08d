"""
Row and column vectors.

Thin wrappers that hold a Matrix of shape 1 x n or n x 1 (n >= 1) and
check that shape on construction. They compose a Matrix rather than
subclassing it; use ``to_matrix()`` for matrix algebra.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any, Iterable

from .core.errors import DimensionMismatchError
from .matrix import DEFAULT_DTYPE, Matrix


class _Vector(ABC):
    """Shared behaviour of row and column vectors."""

    _orientation = ""

    def __init__(self, values: int | Iterable[float], dtype: Any = DEFAULT_DTYPE) -> None:
        """
        Args:
            values: Length of a zero-filled vector, or the element values
            dtype: numpy floating dtype of the elements
        """
        if isinstance(values, numbers.Integral) and not isinstance(values, bool):
            matrix = self._zeros(int(values), dtype)
        else:
            matrix = self._from_values(list(values), dtype)
        self._matrix = self._checked(matrix)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> _Vector:
        """Build a vector from a matrix of the right shape (copied)."""
        vector = cls.__new__(cls)
        vector._matrix = cls._checked(matrix).copy()
        return vector

    @classmethod
    def _checked(cls, matrix: Matrix) -> Matrix:
        if not cls._has_vector_shape(matrix):
            raise DimensionMismatchError(
                "vector construction",
                matrix.shape,
                message=f"Not a {cls._orientation} vector.",
            )
        return matrix

    @staticmethod
    @abstractmethod
    def _has_vector_shape(matrix: Matrix) -> bool:
        ...

    @staticmethod
    @abstractmethod
    def _zeros(length: int, dtype: Any) -> Matrix:
        ...

    @staticmethod
    @abstractmethod
    def _from_values(values: list[float], dtype: Any) -> Matrix:
        ...

    @abstractmethod
    def _position(self, index: int) -> tuple[int, int]:
        ...

    def __len__(self) -> int:
        return max(self._matrix.shape)

    def __getitem__(self, index: int) -> Any:
        return self._matrix[self._position(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._matrix[self._position(index)] = value

    def to_matrix(self) -> Matrix:
        return self._matrix.copy()

    def to_python(self) -> list[float]:
        return [float(self[i]) for i in range(len(self))]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._matrix == other._matrix

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_python()})"


class RowVector(_Vector):
    """Real-valued 1 x n row vector."""

    _orientation = "row"

    @staticmethod
    def _has_vector_shape(matrix: Matrix) -> bool:
        return matrix.rows == 1 and matrix.cols >= 1

    @staticmethod
    def _zeros(length: int, dtype: Any) -> Matrix:
        return Matrix(1, length, dtype=dtype)

    @staticmethod
    def _from_values(values: list[float], dtype: Any) -> Matrix:
        return Matrix([values], dtype=dtype)

    def _position(self, index: int) -> tuple[int, int]:
        return (0, index)


class ColumnVector(_Vector):
    """Real-valued n x 1 column vector."""

    _orientation = "column"

    @staticmethod
    def _has_vector_shape(matrix: Matrix) -> bool:
        return matrix.rows >= 1 and matrix.cols == 1

    @staticmethod
    def _zeros(length: int, dtype: Any) -> Matrix:
        return Matrix(length, 1, dtype=dtype)

    @staticmethod
    def _from_values(values: list[float], dtype: Any) -> Matrix:
        return Matrix([[value] for value in values], dtype=dtype)

    def _position(self, index: int) -> tuple[int, int]:
        return (index, 0)
