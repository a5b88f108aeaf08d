"""
Library exceptions.

Every violated precondition surfaces immediately as a subclass of
``LinMatError``; nothing is retried or recovered inside the library.
"""

from typing import Any, Dict, Optional, Tuple

Shape = Tuple[int, int]


class LinMatError(ValueError):
    """Base exception for linmat errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def as_dict(self) -> Dict[str, Any]:
        """Serialize the error as a plain dictionary."""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class DimensionMismatchError(LinMatError):
    """Raised when operand shapes are incompatible"""

    def __init__(self, operation: str, left: Shape, right: Optional[Shape] = None, message: Optional[str] = None):
        if message is None:
            message = f"Incompatible dimensions for {operation}: {left} and {right}"
        super().__init__(
            message=message,
            details={"operation": operation, "left": left, "right": right}
        )


class NotSquareError(LinMatError):
    """Raised when a square-only algorithm receives a non-square matrix"""

    def __init__(self, operation: str, shape: Shape):
        super().__init__(
            message=f"{operation} requires a square matrix, got {shape[0]}x{shape[1]}",
            details={"operation": operation, "shape": shape}
        )


class WrongFixedSizeError(LinMatError):
    """Raised when a fixed-size routine receives the wrong size"""

    def __init__(self, operation: str, expected: int, shape: Shape):
        super().__init__(
            message=f"{operation} requires a {expected}x{expected} matrix, got {shape[0]}x{shape[1]}",
            details={"operation": operation, "expected": expected, "shape": shape}
        )


class DimensionTooSmallError(LinMatError):
    """Raised when a decomposition receives a matrix below its minimum size"""

    def __init__(self, operation: str, minimum: int, shape: Shape):
        super().__init__(
            message=f"{operation} requires at least a {minimum}x{minimum} matrix, got {shape[0]}x{shape[1]}",
            details={"operation": operation, "minimum": minimum, "shape": shape}
        )


class SingularMatrixError(LinMatError):
    """Raised when an exact inverse meets a zero determinant"""

    def __init__(self, operation: str, determinant: float):
        super().__init__(
            message="Matrix is singular.",
            details={"operation": operation, "determinant": float(determinant)}
        )


class NotHermitianError(LinMatError):
    """Raised when Cholesky decomposition receives an asymmetric matrix"""

    def __init__(self, row: int, col: int):
        super().__init__(
            message=f"Matrix is not symmetric: element ({row}, {col}) differs from ({col}, {row})",
            details={"row": row, "col": col}
        )
