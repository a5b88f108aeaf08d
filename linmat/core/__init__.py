"""Core utilities package"""

from .config import Settings, get_settings
from .errors import (
    DimensionMismatchError,
    DimensionTooSmallError,
    LinMatError,
    NotHermitianError,
    NotSquareError,
    SingularMatrixError,
    WrongFixedSizeError,
)
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "LinMatError",
    "DimensionMismatchError",
    "NotSquareError",
    "WrongFixedSizeError",
    "DimensionTooSmallError",
    "SingularMatrixError",
    "NotHermitianError",
]
