"""Core matrix container and its error types."""

from .matrix import Matrix
from .errors import (
    InvalidDimensionError,
    MatrixError,
    MinimumSizeError,
    NonTerminatingLineError,
    OutOfBoundsError,
    SizeMismatchError,
)

__all__ = [
    "Matrix",
    "MatrixError",
    "InvalidDimensionError",
    "MinimumSizeError",
    "NonTerminatingLineError",
    "OutOfBoundsError",
    "SizeMismatchError",
]
