from __future__ import annotations

"""Error types raised by :class:`~grid_matrix.src.core.matrix.Matrix`."""

__all__ = [
    "MatrixError",
    "InvalidDimensionError",
    "MinimumSizeError",
    "NonTerminatingLineError",
    "OutOfBoundsError",
    "SizeMismatchError",
]


class MatrixError(Exception):
    """Base class for all matrix failures."""


class InvalidDimensionError(MatrixError, ValueError):
    """Raised when a matrix would be built with fewer than one row or column."""


class MinimumSizeError(InvalidDimensionError):
    """Raised when deleting the only remaining row or column."""


class NonTerminatingLineError(MatrixError, ValueError):
    """Raised when a line fill would revisit the same cell forever."""


class OutOfBoundsError(MatrixError, IndexError):
    """Raised when a row or column index falls outside its valid range."""


class SizeMismatchError(MatrixError, ValueError):
    """Raised when supplied row/column values do not match the matrix shape."""
