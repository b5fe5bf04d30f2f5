"""Matrix construction, snapshot and display helpers."""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

from grid_matrix.src.core.errors import InvalidDimensionError, SizeMismatchError
from grid_matrix.src.core.matrix import Matrix


def from_rows(rows: Sequence[Sequence[Any]], default: Any = None) -> Matrix:
    """Return a new matrix holding a copy of the rectangular ``rows``."""
    if not rows or not rows[0]:
        raise InvalidDimensionError("Matrix cannot be built from empty rows")
    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise SizeMismatchError(f"Row {r} has length {len(row)}, expected {width}")
    matrix = Matrix(width, len(rows), default)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            matrix.set(r, c, value)
    return matrix


def to_list(matrix: Matrix) -> List[List[Any]]:
    """Return a deep list copy of ``matrix``."""
    return matrix.to_list()


def to_array(matrix: Matrix, dtype: Any = None) -> np.ndarray:
    """Return a ``(height, width)`` numpy copy of ``matrix``."""
    return np.array(matrix.to_list(), dtype=dtype)


def from_array(arr: np.ndarray, default: Any = None) -> Matrix:
    """Return a new matrix holding the values of the 2-D array ``arr``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise InvalidDimensionError(f"array must be 2-dimensional, got {arr.ndim}")
    # tolist() converts numpy scalars back to Python values.
    return from_rows(arr.tolist(), default)


def render(matrix: Matrix) -> str:
    """Return the matrix values as space separated lines, one per row."""
    return "\n".join(" ".join(str(v) for v in row) for row in matrix.to_list())


__all__ = ["from_rows", "to_list", "to_array", "from_array", "render"]
