"""Mutable, resizable two-dimensional container of arbitrary values."""

from __future__ import annotations

from typing import Any, Iterator, List, Sequence, Tuple

from grid_matrix.src.core.errors import (
    InvalidDimensionError,
    MinimumSizeError,
    NonTerminatingLineError,
    OutOfBoundsError,
    SizeMismatchError,
)
from grid_matrix.src.utils import config_loader
from grid_matrix.src.utils.logger import get_logger

__all__ = ["Matrix"]

logger = get_logger(__name__)

Cell = Tuple[int, int]


class Matrix:
    """Dense rectangular grid with row/column insertion and deletion.

    Cells are addressed as ``(row, col)`` with both indices starting at zero.
    Newly created cells hold ``default`` until overwritten. The matrix never
    has fewer than one row or one column.

    Examples:
        >>> m = Matrix(3, 2, 0)
        >>> m.width(), m.height()
        (3, 2)
        >>> m.set(1, 2, 5)
        >>> m[1, 2]
        5
    """

    def __init__(self, columns: int, rows: int, default: Any = None) -> None:
        if columns < 1 or rows < 1:
            raise InvalidDimensionError(
                f"Matrix needs at least one row and one column, got {rows}x{columns}"
            )
        self._columns = columns
        self._rows = rows
        self._default = default
        self._data: List[List[Any]] = [[default] * columns for _ in range(rows)]

    # Shape ---------------------------------------------------------------

    def width(self) -> int:
        """Number of columns."""
        return self._columns

    def height(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def default(self) -> Any:
        """Value placed in newly created cells."""
        return self._default

    # Element access ------------------------------------------------------

    def get(self, row: int, col: int) -> Any:
        """Return the value stored at ``row``, ``col``."""
        self._check_cell(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, value: Any) -> None:
        """Overwrite the value stored at ``row``, ``col``."""
        self._check_cell(row, col)
        self._data[row][col] = value

    def __getitem__(self, key: Cell) -> Any:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: Cell, value: Any) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    # Structural edits ----------------------------------------------------

    def insert_row(self, index: int, values: Sequence[Any] | None = None) -> None:
        """Insert a row at ``index``; ``index == height()`` appends.

        The new row is filled with the default value, or with a copy of
        ``values`` when given. ``values`` must have exactly ``width()`` items.
        """
        if values is not None and len(values) != self._columns:
            raise SizeMismatchError(
                f"Row has {len(values)} values, expected {self._columns}"
            )
        if not (0 <= index <= self._rows):
            raise OutOfBoundsError(f"Row insertion index {index} out of bounds [0, {self._rows}]")
        if values is None:
            new_row = [self._default] * self._columns
        else:
            new_row = list(values)
        self._data.insert(index, new_row)
        self._rows += 1
        logger.debug("inserted row at %d, shape now %dx%d", index, self._rows, self._columns)

    def insert_col(self, index: int, values: Sequence[Any] | None = None) -> None:
        """Insert a column at ``index``; ``index == width()`` appends.

        Every row gains one cell holding the default value, or ``values[r]``
        for row ``r`` when ``values`` is given. ``values`` must have exactly
        ``height()`` items.
        """
        if values is not None and len(values) != self._rows:
            raise SizeMismatchError(
                f"Column has {len(values)} values, expected {self._rows}"
            )
        if not (0 <= index <= self._columns):
            raise OutOfBoundsError(
                f"Column insertion index {index} out of bounds [0, {self._columns}]"
            )
        if values is None:
            for row in self._data:
                row.insert(index, self._default)
        else:
            for row, value in zip(self._data, values):
                row.insert(index, value)
        self._columns += 1
        logger.debug("inserted column at %d, shape now %dx%d", index, self._rows, self._columns)

    def delete_row(self, index: int) -> None:
        """Remove row ``index``; later rows shift up by one."""
        self._check_row(index)
        if self._rows == 1:
            raise MinimumSizeError("Cannot delete the only remaining row")
        del self._data[index]
        self._rows -= 1
        logger.debug("deleted row %d, shape now %dx%d", index, self._rows, self._columns)

    def delete_col(self, index: int) -> None:
        """Remove column ``index`` from every row."""
        self._check_col(index)
        if self._columns == 1:
            raise MinimumSizeError("Cannot delete the only remaining column")
        for row in self._data:
            del row[index]
        self._columns -= 1
        logger.debug("deleted column %d, shape now %dx%d", index, self._rows, self._columns)

    # Bulk fills ----------------------------------------------------------

    def fill_region(
        self, start_row: int, start_col: int, end_row: int, end_col: int, value: Any
    ) -> None:
        """Set every cell in rows ``[start_row, end_row)`` and columns
        ``[start_col, end_col)`` to ``value``.

        Cells are written in row-major order through :meth:`set`. Unless
        strict fills are enabled, a region reaching outside the matrix raises
        :class:`OutOfBoundsError` at the first bad cell and leaves the cells
        visited before it already written.
        """
        cells = (
            (r, c)
            for r in range(start_row, end_row)
            for c in range(start_col, end_col)
        )
        self._fill(cells, value, "region")

    def fill_line(
        self,
        start_row: int,
        start_col: int,
        row_step: int,
        col_step: int,
        end_row: int,
        end_col: int,
        value: Any,
    ) -> None:
        """Set each cell along a strided walk to ``value``.

        The walk starts at ``(start_row, start_col)`` and advances by
        ``(row_step, col_step)`` while the row is below ``end_row`` and the
        column is below ``end_col``. Failure behaviour matches
        :meth:`fill_region`.

        Raises:
            NonTerminatingLineError: If both steps are zero and the start
                lies inside the matrix below both end bounds.
        """
        if row_step == 0 and col_step == 0 and start_row < end_row and start_col < end_col:
            self._check_cell(start_row, start_col)
            raise NonTerminatingLineError("fill_line needs a non-zero row_step or col_step")
        cells = _line_cells(start_row, start_col, row_step, col_step, end_row, end_col)
        self._fill(cells, value, "line")

    def _fill(self, cells: Iterator[Cell], value: Any, kind: str) -> None:
        if config_loader.STRICT_FILLS:
            # Materialise first so nothing is written if any cell is bad.
            targets = []
            for row, col in cells:
                try:
                    self._check_cell(row, col)
                except OutOfBoundsError:
                    logger.warning("rejected %s fill touching (%d, %d)", kind, row, col)
                    raise
                targets.append((row, col))
            for row, col in targets:
                self._data[row][col] = value
            count = len(targets)
        else:
            count = 0
            for row, col in cells:
                self.set(row, col, value)
                count += 1
        logger.debug("%s fill wrote %d cells", kind, count)

    # Copying and comparison ----------------------------------------------

    def clone(self) -> "Matrix":
        """Return an independent copy with its own row storage."""
        copy = Matrix(self._columns, self._rows, self._default)
        copy._data = [row[:] for row in self._data]
        return copy

    def __copy__(self) -> "Matrix":
        return self.clone()

    def to_list(self) -> List[List[Any]]:
        """Return a deep list copy of the matrix data."""
        return [row[:] for row in self._data]

    def visualize(self) -> None:
        """Pretty-print the matrix values."""
        from grid_matrix.src.utils.grid_utils import render

        print(render(self))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._columns == other._columns
            and self._rows == other._rows
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._rows, self._columns, tuple(tuple(row) for row in self._data)))

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns})"

    # Bounds checks -------------------------------------------------------

    def _check_row(self, row: int) -> None:
        if not (0 <= row < self._rows):
            raise OutOfBoundsError(f"Row index {row} out of bounds [0, {self._rows})")

    def _check_col(self, col: int) -> None:
        if not (0 <= col < self._columns):
            raise OutOfBoundsError(f"Column index {col} out of bounds [0, {self._columns})")

    def _check_cell(self, row: int, col: int) -> None:
        self._check_row(row)
        self._check_col(col)

    @staticmethod
    def _unpack_key(key: Any) -> Cell:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be (row, col) pairs")
        return key[0], key[1]


def _line_cells(
    row: int, col: int, row_step: int, col_step: int, end_row: int, end_col: int
) -> Iterator[Cell]:
    """Yield the cells visited by :meth:`Matrix.fill_line`."""
    while row < end_row and col < end_col:
        yield row, col
        row += row_step
        col += col_step
