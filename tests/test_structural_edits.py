import pytest

from grid_matrix.src.core.matrix import Matrix
from grid_matrix.src.core.errors import (
    InvalidDimensionError,
    MinimumSizeError,
    OutOfBoundsError,
    SizeMismatchError,
)
from grid_matrix.src.utils.grid_utils import from_rows


def _assert_rectangular(m):
    data = m.to_list()
    assert len(data) == m.height()
    assert all(len(row) == m.width() for row in data)


def test_insert_row_middle():
    m = from_rows([[1, 2], [3, 4]], default=0)
    m.insert_row(1)
    assert m.height() == 3
    assert m.to_list() == [[1, 2], [0, 0], [3, 4]]


def test_insert_row_front_and_end():
    m = from_rows([[1, 2]], default=0)
    m.insert_row(0)
    m.insert_row(2)
    assert m.to_list() == [[0, 0], [1, 2], [0, 0]]


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_row_out_of_bounds(index):
    m = Matrix(2, 2, 0)
    with pytest.raises(OutOfBoundsError):
        m.insert_row(index)
    assert m.height() == 2


def test_insert_row_with_values():
    m = from_rows([[1, 2], [3, 4]])
    m.insert_row(2, [5, 6])
    assert m.to_list() == [[1, 2], [3, 4], [5, 6]]


def test_insert_row_copies_values():
    values = [5, 6]
    m = Matrix(2, 1, 0)
    m.insert_row(0, values)
    values[0] = 99
    assert m.get(0, 0) == 5


def test_insert_row_size_mismatch_leaves_matrix_unchanged():
    m = from_rows([[1, 2], [3, 4]])
    before = m.clone()
    with pytest.raises(SizeMismatchError, match="expected 2"):
        m.insert_row(0, [1, 2, 3])
    assert m == before
    assert m.height() == 2


def test_insert_row_size_checked_before_index():
    m = Matrix(2, 2, 0)
    with pytest.raises(SizeMismatchError):
        m.insert_row(10, [1])


def test_insert_row_values_bad_index():
    m = Matrix(2, 2, 0)
    with pytest.raises(OutOfBoundsError):
        m.insert_row(3, [1, 2])
    assert m.height() == 2


def test_insert_col_middle():
    m = from_rows([[1, 2], [3, 4]], default=0)
    m.insert_col(1)
    assert m.width() == 3
    assert m.to_list() == [[1, 0, 2], [3, 0, 4]]


def test_insert_col_append():
    m = from_rows([[1], [2]], default="-")
    m.insert_col(1)
    assert m.to_list() == [[1, "-"], [2, "-"]]


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_col_out_of_bounds(index):
    m = from_rows([[1, 2], [3, 4]])
    with pytest.raises(OutOfBoundsError):
        m.insert_col(index)
    assert m.to_list() == [[1, 2], [3, 4]]


def test_insert_col_with_values():
    m = from_rows([[1, 2], [3, 4]])
    m.insert_col(0, [8, 9])
    assert m.to_list() == [[8, 1, 2], [9, 3, 4]]


def test_insert_col_size_mismatch():
    m = from_rows([[1, 2], [3, 4]])
    with pytest.raises(SizeMismatchError):
        m.insert_col(0, [1])
    assert m.to_list() == [[1, 2], [3, 4]]


def test_delete_row():
    m = from_rows([[1, 2], [3, 4], [5, 6]])
    m.delete_row(1)
    assert m.height() == 2
    assert m.to_list() == [[1, 2], [5, 6]]


@pytest.mark.parametrize("index", [-1, 3])
def test_delete_row_out_of_bounds(index):
    m = Matrix(2, 3, 0)
    with pytest.raises(OutOfBoundsError):
        m.delete_row(index)
    assert m.height() == 3


def test_delete_col():
    m = from_rows([[1, 2, 3], [4, 5, 6]])
    m.delete_col(0)
    assert m.width() == 2
    assert m.to_list() == [[2, 3], [5, 6]]


@pytest.mark.parametrize("index", [-1, 2])
def test_delete_col_out_of_bounds(index):
    m = Matrix(2, 2, 0)
    with pytest.raises(OutOfBoundsError):
        m.delete_col(index)


def test_delete_last_row_rejected():
    m = Matrix(3, 1, 0)
    with pytest.raises(MinimumSizeError, match="only remaining row"):
        m.delete_row(0)
    assert m.height() == 1


def test_delete_last_col_rejected():
    m = Matrix(1, 3, 0)
    with pytest.raises(InvalidDimensionError):
        m.delete_col(0)
    assert m.width() == 1


def test_row_insert_delete_inverse():
    m = from_rows([[1, 2, 3], [4, 5, 6]], default=0)
    original = m.clone()
    for i in range(m.height() + 1):
        m.insert_row(i)
        m.delete_row(i)
        assert m == original


def test_col_insert_delete_inverse():
    m = from_rows([[1, 2, 3], [4, 5, 6]], default=0)
    original = m.clone()
    for i in range(m.width() + 1):
        m.insert_col(i, [7, 8])
        m.delete_col(i)
        assert m == original


def test_shape_invariant_after_mixed_edits():
    m = Matrix(2, 2, 0)
    m.insert_row(1)
    m.insert_col(0, [1, 2, 3])
    m.delete_row(0)
    m.insert_col(3)
    m.delete_col(1)
    m.insert_row(2, [9, 9, 9])
    _assert_rectangular(m)
    assert (m.height(), m.width()) == (3, 3)


def test_new_cells_hold_default():
    m = Matrix(2, 2, "d")
    m.set(0, 0, "x")
    m.insert_row(1)
    m.insert_col(1)
    assert m.get(1, 0) == "d"
    assert m.get(0, 1) == "d"
    assert m.get(0, 0) == "x"
