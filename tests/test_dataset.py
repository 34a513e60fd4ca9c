import math

import pytest

from tabset.core.data.column import Column
from tabset.core.data.dataset import Dataset
from tabset.core.data.value import Value


def test_column_new():
    column = Column("test", 10)

    assert column.label == "test"
    assert len(column.series) == 10
    assert column.series[9] == Value.null()


def test_column_series_is_read_only():
    column = Column("test")

    with pytest.raises(AttributeError):
        column.series = None


def test_new():
    ds = Dataset(["A", "B", "C"], 10)

    assert ds.column_count() == 3
    assert ds.row_count() == 10
    assert ds.column_label(0) == "A"
    assert ds.column_label(1) == "B"
    assert ds.column_label(2) == "C"
    assert ds.labels() == ["A", "B", "C"]
    assert ds.at(9, 2) == Value.null()


def test_empty_dataset_has_no_rows():
    ds = Dataset()

    assert ds.column_count() == 0
    assert ds.row_count() == 0
    assert list(ds) == []


def test_duplicate_labels_allowed():
    ds = Dataset(["x", "x"], 1)

    assert ds.labels() == ["x", "x"]
    assert ds.column(0) is not ds.column(1)


def test_append_row():
    ds = Dataset(["A", "B", "C"], 5)

    ds.append_row(["1", "2", "3"])

    assert ds.row_count() == 6
    assert ds.at(5, 0).numeric == 1.0
    assert ds.at(5, 1).numeric == 2.0
    assert ds.at(5, 2).numeric == 3.0


def test_append_row_keeps_prior_rows():
    ds = Dataset(["A", "B"], 0)
    ds.append_row(["1", "x"])
    ds.append_row(["2", ""])
    before = [[ds.at(row, col) for col in range(2)] for row in range(ds.row_count())]

    ds.append_row(["3", "z"])

    assert ds.row_count() == 3
    assert [[ds.at(row, col) for col in range(2)] for row in range(2)] == before
    assert all(len(column.series) == ds.row_count() for column in ds)


def test_append_row_length_mismatch():
    ds = Dataset(["A", "B"], 1)

    with pytest.raises(ValueError):
        ds.append_row(["1"])
    with pytest.raises(ValueError):
        ds.append_row(["1", "2", "3"])

    assert ds.row_count() == 1
    assert all(len(column.series) == 1 for column in ds)


def test_bounds_checks():
    ds = Dataset(["A", "B"], 2)

    with pytest.raises(IndexError):
        ds.at(2, 0)
    with pytest.raises(IndexError):
        ds.at(0, 2)
    with pytest.raises(IndexError):
        ds.at(-1, 0)
    with pytest.raises(IndexError):
        ds.column_label(5)
    with pytest.raises(IndexError):
        ds.column(-1)


def test_to_matrix():
    ds = Dataset(["A", "B"], 0)
    ds.append_row(["1", "label"])
    ds.append_row(["2.5", "4"])

    matrix = ds.to_matrix()

    assert matrix.shape == (2, 2)
    assert matrix[0, 0] == 1.0
    assert math.isnan(matrix[0, 1])
    assert matrix[1, 0] == 2.5
    assert matrix[1, 1] == 4.0
