import math
from typing import Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from tabset.core.data.column import Column
from tabset.core.data.value import Value


class Dataset:
    """Ordered columns sharing one row count.

    Columns are created together and only grow together through
    ``append_row``, so every Series always has the dataset's row count.
    """

    def __init__(self, labels: Iterable[str] = (), row_count: int = 0) -> None:
        if row_count < 0:
            raise ValueError("row_count must be >= 0")
        self._columns: list[Column] = [Column(str(label), row_count) for label in labels]

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __repr__(self) -> str:
        return f"Dataset(columns={self.column_count()}, rows={self.row_count()})"

    def column_count(self) -> int:
        return len(self._columns)

    def row_count(self) -> int:
        if not self._columns:
            return 0
        return len(self._columns[0].series)

    def _check_column(self, index: int) -> Column:
        if not 0 <= index < len(self._columns):
            raise IndexError(f"column index {index} out of range for {len(self._columns)} columns")
        return self._columns[index]

    def column(self, index: int) -> Column:
        return self._check_column(index)

    def column_label(self, index: int) -> str:
        return self._check_column(index).label

    def labels(self) -> list[str]:
        return [column.label for column in self._columns]

    def at(self, row: int, col: int) -> Value:
        return self._check_column(col).series[row]

    def append_row(self, values: Sequence[str]) -> None:
        if len(values) != len(self._columns):
            raise ValueError(
                f"row has {len(values)} values but dataset has {len(self._columns)} columns"
            )
        for column, raw in zip(self._columns, values):
            column.series.append_raw(raw)

    def to_matrix(self) -> NDArray[np.float64]:
        """Rows x columns float matrix; non-numeric cells become nan."""
        matrix = np.full((self.row_count(), self.column_count()), math.nan, dtype=np.float64)
        for col_idx, column in enumerate(self._columns):
            for row_idx, value in enumerate(column.series):
                if value.is_numeric:
                    matrix[row_idx, col_idx] = value.numeric
        return matrix
