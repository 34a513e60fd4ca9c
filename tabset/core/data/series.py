import math
from typing import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from tabset.core.data.value import Value
from tabset.interfaces import Number, Numeric


def _divide(numerator: Number, denominator: int) -> Number:
    # IEEE semantics: 0/0 is nan, x/0 is +/-inf; never raises.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


class Series:
    """Ordered cell data of one column, with descriptive statistics.

    Three different counts feed the statistics and are kept apart on purpose:
    ``len()`` counts every row, ``count_non_blank()`` counts rows with any
    text, and ``count_numeric()`` counts rows that parsed as numbers. Only the
    last one is used as a denominator.
    """

    def __init__(self, values: Iterable[Value] = ()) -> None:
        self._values: list[Value] = list(values)

    @classmethod
    def nulls(cls, size: int) -> "Series":
        if size < 0:
            raise ValueError("size must be >= 0")
        return cls(Value.null() for _ in range(size))

    @classmethod
    def from_raw(cls, raws: Iterable[str]) -> "Series":
        return cls(Value.from_text(raw) for raw in raws)

    @classmethod
    def sequence(cls, size: int, start: Numeric, increment: Numeric) -> "Series":
        """Arithmetic sequence of ``size`` numeric values, for synthetic data."""
        if size < 0:
            raise ValueError("size must be >= 0")

        values: list[Value] = []
        current = float(start)
        for _ in range(size):
            values.append(Value.from_number(current))
            current += increment
        return cls(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Value:
        if not 0 <= index < len(self._values):
            raise IndexError(f"row index {index} out of range for series of length {len(self._values)}")
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Series(length={len(self._values)})"

    def length(self) -> int:
        return len(self._values)

    def count_non_blank(self) -> int:
        return sum(1 for value in self._values if value.raw != "")

    def count_numeric(self) -> int:
        return sum(1 for value in self._values if value.is_numeric)

    def sum(self) -> Number:
        total = 0.0
        for value in self._values:
            total += value.numeric
        return total

    def mean(self) -> Number:
        """Mean over numeric cells; nan for an empty series or one without numbers."""
        if not self._values:
            return math.nan
        return _divide(self.sum(), self.count_numeric())

    def _squared_deviations(self) -> Number:
        mean = self.mean()
        total = 0.0
        for value in self._values:
            if value.is_numeric:
                total += (value.numeric - mean) ** 2
        return total

    def population_variance(self) -> Number:
        if not self._values:
            return 0.0
        return _divide(self._squared_deviations(), self.count_numeric())

    def population_stddev(self) -> Number:
        return math.sqrt(self.population_variance())

    def sample_variance(self) -> Number:
        """Variance normalized by ``count_numeric() - 1``.

        Not guarded against a zero denominator: a series holding exactly one
        numeric value returns nan, and callers must tolerate it. With rows but
        no numeric values the denominator is -1 and the result is -0.0.
        """
        if not self._values:
            return 0.0
        return _divide(self._squared_deviations(), self.count_numeric() - 1)

    def sample_stddev(self) -> Number:
        return math.sqrt(self.sample_variance())

    def trimmed(self) -> "Series":
        return Series(value.trimmed() for value in self._values)

    def append_raw(self, text: str) -> None:
        self._values.append(Value.from_text(text))

    def to_array(self) -> NDArray[np.float64]:
        return np.fromiter(
            (value.numeric for value in self._values if value.is_numeric),
            dtype=np.float64,
        )
