from tabset.core.data.series import Series


class Column:
    def __init__(self, label: str, size: int = 0) -> None:
        self._label = label
        self._series = Series.nulls(size)

    @property
    def label(self) -> str:
        return self._label

    @property
    def series(self) -> Series:
        return self._series

    def __len__(self) -> int:
        return len(self._series)

    def __repr__(self) -> str:
        return f"Column(label={self._label!r}, length={len(self._series)})"
