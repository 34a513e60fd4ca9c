from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from tabset.core.data.dataset import Dataset
    from tabset.core.io.csv_reader import CsvOptions


class DatasetLoader(Protocol):
    """Fetches CSV text from a source locator and converts it to a Dataset.

    Fetch failures (network errors, non-200 responses, timeouts) belong to the
    loader; malformed text is reported by the converter it delegates to.
    """

    def __call__(self, source: str, options: Optional[CsvOptions] = None, /) -> Dataset:
        ...
