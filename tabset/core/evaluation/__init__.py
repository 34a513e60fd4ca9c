"""Summary helpers with lazy exports to avoid importing numpy eagerly."""

from __future__ import annotations

from typing import Any

__all__ = [
    "describe_series",
    "describe_dataset",
]


def __getattr__(name: str) -> Any:
    if name == "describe_series":
        from tabset.core.evaluation.summary import describe_series

        return describe_series
    if name == "describe_dataset":
        from tabset.core.evaluation.summary import describe_dataset

        return describe_dataset
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
