from tabset.interfaces.loader import DatasetLoader
from tabset.interfaces.types import Number, Numeric, SeriesSummary

__all__ = [
    "DatasetLoader",
    "Number",
    "Numeric",
    "SeriesSummary",
]
