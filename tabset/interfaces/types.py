from typing import Union

Number = float
Numeric = Union[int, float]

SeriesSummary = dict[str, float]
