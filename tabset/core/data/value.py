import math
from dataclasses import dataclass
from decimal import Decimal

from tabset.interfaces import Number, Numeric


def _parse_number(raw: str) -> Number | None:
    # Exact ASCII text only: no padding, no digit-group underscores, no inf/nan.
    if raw == "" or not raw.isascii() or raw != raw.strip() or "_" in raw:
        return None

    try:
        number = float(raw)
    except ValueError:
        return None

    if not math.isfinite(number):
        return None
    return number


def _render_decimal(number: Number) -> str:
    # Shortest round-trip digits of repr(), always in positional notation.
    text = format(Decimal(repr(number)), "f")
    if "." not in text:
        text += ".0"
    return text


@dataclass(frozen=True)
class Value:
    """One cell: the original text plus its best-effort numeric reading.

    A cell that does not parse is still a valid Value; it keeps ``numeric``
    at 0.0 so sums are unaffected and drops out of every numeric count.
    """

    raw: str
    numeric: Number = 0.0
    is_numeric: bool = False

    @classmethod
    def from_text(cls, raw: str) -> "Value":
        number = _parse_number(raw)
        if number is None:
            return cls(raw=raw)
        return cls(raw=raw, numeric=number, is_numeric=True)

    @classmethod
    def from_number(cls, number: Numeric) -> "Value":
        value = float(number)
        if not math.isfinite(value):
            raise ValueError(f"numeric value must be finite, got {number!r}")
        return cls(raw=_render_decimal(value), numeric=value, is_numeric=True)

    @classmethod
    def null(cls) -> "Value":
        return cls.from_text("")

    def trimmed(self) -> "Value":
        return Value.from_text(self.raw.strip())
