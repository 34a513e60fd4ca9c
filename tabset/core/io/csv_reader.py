import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from tabset.core.data.dataset import Dataset

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


class CsvFormatError(ValueError):
    """Raised when CSV text cannot be converted; no partial dataset is kept."""

    def __init__(self, record: int, reason: str) -> None:
        super().__init__(f"record {record}: {reason}")
        self.record = record  # 1-based, counted after skipped lines
        self.reason = reason


@dataclass(frozen=True)
class CsvOptions:
    skip_lines: int = 0
    quote: str = '"'
    delimiter: str = ","
    # None means CRLF mode: "\r\n", "\n" and "\r" all end a record.
    terminator: Optional[str] = None
    headers: bool = True

    def __post_init__(self) -> None:
        if self.skip_lines < 0:
            raise ValueError("skip_lines must be >= 0")
        if len(self.quote) != 1:
            raise ValueError("quote must be a single character")
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        if self.quote == self.delimiter:
            raise ValueError("quote and delimiter must differ")
        if self.terminator is not None:
            if len(self.terminator) != 1:
                raise ValueError("terminator must be a single character")
            if self.terminator in (self.quote, self.delimiter):
                raise ValueError("terminator must differ from quote and delimiter")


def _skip_lines(text: str, count: int) -> str:
    if count == 0:
        return text
    parts = text.split("\n", count)
    if len(parts) <= count:
        return ""
    return parts[count]


def _scan_records(text: str, options: CsvOptions) -> Iterator[list[str]]:
    # Custom-terminator records: "\r" and "\n" are field data, except line
    # breaks right after a terminator, which are layout.
    delimiter, quote, terminator = options.delimiter, options.quote, options.terminator
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    after_quote = False
    at_record_start = True
    position = 0
    length = len(text)
    while position < length:
        char = text[position]
        position += 1
        if in_quotes:
            if char != quote:
                field.append(char)
            elif position < length and text[position] == quote:
                field.append(quote)
                position += 1
            else:
                in_quotes = False
                after_quote = True
            continue

        if at_record_start and char in "\r\n":
            continue
        at_record_start = False

        if char == delimiter:
            row.append("".join(field))
            field = []
            after_quote = False
        elif char == terminator:
            row.append("".join(field))
            if row != [""] or after_quote:
                yield row
            row = []
            field = []
            after_quote = False
            at_record_start = True
        elif after_quote:
            raise csv.Error(f"'{delimiter}' expected after '{quote}'")
        elif char == quote and not field:
            in_quotes = True
        else:
            field.append(char)

    if in_quotes:
        raise csv.Error("unexpected end of data")
    if not at_record_start:
        row.append("".join(field))
        if row != [""] or after_quote:
            yield row


def _read_records(text: str, options: CsvOptions) -> Iterator[list[str]]:
    rows: Iterator[list[str]]
    if options.terminator is None:
        rows = csv.reader(
            io.StringIO(text, newline=""),
            delimiter=options.delimiter,
            quotechar=options.quote,
            strict=True,
        )
    else:
        rows = _scan_records(text, options)

    record_number = 0
    while True:
        try:
            row = next(rows)
        except StopIteration:
            return
        except csv.Error as exc:
            raise CsvFormatError(record_number + 1, str(exc)) from exc

        if not row:
            continue
        record_number += 1
        yield row


def text_to_dataset(text: str, options: Optional[CsvOptions] = None) -> Dataset:
    """Convert delimited text into a Dataset, one column per field.

    The first record fixes the column count; with ``options.headers`` it also
    supplies the labels and is not stored as data. Every later record must
    have the same number of fields.
    """
    if options is None:
        options = CsvOptions()

    # No cell can outgrow the text itself; the stdlib cap (128 KiB) is lifted
    # for this pass only.
    previous_limit = csv.field_size_limit()
    csv.field_size_limit(max(previous_limit, len(text) + 1))
    try:
        records = _read_records(_skip_lines(text, options.skip_lines), options)
        first = next(records, None)
        if first is None:
            logger.debug("[csv] empty input after skip_lines=%s", options.skip_lines)
            return Dataset()

        if options.headers:
            dataset = Dataset(first, 0)
        else:
            dataset = Dataset([""] * len(first), 0)
            dataset.append_row(first)

        col_count = dataset.column_count()
        record_number = 1
        for row in records:
            record_number += 1
            if len(row) != col_count:
                raise CsvFormatError(
                    record_number, f"expected {col_count} fields, found {len(row)}"
                )
            dataset.append_row(row)
    finally:
        csv.field_size_limit(previous_limit)

    logger.debug(
        "[csv] columns=%s rows=%s headers=%s",
        dataset.column_count(),
        dataset.row_count(),
        options.headers,
    )
    return dataset


def read_csv_dataset(path: PathLike, options: Optional[CsvOptions] = None) -> Dataset:
    csv_path = Path(path)
    try:
        with csv_path.open(mode="r", encoding="utf-8", newline="") as file:
            text = file.read()
    except UnicodeDecodeError as exc:
        raise CsvFormatError(0, f"{csv_path} is not valid UTF-8") from exc
    return text_to_dataset(text, options)
