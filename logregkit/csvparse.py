"""Reading separator-delimited numeric files into a :class:`Dataset`."""

from __future__ import annotations

import itertools
import re
from typing import IO, AnyStr

from logregkit.dataset import Dataset

_SPACE = " \t\n\v\f\r"
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class CsvError(ValueError):
    """Raised when a file cannot be read as a numeric table."""


def _read_text(stream: IO[AnyStr]) -> str:
    data = stream.read()
    if isinstance(data, bytes):
        return data.decode("utf-8")
    return data


def _check_separator(separator: str) -> None:
    if len(separator) != 1:
        raise ValueError("separator must be a single character")


def _lines(text: str) -> list[str]:
    return _LINE.findall(text)


def _measure(text: str, separator: str, skip_header: bool) -> tuple[int, int]:
    m = n = 0
    first_row = True
    for line in _lines(text):
        count = line.count(separator)
        if first_row:
            n += count
        if line.endswith("\n") and count > 0:
            if not first_row and count != n:
                raise CsvError(
                    f"Number of columns in row {m} is different from the first row"
                )
            m += 1
            first_row = False
    if n > 0:
        n += 1
    if skip_header and m > 0:
        m -= 1
    return m, n


def _to_float(token: str, line_no: int) -> float:
    stripped = token.lstrip(_SPACE)
    match = _NUMBER.match(stripped)
    if match is None:
        value, rest = 0.0, token
    else:
        value, rest = float(match.group()), stripped[match.end():]
    if rest and rest[0] not in _SPACE:
        raise CsvError(f"Failed to parse '{token}' in line {line_no} as double")
    return value


def csv_size(
    stream: IO[AnyStr], separator: str = ";", skip_header: bool = False
) -> tuple[int, int]:
    """Return ``(rows, columns)`` of the table in ``stream``.

    Columns are counted from the first line holding a separator; lines
    without a separator, and a final line without a newline, are not rows.
    """
    _check_separator(separator)
    return _measure(_read_text(stream), separator, skip_header)


def parse_csv(
    stream: IO[AnyStr], separator: str = ";", skip_header: bool = False
) -> Dataset:
    """Parse the numeric table in ``stream`` into a :class:`Dataset`."""
    _check_separator(separator)
    text = _read_text(stream)
    m, n = _measure(text, separator, skip_header)
    if m == 0 or n == 0:
        return Dataset(n)

    lines = _lines(text)
    start = 1
    if skip_header:
        lines = lines[1:]
        start = 2
    values = [
        _to_float(token, line_no)
        for line_no, line in enumerate(lines, start=start)
        for token in line.split(separator)
        if token
    ]
    if len(values) < m * n:
        raise CsvError(
            f"Expected {m * n} values for {m} rows of {n} columns, found {len(values)}"
        )
    rows = [list(row) for row in itertools.islice(zip(*[iter(values)] * n), m)]
    return Dataset(n, rows)