"""Streaming CSV reading with quote-aware row splitting."""

from __future__ import annotations

import os
from collections.abc import Iterator
from types import TracebackType

_BLOCK_SIZE = 40 * 1024 * 1024

DEFAULT_DELIMITER = ","
DEFAULT_QUOTE = '"'
DEFAULT_ESCAPE = "\\"


def _check_char(name: str, value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def split_columns(
    row: str,
    delimiter: str = DEFAULT_DELIMITER,
    quote: str = DEFAULT_QUOTE,
    escape: str = DEFAULT_ESCAPE,
) -> Iterator[str]:
    """Yield the columns of one CSV row.

    A column starting with the quote character runs to the next lone quote;
    doubled quotes stand for one quote, and the escape character is dropped
    in front of the character it precedes. Anything between a closing quote
    and the next delimiter is skipped. A delimiter at the very end of the row
    does not open an empty trailing column.
    """
    for name, value in (("delimiter", delimiter), ("quote", quote), ("escape", escape)):
        _check_char(name, value)

    length = len(row)
    pos = 0
    while True:
        begin = pos
        p = pos
        out: list[str] = []
        quoted = p < length and row[p] == quote
        if quoted:
            p += 1

        while p < length:
            doubled = False
            if row[p] == escape and p + 1 < length:
                p += 1
            if row[p] == quote and p + 1 < length and row[p + 1] == quote:
                doubled = True
                p += 1
            if quoted and not doubled:
                if row[p] == quote:
                    break
            elif row[p] == delimiter:
                break
            out.append(row[p])
            p += 1

        if p >= length:
            if p == begin:
                return
            yield "".join(out)
            pos = p
            continue

        yield "".join(out)
        if quoted:
            next_delim = row.find(delimiter, p + 1)
            pos = length if next_delim < 0 else next_delim + 1
        else:
            pos = p + 1


class CsvReader:
    """Reads a CSV file row by row; newlines inside quotes stay in the row."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        delimiter: str = DEFAULT_DELIMITER,
        quote: str = DEFAULT_QUOTE,
        escape: str = DEFAULT_ESCAPE,
    ) -> None:
        for name, value in (("delimiter", delimiter), ("quote", quote), ("escape", escape)):
            _check_char(name, value)
        self.delimiter = delimiter
        self.quote = quote
        self.escape = escape
        self._file = open(
            path, "r", encoding="utf-8", errors="surrogateescape", newline=""
        )

    def rows(self) -> Iterator[str]:
        """Yield raw rows without their LF or CR LF terminator."""
        quote = self.quote
        pending: list[str] = []
        quotes = 0
        while chunk := self._file.read(_BLOCK_SIZE):
            start = 0
            while True:
                newline = chunk.find("\n", start)
                if newline < 0:
                    quotes += chunk.count(quote, start)
                    pending.append(chunk[start:])
                    break
                quotes += chunk.count(quote, start, newline)
                if quotes % 2:
                    pending.append(chunk[start : newline + 1])
                    start = newline + 1
                    continue
                pending.append(chunk[start:newline])
                line = "".join(pending)
                pending.clear()
                quotes = 0
                start = newline + 1
                if line.endswith("\r"):
                    line = line[:-1]
                yield line
        rest = "".join(pending)
        if rest:
            yield rest

    def close(self) -> None:
        """Release the underlying file."""
        self._file.close()

    def __iter__(self) -> Iterator[str]:
        return self.rows()

    def __enter__(self) -> CsvReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def read_csv(
    path: str | os.PathLike[str],
    delimiter: str = DEFAULT_DELIMITER,
    quote: str = DEFAULT_QUOTE,
    escape: str = DEFAULT_ESCAPE,
) -> Iterator[list[str]]:
    """Yield every row of a CSV file as a list of columns."""
    with CsvReader(path, delimiter, quote, escape) as reader:
        for row in reader:
            yield list(split_columns(row, delimiter, quote, escape))