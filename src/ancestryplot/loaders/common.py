"""Shared utilities for delimited table loaders."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pandas as pd

from ancestryplot.config import MISSING_TOKENS, Delimiter
from ancestryplot.errors import ParseError


def resolve_delimiter(delimiter: str | Delimiter, path: str | Path) -> Delimiter:
    """Resolve ``auto`` by sniffing the header line of ``path``."""

    resolved = Delimiter(delimiter)
    if resolved is not Delimiter.AUTO:
        return resolved
    return _sniff_delimiter(read_header_line(path))


def read_header_line(path: str | Path) -> str:
    """Return the first line of ``path``; a blank first line means no header."""

    try:
        with Path(path).open("r", encoding="utf-8") as stream:
            header = stream.readline()
    except UnicodeDecodeError as exc:
        raise ParseError("not valid UTF-8 text", path=path) from exc

    if not header.strip():
        raise ParseError("missing header row", path=path)
    return header


def _sniff_delimiter(header: str) -> Delimiter:
    if "\t" in header:
        return Delimiter.TAB
    if "," in header:
        return Delimiter.COMMA
    return Delimiter.WHITESPACE


def read_text_frame(path: str | Path, delimiter: str | Delimiter = Delimiter.AUTO) -> pd.DataFrame:
    """Read a delimited file with every cell kept as stripped text.

    Blank lines are kept while reading and dropped afterwards so that the
    frame index maps onto file line numbers (``index + 2``).
    """

    table_path = Path(os.path.expandvars(os.path.expanduser(str(path))))
    if not table_path.is_file():
        raise ParseError("file not found", path=table_path)

    header = read_header_line(table_path)
    separator = Delimiter(delimiter)
    if separator is Delimiter.AUTO:
        separator = _sniff_delimiter(header)

    try:
        frame = pd.read_csv(
            table_path,
            encoding="utf-8",
            sep=separator.pattern,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            engine="python" if separator is Delimiter.WHITESPACE else "c",
        )
    except pd.errors.EmptyDataError as exc:
        raise ParseError("missing header row", path=table_path) from exc
    except pd.errors.ParserError as exc:
        raise ParseError(f"malformed table ({exc})", path=table_path) from exc
    except UnicodeDecodeError as exc:
        raise ParseError("not valid UTF-8 text", path=table_path) from exc

    frame.columns = [str(column).strip() for column in frame.columns]
    frame = frame.fillna("")
    for column in frame.columns:
        frame[column] = frame[column].str.strip()

    blank = (frame == "").all(axis=1)
    return frame.loc[~blank]


def line_number(index: Any) -> int:
    """File line number of a data row; the header is line 1."""

    return int(index) + 2


class DelimitedTableMixin:
    """Cell conversions that report the offending file position."""

    path: Path

    def _require_columns(self, frame: pd.DataFrame, columns: tuple[str, ...]) -> None:
        header = list(frame.columns)
        for column in columns:
            if column not in header:
                raise ParseError(
                    f"header is missing column (found: {', '.join(header)})",
                    path=self.path,
                    row=1,
                    column=column,
                )

    def _require_text(self, value: str, *, row: int, column: str) -> str:
        if not value:
            raise ParseError("empty value", path=self.path, row=row, column=column)
        return value

    def _parse_float(self, value: str, *, row: int, column: str) -> float:
        if value.lower() in MISSING_TOKENS:
            raise ParseError("empty numeric value", path=self.path, row=row, column=column)
        try:
            return float(value)
        except ValueError:
            raise ParseError(
                f"expected a number, got '{value}'",
                path=self.path,
                row=row,
                column=column,
            ) from None

    @staticmethod
    def _to_float(value: str) -> float | None:
        if value.lower() in MISSING_TOKENS:
            return None
        try:
            return float(value)
        except ValueError:
            return None

    @staticmethod
    def _to_symbol(value: str) -> int | str:
        """R ``pch`` codes become ints; any other token is kept as text."""

        try:
            number = float(value)
        except ValueError:
            return value
        if number.is_integer():
            return int(number)
        return value

    def _infer_extra_columns(self, frame: pd.DataFrame, columns: list[str]) -> dict[str, bool]:
        """Map each extra column to True when all its values are numeric."""

        numeric: dict[str, bool] = {}
        for column in columns:
            values = [value for value in frame[column] if value.lower() not in MISSING_TOKENS]
            numeric[column] = bool(values) and all(
                self._to_float(value) is not None for value in values
            )
        return numeric
