"""Column contracts for the two input tables."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class Delimiter(str, Enum):
    """Field separator used when reading a delimited table."""

    AUTO = "auto"
    TAB = "tab"
    COMMA = "comma"
    WHITESPACE = "whitespace"

    @property
    def pattern(self) -> str:
        """Separator passed to ``pandas.read_csv``."""

        if self is Delimiter.TAB:
            return "\t"
        if self is Delimiter.COMMA:
            return ","
        if self is Delimiter.WHITESPACE:
            return r"\s+"
        raise ValueError("AUTO must be resolved against a file before reading")


@dataclass(frozen=True)
class TableSchema:
    """Declared column names for one input table.

    ``numeric_pattern`` selects the coordinate columns of the primary table;
    they are parsed as floats and kept in file order.
    """

    key_column: str = "Population"
    id_column: str | None = None
    color_column: str | None = None
    symbol_column: str | None = None
    numeric_pattern: str | None = None
    min_numeric_columns: int = 0

    def declared_columns(self) -> tuple[str, ...]:
        """Text columns that must be present in the header."""

        columns = [self.key_column]
        for column in (self.id_column, self.color_column, self.symbol_column):
            if column:
                columns.append(column)
        return tuple(columns)

    def numeric_columns(self, header: list[str]) -> list[str]:
        """Return header columns matched by ``numeric_pattern``, in file order."""

        if not self.numeric_pattern:
            return []
        matcher = re.compile(self.numeric_pattern)
        return [column for column in header if matcher.fullmatch(column)]


PRIMARY_SCHEMA = TableSchema(
    key_column="Population",
    id_column="Individual",
    numeric_pattern=r"PC\d+",
    min_numeric_columns=4,
)

STYLE_SCHEMA = TableSchema(
    key_column="Population",
    color_column="colorNr",
    symbol_column="symbolNr",
)

# Placeholders read as "no value" in numeric cells; text cells keep them verbatim.
MISSING_TOKENS: frozenset[str] = frozenset({"", "na", "nan", "none", "null"})
