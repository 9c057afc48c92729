"""Loader for the per-population color and shape table."""

from __future__ import annotations

from pathlib import Path

from ancestryplot.config import STYLE_SCHEMA, Delimiter, TableSchema
from ancestryplot.loaders.base import TableLoader
from ancestryplot.loaders.common import DelimitedTableMixin, line_number, read_text_frame
from ancestryplot.models import CategoryStyle


class CategoryStyleLoader(DelimitedTableMixin, TableLoader):
    """Read ``Population``, ``colorNr`` and ``symbolNr`` rows.

    Duplicate populations are kept as separate rows; the join fans them out.
    """

    name = "population_styles"

    def __init__(
        self,
        *,
        path: str | Path,
        schema: TableSchema = STYLE_SCHEMA,
        delimiter: str | Delimiter = Delimiter.AUTO,
    ) -> None:
        if schema.color_column is None or schema.symbol_column is None:
            raise ValueError("Style schema must declare color and symbol columns")
        self.path = Path(path)
        self.schema = schema
        self.delimiter = delimiter

    def read(self) -> list[CategoryStyle]:
        frame = read_text_frame(self.path, self.delimiter)
        self._require_columns(frame, self.schema.declared_columns())

        styles: list[CategoryStyle] = []
        for index, row in frame.iterrows():
            line = line_number(index)
            styles.append(
                CategoryStyle(
                    population=self._require_text(
                        row[self.schema.key_column], row=line, column=self.schema.key_column
                    ),
                    color=self._require_text(
                        row[self.schema.color_column], row=line, column=self.schema.color_column
                    ),
                    symbol=self._to_symbol(
                        self._require_text(
                            row[self.schema.symbol_column],
                            row=line,
                            column=self.schema.symbol_column,
                        )
                    ),
                )
            )

        return styles
