"""Loader for the PCA coordinate table."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ancestryplot.config import PRIMARY_SCHEMA, Delimiter, MISSING_TOKENS, TableSchema
from ancestryplot.errors import ParseError
from ancestryplot.loaders.base import TableLoader
from ancestryplot.loaders.common import DelimitedTableMixin, line_number, read_text_frame
from ancestryplot.models import Observation


class ObservationLoader(DelimitedTableMixin, TableLoader):
    """Read ``Individual``, ``PC1..PCn`` and ``Population`` rows.

    Columns outside the schema are carried in ``Observation.extra``; a column
    whose every non-empty value is numeric is stored as floats.
    """

    name = "pca_observations"

    def __init__(
        self,
        *,
        path: str | Path,
        schema: TableSchema = PRIMARY_SCHEMA,
        delimiter: str | Delimiter = Delimiter.AUTO,
    ) -> None:
        if schema.id_column is None:
            raise ValueError("Observation schema must declare an id column")
        self.path = Path(path)
        self.schema = schema
        self.delimiter = delimiter

    def read(self) -> list[Observation]:
        frame = read_text_frame(self.path, self.delimiter)
        self._require_columns(frame, self.schema.declared_columns())

        header = list(frame.columns)
        components = self.schema.numeric_columns(header)
        if len(components) < self.schema.min_numeric_columns:
            raise ParseError(
                f"expected at least {self.schema.min_numeric_columns} component columns "
                f"matching '{self.schema.numeric_pattern}', found {len(components)}",
                path=self.path,
                row=1,
            )

        declared = set(self.schema.declared_columns()) | set(components)
        extra_columns = [column for column in header if column not in declared]
        numeric_extra = self._infer_extra_columns(frame, extra_columns)

        observations: list[Observation] = []
        for index, row in frame.iterrows():
            line = line_number(index)
            individual = self._require_text(
                row[self.schema.id_column], row=line, column=self.schema.id_column
            )
            population = self._require_text(
                row[self.schema.key_column], row=line, column=self.schema.key_column
            )
            coordinates = {
                column: self._parse_float(row[column], row=line, column=column)
                for column in components
            }
            extra: dict[str, Any] = {}
            for column in extra_columns:
                value = row[column]
                if numeric_extra[column]:
                    extra[column] = self._to_float(value)
                else:
                    extra[column] = None if value.lower() in MISSING_TOKENS else value

            observations.append(
                Observation(
                    individual=individual,
                    population=population,
                    components=coordinates,
                    extra=extra,
                )
            )

        return observations
