"""Error kinds raised by the ancestryplot pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class AncestryPlotError(Exception):
    """Base class for all pipeline errors."""


class ParseError(AncestryPlotError, ValueError):
    """A delimited input file is missing, malformed, or lacks a column."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        row: int | None = None,
        column: str | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.row = row
        self.column = column

        context = []
        if self.path is not None:
            context.append(str(self.path))
        if row is not None:
            context.append(f"line {row}")
        if column is not None:
            context.append(f"column '{column}'")

        if context:
            message = f"{', '.join(context)}: {message}"
        super().__init__(message)


class JoinKeyMismatchError(AncestryPlotError, ValueError):
    """The two tables disagree on the set of join key values."""

    def __init__(self, missing: tuple[str, ...], unused: tuple[str, ...]) -> None:
        self.missing = missing
        self.unused = unused

        parts = []
        if missing:
            parts.append(f"no style row for: {', '.join(missing)}")
        if unused:
            parts.append(f"style rows never used: {', '.join(unused)}")
        super().__init__("Join key mismatch; " + "; ".join(parts))


class AestheticError(AncestryPlotError, ValueError):
    """A color or shape token cannot be turned into a drawable value."""


class MissingAestheticError(AestheticError, LookupError):
    """A category being drawn has no entry in the supplied lookup."""

    def __init__(self, key: Any, aesthetic: str) -> None:
        self.key = key
        self.aesthetic = aesthetic
        super().__init__(f"No {aesthetic} defined for category '{key}'")


class ProfileError(AncestryPlotError, ValueError):
    """A chart profile document does not satisfy the profile schema."""
