"""Category -> aesthetic lookups built from the joined table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ancestryplot.errors import MissingAestheticError
from ancestryplot.models import JoinedRecord


class AestheticLookup(Mapping[Any, Any]):
    """Ordered, read-only mapping from category to one display value.

    Built by sequential insertion: a repeated key overwrites the earlier value
    but keeps the position of its first insertion.
    """

    def __init__(self, items: Iterable[tuple[Any, Any]] = (), *, aesthetic: str = "value") -> None:
        self.aesthetic = aesthetic
        self._values: dict[Any, Any] = {}
        for key, value in items:
            self._values[key] = value

    def __getitem__(self, key: Any) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AestheticLookup({self._values!r}, aesthetic={self.aesthetic!r})"

    def require(self, key: Any) -> Any:
        """Return the value for ``key`` or raise ``MissingAestheticError``."""

        if key not in self._values:
            raise MissingAestheticError(key, self.aesthetic)
        return self._values[key]


def build_lookup(
    records: Iterable[JoinedRecord],
    key_field: str,
    value_field: str,
) -> AestheticLookup:
    """Map each ``key_field`` value to the last non-null ``value_field`` seen.

    Records without a style (unmatched in the join) carry None and are skipped,
    so a category only lacks an entry if the style table never listed it.
    """

    items = (
        (record.get(key_field), record.get(value_field))
        for record in records
        if record.get(value_field) is not None
    )
    return AestheticLookup(items, aesthetic=value_field)
