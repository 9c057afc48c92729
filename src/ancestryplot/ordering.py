"""First-seen ordering of a categorical column."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ancestryplot.models import JoinedRecord


@dataclass(frozen=True)
class CategoryOrder:
    """Explicit value -> rank table; ranks run ``0..n-1``.

    ``ranks`` is a read-only view over a private copy of the table.
    """

    ranks: Mapping[Any, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))

    @classmethod
    def from_values(cls, values: Iterable[Any], leading: Sequence[Any] = ()) -> "CategoryOrder":
        """Rank ``leading`` first, then every other value by first appearance."""

        ranks: dict[Any, int] = {}
        for value in (*leading, *values):
            if value not in ranks:
                ranks[value] = len(ranks)
        return cls(ranks=ranks)

    @property
    def categories(self) -> tuple[Any, ...]:
        return tuple(self.ranks)

    def rank(self, value: Any) -> int:
        try:
            return self.ranks[value]
        except KeyError:
            raise KeyError(f"Unknown category '{value}'") from None

    def __contains__(self, value: object) -> bool:
        return value in self.ranks

    def __iter__(self) -> Iterator[Any]:
        return iter(self.ranks)

    def __len__(self) -> int:
        return len(self.ranks)


def assign_order(
    records: Sequence[JoinedRecord],
    key: str = "population",
    leading: Sequence[Any] = (),
) -> tuple[CategoryOrder, list[JoinedRecord]]:
    """Rank ``key`` values in first-seen order and tag every record with its rank.

    ``leading`` values, when given, take ranks ``0..len(leading)-1`` even if
    they appear later in the table or not at all.
    """

    order = CategoryOrder.from_values((record.get(key) for record in records), leading=leading)
    tagged = [record.with_rank(order.rank(record.get(key))) for record in records]
    return order, tagged


def sort_by_rank(records: Sequence[JoinedRecord], descending: bool = False) -> list[JoinedRecord]:
    """Stable sort on rank; records within one category keep their relative order."""

    for record in records:
        if record.rank is None:
            raise ValueError(f"Record for '{record.individual}' has no rank; call assign_order first")

    if descending:
        return sorted(records, key=lambda record: -record.rank)
    return sorted(records, key=lambda record: record.rank)
