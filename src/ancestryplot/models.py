"""Immutable in-memory records flowing through the plotting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class Observation:
    """One individual from the PCA table.

    ``components`` keeps the principal component columns in file order, so
    ``list(observation.components)`` is ``["PC1", "PC2", ...]``.
    """

    individual: str
    population: str
    components: Mapping[str, float] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    def get(self, field_name: str) -> Any:
        """Resolve a named field, component, or extra column."""

        if field_name in ("individual", "population"):
            return getattr(self, field_name)
        if field_name in self.components:
            return self.components[field_name]
        if field_name in self.extra:
            return self.extra[field_name]
        raise KeyError(f"Observation has no field '{field_name}'")


@dataclass(frozen=True)
class CategoryStyle:
    """Display color and shape declared for one population."""

    population: str
    color: str
    symbol: int | str

    def get(self, field_name: str) -> Any:
        if field_name in ("population", "color", "symbol"):
            return getattr(self, field_name)
        raise KeyError(f"CategoryStyle has no field '{field_name}'")


@dataclass(frozen=True)
class JoinedRecord:
    """An observation paired with one matching style row, or with none.

    ``rank`` is unset until the population order has been assigned.
    """

    observation: Observation
    style: CategoryStyle | None = None
    rank: int | None = None

    @property
    def individual(self) -> str:
        return self.observation.individual

    @property
    def population(self) -> str:
        return self.observation.population

    @property
    def color(self) -> str | None:
        return self.style.color if self.style is not None else None

    @property
    def symbol(self) -> int | str | None:
        return self.style.symbol if self.style is not None else None

    @property
    def components(self) -> Mapping[str, float]:
        return self.observation.components

    def get(self, field_name: str) -> Any:
        """Resolve a field on the joined row; style fields are None when unmatched."""

        if field_name == "rank":
            return self.rank
        if field_name in ("color", "symbol"):
            return getattr(self, field_name)
        return self.observation.get(field_name)

    def with_rank(self, rank: int) -> "JoinedRecord":
        return replace(self, rank=rank)

    def with_components(self, components: Mapping[str, float]) -> "JoinedRecord":
        return replace(self, observation=replace(self.observation, components=dict(components)))

    def to_row(self) -> dict[str, Any]:
        """Flatten into a plain dict, e.g. for ``pandas.DataFrame``."""

        row: dict[str, Any] = {
            "individual": self.individual,
            "population": self.population,
        }
        row.update(self.observation.components)
        row.update(self.observation.extra)
        row["color"] = self.color
        row["symbol"] = self.symbol
        row["rank"] = self.rank
        return row
