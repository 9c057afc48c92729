"""Load -> join -> order -> lookup -> render orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ancestryplot.join import left_join
from ancestryplot.loaders.base import TableLoader
from ancestryplot.lookup import AestheticLookup, build_lookup
from ancestryplot.models import JoinedRecord
from ancestryplot.ordering import CategoryOrder, assign_order
from ancestryplot.profiles import ChartProfile
from ancestryplot.quality import KeyCoverage, check_join_keys
from ancestryplot.render import ChartRenderer
from ancestryplot.transforms import flip_sign

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedTable:
    """Joined, ranked records and their lookups; reusable across charts."""

    records: tuple[JoinedRecord, ...]
    order: CategoryOrder
    colors: AestheticLookup
    shapes: AestheticLookup
    coverage: KeyCoverage
    observation_count: int
    style_count: int

    @property
    def unmatched_categories(self) -> tuple[str, ...]:
        return self.coverage.missing_styles


@dataclass
class PlotRunReport:
    """Execution summary for one rendered chart."""

    profile: str
    observations: int
    styles: int
    joined_records: int
    categories: int
    background_records: int
    foreground_records: int
    output_path: Path
    unmatched_categories: list[str] = field(default_factory=list)
    unused_styles: list[str] = field(default_factory=list)
    legend_entries: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "profile": self.profile,
            "observations": self.observations,
            "styles": self.styles,
            "joined_records": self.joined_records,
            "categories": self.categories,
            "background_records": self.background_records,
            "foreground_records": self.foreground_records,
            "output_path": str(self.output_path),
            "unmatched_categories": self.unmatched_categories,
            "unused_styles": self.unused_styles,
            "legend_entries": self.legend_entries,
        }


class AncestryPlotPipeline:
    """Run the loaders, join, ordering, lookups and renderer in order."""

    def __init__(
        self,
        *,
        observation_loader: TableLoader,
        style_loader: TableLoader,
        renderer: ChartRenderer | None = None,
        key: str = "population",
    ) -> None:
        self.observation_loader = observation_loader
        self.style_loader = style_loader
        self.renderer = renderer or ChartRenderer()
        self.key = key

    def prepare(self, *, leading: Sequence[str] = (), strict_keys: bool = False) -> PreparedTable:
        observations = self.observation_loader.read()
        styles = self.style_loader.read()
        logger.info("Loaded %d observations and %d style rows", len(observations), len(styles))

        coverage = check_join_keys(observations, styles, key=self.key)
        if strict_keys:
            coverage.raise_for_mismatch()
        if coverage.missing_styles:
            logger.warning("Populations without a style row: %s", ", ".join(coverage.missing_styles))
        if coverage.unused_styles:
            logger.warning("Style rows for absent populations: %s", ", ".join(coverage.unused_styles))

        joined = left_join(observations, styles, key=self.key)
        order, ranked = assign_order(joined, key=self.key, leading=leading)
        logger.info("Joined %d records across %d populations", len(ranked), len(order))

        return PreparedTable(
            records=tuple(ranked),
            order=order,
            colors=build_lookup(ranked, self.key, "color"),
            shapes=build_lookup(ranked, self.key, "symbol"),
            coverage=coverage,
            observation_count=len(observations),
            style_count=len(styles),
        )

    def render(
        self,
        prepared: PreparedTable,
        profile: ChartProfile,
        output_path: str | Path,
    ) -> PlotRunReport:
        records: list[JoinedRecord] = list(prepared.records)
        for component in dict.fromkeys(profile.flip):
            records = flip_sign(records, component)

        summary = self.renderer.render(
            records,
            colors=prepared.colors,
            shapes=prepared.shapes,
            profile=profile,
            output_path=output_path,
        )

        return PlotRunReport(
            profile=profile.name,
            observations=prepared.observation_count,
            styles=prepared.style_count,
            joined_records=len(prepared.records),
            categories=len({record.population for record in prepared.records}),
            background_records=summary.background_records,
            foreground_records=summary.foreground_records,
            output_path=summary.output_path,
            unmatched_categories=list(prepared.coverage.missing_styles),
            unused_styles=list(prepared.coverage.unused_styles),
            legend_entries=list(summary.legend_entries),
        )

    def run(self, profile: ChartProfile, output_path: str | Path) -> PlotRunReport:
        prepared = self.prepare(leading=profile.leading, strict_keys=profile.strict_keys)
        return self.render(prepared, profile, output_path)
