"""Layered scatter/label rendering with matplotlib."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from ancestryplot.lookup import AestheticLookup
from ancestryplot.models import JoinedRecord
from ancestryplot.ordering import sort_by_rank
from ancestryplot.palette import ShapeStyle, legend_colors, marker_colors, resolve_color, resolve_shape
from ancestryplot.profiles import ChartProfile
from ancestryplot.transforms import partition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSummary:
    """What ended up on the chart."""

    output_path: Path
    background_records: int
    foreground_records: int
    legend_entries: tuple[str, ...]


class ChartRenderer:
    """Draw background populations as faded labels and highlighted ones as points.

    Records are drawn in rank order (descending by default, so the first-seen
    populations end up on top) and a single legend lists the point layer with
    both color and shape per population.
    """

    def render(
        self,
        records: Sequence[JoinedRecord],
        *,
        colors: AestheticLookup,
        shapes: AestheticLookup,
        profile: ChartProfile,
        output_path: str | Path,
    ) -> RenderSummary:
        self._check_components(records, profile)

        ordered = sort_by_rank(records, descending=profile.descending)
        background, foreground = partition(ordered, set(profile.highlight))

        label_colors = {
            population: resolve_color(colors.require(population))
            for population in dict.fromkeys(record.population for record in background)
        }
        point_styles: dict[str, tuple[str, ShapeStyle]] = {
            population: (
                resolve_color(colors.require(population)),
                resolve_shape(shapes.require(population)),
            )
            for population in dict.fromkeys(record.population for record in foreground)
        }

        figure = Figure(figsize=(profile.width, profile.height))
        FigureCanvasAgg(figure)
        axes = figure.add_subplot()

        if background:
            for record in background:
                axes.text(
                    record.components[profile.x],
                    record.components[profile.y],
                    record.population,
                    color=label_colors[record.population],
                    alpha=profile.label_alpha,
                    fontsize=profile.label_size,
                    ha="center",
                    va="center",
                    zorder=1,
                )
            # Text artists do not update data limits on their own.
            axes.update_datalim(
                [(record.components[profile.x], record.components[profile.y]) for record in background]
            )

        for layer, (population, group) in enumerate(
            itertools.groupby(foreground, key=lambda record: record.population)
        ):
            members = list(group)
            color, shape = point_styles[population]
            axes.scatter(
                [record.components[profile.x] for record in members],
                [record.components[profile.y] for record in members],
                marker=shape.marker,
                s=profile.point_size,
                linewidths=profile.edge_width,
                zorder=2 + layer,
                **marker_colors(shape, color),
            )

        axes.autoscale_view()
        axes.set_xlabel(profile.axis_label(profile.x))
        axes.set_ylabel(profile.axis_label(profile.y))
        if profile.title:
            axes.set_title(profile.title)
        if profile.equal_aspect:
            axes.set_aspect("equal", adjustable="datalim")

        legend_entries = tuple(
            sorted(point_styles, key=lambda population: self._rank_of(foreground, population))
        )
        if legend_entries:
            handles = [
                Line2D(
                    [],
                    [],
                    linestyle="none",
                    marker=point_styles[population][1].marker,
                    markersize=8,
                    markeredgewidth=profile.edge_width,
                    label=population,
                    **legend_colors(point_styles[population][1], point_styles[population][0]),
                )
                for population in legend_entries
            ]
            axes.legend(
                handles=handles,
                title=profile.legend_title,
                loc="center left",
                bbox_to_anchor=(1.02, 0.5),
                frameon=False,
            )

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        figure.savefig(path, dpi=profile.dpi, bbox_inches="tight")
        logger.info(
            "Rendered %s: %d labels, %d points, %d legend entries",
            path,
            len(background),
            len(foreground),
            len(legend_entries),
        )

        return RenderSummary(
            output_path=path,
            background_records=len(background),
            foreground_records=len(foreground),
            legend_entries=legend_entries,
        )

    @staticmethod
    def _check_components(records: Sequence[JoinedRecord], profile: ChartProfile) -> None:
        for record in records:
            for component in (profile.x, profile.y):
                if component not in record.components:
                    raise KeyError(
                        f"Record for '{record.individual}' has no component '{component}'"
                    )

    @staticmethod
    def _rank_of(records: Sequence[JoinedRecord], population: str) -> int:
        return next(record.rank for record in records if record.population == population)
