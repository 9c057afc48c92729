import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from ancestryplot import (  # noqa: E402
    AestheticLookup,
    ChartProfile,
    ChartRenderer,
    CategoryStyle,
    MissingAestheticError,
    Observation,
    assign_order,
    build_lookup,
    left_join,
)


def _ranked():
    left = [
        Observation(individual="l1", population="Loschbour", components={"PC1": 0.04, "PC2": 0.02}),
        Observation(individual="f1", population="French", components={"PC1": 0.03, "PC2": 0.01}),
        Observation(individual="f2", population="French", components={"PC1": 0.035, "PC2": 0.012}),
        Observation(individual="y1", population="Yoruba", components={"PC1": -0.04, "PC2": -0.02}),
    ]
    right = [
        CategoryStyle(population="Loschbour", color="2", symbol=17),
        CategoryStyle(population="French", color="#4477AA", symbol=16),
        CategoryStyle(population="Yoruba", color="grey40", symbol=1),
    ]
    _, ranked = assign_order(left_join(left, right))
    return ranked


def test_renderer_writes_layered_chart(tmp_path: Path) -> None:
    records = _ranked()
    output = tmp_path / "charts" / "pca.png"

    summary = ChartRenderer().render(
        records,
        colors=build_lookup(records, "population", "color"),
        shapes=build_lookup(records, "population", "symbol"),
        profile=ChartProfile(highlight=("Loschbour", "Yoruba"), dpi=50, title="Test"),
        output_path=output,
    )

    assert output.exists()
    assert output.stat().st_size > 0
    assert summary.background_records == 2
    assert summary.foreground_records == 2
    assert summary.legend_entries == ("Loschbour", "Yoruba")


def test_renderer_draws_all_points_without_highlight(tmp_path: Path) -> None:
    records = _ranked()

    summary = ChartRenderer().render(
        records,
        colors=build_lookup(records, "population", "color"),
        shapes=build_lookup(records, "population", "symbol"),
        profile=ChartProfile(dpi=50, equal_aspect=True),
        output_path=tmp_path / "pca.svg",
    )

    assert summary.background_records == 0
    assert summary.legend_entries == ("Loschbour", "French", "Yoruba")
    assert (tmp_path / "pca.svg").read_text().lstrip().startswith("<?xml")


def test_missing_color_is_reported_at_render_time(tmp_path: Path) -> None:
    records = _ranked()
    colors = AestheticLookup([("Loschbour", "red"), ("French", "blue")], aesthetic="color")

    with pytest.raises(MissingAestheticError) as excinfo:
        ChartRenderer().render(
            records,
            colors=colors,
            shapes=build_lookup(records, "population", "symbol"),
            profile=ChartProfile(dpi=50),
            output_path=tmp_path / "pca.png",
        )

    assert excinfo.value.key == "Yoruba"
    assert not (tmp_path / "pca.png").exists()


def test_unknown_axis_component_is_rejected(tmp_path: Path) -> None:
    records = _ranked()

    with pytest.raises(KeyError):
        ChartRenderer().render(
            records,
            colors=build_lookup(records, "population", "color"),
            shapes=build_lookup(records, "population", "symbol"),
            profile=ChartProfile(x="PC7", dpi=50),
            output_path=tmp_path / "pca.png",
        )
