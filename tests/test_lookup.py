import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from ancestryplot import (  # noqa: E402
    AestheticLookup,
    CategoryStyle,
    MissingAestheticError,
    Observation,
    build_lookup,
    left_join,
)


def _joined():
    left = [
        Observation(individual="a", population="X"),
        Observation(individual="b", population="Y"),
        Observation(individual="c", population="Z"),
    ]
    right = [
        CategoryStyle(population="X", color="red", symbol=16),
        CategoryStyle(population="X", color="blue", symbol=17),
        CategoryStyle(population="Y", color="green", symbol=15),
    ]
    return left_join(left, right)


def test_last_occurrence_wins() -> None:
    colors = build_lookup(_joined(), "population", "color")
    shapes = build_lookup(_joined(), "population", "symbol")

    assert dict(colors) == {"X": "blue", "Y": "green"}
    assert dict(shapes) == {"X": 17, "Y": 15}


def test_overwrite_keeps_first_insertion_position() -> None:
    lookup = AestheticLookup([("X", 1), ("Y", 2), ("X", 3)])

    assert list(lookup) == ["X", "Y"]
    assert lookup["X"] == 3


def test_build_lookup_is_idempotent() -> None:
    records = _joined()

    assert build_lookup(records, "population", "color") == build_lookup(
        records, "population", "color"
    )


def test_unmatched_rows_do_not_create_entries() -> None:
    colors = build_lookup(_joined(), "population", "color")

    assert "Z" not in colors
    assert len(colors) == 2


def test_require_raises_missing_aesthetic() -> None:
    colors = build_lookup(_joined(), "population", "color")

    assert colors.require("Y") == "green"
    with pytest.raises(MissingAestheticError) as excinfo:
        colors.require("Z")

    assert excinfo.value.key == "Z"
    assert excinfo.value.aesthetic == "color"
    assert isinstance(excinfo.value, LookupError)
