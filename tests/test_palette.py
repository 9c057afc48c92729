import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from ancestryplot import AestheticError  # noqa: E402
from ancestryplot.palette import (  # noqa: E402
    ShapeKind,
    marker_colors,
    resolve_color,
    resolve_shape,
)


def test_integer_color_tokens_index_the_r_palette() -> None:
    assert resolve_color("1") == "black"
    assert resolve_color("2") == "#DF536B"
    assert resolve_color("9") == "black"


def test_grey_tokens_become_grayscale_levels() -> None:
    assert resolve_color("grey62") == "0.62"
    assert resolve_color("gray100") == "1.0"


def test_named_and_hex_colors_pass_through() -> None:
    assert resolve_color("darkorange") == "darkorange"
    assert resolve_color("#4477AA") == "#4477AA"


def test_unknown_color_is_rejected() -> None:
    with pytest.raises(AestheticError):
        resolve_color("not-a-colour")


def test_pch_codes_map_to_markers() -> None:
    assert resolve_shape(16).marker == "o"
    assert resolve_shape(16).kind is ShapeKind.FILLED
    assert resolve_shape(1).kind is ShapeKind.OPEN
    assert resolve_shape(24).kind is ShapeKind.BORDERED
    assert resolve_shape(4).kind is ShapeKind.LINE


def test_marker_strings_pass_through() -> None:
    assert resolve_shape("^").marker == "^"


def test_unknown_shapes_are_rejected() -> None:
    with pytest.raises(AestheticError):
        resolve_shape(26)
    with pytest.raises(AestheticError):
        resolve_shape("not-a-marker")


def test_open_markers_have_no_face() -> None:
    assert marker_colors(resolve_shape(1), "red") == {"facecolors": "none", "edgecolors": "red"}
    assert marker_colors(resolve_shape(21), "red") == {"facecolors": "red", "edgecolors": "black"}
