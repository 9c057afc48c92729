"""Resolve color and shape tokens from the style table into matplotlib values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from matplotlib.colors import is_color_like
from matplotlib.markers import MarkerStyle

from ancestryplot.errors import AestheticError

# R >= 4.0 default palette(); integer color tokens index into it, cycling.
R_PALETTE: tuple[str, ...] = (
    "black",
    "#DF536B",
    "#61D04F",
    "#2297E6",
    "#28E2E5",
    "#CD0BBC",
    "#F5C710",
    "0.62",
)

_GREY_RE = re.compile(r"^gr[ae]y(\d{1,3})$", re.IGNORECASE)


class ShapeKind(str, Enum):
    """How a marker uses the category color."""

    OPEN = "open"
    FILLED = "filled"
    BORDERED = "bordered"
    LINE = "line"


@dataclass(frozen=True)
class ShapeStyle:
    marker: Any
    kind: ShapeKind = ShapeKind.FILLED


ASTERISK = (6, 2, 0)

# R pch codes. 7 and 9-14 are composite glyphs in R; the nearest single
# matplotlib marker is used.
PCH_SHAPES: dict[int, ShapeStyle] = {
    0: ShapeStyle("s", ShapeKind.OPEN),
    1: ShapeStyle("o", ShapeKind.OPEN),
    2: ShapeStyle("^", ShapeKind.OPEN),
    3: ShapeStyle("+", ShapeKind.LINE),
    4: ShapeStyle("x", ShapeKind.LINE),
    5: ShapeStyle("D", ShapeKind.OPEN),
    6: ShapeStyle("v", ShapeKind.OPEN),
    7: ShapeStyle("X", ShapeKind.OPEN),
    8: ShapeStyle(ASTERISK, ShapeKind.LINE),
    9: ShapeStyle("P", ShapeKind.OPEN),
    10: ShapeStyle("o", ShapeKind.OPEN),
    11: ShapeStyle("*", ShapeKind.OPEN),
    12: ShapeStyle("s", ShapeKind.OPEN),
    13: ShapeStyle("8", ShapeKind.OPEN),
    14: ShapeStyle("p", ShapeKind.OPEN),
    15: ShapeStyle("s", ShapeKind.FILLED),
    16: ShapeStyle("o", ShapeKind.FILLED),
    17: ShapeStyle("^", ShapeKind.FILLED),
    18: ShapeStyle("d", ShapeKind.FILLED),
    19: ShapeStyle("o", ShapeKind.FILLED),
    20: ShapeStyle(".", ShapeKind.FILLED),
    21: ShapeStyle("o", ShapeKind.BORDERED),
    22: ShapeStyle("s", ShapeKind.BORDERED),
    23: ShapeStyle("D", ShapeKind.BORDERED),
    24: ShapeStyle("^", ShapeKind.BORDERED),
    25: ShapeStyle("v", ShapeKind.BORDERED),
}


def resolve_color(token: Any) -> str:
    """Turn a ``colorNr`` token into a matplotlib color spec."""

    text = str(token).strip()

    if text.isdigit():
        index = int(text)
        if index == 0:
            return "white"
        return R_PALETTE[(index - 1) % len(R_PALETTE)]

    grey = _GREY_RE.match(text)
    if grey:
        level = int(grey.group(1))
        if level > 100:
            raise AestheticError(f"Invalid grey level in color token '{text}'")
        return str(level / 100)

    if not is_color_like(text):
        raise AestheticError(f"Unrecognized color token '{text}'")
    return text


def resolve_shape(token: Any) -> ShapeStyle:
    """Turn a ``symbolNr`` token (R pch code or marker string) into a ShapeStyle."""

    if isinstance(token, bool):
        raise AestheticError(f"Unrecognized shape token '{token}'")

    if isinstance(token, int):
        try:
            return PCH_SHAPES[token]
        except KeyError:
            raise AestheticError(f"Shape code {token} is outside the supported range 0-25") from None

    try:
        MarkerStyle(token)
    except ValueError:
        raise AestheticError(f"Unrecognized shape token '{token}'") from None
    return ShapeStyle(token, ShapeKind.FILLED)


def marker_colors(shape: ShapeStyle, color: str) -> dict[str, Any]:
    """Face and edge colors for ``Axes.scatter`` keyed the way it expects."""

    if shape.kind is ShapeKind.OPEN:
        return {"facecolors": "none", "edgecolors": color}
    if shape.kind is ShapeKind.BORDERED:
        return {"facecolors": color, "edgecolors": "black"}
    if shape.kind is ShapeKind.LINE:
        return {"c": [color]}
    return {"facecolors": color, "edgecolors": color}


def legend_colors(shape: ShapeStyle, color: str) -> dict[str, Any]:
    """Face and edge colors for a ``Line2D`` legend handle."""

    if shape.kind is ShapeKind.OPEN:
        return {"markerfacecolor": "none", "markeredgecolor": color}
    if shape.kind is ShapeKind.BORDERED:
        return {"markerfacecolor": color, "markeredgecolor": "black"}
    return {"markerfacecolor": color, "markeredgecolor": color}
