"""Left outer join of observations onto population styles."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from ancestryplot.models import CategoryStyle, JoinedRecord, Observation


def left_join(
    left: Sequence[Observation],
    right: Sequence[CategoryStyle],
    key: str = "population",
) -> list[JoinedRecord]:
    """Pair every observation with each style row sharing its key.

    Left order is kept. A key matched by k style rows yields k records for
    that observation, in style-table order; an unmatched observation yields a
    single record without a style.
    """

    by_key: dict[Any, list[CategoryStyle]] = defaultdict(list)
    for style in right:
        by_key[style.get(key)].append(style)

    joined: list[JoinedRecord] = []
    for observation in left:
        matches = by_key.get(observation.get(key))
        if not matches:
            joined.append(JoinedRecord(observation=observation))
            continue
        joined.extend(JoinedRecord(observation=observation, style=style) for style in matches)

    return joined
