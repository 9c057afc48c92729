"""Record-level transforms applied between ordering and rendering."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from ancestryplot.models import JoinedRecord


def flip_sign(records: Sequence[JoinedRecord], component: str) -> list[JoinedRecord]:
    """Negate one principal component on every record.

    PCA axes have arbitrary sign, so flipping only changes orientation.
    Applying the same flip twice returns the original values.
    """

    flipped: list[JoinedRecord] = []
    for record in records:
        if component not in record.components:
            raise KeyError(f"Record for '{record.individual}' has no component '{component}'")
        components = dict(record.components)
        components[component] = -components[component]
        flipped.append(record.with_components(components))
    return flipped


def partition(
    records: Sequence[JoinedRecord],
    highlight: Collection[str],
) -> tuple[list[JoinedRecord], list[JoinedRecord]]:
    """Split into (background, foreground) by population membership in ``highlight``.

    With an empty ``highlight`` every record is foreground.
    """

    if not highlight:
        return [], list(records)

    background = [record for record in records if record.population not in highlight]
    foreground = [record for record in records if record.population in highlight]
    return background, foreground
