"""Join-key coverage checks between the PCA and style tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ancestryplot.errors import JoinKeyMismatchError
from ancestryplot.models import CategoryStyle, Observation


@dataclass(frozen=True)
class KeyCoverage:
    """Categories present on only one side of the join."""

    missing_styles: tuple[str, ...] = ()
    unused_styles: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.missing_styles and not self.unused_styles

    def raise_for_mismatch(self) -> None:
        if not self.is_complete:
            raise JoinKeyMismatchError(self.missing_styles, self.unused_styles)


def check_join_keys(
    observations: Sequence[Observation],
    styles: Sequence[CategoryStyle],
    key: str = "population",
) -> KeyCoverage:
    """Compare key sets; both result tuples are in first-seen order."""

    left_keys = list(dict.fromkeys(observation.get(key) for observation in observations))
    right_keys = list(dict.fromkeys(style.get(key) for style in styles))
    right_set = set(right_keys)
    left_set = set(left_keys)

    return KeyCoverage(
        missing_styles=tuple(value for value in left_keys if value not in right_set),
        unused_styles=tuple(value for value in right_keys if value not in left_set),
    )
