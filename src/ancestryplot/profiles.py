"""Chart profiles: named, schema-validated render settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from jsonschema.validators import validator_for

from ancestryplot.errors import ProfileError


_REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_PROFILES_DIR = _REPO_ROOT / "config" / "charts"
DEFAULT_SCHEMA_PATH = _REPO_ROOT / "schemas" / "chart_profile.schema.json"

_TUPLE_FIELDS = ("flip", "highlight", "leading")


@dataclass(frozen=True)
class ChartProfile:
    """Which components to plot and how the two layers look."""

    name: str = "default"
    description: str = ""
    x: str = "PC1"
    y: str = "PC2"
    flip: tuple[str, ...] = ()
    highlight: tuple[str, ...] = ()
    leading: tuple[str, ...] = ()
    descending: bool = True
    title: str | None = None
    width: float = 8.0
    height: float = 6.0
    dpi: int = 150
    point_size: float = 60.0
    edge_width: float = 1.0
    label_alpha: float = 0.4
    label_size: float = 7.0
    equal_aspect: bool = False
    legend_title: str = "Population"
    strict_keys: bool = False

    def with_overrides(self, **changes: Any) -> "ChartProfile":
        """Return a copy with ``changes`` applied; None values are ignored."""

        cleaned = {key: value for key, value in changes.items() if value is not None}
        for key in _TUPLE_FIELDS:
            if key in cleaned:
                cleaned[key] = tuple(dict.fromkeys(cleaned[key]))
        return replace(self, **cleaned)

    def axis_label(self, component: str) -> str:
        return f"-{component}" if component in self.flip else component


class ChartProfileLoader:
    """Load chart profile JSON from ``config/charts`` or a custom path."""

    def __init__(
        self,
        profiles_dir: str | Path | None = None,
        schema_path: str | Path | None = None,
    ) -> None:
        self.profiles_dir = Path(profiles_dir) if profiles_dir is not None else DEFAULT_PROFILES_DIR
        self.schema_path = Path(schema_path) if schema_path is not None else DEFAULT_SCHEMA_PATH
        self._validator = None

    def list_profiles(self) -> list[str]:
        """Return available profile names from the configured directory."""

        return sorted(path.stem for path in self.profiles_dir.glob("*.json"))

    def load(self, name_or_path: str | Path) -> ChartProfile:
        """Load a profile by name (for example, ``pc1_pc2``) or explicit path."""

        path = self._resolve_path(name_or_path)
        try:
            payload = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ProfileError(f"{path}: invalid JSON ({exc})") from exc

        self._validate(payload, path)
        return self._parse(payload)

    def _resolve_path(self, name_or_path: str | Path) -> Path:
        requested = Path(name_or_path)

        if requested.exists():
            return requested

        candidate = self.profiles_dir / f"{requested}.json"
        if candidate.exists():
            return candidate

        raise FileNotFoundError(
            f"Chart profile not found: {name_or_path}. Available: {', '.join(self.list_profiles())}"
        )

    def _get_validator(self):
        if self._validator is None:
            schema = json.loads(self.schema_path.read_text())
            Validator = validator_for(schema)
            Validator.check_schema(schema)
            self._validator = Validator(schema)
        return self._validator

    def _validate(self, payload: Any, path: Path) -> None:
        errors = sorted(
            self._get_validator().iter_errors(payload),
            key=lambda err: [str(part) for part in err.path],
        )
        if not errors:
            return

        details = "; ".join(
            f"/{'/'.join(str(part) for part in err.path)}: {err.message}" for err in errors
        )
        raise ProfileError(f"{path}: {details}")

    def _parse(self, payload: dict[str, Any]) -> ChartProfile:
        return ChartProfile().with_overrides(**payload)
