#!/usr/bin/env python3
"""List bundled chart profiles and their descriptions."""
from __future__ import annotations
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from ancestryplot import ChartProfileLoader  # noqa: E402


def main() -> int:
    loader = ChartProfileLoader()
    for name in loader.list_profiles():
        profile = loader.load(name)
        print(f"{profile.name}\t{profile.description}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
