#!/usr/bin/env python3
"""Render an ancestry PCA chart from a coordinate table and a style table."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ancestryplot import (  # noqa: E402
    AncestryPlotError,
    AncestryPlotPipeline,
    CategoryStyleLoader,
    ChartProfile,
    ChartProfileLoader,
    Delimiter,
    ObservationLoader,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot precomputed PCA coordinates by population")
    parser.add_argument("--pca", required=True, help="Table with Individual, PC1..PCn, Population")
    parser.add_argument("--populations", required=True, help="Table with Population, colorNr, symbolNr")
    parser.add_argument("--output", required=True, help="Image path; format follows the extension")
    parser.add_argument("--profile", default=None, help="Chart profile name or JSON path")
    parser.add_argument("--profiles-dir", default=None, help="Directory holding chart profiles")
    parser.add_argument("--x", default=None, help="Component on the x axis, e.g. PC1")
    parser.add_argument("--y", default=None, help="Component on the y axis, e.g. PC2")
    parser.add_argument("--flip", nargs="+", default=None, help="Components to sign-flip")
    parser.add_argument("--highlight", nargs="+", default=None, help="Populations drawn as points")
    parser.add_argument("--title", default=None)
    parser.add_argument(
        "--delimiter",
        choices=[item.value for item in Delimiter],
        default=Delimiter.AUTO.value,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args()


def resolve_profile(args: argparse.Namespace) -> ChartProfile:
    if args.profile:
        profile = ChartProfileLoader(profiles_dir=args.profiles_dir).load(args.profile)
    else:
        profile = ChartProfile()

    return profile.with_overrides(
        x=args.x,
        y=args.y,
        flip=args.flip,
        highlight=args.highlight,
        title=args.title,
    )


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger("ancestryplot.plot_pca")

    try:
        profile = resolve_profile(args)
        pipeline = AncestryPlotPipeline(
            observation_loader=ObservationLoader(path=args.pca, delimiter=args.delimiter),
            style_loader=CategoryStyleLoader(path=args.populations, delimiter=args.delimiter),
        )
        report = pipeline.run(profile, args.output)
    except (AncestryPlotError, FileNotFoundError, KeyError) as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(report.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
