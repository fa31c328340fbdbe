"""Command-line interface for rating video-analysis payloads."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from pitchrate.config_loader import MappingProfile
from pitchrate.ingest import AnalysisUnavailableError, load_payload_json, payload_to_metrics
from pitchrate.models import AnalysisMetrics
from pitchrate.rating import rating_breakdown


logger = logging.getLogger(__name__)

CSV_HEADER = [
    "source",
    "speed",
    "stamina",
    "dribbling",
    "passing",
    "shooting",
    "distance_covered",
    "overall_accuracy",
    "rating",
]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute overall ratings from analysis JSON files")
    parser.add_argument("payloads", type=Path, nargs="+", help="Analysis response JSON files")
    parser.add_argument(
        "--stats-column",
        action="append",
        default=[],
        help="Mapping for stats keys (e.g., passing=pass_pct)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load stats mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save stats mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV output path")
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print per-attribute contributions for each payload",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _csv_row(source: Path, metrics: AnalysisMetrics, rating: int) -> list[object]:
    return [
        str(source),
        metrics.speed,
        metrics.stamina,
        metrics.dribbling,
        metrics.passing,
        metrics.shooting,
        "" if metrics.distance_covered is None else metrics.distance_covered,
        metrics.overall_accuracy,
        rating,
    ]


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    stats_mapping = _parse_mapping(args.stats_column)
    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        stats_mapping = profile.stats_mapping | stats_mapping
    if args.save_profile:
        MappingProfile(stats_mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    rows: list[list[object]] = []
    failures = 0
    for path in args.payloads:
        try:
            payload = load_payload_json(path, mapping=stats_mapping or None)
            metrics = payload_to_metrics(payload)
            breakdown = rating_breakdown(metrics.to_performance_metrics())
        except (OSError, json.JSONDecodeError, AnalysisUnavailableError, ValidationError) as exc:
            failures += 1
            print(f"{path}: {exc}", file=sys.stderr)
            continue

        print(f"{path}: overall rating {breakdown.rating}")
        if args.breakdown:
            for component in breakdown.components:
                raw = "-" if component.raw is None else f"{component.raw:.2f}"
                print(
                    f"  {component.name:<16} raw={raw:>9} "
                    f"normalized={component.normalized:.3f} contribution={component.contribution:.4f}"
                )
        rows.append(_csv_row(path, metrics, breakdown.rating))

    if args.output:
        with args.output.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            writer.writerows(rows)
        print(f"Wrote {len(rows)} ratings to {args.output}")

    if failures:
        logger.warning("%d payload(s) could not be rated", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
