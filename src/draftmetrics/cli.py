"""Command-line interface for enriching draft history JSON files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from draftmetrics.config import MetricConfig
from draftmetrics.config_loader import MetricProfile
from draftmetrics.metrics import enrich_draft_entries
from draftmetrics.summary import (
    GroupSummary,
    summarize_by_manager,
    summarize_by_position,
    summarize_by_year,
    summarize_by_year_and_manager,
)


logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "draft-history-enriched.json"

_SUMMARY_COLUMNS: tuple[tuple[str, str], ...] = (
    ("total_picks", "picks"),
    ("eligible_picks", "eligible"),
    ("excluded_picks", "excluded"),
    ("unranked_picks", "unranked"),
    ("beat_cost_rate", "beat%"),
    ("met_or_beat_cost_rate", "met+beat%"),
    ("avg_pos_rank_delta", "avg_delta"),
    ("median_pos_rank_delta", "med_delta"),
    ("avg_capped_pos_rank_delta", "avg_cap_delta"),
    ("avg_percentile_delta", "avg_pct_delta"),
    ("avg_capped_value_ratio", "avg_cap_ratio"),
)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Enrich draft history with positional value metrics")
    parser.add_argument("input", type=Path, help="Path to draft history JSON (array of objects)")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"Enriched JSON path (default: {DEFAULT_OUTPUT_NAME} beside the input)",
    )
    parser.add_argument("--profile", type=Path, default=None, help="Load metric config JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save metric config JSON")
    parser.add_argument(
        "--finish-pool-strategy",
        choices=("draftCount", "cap"),
        default=None,
        help="Denominator for finish percentiles and imputed finishes",
    )
    parser.add_argument(
        "--cap",
        action="append",
        default=[],
        help="Position finish cap override (e.g., QB=20 or K=none)",
    )
    parser.add_argument(
        "--summary-limit",
        type=int,
        default=10,
        help="Maximum rows printed per summary table (0 prints none)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log pipeline progress")
    return parser.parse_args(argv)


def _parse_caps(entries: list[str]) -> dict[str, Optional[int]]:
    caps: dict[str, Optional[int]] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid cap entry '{entry}', expected POS=N")
        key, value = entry.split("=", 1)
        value = value.strip()
        if value.lower() in {"none", "null", ""}:
            caps[key.strip().upper()] = None
            continue
        try:
            caps[key.strip().upper()] = int(value)
        except ValueError:
            raise ValueError(f"Cap for '{key.strip()}' is not an integer: '{value}'") from None
    return caps


def _build_config(args: argparse.Namespace) -> MetricConfig:
    profile = MetricProfile.load(args.profile) if args.profile else MetricProfile()
    profile.position_caps = profile.position_caps | _parse_caps(args.cap)
    if args.finish_pool_strategy:
        profile.finish_pool_strategy = args.finish_pool_strategy
    config = profile.to_config()
    if args.save_profile:
        MetricProfile.from_config(config).save(args.save_profile)
        print(f"Saved metric profile to {args.save_profile}")
    return config


def load_source_entries(path: Path) -> list[dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ValueError(f"{path} must contain a JSON array of objects")
    return data


def _format_cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def format_summary_table(summaries: Sequence[GroupSummary], key_label: str) -> str:
    """Render summaries as an aligned plain-text table."""

    header = [key_label, *(label for _, label in _SUMMARY_COLUMNS)]
    rows = [
        [summary.key, *(_format_cell(getattr(summary, name)) for name, _ in _SUMMARY_COLUMNS)]
        for summary in summaries
    ]
    widths = [max(len(row[idx]) for row in [header, *rows]) for idx in range(len(header))]
    lines = ["  ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)).rstrip() for row in [header, *rows]]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def _print_summaries(enriched, limit: int) -> None:
    if limit <= 0:
        return
    print("\n=== Summary by Year ===")
    print(format_summary_table(summarize_by_year(enriched)[:limit], "year"))
    print("\n=== Summary by Manager ===")
    print(format_summary_table(summarize_by_manager(enriched)[:limit], "manager"))
    print("\n=== Summary by Position ===")
    print(format_summary_table(summarize_by_position(enriched), "position"))
    print("\n=== Summary by Year and Manager ===")
    for block in summarize_by_year_and_manager(enriched)[:limit]:
        print(f"Year: {block.year}")
        print(format_summary_table(block.managers[:limit], "manager"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
        source_entries = load_source_entries(args.input)
    except (OSError, ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError subclass.
        print(f"Failed to enrich draft history: {exc}", file=sys.stderr)
        return 1

    enriched = enrich_draft_entries(source_entries, config)
    output_path = args.output or args.input.with_name(DEFAULT_OUTPUT_NAME)
    payload = [entry.as_record() for entry in enriched]
    try:
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except OSError as exc:
        print(f"Failed to write {output_path}: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {len(payload)} enriched entries to {output_path}")
    logger.info("Metric config: %s", config.model_dump(by_alias=True))

    _print_summaries(enriched, args.summary_limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
