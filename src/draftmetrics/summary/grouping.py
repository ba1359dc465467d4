"""Group enriched draft entries and summarize hit rates and value metrics."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from statistics import fmean, median
from typing import Callable, Iterable, Optional, Sequence

from draftmetrics.models import EnrichedEntry


UNKNOWN_YEAR = "Unknown Year"

_DIGITS = re.compile(r"(\d+)")


@dataclass(frozen=True)
class GroupSummary:
    """Aggregate stats for the picks sharing one grouping key."""

    key: str
    total_picks: int
    eligible_picks: int
    excluded_picks: int
    unranked_picks: int
    beat_cost_rate: float | None
    met_or_beat_cost_rate: float | None
    avg_pos_rank_delta: float | None
    median_pos_rank_delta: float | None
    avg_capped_pos_rank_delta: float | None
    avg_percentile_delta: float | None
    avg_capped_value_ratio: float | None


@dataclass(frozen=True)
class YearManagerSummary:
    """Manager summaries nested under one draft year."""

    year: str
    managers: list[GroupSummary]


def natural_sort_key(value: str) -> tuple:
    """Case-insensitive ordering that compares digit runs numerically ("2" < "10")."""

    parts = _DIGITS.split(value)
    return (
        tuple(int(part) if index % 2 else part.casefold() for index, part in enumerate(parts)),
        value,
    )


def year_key(entry: EnrichedEntry) -> str:
    return str(entry.year) if entry.year is not None else UNKNOWN_YEAR


def manager_key(entry: EnrichedEntry) -> str:
    return entry.manager


def position_key(entry: EnrichedEntry) -> str:
    return entry.position


def _mean(values: Sequence[float]) -> Optional[float]:
    return fmean(values) if values else None


def _present(values: Iterable[Optional[float]]) -> list[float]:
    return [value for value in values if value is not None]


def summarize_group(key: str, entries: Sequence[EnrichedEntry]) -> GroupSummary:
    eligible = [entry for entry in entries if entry.is_rank_eligible]
    eligible_count = len(eligible)
    excluded_count = sum(1 for entry in entries if entry.is_defense_or_kicker)
    unranked_count = sum(
        1 for entry in entries if not entry.is_defense_or_kicker and not entry.is_rank_eligible
    )
    beat = sum(1 for entry in eligible if entry.beat_cost)
    met = sum(1 for entry in eligible if entry.met_cost)

    deltas = _present(entry.pos_rank_delta for entry in eligible)
    capped_deltas = _present(entry.capped_pos_rank_delta for entry in eligible)
    percentile_deltas = _present(entry.percentile_delta for entry in eligible)
    capped_ratios = _present(entry.capped_value_ratio for entry in eligible)

    return GroupSummary(
        key=key,
        total_picks=len(entries),
        eligible_picks=eligible_count,
        excluded_picks=excluded_count,
        unranked_picks=unranked_count,
        beat_cost_rate=beat / eligible_count if eligible_count else None,
        met_or_beat_cost_rate=(beat + met) / eligible_count if eligible_count else None,
        avg_pos_rank_delta=_mean(deltas),
        median_pos_rank_delta=median(deltas) if deltas else None,
        avg_capped_pos_rank_delta=_mean(capped_deltas),
        avg_percentile_delta=_mean(percentile_deltas),
        avg_capped_value_ratio=_mean(capped_ratios),
    )


def _group(
    entries: Iterable[EnrichedEntry],
    key_fn: Callable[[EnrichedEntry], str],
) -> dict[str, list[EnrichedEntry]]:
    grouped: dict[str, list[EnrichedEntry]] = defaultdict(list)
    for entry in entries:
        grouped[str(key_fn(entry))].append(entry)
    return grouped


def group_and_summarize(
    entries: Iterable[EnrichedEntry],
    key_fn: Callable[[EnrichedEntry], str],
) -> list[GroupSummary]:
    """Summarize each group produced by ``key_fn``, ordered by natural key order."""

    grouped = _group(entries, key_fn)
    return [
        summarize_group(key, grouped[key]) for key in sorted(grouped, key=natural_sort_key)
    ]


def summarize_by_year(entries: Iterable[EnrichedEntry]) -> list[GroupSummary]:
    return group_and_summarize(entries, year_key)


def summarize_by_manager(entries: Iterable[EnrichedEntry]) -> list[GroupSummary]:
    return group_and_summarize(entries, manager_key)


def summarize_by_position(entries: Iterable[EnrichedEntry]) -> list[GroupSummary]:
    return group_and_summarize(entries, position_key)


def summarize_by_year_and_manager(entries: Iterable[EnrichedEntry]) -> list[YearManagerSummary]:
    by_year = _group(entries, year_key)
    return [
        YearManagerSummary(year=year, managers=summarize_by_manager(by_year[year]))
        for year in sorted(by_year, key=natural_sort_key)
    ]


__all__ = [
    "GroupSummary",
    "UNKNOWN_YEAR",
    "YearManagerSummary",
    "group_and_summarize",
    "natural_sort_key",
    "summarize_by_manager",
    "summarize_by_position",
    "summarize_by_year",
    "summarize_by_year_and_manager",
    "summarize_group",
]
