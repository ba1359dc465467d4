"""Per (year, position) cohort rankings by draft slot and auction price."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from draftmetrics.models import NormalizedEntry


UNKNOWN_YEAR_KEY = "unknown"


@dataclass(frozen=True)
class CohortRanks:
    """Cohort-scoped ranks for one entry; price fields are ``None`` when unpriced."""

    cohort_key: tuple[str, str]
    draft_order: int
    draft_count: int
    price_order: Optional[int] = None
    price_count: Optional[int] = None


def cohort_key(entry: NormalizedEntry) -> tuple[str, str]:
    year = str(entry.year) if entry.year is not None else UNKNOWN_YEAR_KEY
    return year, entry.position


def _draft_sort_key(entry: NormalizedEntry) -> tuple[bool, float, int]:
    # Entries without an overall pick sort after every drafted slot.
    missing = entry.overall_pick is None
    return missing, 0.0 if missing else entry.overall_pick, entry.source_index


def _price_sort_key(entry: NormalizedEntry) -> tuple[float, int]:
    return -entry.auction_price, entry.source_index


def group_cohorts(
    entries: Iterable[NormalizedEntry],
) -> Mapping[tuple[str, str], tuple[NormalizedEntry, ...]]:
    """Partition entries by cohort key, keeping input order within each cohort."""

    grouped: dict[tuple[str, str], list[NormalizedEntry]] = defaultdict(list)
    for entry in entries:
        grouped[cohort_key(entry)].append(entry)
    return MappingProxyType({key: tuple(members) for key, members in grouped.items()})


def _ordering(members: Sequence[NormalizedEntry], key) -> dict[int, tuple[int, int]]:
    ordered = sorted(members, key=key)
    count = len(ordered)
    return {entry.source_index: (rank, count) for rank, entry in enumerate(ordered, start=1)}


def index_cohorts(entries: Sequence[NormalizedEntry]) -> Mapping[int, CohortRanks]:
    """Rank every entry within its cohort, keyed by ``source_index``.

    Draft order is ascending overall pick; price order is descending auction
    price over priced entries only. Both break ties on ``source_index`` so the
    result depends only on input order.
    """

    ranks: dict[int, CohortRanks] = {}
    for key, members in group_cohorts(entries).items():
        draft = _ordering(members, _draft_sort_key)
        price = _ordering(
            [entry for entry in members if entry.auction_price is not None],
            _price_sort_key,
        )
        for entry in members:
            draft_order, draft_count = draft[entry.source_index]
            price_order, price_count = price.get(entry.source_index, (None, None))
            ranks[entry.source_index] = CohortRanks(
                cohort_key=key,
                draft_order=draft_order,
                draft_count=draft_count,
                price_order=price_order,
                price_count=price_count,
            )
    return MappingProxyType(ranks)


__all__ = [
    "CohortRanks",
    "UNKNOWN_YEAR_KEY",
    "cohort_key",
    "group_cohorts",
    "index_cohorts",
]
