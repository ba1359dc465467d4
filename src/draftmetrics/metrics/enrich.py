"""Draft value enrichment: percentiles, rank deltas and value ratios per pick.

Several views of "value" are reported side by side:

* rank deltas and ratios are intuitive but raw ratios are skewed by long bust
  tails;
* percentiles are comparable across positions and years;
* capped finish ranks stop a single catastrophic miss from dominating group
  averages.

Picks with no recorded finish at a rank-eligible position are imputed as the
last place in their finish pool. Kickers and team defenses are excluded from
every rank based metric.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from draftmetrics.config import MetricConfig, resolve_config
from draftmetrics.ingest import normalize_entries
from draftmetrics.models import EnrichedEntry, HitTier, NormalizedEntry

from .cohorts import CohortRanks, index_cohorts


logger = logging.getLogger(__name__)

METRIC_DESCRIPTIONS: Mapping[str, str] = {
    "valueRatio": (
        "Value Ratio = positional draft order ÷ end-of-year positional finish (higher is better)."
    ),
    "percentileDelta": (
        "Percentile Delta = finish percentile - draft percentile; "
        "positive means better-than-cost outcomes."
    ),
}


def get_metric_descriptions() -> dict[str, str]:
    """Display strings for the headline metrics, keyed by output field name."""

    return dict(METRIC_DESCRIPTIONS)


def percentile_from_rank(rank: Optional[int], pool_size: Optional[int]) -> Optional[float]:
    """Map a 1-based rank onto a percentile where rank 1 is 1.0 and last place is 0.0.

    Ranks past the end of the pool go below 0.0.
    """

    if rank is None or pool_size is None or pool_size <= 0:
        return None
    if pool_size == 1:
        return 1.0
    return (pool_size - rank) / (pool_size - 1)


def _hit_tier(entry: NormalizedEntry, eligible: bool, beat: bool, missed: bool) -> HitTier:
    if entry.is_defense_or_kicker:
        return "excluded"
    if not eligible:
        return "unranked"
    if beat:
        return "win"
    if missed:
        return "loss"
    return "neutral"


def enrich_entry(entry: NormalizedEntry, ranks: CohortRanks, config: MetricConfig) -> EnrichedEntry:
    draft_order = ranks.draft_order
    draft_count = ranks.draft_count
    price_order = ranks.price_order
    cap = config.cap_for(entry.position)

    if config.finish_pool_strategy == "cap" and cap is not None:
        pool_size = cap
    else:
        pool_size = draft_count

    imputed = None
    if not entry.is_defense_or_kicker and entry.finish_rank is None and pool_size is not None:
        imputed = pool_size
    effective = entry.finish_rank if entry.finish_rank is not None else imputed
    capped = min(effective, cap) if effective is not None and cap is not None else None
    eligible = not entry.is_defense_or_kicker and effective is not None

    draft_pct = None if entry.is_defense_or_kicker else percentile_from_rank(draft_order, draft_count)
    finish_pct = percentile_from_rank(effective, pool_size) if eligible else None
    pct_delta = finish_pct - draft_pct if finish_pct is not None and draft_pct is not None else None

    metrics: dict[str, Any] = {
        "pos_draft_order": draft_order,
        "pos_draft_count": draft_count,
        "pos_price_order": price_order,
        "pos_price_count": ranks.price_count,
        "is_rank_eligible": eligible,
        "imputed_finish_rank": imputed,
        "effective_finish_rank": effective,
        "capped_finish_rank": capped,
        "draft_percentile_within_pos": draft_pct,
        "finish_percentile_within_pos": finish_pct,
        "percentile_delta": pct_delta,
    }

    beat = met = missed = False
    if eligible:
        beat = effective < draft_order
        met = effective == draft_order
        missed = effective > draft_order
        metrics["pos_rank_delta"] = draft_order - effective
        metrics["value_ratio"] = draft_order / effective
        if capped is not None:
            metrics["capped_pos_rank_delta"] = draft_order - capped
            metrics["capped_value_ratio"] = draft_order / capped
        if price_order is not None:
            metrics["price_vs_finish_delta"] = price_order - effective

    return EnrichedEntry(
        **dict(entry),
        **metrics,
        beat_cost=beat,
        met_cost=met,
        missed_cost=missed,
        hit_tier=_hit_tier(entry, eligible, beat, missed),
    )


def enrich_draft_entries(
    source_entries: Iterable[Mapping[str, Any]],
    config: Union[MetricConfig, Mapping[str, Any], None] = None,
) -> List[EnrichedEntry]:
    """Run normalization, cohort indexing and metric calculation in one pass.

    Returns one ``EnrichedEntry`` per input row in input order. Source rows are
    copied, never mutated, and repeated calls with the same input give equal
    results.
    """

    cfg = resolve_config(config)
    normalized = normalize_entries(source_entries)
    cohort_ranks = index_cohorts(normalized)
    enriched = [enrich_entry(entry, cohort_ranks[entry.source_index], cfg) for entry in normalized]
    logger.info(
        "Enriched %d draft entries across %d cohorts (finish pool: %s)",
        len(enriched),
        len({ranks.cohort_key for ranks in cohort_ranks.values()}),
        cfg.finish_pool_strategy,
    )
    return enriched


__all__ = [
    "METRIC_DESCRIPTIONS",
    "enrich_draft_entries",
    "enrich_entry",
    "get_metric_descriptions",
    "percentile_from_rank",
]
