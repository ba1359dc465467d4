"""Cohort ranking and draft value metric calculation."""

from .cohorts import CohortRanks, cohort_key, group_cohorts, index_cohorts
from .enrich import (
    METRIC_DESCRIPTIONS,
    enrich_draft_entries,
    enrich_entry,
    get_metric_descriptions,
    percentile_from_rank,
)

__all__ = [
    "CohortRanks",
    "METRIC_DESCRIPTIONS",
    "cohort_key",
    "enrich_draft_entries",
    "enrich_entry",
    "get_metric_descriptions",
    "group_cohorts",
    "index_cohorts",
    "percentile_from_rank",
]
