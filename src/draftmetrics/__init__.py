"""Draft value metrics for fantasy football draft history."""

from draftmetrics.config import DEFAULT_POSITION_CAPS, MetricConfig, default_metric_config
from draftmetrics.metrics import enrich_draft_entries, get_metric_descriptions
from draftmetrics.models import EnrichedEntry, NormalizedEntry
from draftmetrics.summary import (
    GroupSummary,
    YearManagerSummary,
    summarize_by_manager,
    summarize_by_position,
    summarize_by_year,
    summarize_by_year_and_manager,
)

__all__ = [
    "DEFAULT_POSITION_CAPS",
    "EnrichedEntry",
    "GroupSummary",
    "MetricConfig",
    "NormalizedEntry",
    "YearManagerSummary",
    "default_metric_config",
    "enrich_draft_entries",
    "get_metric_descriptions",
    "summarize_by_manager",
    "summarize_by_position",
    "summarize_by_year",
    "summarize_by_year_and_manager",
]
