"""Grouped summaries over enriched draft entries."""

from .grouping import (
    GroupSummary,
    YearManagerSummary,
    group_and_summarize,
    summarize_by_manager,
    summarize_by_position,
    summarize_by_year,
    summarize_by_year_and_manager,
)

__all__ = [
    "GroupSummary",
    "YearManagerSummary",
    "group_and_summarize",
    "summarize_by_manager",
    "summarize_by_position",
    "summarize_by_year",
    "summarize_by_year_and_manager",
]
