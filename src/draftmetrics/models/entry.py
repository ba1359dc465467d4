"""Canonical draft entry models shared across ingestion, metrics and summaries."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


Position = Literal["QB", "RB", "WR", "TE", "K", "DST"]
HitTier = Literal["excluded", "unranked", "win", "loss", "neutral"]

# Bookkeeping fields that would otherwise shadow the source record's own keys.
_BOOKKEEPING_FIELDS = {"source", "source_index", "year", "overall_pick"}


class NormalizedEntry(BaseModel):
    """Single draft pick with resolved fields, before any cohort metrics."""

    source_index: int = Field(..., ge=0)
    year: Optional[int] = None
    overall_pick: Optional[float] = None
    position: Position = Field(..., alias="normalizedPosition")
    is_defense_or_kicker: bool
    manager: str = Field(..., alias="managerValue")
    player: str = Field(..., alias="playerValue")
    finish_rank: Optional[int] = Field(default=None, ge=1)
    auction_price: Optional[float] = Field(default=None, ge=0.0)
    source: Dict[Any, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class EnrichedEntry(NormalizedEntry):
    """Normalized entry plus positional rank, percentile and value metrics."""

    pos_draft_order: Optional[int] = None
    pos_draft_count: Optional[int] = None
    pos_price_order: Optional[int] = None
    pos_price_count: Optional[int] = None
    is_rank_eligible: bool = False
    imputed_finish_rank: Optional[int] = None
    effective_finish_rank: Optional[int] = None
    capped_finish_rank: Optional[int] = None
    pos_rank_delta: Optional[int] = None
    capped_pos_rank_delta: Optional[int] = None
    price_vs_finish_delta: Optional[int] = None
    value_ratio: Optional[float] = None
    capped_value_ratio: Optional[float] = None
    draft_percentile_within_pos: Optional[float] = None
    finish_percentile_within_pos: Optional[float] = None
    percentile_delta: Optional[float] = None
    beat_cost: bool = False
    met_cost: bool = False
    missed_cost: bool = False
    hit_tier: HitTier = "unranked"

    def as_record(self) -> Dict[Any, Any]:
        """Return a new flat dict: source fields overlaid with derived camelCase fields."""

        derived = self.model_dump(by_alias=True, exclude=_BOOKKEEPING_FIELDS)
        return {**self.source, **derived}
