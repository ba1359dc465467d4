"""Convert raw draft history rows into canonical ``NormalizedEntry`` records."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from draftmetrics.models import NormalizedEntry

from .fields import (
    DEFENSE_OR_KICKER,
    parse_auction_price,
    parse_finish_rank,
    parse_overall_pick,
    parse_year,
    resolve_manager,
    resolve_player,
    resolve_position,
)


logger = logging.getLogger(__name__)


def normalize_entry(row: Mapping[str, Any], source_index: int) -> NormalizedEntry:
    position = resolve_position(row)
    return NormalizedEntry(
        source_index=source_index,
        year=parse_year(row),
        overall_pick=parse_overall_pick(row),
        position=position,
        is_defense_or_kicker=position in DEFENSE_OR_KICKER,
        manager=resolve_manager(row),
        player=resolve_player(row),
        finish_rank=parse_finish_rank(row),
        auction_price=parse_auction_price(row),
        source=dict(row),
    )


def normalize_entries(source_entries: Iterable[Mapping[str, Any]]) -> List[NormalizedEntry]:
    """Normalize every row, keeping input order and recording each row's index.

    Rows are copied, never mutated. Malformed fields degrade to ``None`` or
    their documented fallback instead of raising.
    """

    entries = [normalize_entry(row, index) for index, row in enumerate(source_entries)]
    logger.debug("Normalized %d draft entries", len(entries))
    return entries
