"""Input adapters that normalize raw draft history rows."""

from .fields import (
    MISSING,
    UNKNOWN_MANAGER,
    UNKNOWN_PLAYER,
    first_present,
    normalize_position,
    parse_auction_price,
    parse_finish_rank,
    resolve_manager,
    resolve_player,
    to_finite_number,
)
from .normalize import normalize_entries, normalize_entry

__all__ = [
    "MISSING",
    "UNKNOWN_MANAGER",
    "UNKNOWN_PLAYER",
    "first_present",
    "normalize_entries",
    "normalize_entry",
    "normalize_position",
    "parse_auction_price",
    "parse_finish_rank",
    "resolve_manager",
    "resolve_player",
    "to_finite_number",
]
