"""Resolve typed values from loosely keyed draft history rows."""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Mapping, Optional, Sequence

from draftmetrics.models import Position


logger = logging.getLogger(__name__)

UNKNOWN_MANAGER = "Unknown Manager"
UNKNOWN_PLAYER = "Unknown Player"

MANAGER_FIELDS: tuple[str, ...] = ("manager", "owner", "teamOwner", "team_owner", "gm")
PLAYER_FIELDS: tuple[str, ...] = ("player", "name")
FINISH_RANK_FIELDS: tuple[str, ...] = ("positionrank", "position rank", "positionRank")
PRICE_FIELDS: tuple[str, ...] = ("price", "auctionPrice", "auction_price", "cost")
POSITION_FIELDS: tuple[str, ...] = ("position",)
YEAR_FIELDS: tuple[str, ...] = ("year",)
OVERALL_FIELDS: tuple[str, ...] = ("overall",)

POSITION_ALIASES: dict[str, Position] = {
    "D/ST": "DST",
    "DST": "DST",
    "DEF": "DST",
    "D": "DST",
    "K": "K",
    "PK": "K",
    "QB": "QB",
    "RB": "RB",
    "WR": "WR",
    "TE": "TE",
}
DEFENSE_OR_KICKER: frozenset[str] = frozenset({"K", "DST"})


class _Missing:
    """Sentinel for a logical field with no candidate key present."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def first_present(row: Mapping[str, Any], candidates: Sequence[str]) -> Any:
    """Return the value of the first candidate key present in ``row``.

    Presence is checked by key, so a present ``None`` or ``""`` wins over a
    later candidate. Returns ``MISSING`` when no candidate key exists.
    """

    for key in candidates:
        if key in row:
            return row[key]
    return MISSING


def _is_blank(value: Any) -> bool:
    return value is None or value is MISSING or (isinstance(value, str) and not value.strip())


def to_finite_number(value: Any) -> Optional[float]:
    """Parse numbers and numeric strings, returning ``None`` unless finite."""

    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        # Digit separators ("1_000") are not numeric input.
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def resolve_manager(row: Mapping[str, Any]) -> str:
    raw = first_present(row, MANAGER_FIELDS)
    return UNKNOWN_MANAGER if _is_blank(raw) else str(raw).strip()


def resolve_player(row: Mapping[str, Any]) -> str:
    raw = first_present(row, PLAYER_FIELDS)
    return UNKNOWN_PLAYER if _is_blank(raw) else str(raw).strip()


def normalize_position(value: Any) -> Position:
    """Map a raw position label onto the closed position set.

    Unrecognised labels, including blanks, are treated as team defense.
    """

    raw = "" if value is None or value is MISSING else str(value).strip().upper()
    position = POSITION_ALIASES.get(raw)
    if position is None:
        logger.debug("Unrecognised position %r; treating as DST", value)
        return "DST"
    return position


def resolve_position(row: Mapping[str, Any]) -> Position:
    return normalize_position(first_present(row, POSITION_FIELDS))


def parse_finish_rank(row: Mapping[str, Any]) -> Optional[int]:
    raw = first_present(row, FINISH_RANK_FIELDS)
    parsed = to_finite_number(raw)
    rank = math.floor(parsed) if parsed is not None else None
    if rank is None or rank <= 0:
        if not _is_blank(raw):
            logger.debug("Ignoring finish rank %r", raw)
        return None
    return rank


def parse_auction_price(row: Mapping[str, Any]) -> Optional[float]:
    parsed = to_finite_number(first_present(row, PRICE_FIELDS))
    if parsed is None or parsed < 0:
        return None
    return parsed


def parse_year(row: Mapping[str, Any]) -> Optional[int]:
    parsed = to_finite_number(first_present(row, YEAR_FIELDS))
    return math.floor(parsed) if parsed is not None else None


def parse_overall_pick(row: Mapping[str, Any]) -> Optional[float]:
    return to_finite_number(first_present(row, OVERALL_FIELDS))


__all__ = [
    "DEFENSE_OR_KICKER",
    "MISSING",
    "UNKNOWN_MANAGER",
    "UNKNOWN_PLAYER",
    "first_present",
    "normalize_position",
    "parse_auction_price",
    "parse_finish_rank",
    "parse_overall_pick",
    "parse_year",
    "resolve_manager",
    "resolve_player",
    "resolve_position",
    "to_finite_number",
]
