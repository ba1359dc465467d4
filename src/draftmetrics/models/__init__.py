"""Record types for draft entries."""

from .entry import EnrichedEntry, HitTier, NormalizedEntry, Position

__all__ = [
    "EnrichedEntry",
    "HitTier",
    "NormalizedEntry",
    "Position",
]
