import pytest
from pydantic import ValidationError

from draftmetrics.models import NormalizedEntry


def test_normalized_entry_is_frozen():
    entry = NormalizedEntry(
        source_index=0,
        position="QB",
        is_defense_or_kicker=False,
        manager="Ann",
        player="Test Player",
    )

    assert entry.finish_rank is None
    assert entry.model_dump(by_alias=True)["normalizedPosition"] == "QB"

    with pytest.raises((TypeError, ValidationError)):
        entry.manager = "Bob"  # type: ignore[misc]


def test_normalized_entry_rejects_unknown_position():
    with pytest.raises(ValidationError):
        NormalizedEntry(
            source_index=0,
            position="LB",
            is_defense_or_kicker=False,
            manager="Ann",
            player="Test Player",
        )
