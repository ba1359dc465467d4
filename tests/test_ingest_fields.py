import math

import pytest

from draftmetrics.ingest import (
    MISSING,
    first_present,
    normalize_entries,
    normalize_position,
    parse_auction_price,
    parse_finish_rank,
    resolve_manager,
    resolve_player,
    to_finite_number,
)


def test_first_present_uses_key_presence_not_truthiness():
    row = {"manager": "", "owner": "Alice"}
    assert first_present(row, ("manager", "owner")) == ""
    assert first_present({"gm": None}, ("manager", "gm")) is None
    assert first_present({}, ("manager", "owner")) is MISSING


@pytest.mark.parametrize(
    "value, expected",
    [
        (12, 12.0),
        (3.5, 3.5),
        (" 7 ", 7.0),
        ("1e2", 100.0),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("12abc", None),
        ("1_000", None),
        ("nan", None),
        ("inf", None),
        (math.inf, None),
        (True, None),
        (None, None),
        ([1], None),
    ],
)
def test_to_finite_number(value, expected):
    assert to_finite_number(value) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("qb", "QB"),
        (" Rb ", "RB"),
        ("wr", "WR"),
        ("TE", "TE"),
        ("D/ST", "DST"),
        ("def", "DST"),
        ("d", "DST"),
        ("PK", "K"),
        ("k", "K"),
        ("FLEX", "DST"),
        ("", "DST"),
        (None, "DST"),
    ],
)
def test_normalize_position(raw, expected):
    assert normalize_position(raw) == expected


def test_manager_and_player_fallbacks():
    assert resolve_manager({"owner": "  Bob  "}) == "Bob"
    assert resolve_manager({"teamOwner": "Carol", "gm": "Dave"}) == "Carol"
    assert resolve_manager({"manager": "   ", "owner": "Eve"}) == "Unknown Manager"
    assert resolve_manager({}) == "Unknown Manager"
    assert resolve_player({"name": "Ja'Marr Chase"}) == "Ja'Marr Chase"
    assert resolve_player({"player": None}) == "Unknown Player"


def test_parse_finish_rank_floors_and_rejects_non_positive():
    assert parse_finish_rank({"positionrank": "3.9"}) == 3
    assert parse_finish_rank({"position rank": 12}) == 12
    assert parse_finish_rank({"positionRank": 0}) is None
    assert parse_finish_rank({"positionrank": -2}) is None
    assert parse_finish_rank({"positionrank": "n/a"}) is None
    assert parse_finish_rank({}) is None


@pytest.mark.parametrize("raw", [0.5, "0.9", 0.999])
def test_parse_finish_rank_rejects_values_flooring_to_zero(raw):
    assert parse_finish_rank({"positionrank": raw}) is None


def test_parse_finish_rank_keeps_values_flooring_to_one():
    assert parse_finish_rank({"positionrank": 1.0}) == 1
    assert parse_finish_rank({"positionrank": "1.7"}) == 1


def test_parse_auction_price_rejects_negative():
    assert parse_auction_price({"price": "42"}) == pytest.approx(42.0)
    assert parse_auction_price({"auction_price": 0}) == 0.0
    assert parse_auction_price({"cost": -1}) is None
    assert parse_auction_price({"price": "free"}) is None


def test_normalize_entries_builds_canonical_records_without_mutating_source():
    rows = [
        {"year": "2021.0", "overall": "14", "position": "wr", "owner": "Ann", "name": "Player A",
         "positionrank": "5", "price": "31"},
        {"position": "LB", "manager": None},
    ]
    snapshot = [dict(row) for row in rows]

    entries = normalize_entries(rows)

    assert rows == snapshot
    first, second = entries
    assert first.source_index == 0
    assert first.year == 2021
    assert first.overall_pick == pytest.approx(14.0)
    assert first.position == "WR"
    assert first.is_defense_or_kicker is False
    assert first.manager == "Ann"
    assert first.player == "Player A"
    assert first.finish_rank == 5
    assert first.auction_price == pytest.approx(31.0)
    assert first.source == rows[0]
    assert first.source is not rows[0]

    assert second.source_index == 1
    assert second.year is None
    assert second.overall_pick is None
    assert second.position == "DST"
    assert second.is_defense_or_kicker is True
    assert second.manager == "Unknown Manager"
    assert second.player == "Unknown Player"
