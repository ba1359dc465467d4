from draftmetrics.ingest import normalize_entries
from draftmetrics.metrics import cohort_key, group_cohorts, index_cohorts


def _row(**kwargs):
    base = {"year": 2022, "position": "RB", "manager": "M", "player": "P"}
    base.update(kwargs)
    return base


def test_draft_order_sorts_by_overall_with_missing_last():
    entries = normalize_entries(
        [
            _row(overall=30),
            _row(),
            _row(overall=5),
            _row(overall=12),
        ]
    )

    ranks = index_cohorts(entries)

    assert [ranks[i].draft_order for i in range(4)] == [3, 4, 1, 2]
    assert {ranks[i].draft_count for i in range(4)} == {4}


def test_ties_break_on_source_index():
    entries = normalize_entries([_row(overall=8), _row(overall=8), _row(), _row()])

    ranks = index_cohorts(entries)

    assert [ranks[i].draft_order for i in range(4)] == [1, 2, 3, 4]


def test_price_order_descending_among_priced_only():
    entries = normalize_entries(
        [
            _row(overall=1, price=20),
            _row(overall=2),
            _row(overall=3, price=45),
            _row(overall=4, price=20),
        ]
    )

    ranks = index_cohorts(entries)

    assert ranks[2].price_order == 1
    assert ranks[0].price_order == 2
    assert ranks[3].price_order == 3
    assert ranks[1].price_order is None
    assert ranks[1].price_count is None
    assert ranks[0].price_count == 3


def test_cohorts_split_by_year_and_position_with_unknown_year():
    entries = normalize_entries(
        [
            _row(overall=1),
            _row(overall=2, position="WR"),
            _row(overall=3, year=2023),
            _row(overall=4, year=None),
            _row(overall=5, year="n/a"),
        ]
    )

    cohorts = group_cohorts(entries)
    ranks = index_cohorts(entries)

    assert cohort_key(entries[3]) == ("unknown", "RB")
    assert set(cohorts) == {("2022", "RB"), ("2022", "WR"), ("2023", "RB"), ("unknown", "RB")}
    assert ranks[3].draft_count == 2
    assert ranks[4].draft_order == 2
    assert ranks[0].draft_count == 1


def test_index_is_stable_across_calls():
    rows = [_row(overall=n % 3) for n in range(6)]

    first = index_cohorts(normalize_entries(rows))
    second = index_cohorts(normalize_entries(rows))

    assert dict(first) == dict(second)
