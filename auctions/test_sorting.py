"""
Tests for the sort comparator.
"""
import math

import pytest

from auctions.testing import make_property
from auctions.sorting import compare, discount_percent, sort_listings


def ids(records):
    return [r.id for r in records]


def test_discount_percent():
    assert discount_percent(make_property(initial_bid_value=75, appraised_value=100)) == pytest.approx(25.0)


@pytest.mark.parametrize("appraised,bid", [
    (None, 100),      # no appraisal
    (100, 150),       # bid above appraisal
    (100, 100),       # no gap
    (0, 100),         # zero appraisal
    (-10, -20),       # nonsense data
])
def test_discount_percent_is_never_negative_or_nan(appraised, bid):
    d = discount_percent(make_property(initial_bid_value=bid, appraised_value=appraised))
    assert d == 0.0
    assert not math.isnan(d)


def test_highest_discount_treats_missing_appraisal_as_zero():
    records = [
        make_property("none", appraised_value=None, initial_bid_value=10),
        make_property("big", appraised_value=100, initial_bid_value=50),
        make_property("small", appraised_value=100, initial_bid_value=90),
        make_property("negative", appraised_value=100, initial_bid_value=120),
    ]
    assert ids(sort_listings(records, "highest-discount")) == ["big", "small", "none", "negative"]


def test_bid_sorts():
    records = [
        make_property("b", initial_bid_value=200),
        make_property("a", initial_bid_value=100),
        make_property("c", initial_bid_value=300),
    ]
    assert ids(sort_listings(records, "lowest-bid")) == ["a", "b", "c"]
    assert ids(sort_listings(records, "highest-bid")) == ["c", "b", "a"]


def test_newest_is_stable_on_ties():
    same = "2025-06-15T12:00:00Z"
    records = [
        make_property("first", updated_at=same),
        make_property("latest", updated_at="2025-06-16T12:00:00Z"),
        make_property("second", updated_at=same),
    ]
    assert ids(sort_listings(records, "newest")) == ["latest", "first", "second"]


def test_newest_puts_missing_dates_last():
    records = [
        make_property("missing", updated_at=None),
        make_property("old", updated_at="2025-01-01T00:00:00Z"),
        make_property("garbage", updated_at="yesterday"),
        make_property("new", updated_at="2025-06-01T00:00:00Z"),
    ]
    assert ids(sort_listings(records, "newest")) == ["new", "old", "missing", "garbage"]


def test_nearest_orders_by_end_date():
    records = [
        make_property("late", end_date="2025-09-01T00:00:00Z"),
        make_property("soon", end_date="2025-07-01T00:00:00Z"),
    ]
    assert ids(sort_listings(records, "nearest")) == ["soon", "late"]


def test_compare_returns_sign():
    a = make_property(initial_bid_value=1)
    b = make_property(initial_bid_value=2)
    assert compare(a, b, "lowest-bid") == -1
    assert compare(b, a, "lowest-bid") == 1
    assert compare(a, a, "lowest-bid") == 0


def test_unknown_sort_key_raises():
    with pytest.raises(ValueError):
        sort_listings([make_property()], "cheapest")
