"""
Sort comparator for listings.
"""
import math
from functools import cmp_to_key
from typing import Iterable, List

from .models import SORT_KEYS, Listing
from .utils import parse_date
from .validation import is_sort_key


def discount_percent(record: Listing) -> float:
    """Percentage below appraisal; 0 when there is no usable appraisal."""
    appraised = record.appraised_value
    bid = record.initial_bid_value
    if appraised is None or bid is None:
        return 0.0
    if not (math.isfinite(appraised) and math.isfinite(bid)):
        return 0.0
    if appraised <= 0 or appraised <= bid:
        return 0.0
    return (appraised - bid) / appraised * 100


def _timestamp(value) -> float:
    dt = parse_date(value)
    return dt.timestamp() if dt is not None else math.nan


def _bid(record: Listing) -> float:
    bid = record.initial_bid_value
    return bid if bid is not None and math.isfinite(bid) else 0.0


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def _cmp_dates(a: float, b: float, descending: bool) -> int:
    # Missing dates always go last
    if math.isnan(a) or math.isnan(b):
        return _sign(math.isnan(a) - math.isnan(b))
    return _sign(b - a) if descending else _sign(a - b)


def compare(a: Listing, b: Listing, sort_key: str) -> int:
    """Return -1, 0 or 1 ordering ``a`` against ``b`` for ``sort_key``."""
    if sort_key == "newest":
        return _cmp_dates(_timestamp(a.updated_at), _timestamp(b.updated_at), descending=True)
    if sort_key == "lowest-bid":
        return _sign(_bid(a) - _bid(b))
    if sort_key == "highest-bid":
        return _sign(_bid(b) - _bid(a))
    if sort_key == "highest-discount":
        return _sign(discount_percent(b) - discount_percent(a))
    if sort_key == "nearest":
        return _cmp_dates(_timestamp(a.end_date), _timestamp(b.end_date), descending=False)
    raise ValueError(f"Unknown sort key: {sort_key!r} (expected one of {', '.join(SORT_KEYS)})")


def sort_listings(records: Iterable[Listing], sort_key: str) -> List[Listing]:
    """Stable sort; ties keep catalog order."""
    if not is_sort_key(sort_key):
        raise ValueError(f"Unknown sort key: {sort_key!r}")
    return sorted(records, key=cmp_to_key(lambda a, b: compare(a, b, sort_key)))
