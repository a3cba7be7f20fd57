"""
Filter evaluation for a single listing against a criteria set.
"""
from datetime import datetime
from typing import Any, Optional

from .models import Criteria, Listing, PropertyCriteria, PropertyListing, VehicleCriteria, VehicleListing
from .normalize import (
    FORMAT_GROUPS, ORIGIN_LABELS, STAGE_LABELS, TYPE_GROUPS,
    accepted_values, is_unconstrained, matches_any, text_equals,
)
from .utils import ensure_aware, parse_date
from .validation import is_numeric_range


def is_active(record: Listing, as_of: datetime) -> bool:
    """A listing is active while its end date is strictly in the future."""
    end = parse_date(record.end_date)
    return end is not None and end > ensure_aware(as_of)


def in_range(value: Optional[float], bounds: Any) -> bool:
    """Closed-interval check. Malformed or inverted bounds match nothing."""
    if not is_numeric_range(bounds):
        return False
    lo, hi = bounds
    if lo > hi:
        return False
    return value is not None and lo <= value <= hi


def _scalar_ok(record_value: Any, wanted: Any) -> bool:
    return is_unconstrained(wanted) or text_equals(record_value, wanted)


def _multi_ok(record_value: Any, wanted, table) -> bool:
    if not wanted:
        return True
    accepted = tuple(v for w in wanted for v in accepted_values(table, w))
    return matches_any(record_value, accepted)


def matches_sub_type(record: Listing, sub_type: str) -> bool:
    """``sub_type`` must already be canonical (see normalize.canonical_sub_type)."""
    if is_unconstrained(sub_type):
        return True
    table = TYPE_GROUPS.get(record.kind, {})
    return matches_any(record.type_label, accepted_values(table, sub_type))


def matches(
    record: Listing,
    criteria: Criteria,
    as_of: datetime,
    sub_type: str = "all"
) -> bool:
    """
    Check a listing against criteria, cheapest checks first.

    Order: active, category, sub-type, scalar filters, multi-select filters,
    numeric ranges. Area and year only constrain listings that carry them.
    """
    if not is_active(record, as_of):
        return False

    if record.kind != criteria.category:
        return False

    if not matches_sub_type(record, sub_type):
        return False

    # Scalar filters
    if not is_unconstrained(criteria.format):
        if not matches_any(record.format, accepted_values(FORMAT_GROUPS, criteria.format)):
            return False
    if not _scalar_ok(record.state, criteria.state):
        return False
    # City names come from two sources with inconsistent accents
    if not _scalar_ok(record.city, criteria.city):
        return False
    if isinstance(criteria, VehicleCriteria) and isinstance(record, VehicleListing):
        if not _scalar_ok(record.brand, criteria.brand):
            return False
        if not _scalar_ok(record.model, criteria.model):
            return False
        if not _scalar_ok(record.color, criteria.color):
            return False

    # Multi-select filters
    if not _multi_ok(record.origin, criteria.origin, ORIGIN_LABELS):
        return False
    if not _multi_ok(record.stage, criteria.stage, STAGE_LABELS):
        return False

    # Numeric ranges
    if criteria.price is not None and not in_range(record.initial_bid_value, criteria.price):
        return False
    if isinstance(criteria, PropertyCriteria) and isinstance(record, PropertyListing):
        if criteria.area is not None and record.useful_area_m2 is not None:
            if not in_range(record.useful_area_m2, criteria.area):
                return False
    if isinstance(criteria, VehicleCriteria) and isinstance(record, VehicleListing):
        if criteria.year is not None and record.year is not None:
            if not in_range(record.year, criteria.year):
                return False

    return True
