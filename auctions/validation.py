"""
Type guards and coercion for untrusted listing and criteria data.
"""
import logging
import math
from dataclasses import fields, replace
from datetime import datetime
from numbers import Real
from typing import Any, Mapping, Optional

from .models import (
    CATEGORIES, CRITERIA_TYPES, LISTING_TYPES, SORT_KEYS, VIEW_MODES,
    Criteria, Listing,
)
from .utils import clean_text, to_float, to_int

logger = logging.getLogger(__name__)

# Keys used by the scraped feed, mapped to model field names
LISTING_ALIASES = {
    "_id": "id",
    "type": "kind",
    "href": "url",
    "updated": "updated_at",
    "data_scraped": "scraped_at",
    "website": "source_site",
    "website_image": "source_image",
    "property_address": "address",
}

# Free-text fields; anything that is not a string is blanked
TEXT_FIELDS = (
    "image", "url", "origin", "stage", "format", "source_site", "source_image",
    "property_type", "vehicle_type",
)
CLEANED_TEXT_FIELDS = ("city", "state", "brand", "model", "color", "address")
DATE_FIELDS = ("end_date", "updated_at", "scraped_at")

RANGE_FIELDS = ("price", "area", "year")
MULTI_FIELDS = ("origin", "stage")


class CriteriaError(ValueError):
    """Raised when stored or submitted criteria have the wrong shape."""


def _get(x: Any, key: str) -> Any:
    if isinstance(x, Mapping):
        return x.get(key)
    return getattr(x, key, None)


def _canonical_keys(m: Mapping) -> dict:
    out = {}
    for k, v in m.items():
        out[LISTING_ALIASES.get(k, k)] = v
    return out


def is_listing_record(x: Any) -> bool:
    """Structural check: non-empty id, known kind, image or url present."""
    if isinstance(x, Listing):
        data = x
    elif isinstance(x, Mapping):
        data = _canonical_keys(x)
    else:
        return False

    record_id = _get(data, "id")
    if not isinstance(record_id, str) or not record_id.strip():
        return False
    if _get(data, "kind") not in CATEGORIES:
        return False
    image, url = _get(data, "image"), _get(data, "url")
    return (isinstance(image, str) and bool(image)) or (isinstance(url, str) and bool(url))


def is_numeric_range(x: Any) -> bool:
    """Two finite numbers. Inverted ranges pass; the evaluator rejects them."""
    if not isinstance(x, (list, tuple)) or len(x) != 2:
        return False
    return all(
        isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v)
        for v in x
    )


def is_string_array(x: Any) -> bool:
    return isinstance(x, (list, tuple)) and all(isinstance(v, str) for v in x)


def is_category(x: Any) -> bool:
    return x in CATEGORIES


def is_sort_key(x: Any) -> bool:
    return x in SORT_KEYS


def is_view_mode(x: Any) -> bool:
    return x in VIEW_MODES


def listing_from_mapping(m: Mapping[str, Any]) -> Optional[Listing]:
    """
    Build the right listing variant from a raw mapping.

    Returns None when the mapping fails ``is_listing_record``. Unknown keys
    are ignored. Fields of the wrong type are degraded rather than rejected:
    text becomes "", timestamps other than str/datetime become None, and
    numbers that cannot be read become None (0 for the initial bid, which is
    also floored at 0).
    """
    if not is_listing_record(m):
        return None

    data = _canonical_keys(m)
    cls = LISTING_TYPES[data["kind"]]
    names = {f.name for f in fields(cls)}
    kwargs = {k: v for k, v in data.items() if k in names}

    kwargs["id"] = data["id"].strip()
    kwargs["initial_bid_value"] = max(to_float(data.get("initial_bid_value")) or 0.0, 0.0)
    kwargs["appraised_value"] = to_float(data.get("appraised_value"))
    if "useful_area_m2" in kwargs:
        kwargs["useful_area_m2"] = to_float(kwargs["useful_area_m2"])
    if "year" in kwargs:
        kwargs["year"] = to_int(kwargs["year"])
    for key in TEXT_FIELDS:
        if key in kwargs and not isinstance(kwargs[key], str):
            kwargs[key] = ""
    for key in CLEANED_TEXT_FIELDS:
        if key in kwargs:
            kwargs[key] = clean_text(kwargs[key]) if isinstance(kwargs[key], str) else ""
    for key in DATE_FIELDS:
        if key in kwargs and not isinstance(kwargs[key], (str, datetime)):
            kwargs[key] = None
    docs = kwargs.get("docs")
    kwargs["docs"] = list(docs) if is_string_array(docs) else []

    return cls(**kwargs)


def criteria_from_mapping(
    category: str,
    data: Mapping[str, Any],
    base: Optional[Criteria] = None
) -> Criteria:
    """
    Merge ``data`` onto ``base`` (or empty criteria) after validating every key.

    Ranges must pass ``is_numeric_range``, multi-selects ``is_string_array``,
    scalars must be strings or None. Raises CriteriaError otherwise.
    """
    if not is_category(category):
        raise CriteriaError(f"Unknown category: {category!r}")
    if not isinstance(data, Mapping):
        raise CriteriaError("Criteria must be a mapping")

    cls = CRITERIA_TYPES[category]
    if base is None:
        base = cls()
    elif not isinstance(base, cls):
        raise CriteriaError(f"Base criteria is not {cls.__name__}")

    names = {f.name for f in fields(cls)}
    updates = {}
    for key, value in data.items():
        if key not in names:
            raise CriteriaError(f"Unknown {category} criteria field: {key!r}")
        if key in RANGE_FIELDS:
            if value is not None and not is_numeric_range(value):
                raise CriteriaError(f"{key} must be a [min, max] pair of numbers")
            updates[key] = tuple(value) if value is not None else None
        elif key in MULTI_FIELDS:
            if not is_string_array(value):
                raise CriteriaError(f"{key} must be a list of strings")
            updates[key] = tuple(value)
        else:
            if value is not None and not isinstance(value, str):
                raise CriteriaError(f"{key} must be a string")
            updates[key] = value

    return replace(base, **updates)


def criteria_to_dict(criteria: Criteria) -> dict:
    """JSON-friendly dict (tuples become lists)."""
    out = {}
    for f in fields(criteria):
        value = getattr(criteria, f.name)
        out[f.name] = list(value) if isinstance(value, tuple) else value
    return out
