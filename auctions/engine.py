"""
Search engine: validation, filtering, free-text search, sorting and statistics
over an in-memory catalog.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .config import config
from .filters import matches
from .models import CRITERIA_TYPES, Criteria, Listing, SearchResult, default_criteria
from .normalize import canonical_sub_type, normalize_text
from .sorting import sort_listings
from .utils import is_within_last_hours, now_utc
from .validation import is_category, is_listing_record, is_sort_key, listing_from_mapping

logger = logging.getLogger(__name__)

SEARCHABLE_FIELDS = ("type_label", "address", "brand", "model", "city", "state", "source_site")


def coerce_catalog(catalog: Iterable[Any]) -> List[Listing]:
    """Keep valid listings, converting raw mappings; malformed entries are dropped."""
    records: List[Listing] = []
    dropped = 0
    for item in catalog:
        if isinstance(item, Listing):
            if is_listing_record(item):
                records.append(item)
                continue
        elif isinstance(item, Mapping):
            rec = listing_from_mapping(item)
            if rec is not None:
                records.append(rec)
                continue
        dropped += 1
        logger.debug(f"Dropping malformed listing: {item!r:.200}")

    if dropped:
        logger.warning(f"Dropped {dropped} malformed listing(s) from catalog")
    return records


def searchable_text(record: Listing) -> str:
    parts = [getattr(record, name, None) for name in SEARCHABLE_FIELDS]
    return normalize_text(" ".join(p for p in parts if isinstance(p, str) and p))


def matches_query(record: Listing, query: str) -> bool:
    """Substring containment on accent-folded text. Empty query matches all."""
    q = normalize_text(query)
    return not q or q in searchable_text(record)


def compute_statistics(listings: List[Listing], as_of: datetime) -> Dict[str, int]:
    sources = {r.source_site for r in listings if isinstance(r.source_site, str) and r.source_site}
    new_today = sum(
        1 for r in listings
        if is_within_last_hours(r.scraped_at, config.NEW_LISTING_THRESHOLD_HOURS, as_of)
    )
    return {"distinct_source_count": len(sources), "new_today_count": new_today}


def search(
    catalog: Iterable[Any],
    category: str,
    sub_type: str = "all",
    criteria: Optional[Criteria] = None,
    sort_key: Optional[str] = None,
    query: str = "",
    as_of: Optional[datetime] = None
) -> SearchResult:
    """
    Run the full search pipeline over ``catalog``.

    Bad records and bad dates never raise; they only shrink the result.
    A failure while sorting or computing statistics is logged and the
    filtered listings are returned unsorted with zeroed statistics.
    Wrong arguments (unknown category or sort key, criteria for the other
    category) raise ValueError/TypeError.
    """
    if not is_category(category):
        raise ValueError(f"Unknown category: {category!r}")
    if sort_key is not None and not is_sort_key(sort_key):
        raise ValueError(f"Unknown sort key: {sort_key!r}")
    if criteria is None:
        criteria = CRITERIA_TYPES[category]()
    elif criteria.category != category:
        raise TypeError(
            f"{type(criteria).__name__} cannot filter the {category!r} category"
        )
    if as_of is None:
        as_of = now_utc()

    sub_type = canonical_sub_type(category, sub_type)
    records = coerce_catalog(catalog)

    filtered = [r for r in records if matches(r, criteria, as_of, sub_type)]
    if query and query.strip():
        filtered = [r for r in filtered if matches_query(r, query)]

    logger.debug(
        f"search category={category} sub_type={sub_type} sort={sort_key} "
        f"query={query!r}: {len(filtered)}/{len(records)} listings"
    )

    try:
        ordered = sort_listings(filtered, sort_key) if sort_key else filtered
        stats = compute_statistics(ordered, as_of)
    except Exception as e:
        logger.error(f"Sorting/statistics failed, returning unsorted results: {e}", exc_info=True)
        return SearchResult(listings=filtered)

    return SearchResult(listings=ordered, **stats)


def has_active_filters(criteria: Criteria) -> bool:
    """True when ``criteria`` differ from the category defaults."""
    return criteria != default_criteria(criteria.category)


def facet_values(listings: Iterable[Listing], field_name: str) -> List[str]:
    """Distinct non-empty values of ``field_name``, sorted accent-insensitively."""
    seen = {}
    for r in listings:
        value = getattr(r, field_name, None)
        if isinstance(value, str) and value.strip():
            seen.setdefault(normalize_text(value), value.strip())
    return [seen[k] for k in sorted(seen)]
