"""
Auction listing search engine package
"""
from .models import (
    Listing,
    PropertyListing,
    VehicleListing,
    Criteria,
    PropertyCriteria,
    VehicleCriteria,
    SearchResult,
    Page,
    default_criteria
)
from .normalize import normalize_text, text_equals
from .validation import is_listing_record, is_numeric_range, is_string_array, CriteriaError
from .filters import matches
from .sorting import compare, discount_percent, sort_listings
from .engine import search, has_active_filters, facet_values
from .staging import FilterStagingStore
from .pagination import paginate, Paginator
from .preferences import Preferences, export_preferences, load_preferences
from .utils import init_logger, now_iso

__version__ = "1.0.0"

__all__ = [
    "Listing",
    "PropertyListing",
    "VehicleListing",
    "Criteria",
    "PropertyCriteria",
    "VehicleCriteria",
    "SearchResult",
    "Page",
    "default_criteria",
    "normalize_text",
    "text_equals",
    "is_listing_record",
    "is_numeric_range",
    "is_string_array",
    "CriteriaError",
    "matches",
    "compare",
    "discount_percent",
    "sort_listings",
    "search",
    "has_active_filters",
    "facet_values",
    "FilterStagingStore",
    "paginate",
    "Paginator",
    "Preferences",
    "export_preferences",
    "load_preferences",
    "init_logger",
    "now_iso"
]
