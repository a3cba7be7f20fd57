"""
Data models for auction listings, search criteria and results.
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional, Tuple

from .config import config

# Closed numeric interval (min, max)
NumericRange = Tuple[float, float]

CATEGORIES = ("property", "vehicle")
SORT_KEYS = ("newest", "lowest-bid", "highest-bid", "highest-discount", "nearest")
VIEW_MODES = ("horizontal", "vertical")


@dataclass
class Listing:
    """Fields shared by every auction listing."""

    kind: ClassVar[str] = ""

    # Identity and links
    id: str
    image: str = ""
    url: str = ""

    # Location
    city: str = ""
    state: str = ""

    # Commercial
    initial_bid_value: float = 0.0
    appraised_value: Optional[float] = None

    # Classification
    origin: str = ""
    stage: str = ""
    format: str = ""

    # Timestamps, kept as received (ISO text or datetime) and parsed on use
    end_date: Any = None
    updated_at: Any = None
    scraped_at: Any = None

    # Source
    source_site: str = ""
    source_image: str = ""
    docs: List[str] = field(default_factory=list)

    @property
    def type_label(self) -> str:
        return ""


@dataclass
class PropertyListing(Listing):
    """A real-estate auction listing."""

    kind: ClassVar[str] = "property"

    property_type: str = ""
    useful_area_m2: Optional[float] = None
    address: str = ""

    @property
    def type_label(self) -> str:
        return self.property_type


@dataclass
class VehicleListing(Listing):
    """A vehicle auction listing."""

    kind: ClassVar[str] = "vehicle"

    vehicle_type: str = ""
    brand: str = ""
    model: str = ""
    color: str = ""
    year: Optional[int] = None

    @property
    def type_label(self) -> str:
        return self.vehicle_type


@dataclass(frozen=True)
class Criteria:
    """
    Filters shared by both categories.

    Scalar fields use None, "" or "all" for "no constraint"; multi-select
    fields use an empty tuple; ranges use None.
    """

    category: ClassVar[str] = ""

    state: Optional[str] = None
    city: Optional[str] = None
    format: Optional[str] = None
    origin: Tuple[str, ...] = ()
    stage: Tuple[str, ...] = ()
    price: Optional[NumericRange] = None


@dataclass(frozen=True)
class PropertyCriteria(Criteria):
    category: ClassVar[str] = "property"

    area: Optional[NumericRange] = None


@dataclass(frozen=True)
class VehicleCriteria(Criteria):
    category: ClassVar[str] = "vehicle"

    brand: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    year: Optional[NumericRange] = None


CRITERIA_TYPES = {
    "property": PropertyCriteria,
    "vehicle": VehicleCriteria,
}

LISTING_TYPES = {
    "property": PropertyListing,
    "vehicle": VehicleListing,
}


def default_criteria(category: str) -> Criteria:
    """The category's initial filter state, as shown after a clear."""
    if category == "property":
        return PropertyCriteria(
            price=tuple(config.PROPERTY_VALUE_RANGE),
            area=tuple(config.PROPERTY_AREA_RANGE),
        )
    if category == "vehicle":
        return VehicleCriteria(
            price=tuple(config.VEHICLE_PRICE_RANGE),
            year=tuple(config.VEHICLE_YEAR_RANGE),
        )
    raise ValueError(f"Unknown category: {category!r}")


@dataclass
class SearchResult:
    listings: List[Listing] = field(default_factory=list)
    distinct_source_count: int = 0
    new_today_count: int = 0


@dataclass
class Page:
    items: List[Listing]
    page_number: int
    total_pages: int
    total_items: int = 0
