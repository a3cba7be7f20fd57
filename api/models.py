"""
Pydantic models for API request/response serialization.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

class ListingOut(BaseModel):
    """Output model for listing data."""
    id: str
    kind: str
    image: str = ""
    url: str = ""
    city: str = ""
    state: str = ""
    initial_bid_value: float = 0.0
    appraised_value: Optional[float] = None
    discount_percent: float = 0.0
    origin: str = ""
    stage: str = ""
    format: str = ""
    end_date: Optional[str] = None
    updated_at: Optional[str] = None
    scraped_at: Optional[str] = None
    source_site: str = ""
    source_image: str = ""
    docs: List[str] = []
    # Property fields
    property_type: Optional[str] = None
    useful_area_m2: Optional[float] = None
    address: Optional[str] = None
    # Vehicle fields
    vehicle_type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    year: Optional[int] = None

class ListingsResponse(BaseModel):
    """Response model for one page of search results."""
    total: int
    page: int
    total_pages: int
    distinct_source_count: int
    new_today_count: int
    items: List[ListingOut]

class CriteriaPatch(BaseModel):
    """Partial criteria update; unset fields are left as they are."""
    model_config = ConfigDict(extra="forbid")

    state: Optional[str] = None
    city: Optional[str] = None
    format: Optional[str] = None
    origin: Optional[List[str]] = None
    stage: Optional[List[str]] = None
    price: Optional[List[float]] = None
    area: Optional[List[float]] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    year: Optional[List[float]] = None

class FilterStateOut(BaseModel):
    """Staged and applied criteria for one category."""
    category: str
    staged: Dict[str, Any]
    applied: Dict[str, Any]
    version: int
    dirty: bool
    has_active_filters: bool

class StatsOut(BaseModel):
    """Model for statistics data."""
    total_listings: int
    distinct_source_count: int
    new_today_count: int
    min_bid: Optional[float]
    max_bid: Optional[float]
    avg_bid: Optional[float]
    by_type: Dict[str, int]
    by_state: Dict[str, int]

class Option(BaseModel):
    value: str
    label: str
