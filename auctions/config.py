"""
Engine configuration and defaults.
"""
import os
from datetime import datetime


class Config:
    """Search engine configuration."""

    # Pagination
    PAGE_SIZE: int = int(os.getenv("AUCTIONS_PAGE_SIZE", "30"))
    MAX_VISIBLE_PAGES: int = 7

    # Dates are compared in Brasilia time (UTC-3) unless overridden
    TZ_OFFSET_HOURS: int = int(os.getenv("AUCTIONS_TZ_OFFSET_HOURS", "-3"))
    NEW_LISTING_THRESHOLD_HOURS: int = int(os.getenv("AUCTIONS_NEW_THRESHOLD_HOURS", "24"))

    # Default numeric ranges (closed intervals)
    VEHICLE_YEAR_RANGE: tuple = (1990, datetime.now().year)
    VEHICLE_PRICE_RANGE: tuple = (0, 500_000)
    PROPERTY_AREA_RANGE: tuple = (0, 1_000)
    PROPERTY_VALUE_RANGE: tuple = (0, 5_000_000)

    # Sentinel meaning "no constraint" for scalar filters and sub-types
    ALL: str = "all"


# Global config instance
config = Config()
