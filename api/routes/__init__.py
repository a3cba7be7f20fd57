"""
Route package initialization.
"""
from .listings import router as listings_router
from .filters import router as filters_router
from .stats import router as stats_router
from .reference import router as reference_router

__all__ = ["listings_router", "filters_router", "stats_router", "reference_router"]
