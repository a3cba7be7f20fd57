"""
API route handlers for staged/applied filter state.
"""
import logging
from fastapi import APIRouter, HTTPException

from auctions.engine import has_active_filters
from auctions.validation import CriteriaError, criteria_to_dict, is_category

from ..models import CriteriaPatch, FilterStateOut
from ..database import get_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/filters", tags=["filters"])

def _check_category(category: str) -> None:
    if not is_category(category):
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")

def filter_state(category: str) -> FilterStateOut:
    snap = get_store().snapshot(category)
    return FilterStateOut(
        category=category,
        staged=criteria_to_dict(snap.staged),
        applied=criteria_to_dict(snap.applied),
        version=snap.version,
        dirty=snap.staged != snap.applied,
        has_active_filters=has_active_filters(snap.applied),
    )

@router.get("/{category}", response_model=FilterStateOut)
async def get_filters(category: str):
    """Current staged and applied criteria."""
    _check_category(category)
    return filter_state(category)

@router.patch("/{category}/staged", response_model=FilterStateOut)
async def patch_staged(category: str, patch: CriteriaPatch):
    """Edit staged criteria; results do not change until apply."""
    _check_category(category)
    try:
        get_store().set_staged(category, patch.model_dump(exclude_unset=True))
    except CriteriaError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return filter_state(category)

@router.post("/{category}/apply", response_model=FilterStateOut)
async def apply_filters(category: str):
    """Commit staged criteria."""
    _check_category(category)
    get_store().apply(category)
    logger.info(f"Applied {category} filters")
    return filter_state(category)

@router.post("/{category}/clear", response_model=FilterStateOut)
async def clear_filters(category: str):
    """Reset staged and applied criteria to defaults."""
    _check_category(category)
    get_store().clear(category)
    logger.info(f"Cleared {category} filters")
    return filter_state(category)
