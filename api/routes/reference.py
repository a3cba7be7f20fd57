"""
Reference data route handlers.
"""
from typing import List
from fastapi import APIRouter, HTTPException

from auctions.models import CATEGORIES
from auctions.normalize import PROPERTY_TYPES, VEHICLE_TYPES, sub_type_label
from auctions.reference import state_options

from ..models import Option

router = APIRouter(prefix="/api/reference", tags=["reference"])

@router.get("/states", response_model=List[Option])
async def get_states():
    return state_options()

@router.get("/sub-types/{category}", response_model=List[Option])
async def get_sub_types(category: str):
    """Sub-type slugs with labels, in navigation order."""
    if category not in CATEGORIES:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")
    slugs = VEHICLE_TYPES if category == "vehicle" else PROPERTY_TYPES
    return [{"value": s, "label": sub_type_label(s)} for s in slugs]
