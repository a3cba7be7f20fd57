"""
API route handlers for listings endpoints.
"""
import logging
from dataclasses import asdict
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Query, HTTPException
from fastapi.responses import StreamingResponse

from auctions.export import to_csv_bytes
from auctions.models import Listing
from auctions.pagination import paginate
from auctions.engine import search
from auctions.sorting import discount_percent

from ..models import ListingOut, ListingsResponse
from ..database import get_catalog, get_store
from ..config import config

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["listings"])

def listing_to_out(lst: Listing) -> ListingOut:
    data = asdict(lst)
    for key in ("end_date", "updated_at", "scraped_at"):
        if isinstance(data[key], datetime):
            data[key] = data[key].isoformat()
    return ListingOut(kind=lst.kind, discount_percent=round(discount_percent(lst), 2), **data)

def run_search(category: str, sub_type: str, q: str, sort: Optional[str]):
    """Search the catalog with the category's applied criteria."""
    # No sort key keeps catalog order
    if sort is not None and sort.strip().lower() in ("", "none"):
        sort = None
    criteria = get_store().applied(category)
    try:
        return search(get_catalog(), category, sub_type, criteria, sort, q)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/listings/{category}", response_model=ListingsResponse)
async def get_api_listings(
    category: str,
    sub_type: str = "all",
    q: str = "",
    sort: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE)
):
    """Search listings with applied filters, sorting and pagination."""
    result = run_search(category, sub_type, q, sort)
    try:
        pg = paginate(result.listings, page_size, page)
        return ListingsResponse(
            total=pg.total_items,
            page=pg.page_number,
            total_pages=pg.total_pages,
            distinct_source_count=result.distinct_source_count,
            new_today_count=result.new_today_count,
            items=[listing_to_out(x) for x in pg.items],
        )
    except Exception as e:
        logger.error(f"Error building listings page: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.get("/listings/{category}/export/csv")
async def export_listings_csv(
    category: str,
    sub_type: str = "all",
    q: str = "",
    sort: Optional[str] = None
):
    """Export the full filtered result as CSV."""
    result = run_search(category, sub_type, q, sort)
    try:
        csv_content = to_csv_bytes(result.listings)
        return StreamingResponse(
            iter([csv_content]),
            media_type='text/csv',
            headers={'Content-Disposition': f'attachment; filename="auctions_{category}.csv"'}
        )
    except Exception as e:
        logger.error(f"Error exporting CSV: {e}")
        raise HTTPException(status_code=500, detail="Error generating CSV export")
