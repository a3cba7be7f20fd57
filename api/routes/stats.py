"""
Statistics API route handlers.
"""
import logging
from collections import Counter
from fastapi import APIRouter, HTTPException

from ..models import StatsOut
from .listings import run_search

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["statistics"])

@router.get("/stats/{category}", response_model=StatsOut)
async def get_api_stats(category: str, sub_type: str = "all", q: str = ""):
    """Statistics over the listings matching the applied filters."""
    result = run_search(category, sub_type, q, None)
    try:
        bids = [x.initial_bid_value for x in result.listings]
        by_type = Counter(x.type_label for x in result.listings if x.type_label)
        by_state = Counter(x.state for x in result.listings if x.state)
        return StatsOut(
            total_listings=len(result.listings),
            distinct_source_count=result.distinct_source_count,
            new_today_count=result.new_today_count,
            min_bid=min(bids) if bids else None,
            max_bid=max(bids) if bids else None,
            avg_bid=sum(bids) / len(bids) if bids else None,
            by_type=dict(by_type.most_common(20)),
            by_state=dict(by_state.most_common(30)),
        )

    except Exception as e:
        logger.error(f"Error fetching statistics: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
