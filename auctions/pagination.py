"""
Page slicing for ordered result sets.
"""
import math
from typing import Any, Hashable, List, Optional, Sequence

from .config import config
from .models import Listing, Page


def paginate(items: Sequence[Listing], page_size: int, page_number: int) -> Page:
    """
    Slice ``items`` into the requested page.

    ``total_pages`` is at least 1, so an empty result is "page 1 of 1".
    The page number is not clamped; out-of-range pages come back empty.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    total_pages = max(1, math.ceil(len(items) / page_size))
    start = (page_number - 1) * page_size
    page_items = list(items[start:start + page_size]) if start >= 0 else []
    return Page(
        items=page_items,
        page_number=page_number,
        total_pages=total_pages,
        total_items=len(items),
    )


def page_window(current: int, total: int, max_visible: Optional[int] = None) -> List[int]:
    """Page numbers to show in a pager, centered on ``current`` where possible."""
    max_visible = max_visible or config.MAX_VISIBLE_PAGES
    if total <= max_visible:
        return list(range(1, total + 1))
    half = max_visible // 2
    start = min(max(1, current - half), total - max_visible + 1)
    return list(range(start, start + max_visible))


class Paginator:
    """
    Tracks the current page for one result view.

    Every call to ``page`` passes a key built from the inputs that define the
    result set (applied-criteria version, sort key, query, sub-type). When
    the key changes the old page index is meaningless and the cursor goes
    back to page 1.
    """

    def __init__(self, page_size: Optional[int] = None):
        self.page_size = page_size or config.PAGE_SIZE
        self.current_page = 1
        self._key: Any = None

    def sync(self, key: Hashable) -> bool:
        """Reset to page 1 if ``key`` differs from the last one. Returns True on reset."""
        if key != self._key:
            self._key = key
            self.current_page = 1
            return True
        return False

    def go_to(self, page_number: int, total_pages: int) -> int:
        self.current_page = min(max(1, page_number), max(1, total_pages))
        return self.current_page

    def page(self, items: Sequence[Listing], key: Hashable) -> Page:
        self.sync(key)
        return paginate(items, self.page_size, self.current_page)
