"""
Export and restore of persisted user preferences.

Only view mode, sort key and applied criteria are persisted. Staged criteria
and the free-text query belong to the session and are never written out.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .models import CATEGORIES
from .staging import FilterStagingStore
from .validation import criteria_to_dict, is_sort_key, is_view_mode

logger = logging.getLogger(__name__)

DEFAULT_VIEW_MODE = "horizontal"
DEFAULT_SORT_KEY = "newest"


@dataclass
class Preferences:
    view_mode: str = DEFAULT_VIEW_MODE
    sort_key: str = DEFAULT_SORT_KEY


def export_preferences(store: FilterStagingStore, prefs: Preferences) -> Dict[str, Any]:
    """Build the persisted shape from the store's applied criteria."""
    return {
        "view_mode": prefs.view_mode,
        "applied_filters_by_category": {
            c: criteria_to_dict(store.applied(c)) for c in CATEGORIES
        },
        "sort_key": prefs.sort_key,
    }


def load_preferences(store: FilterStagingStore, data: Any) -> Preferences:
    """
    Restore preferences into ``store`` and return view mode and sort key.

    Each part is validated on its own: an invalid sort key falls back to the
    default without discarding valid filters, and vice versa.
    """
    prefs = Preferences()
    if not isinstance(data, dict):
        if data is not None:
            logger.warning(f"Ignoring persisted preferences of type {type(data).__name__}")
        return prefs

    if is_view_mode(data.get("view_mode")):
        prefs.view_mode = data["view_mode"]
    if is_sort_key(data.get("sort_key")):
        prefs.sort_key = data["sort_key"]

    filters = data.get("applied_filters_by_category")
    if isinstance(filters, dict):
        for category in CATEGORIES:
            if category in filters:
                store.load_persisted(category, filters[category])

    return prefs


def dumps(store: FilterStagingStore, prefs: Preferences) -> str:
    return json.dumps(export_preferences(store, prefs), ensure_ascii=False)


def loads(store: FilterStagingStore, text: Optional[str]) -> Preferences:
    """Like ``load_preferences`` but from JSON text; bad JSON yields defaults."""
    if not text:
        return Preferences()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring unreadable preferences: {e}")
        return Preferences()
    return load_preferences(store, data)
