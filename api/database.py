"""
Catalog loading and the per-process filter store.
"""
import logging
from contextlib import contextmanager
from typing import Any, List, Optional

from auctions.catalog import db_connect, load_catalog, load_catalog_json
from auctions.engine import coerce_catalog
from auctions.staging import FilterStagingStore
from auctions.models import Listing

from .config import config

logger = logging.getLogger(__name__)

_catalog: Optional[List[Listing]] = None
_store = FilterStagingStore()

@contextmanager
def get_db_connection():
    """Get a database connection with proper error handling."""
    conn = None
    try:
        if not config.DB_PATH:
            raise ValueError("Database path not configured")

        conn = db_connect(config.DB_PATH)
        yield conn
    except Exception as e:
        logger.error(f"Database error: {e}")
        raise
    finally:
        if conn is not None:
            conn.close()

def load_listings() -> List[Listing]:
    """Read the catalog from the configured JSON file or SQLite database."""
    if config.CATALOG_JSON:
        return coerce_catalog(load_catalog_json(config.CATALOG_JSON))
    with get_db_connection() as conn:
        return load_catalog(conn)

def get_catalog() -> List[Listing]:
    """Catalog loaded once per process."""
    global _catalog
    if _catalog is None:
        _catalog = load_listings()
        logger.info(f"Catalog loaded: {len(_catalog)} listings")
    return _catalog

def set_catalog(listings: List[Any]) -> None:
    """Replace the in-memory catalog (raw mappings are validated)."""
    global _catalog
    _catalog = coerce_catalog(listings)

def get_store() -> FilterStagingStore:
    return _store
