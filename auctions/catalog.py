"""
Catalog storage: JSON files and a SQLite listings table.
"""
import json
import logging
import sqlite3
from datetime import datetime
from typing import Any, Dict, List, Optional

from .models import Listing, PropertyListing, VehicleListing
from .utils import now_iso
from .validation import listing_from_mapping

logger = logging.getLogger(__name__)


# Schema definitions
DDL_LISTINGS = """
CREATE TABLE IF NOT EXISTS listings (
  id TEXT PRIMARY KEY,
  kind TEXT NOT NULL,
  image TEXT,
  url TEXT,
  city TEXT,
  state TEXT,
  initial_bid_value REAL,
  appraised_value REAL,
  origin TEXT,
  stage TEXT,
  format TEXT,
  end_date TEXT,
  updated_at TEXT,
  scraped_at TEXT,
  source_site TEXT,
  source_image TEXT,
  docs_json TEXT,
  property_type TEXT,
  useful_area_m2 REAL,
  address TEXT,
  vehicle_type TEXT,
  brand TEXT,
  model TEXT,
  color TEXT,
  year INTEGER,
  first_seen TEXT,
  last_seen TEXT
);
"""

DDL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_listings_kind ON listings(kind);",
    "CREATE INDEX IF NOT EXISTS idx_listings_end_date ON listings(end_date);",
]

COLUMNS = [
    "id", "kind", "image", "url", "city", "state", "initial_bid_value",
    "appraised_value", "origin", "stage", "format", "end_date", "updated_at",
    "scraped_at", "source_site", "source_image", "docs_json", "property_type",
    "useful_area_m2", "address", "vehicle_type", "brand", "model", "color", "year",
]


def db_connect(path: str) -> sqlite3.Connection:
    """Create database connection with optimized settings."""
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def db_init(conn: sqlite3.Connection):
    """Initialize database schema with tables and indexes."""
    conn.execute(DDL_LISTINGS)
    for ddl in DDL_INDEXES:
        conn.execute(ddl)
    conn.commit()


def row_to_dict(cur, row):
    """Convert a result row to a dictionary."""
    return {desc[0]: row[i] for i, desc in enumerate(cur.description)}


def _ts(value: Any) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def listing_to_row(lst: Listing) -> Dict[str, Any]:
    """Flatten a listing into the listings table columns."""
    row = {
        "id": lst.id,
        "kind": lst.kind,
        "image": lst.image,
        "url": lst.url,
        "city": lst.city,
        "state": lst.state,
        "initial_bid_value": lst.initial_bid_value,
        "appraised_value": lst.appraised_value,
        "origin": lst.origin,
        "stage": lst.stage,
        "format": lst.format,
        "end_date": _ts(lst.end_date),
        "updated_at": _ts(lst.updated_at),
        "scraped_at": _ts(lst.scraped_at),
        "source_site": lst.source_site,
        "source_image": lst.source_image,
        "docs_json": json.dumps(lst.docs, ensure_ascii=False),
        "property_type": None,
        "useful_area_m2": None,
        "address": None,
        "vehicle_type": None,
        "brand": None,
        "model": None,
        "color": None,
        "year": None,
    }
    if isinstance(lst, PropertyListing):
        row.update(property_type=lst.property_type, useful_area_m2=lst.useful_area_m2, address=lst.address)
    elif isinstance(lst, VehicleListing):
        row.update(vehicle_type=lst.vehicle_type, brand=lst.brand, model=lst.model,
                   color=lst.color, year=lst.year)
    return row


def row_to_listing(row: Dict[str, Any]) -> Optional[Listing]:
    """Rebuild a listing from a table row; returns None for malformed rows."""
    data = {k: v for k, v in row.items() if v is not None and k not in ("docs_json", "first_seen", "last_seen")}
    try:
        data["docs"] = json.loads(row.get("docs_json") or "[]")
    except json.JSONDecodeError:
        data["docs"] = []
    return listing_from_mapping(data)


def db_get_listing(conn: sqlite3.Connection, listing_id: str) -> Optional[Dict]:
    """Retrieve existing listing row by id."""
    cur = conn.cursor()
    cur.execute("SELECT * FROM listings WHERE id = ?", (listing_id,))
    r = cur.fetchone()
    if not r:
        return None
    return row_to_dict(cur, r)


def upsert_listing(conn: sqlite3.Connection, lst: Listing) -> bool:
    """
    Insert or update a listing, keeping its first_seen timestamp.

    Returns:
        True if the listing was new
    """
    row = listing_to_row(lst)
    existing = db_get_listing(conn, lst.id)
    ts = now_iso()
    cur = conn.cursor()
    if existing is None:
        cols = COLUMNS + ["first_seen", "last_seen"]
        cur.execute(
            f"INSERT INTO listings ({','.join(cols)}) VALUES ({','.join('?' * len(cols))})",
            [row[c] for c in COLUMNS] + [ts, ts],
        )
    else:
        assignments = ", ".join(f"{c}=?" for c in COLUMNS[1:])
        cur.execute(
            f"UPDATE listings SET {assignments}, last_seen=? WHERE id=?",
            [row[c] for c in COLUMNS[1:]] + [ts, lst.id],
        )
    conn.commit()
    return existing is None


def load_catalog(conn: sqlite3.Connection, kind: Optional[str] = None) -> List[Listing]:
    """Load every listing (optionally of one kind) in insertion order."""
    cur = conn.cursor()
    if kind:
        cur.execute("SELECT * FROM listings WHERE kind = ? ORDER BY rowid", (kind,))
    else:
        cur.execute("SELECT * FROM listings ORDER BY rowid")
    listings = []
    skipped = 0
    for r in cur.fetchall():
        lst = row_to_listing(row_to_dict(cur, r))
        if lst is None:
            skipped += 1
            continue
        listings.append(lst)
    if skipped:
        logger.warning(f"Skipped {skipped} malformed row(s) while loading catalog")
    return listings


def load_catalog_json(path: str) -> List[Dict[str, Any]]:
    """
    Read a JSON catalog (a list of listing objects, or {"listings": [...]}).

    Records are returned raw; the search engine validates and converts them.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("listings", [])
    if not isinstance(data, list):
        raise ValueError(f"Catalog file {path} does not contain a list of listings")
    logger.info(f"Loaded {len(data)} raw listings from {path}")
    return data
