"""
Export utilities for search results.
"""
import logging
from typing import List

import pandas as pd

from .catalog import listing_to_row
from .models import Listing
from .sorting import discount_percent

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "id", "kind", "type_label", "city", "state", "initial_bid_value",
    "appraised_value", "discount_percent", "origin", "stage", "format",
    "end_date", "source_site", "url",
]


def listings_to_frame(listings: List[Listing]) -> pd.DataFrame:
    """Tabulate listings in result order, with derived columns."""
    rows = []
    for x in listings:
        row = listing_to_row(x)
        row["type_label"] = x.type_label
        row["discount_percent"] = round(discount_percent(x), 2)
        rows.append(row)

    if not rows:
        return pd.DataFrame(columns=EXPORT_COLUMNS)
    df = pd.DataFrame(rows)
    extra = [c for c in df.columns if c not in EXPORT_COLUMNS and c != "docs_json"]
    return df[EXPORT_COLUMNS + extra]


def to_csv_bytes(listings: List[Listing]) -> bytes:
    return listings_to_frame(listings).to_csv(index=False).encode("utf-8")


def save_output_rows(listings: List[Listing], out_path: str):
    """Save listings to CSV or Excel file."""
    df = listings_to_frame(listings)
    if out_path.lower().endswith(".xlsx"):
        df.to_excel(out_path, index=False)
    else:
        df.to_csv(out_path, index=False)

    logger.info(f">>> Saved {len(df)} rows to {out_path}")
