"""
Utility functions for logging, date parsing and text cleanup.
"""
import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from .config import config

logger = logging.getLogger(__name__)

# Naive timestamps (no offset) are read as local Brasilia time
LOCAL_TZ = timezone(timedelta(hours=config.TZ_OFFSET_HOURS))

# Brazilian and plain SQL-style layouts accepted after ISO 8601 fails
_ALT_DATE_FORMATS = (
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)


def init_logger(
    name: str = "auctions",
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_file: Optional[str] = None
) -> logging.Logger:
    """Initialize logger with console and optional file handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console_level_num = getattr(logging, console_level.upper(), logging.INFO)
    ch = logging.StreamHandler()
    ch.setLevel(console_level_num)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:  # Create file handler only if log_file is provided
        file_level_num = getattr(logging, file_level.upper(), logging.DEBUG)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level_num)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Return current UTC timestamp in ISO format."""
    return now_utc().isoformat()


def ensure_aware(dt: datetime) -> datetime:
    """Attach the local timezone to naive datetimes."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=LOCAL_TZ)
    return dt


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp defensively.

    Accepts aware or naive datetimes, ISO 8601 strings (with or without a
    trailing ``Z``) and the ``DD/MM/YYYY[ HH:MM:SS]`` layout. Anything else,
    including empty strings, returns None instead of raising.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return ensure_aware(value)

    if not isinstance(value, str):
        logger.debug(f"Unsupported date type: {type(value).__name__}")
        return None

    s = value.strip()
    if not s:
        return None

    iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
    try:
        return ensure_aware(datetime.fromisoformat(iso))
    except ValueError:
        pass

    for fmt in _ALT_DATE_FORMATS:
        try:
            return ensure_aware(datetime.strptime(s, fmt))
        except ValueError:
            continue

    logger.debug(f"Unparseable date: {value!r}")
    return None


def is_within_last_hours(value: Any, hours: float, as_of: datetime) -> bool:
    """True if ``value`` parses and falls in ``[as_of - hours, as_of]``."""
    dt = parse_date(value)
    if dt is None:
        return False
    as_of = ensure_aware(as_of)
    return as_of - timedelta(hours=hours) <= dt <= as_of


def clean_text(s: Optional[str]) -> str:
    """Clean and normalize text by removing extra whitespace."""
    if not s:
        return ""
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def to_float(value: Any) -> Optional[float]:
    """Safely convert a value to a finite float."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def to_int(value: Any) -> Optional[int]:
    """Safely convert a value to int, going through float for "2019.0"-style text."""
    f = to_float(value)
    if f is None:
        return None
    return int(f)
