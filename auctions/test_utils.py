"""
Tests for date parsing and small conversion helpers.
"""
import logging
from datetime import datetime, timedelta, timezone

from auctions.utils import (
    LOCAL_TZ, clean_text, init_logger, is_within_last_hours, parse_date, to_float, to_int,
)


def test_parse_iso_with_z():
    dt = parse_date("2025-06-17T12:00:00.000Z")
    assert dt == datetime(2025, 6, 17, 12, 0, tzinfo=timezone.utc)


def test_parse_naive_is_local_time():
    dt = parse_date("2025-06-17T09:00:00")
    assert dt.tzinfo == LOCAL_TZ
    assert dt == datetime(2025, 6, 17, 12, 0, tzinfo=timezone.utc)


def test_parse_brazilian_layouts():
    assert parse_date("25/07/2025") == datetime(2025, 7, 25, tzinfo=LOCAL_TZ)
    assert parse_date("25/07/2025 14:30:00") == datetime(2025, 7, 25, 14, 30, tzinfo=LOCAL_TZ)


def test_parse_garbage_returns_none():
    for value in (None, "", "   ", "tomorrow", "32/13/2025", 12345, ["2025-01-01"]):
        assert parse_date(value) is None


def test_parse_datetime_passthrough():
    aware = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert parse_date(aware) is aware
    assert parse_date(datetime(2025, 1, 1)).tzinfo == LOCAL_TZ


def test_is_within_last_hours():
    as_of = datetime(2025, 6, 17, 15, 0, tzinfo=timezone.utc)
    assert is_within_last_hours(as_of - timedelta(hours=23), 24, as_of)
    assert is_within_last_hours(as_of - timedelta(hours=24), 24, as_of)
    assert not is_within_last_hours(as_of - timedelta(hours=25), 24, as_of)
    assert not is_within_last_hours(as_of + timedelta(minutes=1), 24, as_of)
    assert not is_within_last_hours("not a date", 24, as_of)


def test_clean_text():
    assert clean_text("  São   Paulo \n") == "São Paulo"
    assert clean_text(None) == ""


def test_numeric_conversion():
    assert to_float("180000.50") == 180000.5
    assert to_float(" ") is None
    assert to_float("nan") is None
    assert to_float(True) is None
    assert to_int("2019.0") == 2019
    assert to_int("abc") is None


def test_init_logger_adds_handlers_once(tmp_path):
    log_file = tmp_path / "auctions.log"
    lg = init_logger("auctions.test_logger", log_file=str(log_file))
    again = init_logger("auctions.test_logger")
    assert lg is again
    assert len(lg.handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in lg.handlers)
    for h in list(lg.handlers):
        h.close()
        lg.removeHandler(h)
