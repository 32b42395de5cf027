"""Tests for the datetime helpers."""

from __future__ import annotations

from datetime import datetime, timezone

from app.utils import format_short_date, parse_datetime


def test_parse_datetime_handles_zulu_suffix() -> None:
    parsed = parse_datetime("2025-03-01T23:30:00Z")

    assert parsed is not None
    assert parsed.astimezone(timezone.utc) == datetime(2025, 3, 1, 23, 30, tzinfo=timezone.utc)


def test_parse_datetime_rejects_garbage() -> None:
    assert parse_datetime("next tuesday") is None
    assert parse_datetime("  ") is None
    assert parse_datetime(None) is None


def test_format_short_date_uses_app_timezone() -> None:
    # 02:00 UTC on the 2nd is still the evening of the 1st in Chicago.
    assert format_short_date("2025-03-02T02:00:00Z") == "Sat, Mar 1"


def test_format_short_date_returns_unparseable_input() -> None:
    assert format_short_date("TBD") == "TBD"
    assert format_short_date(None) == ""
