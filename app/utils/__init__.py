"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    format_short_date,
    get_app_timezone,
    now_in_app_timezone,
    parse_datetime,
)

__all__ = [
    "ensure_app_timezone",
    "format_short_date",
    "get_app_timezone",
    "now_in_app_timezone",
    "parse_datetime",
]
