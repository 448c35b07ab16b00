"""Human date labels for display rows."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_date(value: Any) -> date | None:
    """Parse ``YYYY-MM-DD`` or an ISO timestamp; anything else yields ``None``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_date_label(value: Any, fallback: str | None = None) -> str:
    """``2024-01-05`` -> ``Jan 05, 2024``.

    Unparseable input returns ``fallback``; when no fallback is given the
    trimmed input text is returned so non-empty values are never hidden.
    """
    parsed = parse_date(value)
    if parsed is None:
        if fallback is not None:
            return fallback
        return value.strip() if isinstance(value, str) else ""
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day:02d}, {parsed.year}"
