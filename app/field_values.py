"""Lenient scalar conversions shared by normalization and display."""

from __future__ import annotations

import os
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

TRUE_STRINGS = ("true", "yes", "1")
FALSE_STRINGS = ("false", "no", "0")
STRICT_TRUE_STRINGS = ("true",)
STRICT_FALSE_STRINGS = ("false",)

STRICT_TOGGLES = os.getenv("LIFEVAULT_STRICT_TOGGLES", "").strip() == "1"

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

Clock = Callable[[], str]


def now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def make_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:16]}"


def to_text(value: Any) -> str:
    """Stringify scalars; anything structured becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return ""


def to_string_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [text for text in (to_text(v).strip() for v in value) if text]
    raw = to_text(value).strip()
    if not raw:
        return []
    sep = "\n" if "\n" in raw else ","
    return [part.strip() for part in raw.split(sep) if part.strip()]


def to_time_list(value: Any) -> list[str]:
    times = []
    for item in to_string_list(value):
        match = _TIME_RE.match(item)
        if not match:
            continue
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            continue
        times.append(f"{hours:02d}:{minutes:02d}")
    return times


def to_bool(value: Any, fallback: bool = False, strict: bool | None = None) -> bool:
    """Truthy-string heuristic; unrecognised input falls back to ``fallback``."""
    if isinstance(value, bool):
        return value
    if strict is None:
        strict = STRICT_TOGGLES
    text = to_text(value).strip().lower()
    if text in (STRICT_TRUE_STRINGS if strict else TRUE_STRINGS):
        return True
    if text in (STRICT_FALSE_STRINGS if strict else FALSE_STRINGS):
        return False
    return fallback


def has_meaningful_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    if isinstance(value, (bool, int, float)):
        return True
    if isinstance(value, (list, tuple)):
        return any(has_meaningful_value(item) for item in value)
    if isinstance(value, dict):
        return any(has_meaningful_value(item) for item in value.values())
    return False
