"""Canonical JSON text for persisted derived data.

Two structurally equal values always serialize to the same string: keys are
sorted at every level, separators carry no whitespace, and non-ASCII text is
kept as-is. Only JSON-native values are accepted.
"""

from __future__ import annotations

import json
import math
from typing import Any


class CanonicalJsonTypeError(TypeError):
    """A value that has no canonical JSON form."""


_SCALARS = (str, int, bool, type(None))


def _check(value: Any, where: str) -> None:
    pending = [(value, where)]
    while pending:
        item, at = pending.pop()
        if isinstance(item, dict):
            for key, child in item.items():
                if not isinstance(key, str):
                    raise CanonicalJsonTypeError(f"Unsupported key type at {at}: {type(key).__name__}")
                pending.append((child, f"{at}.{key}"))
        elif isinstance(item, (list, tuple)):
            pending.extend((child, f"{at}[{idx}]") for idx, child in enumerate(item))
        elif isinstance(item, float):
            if not math.isfinite(item):
                raise ValueError(f"Non-finite float at {at}: {item!r}")
        elif not isinstance(item, _SCALARS):
            raise CanonicalJsonTypeError(f"Unsupported type at {at}: {type(item).__name__}")


def canonical_dumps(obj: Any) -> str:
    _check(obj, "$")
    return json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def loads_or_default(raw: str | None, default: Any) -> Any:
    """Parse stored JSON text, returning ``default`` for missing or corrupt input."""
    if not raw:
        return default
    try:
        return json.loads(raw)
    except ValueError:
        return default
