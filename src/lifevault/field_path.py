"""Dotted field paths over nested payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass
class FieldPathError(Exception):
    message: str
    path: str

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        return f"{self.message} (path={self.path!r})"


@dataclass(frozen=True)
class FieldPath:
    """Parsed form of a dotted key such as ``address.city``.

    The raw text is kept so flat legacy keys that contain dots can still be
    resolved with a direct lookup before walking the segments.
    """

    text: str
    segments: Tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "FieldPath":
        if not isinstance(text, str) or not text:
            raise FieldPathError("Field path must be a non-empty string", str(text))
        segments = tuple(text.split("."))
        if any(not seg for seg in segments):
            raise FieldPathError("Field path has an empty segment", text)
        return cls(text=text, segments=segments)

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    @property
    def is_nested(self) -> bool:
        return len(self.segments) > 1

    def __str__(self) -> str:
        return self.text


PathLike = Union[str, FieldPath]


def _segments(path: PathLike) -> Tuple[str, Tuple[str, ...]]:
    if isinstance(path, FieldPath):
        return path.text, path.segments
    text = str(path)
    return text, tuple(text.split("."))


def get_by_path(obj: Any, path: PathLike) -> Any:
    """Return the value at ``path`` or None when any segment is missing."""
    if not isinstance(obj, dict):
        return None
    text, segments = _segments(path)
    direct = obj.get(text)
    if direct is not None:
        return direct
    cur: Any = obj
    for part in segments:
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return None
    return cur


def set_by_path(obj: dict, path: PathLike, value: Any) -> dict:
    """Assign ``value`` at ``path``, replacing non-object intermediates."""
    _, segments = _segments(path)
    cursor = obj
    for part in segments[:-1]:
        nxt = cursor.get(part)
        if not isinstance(nxt, dict):
            nxt = {}
            cursor[part] = nxt
        cursor = nxt
    cursor[segments[-1]] = value
    return obj
