"""Read-path rendering: canonical payloads to label/value rows and card tables."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List

from lifevault.field_path import get_by_path

from app.conditions import is_visible
from app.date_labels import format_date_label
from app.field_values import to_bool
from app.record_types import record_type_label
from app.records_normalize import item_has_content
from app.schema_registry import (
    DATE,
    OBJECT_LIST,
    TOGGLE,
    FieldDecl,
    SchemaRegistry,
    default_registry,
)

FILE_PLACEHOLDER = "[file]"
CARD_TITLE_KEYS = ("label", "title", "name", "providerName", "vaccineName", "medicationName")
TITLE_CANDIDATE_KEYS = (
    "title",
    "fullName",
    "childFullName",
    "memberName",
    "schoolName",
    "label",
    "documentType",
    "insuranceType",
    "petName",
    "address.line1",
)

_CAMEL_RE = re.compile(r"([A-Z])")


def _plain(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _date_like_text(text: str) -> bool:
    text = text.lower()
    return "yyyy-mm-dd" in text or " date" in text or "dob" in text


def is_date_like(decl: FieldDecl) -> bool:
    if decl.type == DATE:
        return True
    return _date_like_text(f"{decl.key} {decl.resolve_label()} {decl.placeholder}")


def _stringify_toggle(decl: FieldDecl, value: Any) -> str:
    return "Yes" if to_bool(value, False) else "No"


def _stringify_object_list(decl: FieldDecl, value: Any) -> str:
    if not isinstance(value, list) or not value:
        return ""
    return f"{len(value)} {'item' if len(value) == 1 else 'items'}"


def _stringify_value(value: Any, date_like: bool) -> str:
    if isinstance(value, str):
        if date_like:
            return format_date_label(value)
        return value.strip()
    if isinstance(value, list):
        if value and isinstance(value[0], dict):
            return f"{len(value)} items"
        return ", ".join(text for text in (_plain(v) for v in value) if text)
    if isinstance(value, dict):
        return _plain(value.get("name")) or _plain(value.get("uri")) or FILE_PLACEHOLDER
    return _plain(value)


_STRINGIFIERS: Dict[str, Callable[[FieldDecl, Any], str]] = {
    TOGGLE: _stringify_toggle,
    OBJECT_LIST: _stringify_object_list,
}


def stringify(decl: FieldDecl, value: Any) -> str:
    if value is None:
        return ""
    stringifier = _STRINGIFIERS.get(decl.type)
    if stringifier:
        return stringifier(decl, value)
    return _stringify_value(value, is_date_like(decl))


def fallback_label(key: str) -> str:
    label = _CAMEL_RE.sub(r" \1", key)
    return label[:1].upper() + label[1:]


class DisplayBuilder:
    def __init__(self, registry: SchemaRegistry | None = None) -> None:
        self.registry = registry or default_registry()

    def to_display_rows(self, record_type: str, payload: Any) -> List[dict]:
        if not isinstance(payload, dict):
            return []
        if not self.registry.get_fields(record_type):
            return self._fallback_rows(payload)
        rows = []
        for decl in self.registry.get_fields(record_type, payload):
            if decl.type == OBJECT_LIST or not decl.persisted:
                continue
            text = stringify(decl, get_by_path(payload, decl.path))
            if text:
                rows.append({"label": decl.resolve_label(payload), "value": text})
        return rows

    def _fallback_rows(self, payload: dict) -> List[dict]:
        rows = []
        for key, value in payload.items():
            if value is None:
                continue
            text = _stringify_value(value, _date_like_text(f"{key} {key} "))
            if text:
                rows.append({"label": fallback_label(key), "value": text})
        return rows

    def to_display_tables(self, record_type: str, payload: Any) -> List[dict]:
        if not isinstance(payload, dict):
            return []
        tables = []
        for decl in self.registry.get_fields(record_type, payload):
            if decl.type != OBJECT_LIST:
                continue
            raw_items = get_by_path(payload, decl.path)
            items = raw_items if isinstance(raw_items, list) else []
            cards = []
            for idx, item in enumerate(items):
                card = self._card(decl, item, idx)
                if card:
                    cards.append(card)
            if cards:
                tables.append({"label": decl.resolve_label(payload), "items": cards})
        return tables

    def _card(self, decl: FieldDecl, item: Any, idx: int) -> dict | None:
        if not isinstance(item, dict) or not item_has_content(decl, item):
            return None
        rows = []
        for item_field in decl.item_fields:
            if not is_visible(item_field.show_when, item, scope="item"):
                continue
            text = stringify(item_field, item.get(item_field.key))
            if text.strip():
                rows.append({"label": item_field.resolve_label(item), "value": text})
        if not rows:
            return None
        card = {"id": _plain(item.get("id")) or f"{decl.key}_{idx}", "rows": rows}
        title = next((t for t in (_plain(item.get(k)) for k in CARD_TITLE_KEYS) if t), None)
        if title:
            card["title"] = title
        return card


def default_title(record_type: str, data: Any = None) -> str:
    """Catalog label, suffixed with the first identifying value in ``data``."""
    label = record_type_label(record_type)
    if not isinstance(data, dict):
        return label
    for key in TITLE_CANDIDATE_KEYS:
        value = _plain(get_by_path(data, key))
        if value:
            return f"{label}: {value}"
    return label


def to_display_rows(record_type: str, payload: Any) -> List[dict]:
    return DisplayBuilder().to_display_rows(record_type, payload)


def to_display_tables(record_type: str, payload: Any) -> List[dict]:
    return DisplayBuilder().to_display_tables(record_type, payload)
