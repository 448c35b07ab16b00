"""Save-path normalization: arbitrary input to a canonical record payload."""

from __future__ import annotations

from typing import Any, Callable, Dict

from lifevault.field_path import get_by_path, set_by_path

from app.field_values import (
    Clock,
    has_meaningful_value,
    make_id,
    now_iso,
    to_bool,
    to_string_list,
    to_text,
    to_time_list,
)
from app.schema_registry import (
    DOCUMENT,
    ITEM_LIST_KEYS,
    ITEM_NULL_WHEN_EMPTY_KEYS,
    LIST,
    OBJECT_LIST,
    TIME_LIST,
    TOGGLE,
    FieldDecl,
    SchemaRegistry,
    default_registry,
    is_bool_key,
    is_null_when_empty_key,
    is_nullable_name_key,
)

DOCUMENT_KEYS = ("uri", "name", "documentId")


def item_has_content(decl: FieldDecl, item: dict) -> bool:
    """True when at least one item field holds a non-empty, non-false value."""
    return any(
        item.get(f.key) is not False and has_meaningful_value(item.get(f.key))
        for f in decl.item_fields
    )


def _coerce_toggle(norm: "Normalizer", decl: FieldDecl, value: Any) -> bool:
    return norm.to_bool(value)


def _coerce_list(norm: "Normalizer", decl: FieldDecl, value: Any) -> list:
    return to_string_list(value)


def _coerce_time_list(norm: "Normalizer", decl: FieldDecl, value: Any) -> list:
    return to_time_list(value)


def _coerce_object_list(norm: "Normalizer", decl: FieldDecl, value: Any) -> list:
    return norm.normalize_object_list(decl, value)


def _coerce_document(norm: "Normalizer", decl: FieldDecl, value: Any) -> dict | None:
    if isinstance(value, dict):
        if not any(isinstance(value.get(k), str) and value.get(k).strip() for k in DOCUMENT_KEYS):
            return None
        return {k: v for k, v in value.items() if isinstance(v, str)}
    text = to_text(value).strip()
    return {"uri": text} if text else None


def _coerce_scalar(norm: "Normalizer", decl: FieldDecl, value: Any) -> Any:
    if is_bool_key(decl.key):
        return norm.to_bool(value)
    if is_nullable_name_key(decl.key):
        return to_text(value).strip() or None
    text = to_text(value)
    if is_null_when_empty_key(decl.key) and not text.strip():
        return None
    return text


_COERCERS: Dict[str, Callable[["Normalizer", FieldDecl, Any], Any]] = {
    TOGGLE: _coerce_toggle,
    LIST: _coerce_list,
    TIME_LIST: _coerce_time_list,
    OBJECT_LIST: _coerce_object_list,
    DOCUMENT: _coerce_document,
}


class Normalizer:
    """Coerces raw record input into the canonical payload for its type.

    ``clock`` stamps objectList item timestamps; pass a fixed clock to get
    repeatable output. ``strict`` overrides the toggle parsing mode, which
    otherwise follows ``LIFEVAULT_STRICT_TOGGLES``.
    """

    def __init__(
        self,
        registry: SchemaRegistry | None = None,
        clock: Clock | None = None,
        strict: bool | None = None,
    ) -> None:
        self.registry = registry or default_registry()
        self.clock = clock or now_iso
        self.strict = strict

    def to_bool(self, value: Any) -> bool:
        return to_bool(value, False, strict=self.strict)

    def coerce(self, decl: FieldDecl, value: Any) -> Any:
        coercer = _COERCERS.get(decl.type, _coerce_scalar)
        return coercer(self, decl, value)

    def normalize_item_field(self, decl: FieldDecl, value: Any) -> Any:
        if decl.key in ITEM_LIST_KEYS:
            return to_string_list(value)
        coercer = _COERCERS.get(decl.type)
        if coercer is not None:
            return coercer(self, decl, value)
        text = to_text(value)
        if decl.key in ITEM_NULL_WHEN_EMPTY_KEYS and not text.strip():
            return None
        return text

    def normalize_object_list(self, decl: FieldDecl, raw: Any) -> list:
        if isinstance(raw, list):
            rows = [row for row in raw if isinstance(row, dict)]
        elif isinstance(raw, dict):
            rows = [raw]
        else:
            rows = []

        items = []
        for row in rows:
            item = {
                "id": to_text(row.get("id")) or make_id(decl.key.lower()),
                "createdAt": to_text(row.get("createdAt")) or self.clock(),
                "updatedAt": self.clock(),
            }
            for item_field in decl.item_fields:
                item[item_field.key] = self.normalize_item_field(item_field, row.get(item_field.key))
            if item_has_content(decl, item):
                items.append(item)
        return items

    def normalize_for_save(self, record_type: str, raw: Any) -> dict:
        base = self.registry.get_canonical_default(record_type)
        if not isinstance(raw, dict):
            return base
        for decl in self.registry.get_fields(record_type):
            if not decl.persisted:
                continue
            value = get_by_path(raw, decl.path)
            if value is None:
                continue
            set_by_path(base, decl.path, self.coerce(decl, value))
        return base

    def normalize_for_edit(self, record_type: str, raw: Any) -> dict:
        """Canonical payload plus flat aliases for nested keys (form binding)."""
        canonical = self.normalize_for_save(record_type, raw if raw is not None else {})
        result = dict(canonical)
        for decl in self.registry.get_fields(record_type):
            if not decl.persisted or not decl.path.is_nested:
                continue
            value = get_by_path(canonical, decl.path)
            if decl.type == OBJECT_LIST and isinstance(value, list):
                result[decl.key] = value
                continue
            result[decl.key] = "" if value is None else value
        return result


def normalize_for_save(record_type: str, raw: Any, clock: Clock | None = None) -> dict:
    return Normalizer(clock=clock).normalize_for_save(record_type, raw)


def normalize_for_edit(record_type: str, raw: Any, clock: Clock | None = None) -> dict:
    return Normalizer(clock=clock).normalize_for_edit(record_type, raw)
