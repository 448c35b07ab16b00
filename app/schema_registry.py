"""Record-type field declarations and canonical default payloads."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Tuple, Union

from lifevault.field_path import FieldPath, set_by_path

from app.conditions import is_visible


TEXT = "text"
MULTILINE = "multiline"
DATE = "date"
SELECT = "select"
TOGGLE = "toggle"
LIST = "list"
OBJECT_LIST = "objectList"
DOCUMENT = "document"
DESCRIPTION = "description"
TIME_LIST = "timeList"

FIELD_TYPES = {
    TEXT,
    MULTILINE,
    DATE,
    SELECT,
    TOGGLE,
    LIST,
    OBJECT_LIST,
    DOCUMENT,
    DESCRIPTION,
    TIME_LIST,
}

LabelFn = Callable[[Dict[str, Any]], str]
Label = Union[str, LabelFn]

BOOL_KEYS = ("privacyEnforced",)
BOOL_KEY_SUFFIXES = ("includeParents",)
NULLABLE_NAME_SUFFIXES = (".parent1Name", ".parent2Name")
NULL_WHEN_EMPTY_KEYS = ("expirationDate",)
ITEM_NULL_WHEN_EMPTY_KEYS = ("endDate", "expirationDate")
ITEM_LIST_KEYS = ("rules",)


@dataclass
class SchemaError(Exception):
    code: str
    message: str
    path: str | None = None

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        base = f"{self.code}: {self.message}"
        return f"{base} (path={self.path})" if self.path else base


@dataclass(frozen=True)
class ShowWhen:
    key: str
    equals: str


@dataclass(frozen=True)
class FieldDecl:
    key: str
    label: Label
    type: str = TEXT
    options: Tuple[str, ...] = ()
    show_when: ShowWhen | None = None
    item_fields: Tuple["FieldDecl", ...] = ()
    placeholder: str = ""
    content: str = ""
    add_label: str = ""
    path: FieldPath = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.type not in FIELD_TYPES:
            raise SchemaError("FIELD_TYPE_UNKNOWN", f"Unknown field type: {self.type}", self.key)
        object.__setattr__(self, "path", FieldPath.parse(self.key))
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "item_fields", tuple(self.item_fields))
        if self.type == OBJECT_LIST:
            if not self.item_fields:
                raise SchemaError("ITEM_FIELDS_MISSING", "objectList requires item fields", self.key)
            _check_unique(self.item_fields, self.key)
            for item_field in self.item_fields:
                if item_field.type == OBJECT_LIST:
                    raise SchemaError("ITEM_FIELDS_NESTED", "objectList item fields cannot nest", item_field.key)
        elif self.item_fields:
            raise SchemaError("ITEM_FIELDS_UNEXPECTED", "only objectList fields take item fields", self.key)

    @property
    def persisted(self) -> bool:
        return self.type != DESCRIPTION

    def resolve_label(self, values: Any = None) -> str:
        return resolve_label(self.label, values)


def resolve_label(label: Label, values: Any = None) -> str:
    if callable(label):
        return str(label(values if isinstance(values, dict) else {}))
    return label


def _check_unique(fields: Iterable[FieldDecl], scope: str) -> None:
    seen: set[str] = set()
    for decl in fields:
        if decl.key in seen:
            raise SchemaError("FIELD_KEY_DUPLICATE", f"Duplicate field key in {scope}", decl.key)
        seen.add(decl.key)


def is_bool_key(key: str) -> bool:
    return key in BOOL_KEYS or key.endswith(BOOL_KEY_SUFFIXES)


def is_nullable_name_key(key: str) -> bool:
    return key.endswith(NULLABLE_NAME_SUFFIXES)


def is_null_when_empty_key(key: str) -> bool:
    return key in NULL_WHEN_EMPTY_KEYS


def empty_value(decl: FieldDecl) -> Any:
    """Zero value a declared field takes in the canonical default."""
    if decl.type in (LIST, TIME_LIST, OBJECT_LIST):
        return []
    if decl.type == TOGGLE or is_bool_key(decl.key):
        return False
    if decl.type == DOCUMENT:
        return None
    if is_nullable_name_key(decl.key) or is_null_when_empty_key(decl.key):
        return None
    return ""


@dataclass(frozen=True)
class RecordSchema:
    record_type: str
    fields: Tuple[FieldDecl, ...]
    default: Dict[str, Any]


class SchemaRegistry:
    def __init__(self) -> None:
        self._schemas: Dict[str, RecordSchema] = {}

    def register(
        self,
        record_type: str,
        fields: Iterable[FieldDecl],
        extra_defaults: dict | None = None,
    ) -> RecordSchema:
        if record_type in self._schemas:
            raise SchemaError("RECORD_TYPE_DUPLICATE", "Record type already registered", record_type)
        decls = tuple(fields)
        _check_unique(decls, record_type)
        default = copy.deepcopy(extra_defaults) if isinstance(extra_defaults, dict) else {}
        for decl in decls:
            if decl.persisted:
                set_by_path(default, decl.path, empty_value(decl))
        schema = RecordSchema(record_type=record_type, fields=decls, default=default)
        self._schemas[record_type] = schema
        return schema

    def register_all(self, defs: Dict[str, List[FieldDecl]], extra_defaults: dict | None = None) -> None:
        extras = extra_defaults or {}
        for record_type, fields in defs.items():
            self.register(record_type, fields, extras.get(record_type))

    def has_schema(self, record_type: str) -> bool:
        return record_type in self._schemas

    def list_record_types(self) -> list[str]:
        return list(self._schemas.keys())

    def get_fields(self, record_type: str, data: Any = None) -> Tuple[FieldDecl, ...]:
        schema = self._schemas.get(record_type)
        if schema is None:
            return ()
        if data is None:
            return schema.fields
        return tuple(f for f in schema.fields if is_visible(f.show_when, data))

    def get_canonical_default(self, record_type: str) -> dict:
        schema = self._schemas.get(record_type)
        if schema is None:
            return {}
        return copy.deepcopy(schema.default)


@lru_cache(maxsize=1)
def default_registry() -> SchemaRegistry:
    from app.record_defs import EXTRA_DEFAULTS, RECORD_DEFS

    registry = SchemaRegistry()
    registry.register_all(RECORD_DEFS, EXTRA_DEFAULTS)
    return registry


def get_fields(record_type: str, data: Any = None) -> Tuple[FieldDecl, ...]:
    return default_registry().get_fields(record_type, data)


def get_canonical_default(record_type: str) -> dict:
    return default_registry().get_canonical_default(record_type)
