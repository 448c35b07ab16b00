"""LifeVault kernel utilities."""

from .canonical_json import CanonicalJsonTypeError, canonical_dumps, loads_or_default
from .field_path import FieldPath, FieldPathError, get_by_path, set_by_path

__all__ = [
    "CanonicalJsonTypeError",
    "FieldPath",
    "FieldPathError",
    "canonical_dumps",
    "get_by_path",
    "loads_or_default",
    "set_by_path",
]
