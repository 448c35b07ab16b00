"""Visibility conditions for schema fields and object-list item fields."""

from __future__ import annotations

from typing import Any, Callable, Dict

from lifevault.field_path import get_by_path

from app.field_values import to_text

SCOPES = ("record", "item")


def _lookup(ref: Any, context: dict) -> Any:
    """Resolve ``$record.x`` / ``$item.x``; a bare key tries the item first."""
    if not isinstance(ref, str):
        return None
    for scope in SCOPES:
        prefix = f"${scope}."
        if ref.startswith(prefix):
            return get_by_path(context.get(scope) or {}, ref[len(prefix) :])
    found = get_by_path(context.get("item") or {}, ref)
    if found is None:
        found = get_by_path(context.get("record") or {}, ref)
    return found


def _norm(value: Any) -> str:
    return to_text(value).strip()


_COMPARISONS: Dict[str, Callable[[Any, Any], bool]] = {
    "eq": lambda left, right: _norm(left) == _norm(right),
    "neq": lambda left, right: _norm(left) != _norm(right),
    "in": lambda left, right: isinstance(right, list) and _norm(left) in {_norm(r) for r in right},
    "exists": lambda left, _right: _norm(left) != "",
}


def eval_condition(condition: dict | None, context: dict) -> bool:
    """Evaluate a condition tree; anything malformed evaluates to False."""
    if not isinstance(condition, dict) or not condition:
        return False
    op = condition.get("op")
    if op == "and":
        return all(eval_condition(c, context) for c in condition.get("conditions") or [])
    if op == "or":
        return any(eval_condition(c, context) for c in condition.get("conditions") or [])
    if op == "not":
        return not eval_condition(condition.get("condition"), context)
    compare = _COMPARISONS.get(op)
    if compare is None:
        return False
    return compare(_lookup(condition.get("field"), context), condition.get("value"))


def show_when_condition(key: str, equals: str, scope: str = "record") -> dict:
    return {"op": "eq", "field": f"${scope}.{key}", "value": equals}


def is_visible(show_when: Any, values: Any, scope: str = "record") -> bool:
    if show_when is None:
        return True
    condition = show_when_condition(show_when.key, show_when.equals, scope=scope)
    return eval_condition(condition, {scope: values if isinstance(values, dict) else {}})
