from __future__ import annotations

from typing import Any

from app.field_values import Clock, now_iso, to_text

ATTACHMENT_ROLES = ("FRONT", "BACK", "CARD", "PAGE", "OTHER")


def _clean(value: Any) -> str:
    return to_text(value).strip()


def normalize_attachment_ref(raw: Any, clock: Clock | None = None) -> dict | None:
    if not isinstance(raw, dict):
        return None
    document_id = _clean(raw.get("documentId"))
    if not document_id:
        return None
    ref = {"documentId": document_id}
    role = _clean(raw.get("role")).upper()
    if role in ATTACHMENT_ROLES:
        ref["role"] = role
    label = _clean(raw.get("label"))
    if label:
        ref["label"] = label
    ref["addedAt"] = _clean(raw.get("addedAt")) or (clock or now_iso)()
    return ref


def normalize_attachment_refs(value: Any, clock: Clock | None = None) -> list[dict]:
    """Keep attachment entries that reference a document id; drop the rest."""
    if not isinstance(value, list):
        return []
    refs = []
    for item in value:
        ref = normalize_attachment_ref(item, clock)
        if ref:
            refs.append(ref)
    return refs


def attachment_document_ids(value: Any) -> list[str]:
    """Distinct document ids in attachment order."""
    seen: list[str] = []
    for ref in normalize_attachment_refs(value, clock=lambda: ""):
        if ref["documentId"] not in seen:
            seen.append(ref["documentId"])
    return seen


def link_document(
    record: dict,
    document_id: str,
    role: str | None = None,
    label: str | None = None,
    clock: Clock | None = None,
) -> dict:
    next_id = _clean(document_id)
    if not next_id:
        return record
    current = normalize_attachment_refs(record.get("attachments"), clock)
    if any(ref["documentId"] == next_id for ref in current):
        return {**record, "attachments": current}
    ref = normalize_attachment_ref({"documentId": next_id, "role": role, "label": label}, clock)
    return {**record, "attachments": current + [ref]}


def unlink_document(record: dict, document_id: str) -> dict:
    next_id = _clean(document_id)
    if not next_id:
        return record
    current = normalize_attachment_refs(record.get("attachments"))
    return {**record, "attachments": [ref for ref in current if ref["documentId"] != next_id]}
