"""Document list storage and migration of record-embedded file URIs."""

from __future__ import annotations

import copy
import json
import logging
from typing import Any, List

from app.attachments import normalize_attachment_refs
from app.field_values import Clock, make_id, now_iso, to_text
from app.record_store import decode_record_list, encode_record_list
from app.stores import DOCUMENTS_KEY, KeyValueStore, entity_id_from_key, records_key

logger = logging.getLogger("lifevault.documents")

DEFAULT_MIME_TYPE = "application/octet-stream"

# (data key, attachment role, attachment label)
LEGACY_URI_FIELDS = (
    ("uri", "OTHER", None),
    ("fileUri", "OTHER", None),
    ("documentUri", "OTHER", None),
    ("imageUri", "OTHER", None),
    ("frontImageUri", "FRONT", "Front"),
    ("backImageUri", "BACK", "Back"),
)
LEGACY_URI_KEYS = frozenset(key for key, _, _ in LEGACY_URI_FIELDS)


def _clean(value: Any) -> str:
    return to_text(value).strip()


def normalize_document(raw: Any, clock: Clock | None = None) -> dict | None:
    """Canonical document entry; entries without a URI are discarded."""
    if not isinstance(raw, dict):
        return None
    uri = _clean(raw.get("uri"))
    if not uri:
        return None
    doc = {
        "id": _clean(raw.get("id")) or make_id("doc"),
        "uri": uri,
        "mimeType": _clean(raw.get("mimeType")) or DEFAULT_MIME_TYPE,
        "createdAt": _clean(raw.get("createdAt")) or (clock or now_iso)(),
    }
    for key in ("fileName", "title", "note", "sha256"):
        value = _clean(raw.get(key))
        if value:
            doc[key] = value
    size = raw.get("sizeBytes")
    if isinstance(size, int) and not isinstance(size, bool):
        doc["sizeBytes"] = size
    tags = raw.get("tags")
    if isinstance(tags, list):
        cleaned = [t for t in (_clean(tag) for tag in tags) if t]
        if cleaned:
            doc["tags"] = cleaned
    metadata = raw.get("metadata")
    doc["metadata"] = copy.deepcopy(metadata) if isinstance(metadata, dict) else {}
    return doc


class DocumentStore:
    def __init__(self, kv: KeyValueStore, clock: Clock | None = None) -> None:
        self.kv = kv
        self.clock = clock or now_iso

    async def _read(self) -> List[dict]:
        raw = await self.kv.get(DOCUMENTS_KEY)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.warning("documents_decode_failed")
            return []
        if not isinstance(parsed, list):
            return []
        docs = []
        for item in parsed:
            doc = normalize_document(item, self.clock)
            if doc:
                docs.append(doc)
        return docs

    async def _write(self, docs: List[dict]) -> None:
        await self.kv.set(DOCUMENTS_KEY, json.dumps(docs, ensure_ascii=False))

    async def list(self) -> List[dict]:
        return await self._read()

    async def get(self, document_id: str) -> dict | None:
        for doc in await self._read():
            if doc["id"] == document_id:
                return doc
        return None

    async def upsert(self, raw: dict) -> dict | None:
        doc = normalize_document(raw, self.clock)
        if doc is None:
            return None
        docs = await self._read()
        idx = next((i for i, d in enumerate(docs) if d["id"] == doc["id"]), None)
        if idx is not None:
            docs[idx] = doc
        else:
            docs.insert(0, doc)
        await self._write(docs)
        logger.info("document_upsert document_id=%s created=%s", doc["id"], idx is None)
        return doc

    async def create(self, raw: dict) -> dict | None:
        return await self.upsert(raw if isinstance(raw, dict) else {})

    async def delete(self, document_id: str) -> bool:
        docs = await self._read()
        remaining = [d for d in docs if d["id"] != document_id]
        if len(remaining) == len(docs):
            return False
        await self._write(remaining)
        logger.info("document_delete document_id=%s", document_id)
        return True

    def _ensure_from_uri(self, docs: List[dict], uri: str, **extra: Any) -> dict:
        for doc in docs:
            if doc["uri"] == uri:
                return doc
        doc = normalize_document({"uri": uri, **extra}, self.clock)
        docs.insert(0, doc)
        return doc

    def _migrate_record(self, docs: List[dict], record: dict) -> bool:
        changed = False
        refs = normalize_attachment_refs(record.get("attachments"), self.clock)
        title = _clean(record.get("title")) or None
        legacy = record.get("attachments") if isinstance(record.get("attachments"), list) else []
        for row in legacy:
            if not isinstance(row, dict) or _clean(row.get("documentId")):
                continue
            uri = _clean(row.get("uri"))
            if not uri:
                continue
            doc = self._ensure_from_uri(
                docs,
                uri,
                fileName=row.get("fileName"),
                mimeType=row.get("mimeType"),
                title=title,
            )
            ref = {"documentId": doc["id"]}
            label = _clean(row.get("label") or row.get("title"))
            if label:
                ref["label"] = label
            ref["addedAt"] = _clean(row.get("createdAt")) or self.clock()
            refs.append(ref)
            changed = True

        data = record.get("data") if isinstance(record.get("data"), dict) else {}
        found_legacy = False
        for key, role, label in LEGACY_URI_FIELDS:
            uri = _clean(data.get(key))
            if not uri:
                continue
            found_legacy = True
            doc = self._ensure_from_uri(docs, uri, title=title)
            if any(ref["documentId"] == doc["id"] for ref in refs):
                continue
            ref = {"documentId": doc["id"], "role": role}
            if label:
                ref["label"] = label
            ref["addedAt"] = self.clock()
            refs.append(ref)
            changed = True
        if found_legacy:
            record["data"] = {k: v for k, v in data.items() if k not in LEGACY_URI_KEYS}
            changed = True
        record["attachments"] = refs
        return changed

    async def migrate_legacy_attachments(self) -> int:
        """Move record-embedded file URIs into document entries.

        Returns the number of records rewritten. The caller rebuilds the
        document-link index afterwards.
        """
        docs = await self._read()
        migrated = 0
        for key in sorted(await self.kv.list_keys()):
            entity_id = entity_id_from_key(key)
            if entity_id is None:
                continue
            records = decode_record_list(await self.kv.get(key), entity_id)
            changed = [self._migrate_record(docs, record) for record in records]
            if any(changed):
                await self.kv.set(records_key(entity_id), encode_record_list(records))
                migrated += sum(1 for flag in changed if flag)
        await self._write(docs)
        logger.info("documents_migrated records=%s documents=%s", migrated, len(docs))
        return migrated
