"""Per-entity record collections persisted in the key-value store."""

from __future__ import annotations

import copy
import json
import logging
from typing import TYPE_CHECKING, Any, List

from app.attachments import normalize_attachment_refs
from app.field_values import Clock, make_id, now_iso, to_text
from app.records_display import default_title
from app.records_normalize import Normalizer
from app.stores import KeyValueStore, entity_id_from_key, records_key

if TYPE_CHECKING:
    from app.document_index import DocumentLinkIndex

logger = logging.getLogger("lifevault.records")


def decode_record_list(raw: str | None, entity_id: str) -> List[dict]:
    """Parse the stored list for one entity; unreadable data reads as empty."""
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.warning("records_decode_failed entity_id=%s", entity_id)
        return []
    if not isinstance(parsed, list):
        logger.warning("records_not_a_list entity_id=%s", entity_id)
        return []
    return [item for item in parsed if isinstance(item, dict)]


def encode_record_list(records: List[dict]) -> str:
    return json.dumps(records, ensure_ascii=False)


class RecordStore:
    def __init__(
        self,
        kv: KeyValueStore,
        index: "DocumentLinkIndex | None" = None,
        normalizer: Normalizer | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.kv = kv
        self.index = index
        self.clock = clock or now_iso
        self.normalizer = normalizer or Normalizer(clock=self.clock)

    async def _read(self, entity_id: str) -> List[dict]:
        return decode_record_list(await self.kv.get(records_key(entity_id)), entity_id)

    async def _write(self, entity_id: str, records: List[dict]) -> None:
        await self.kv.set(records_key(entity_id), encode_record_list(records))

    async def _refresh_index(self, entity_id: str, records: List[dict]) -> None:
        if self.index is not None:
            await self.index.update_for_entity(entity_id, records)

    async def list_entity_ids(self) -> List[str]:
        ids = []
        for key in await self.kv.list_keys():
            entity_id = entity_id_from_key(key)
            if entity_id is not None:
                ids.append(entity_id)
        return sorted(ids)

    async def list_for_entity(self, entity_id: str) -> List[dict]:
        return copy.deepcopy(await self._read(entity_id))

    async def get_by_id(self, entity_id: str, record_id: str) -> dict | None:
        for record in await self._read(entity_id):
            if record.get("id") == record_id:
                return copy.deepcopy(record)
        return None

    def build_record(self, entity_id: str, record: dict, existing: dict | None = None) -> dict:
        record_type = to_text(record.get("recordType")).strip()
        data = self.normalizer.normalize_for_save(record_type, record.get("data"))
        now = self.clock()
        created_at = (existing or {}).get("createdAt") or to_text(record.get("createdAt")) or now
        return {
            "id": to_text(record.get("id")).strip() or make_id("rec"),
            "entityId": entity_id,
            "recordType": record_type,
            "title": to_text(record.get("title")).strip() or default_title(record_type, data),
            "data": data,
            "attachments": normalize_attachment_refs(record.get("attachments"), self.clock),
            "createdAt": created_at,
            "updatedAt": now,
        }

    async def upsert(self, entity_id: str, record: Any) -> dict:
        if not isinstance(record, dict):
            record = {}
        records = await self._read(entity_id)
        record_id = to_text(record.get("id")).strip()
        idx = next((i for i, r in enumerate(records) if record_id and r.get("id") == record_id), None)
        stored = self.build_record(entity_id, record, records[idx] if idx is not None else None)
        if idx is not None:
            records[idx] = stored
        else:
            records.insert(0, stored)
        await self._write(entity_id, records)
        await self._refresh_index(entity_id, records)
        logger.info(
            "record_upsert entity_id=%s record_id=%s record_type=%s created=%s",
            entity_id,
            stored["id"],
            stored["recordType"],
            idx is None,
        )
        return copy.deepcopy(stored)

    async def delete(self, entity_id: str, record_id: str) -> bool:
        records = await self._read(entity_id)
        remaining = [r for r in records if r.get("id") != record_id]
        removed = len(remaining) != len(records)
        if removed:
            await self._write(entity_id, remaining)
        await self._refresh_index(entity_id, remaining)
        logger.info("record_delete entity_id=%s record_id=%s removed=%s", entity_id, record_id, removed)
        return removed
