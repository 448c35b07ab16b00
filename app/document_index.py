"""Document-link index: document id to the records that attach it.

The index is a materialized view over every entity's record list. It can
always be thrown away and rebuilt with ``rebuild_all``; ``update_for_entity``
replaces one entity's contribution in place and yields the same buckets a
full rebuild would.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, Iterable, List

from lifevault.canonical_json import canonical_dumps, loads_or_default

from app.attachments import attachment_document_ids
from app.field_values import to_text
from app.record_store import decode_record_list
from app.stores import DOCUMENT_LINKS_KEY, KeyValueStore, entity_id_from_key, records_key

logger = logging.getLogger("lifevault.index")

Links = Dict[str, List[dict]]


def refs_for_entity(entity_id: str, records: Iterable[dict]) -> List[tuple[str, dict]]:
    """``(document_id, ref)`` pairs contributed by one entity, in record order."""
    pairs = []
    for record in records:
        if not isinstance(record, dict):
            continue
        record_id = to_text(record.get("id")).strip()
        record_type = to_text(record.get("recordType")).strip()
        if not record_id:
            continue
        ref = {"entityId": entity_id, "recordId": record_id, "recordType": record_type}
        title = to_text(record.get("title")).strip()
        if title:
            ref["title"] = title
        for document_id in attachment_document_ids(record.get("attachments")):
            pairs.append((document_id, dict(ref)))
    return pairs


def _sort_bucket(bucket: List[dict]) -> None:
    # stable: record order within an entity is kept
    bucket.sort(key=lambda ref: ref["entityId"])


def _valid_links(value) -> bool:
    if not isinstance(value, dict):
        return False
    for bucket in value.values():
        if not isinstance(bucket, list):
            return False
        if not all(isinstance(ref, dict) and "entityId" in ref for ref in bucket):
            return False
    return True


class DocumentLinkIndex:
    def __init__(self, kv: KeyValueStore) -> None:
        self.kv = kv
        self._links: Links | None = None

    async def _persist(self) -> None:
        await self.kv.set(DOCUMENT_LINKS_KEY, canonical_dumps(self._links or {}))

    async def load(self, refresh: bool = False) -> Links:
        """Cached links; ``refresh`` re-reads the persisted key first."""
        if self._links is not None and not refresh:
            return self._links
        raw = await self.kv.get(DOCUMENT_LINKS_KEY)
        parsed = loads_or_default(raw, None)
        if _valid_links(parsed):
            self._links = parsed
            return self._links
        if raw:
            logger.warning("document_index_unreadable action=rebuild")
        return await self.rebuild_all()

    async def ensure_ready(self) -> None:
        await self.load()

    async def rebuild_all(self) -> Links:
        links: Links = {}
        entity_ids = sorted(
            entity_id
            for entity_id in (entity_id_from_key(key) for key in await self.kv.list_keys())
            if entity_id is not None
        )
        for entity_id in entity_ids:
            records = decode_record_list(await self.kv.get(records_key(entity_id)), entity_id)
            for document_id, ref in refs_for_entity(entity_id, records):
                links.setdefault(document_id, []).append(ref)
        self._links = links
        await self._persist()
        logger.info("document_index_rebuilt entities=%s documents=%s", len(entity_ids), len(links))
        return links

    async def update_for_entity(self, entity_id: str, records: Iterable[dict]) -> None:
        # other processes sharing the store may have written since our last read
        links = await self.load(refresh=True)
        touched = set()
        for document_id in list(links.keys()):
            bucket = links[document_id]
            kept = [ref for ref in bucket if ref.get("entityId") != entity_id]
            if len(kept) != len(bucket):
                touched.add(document_id)
            if kept:
                links[document_id] = kept
            else:
                del links[document_id]
        for document_id, ref in refs_for_entity(entity_id, records):
            links.setdefault(document_id, []).append(ref)
            touched.add(document_id)
        for document_id in touched:
            if document_id in links:
                _sort_bucket(links[document_id])
        await self._persist()
        logger.info("document_index_updated entity_id=%s documents=%s", entity_id, len(touched))

    async def lookup(self, document_id: str) -> List[dict]:
        links = await self.load()
        return copy.deepcopy(links.get(document_id, []))

    async def snapshot(self) -> Links:
        return copy.deepcopy(await self.load())
