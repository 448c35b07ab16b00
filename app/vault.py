"""Vault: the records core wired to one key-value store."""

from __future__ import annotations

import logging
import os
from typing import Any, List

from app.attachments import link_document, unlink_document
from app.document_index import DocumentLinkIndex
from app.documents import DocumentStore
from app.field_values import Clock, now_iso
from app.record_store import RecordStore
from app.records_display import DisplayBuilder
from app.records_normalize import Normalizer
from app.schema_registry import SchemaRegistry, default_registry
from app.stores import InMemoryKeyValueStore, KeyValueStore

logger = logging.getLogger("lifevault")


class Vault:
    def __init__(
        self,
        kv: KeyValueStore,
        registry: SchemaRegistry | None = None,
        clock: Clock | None = None,
        strict_toggles: bool | None = None,
    ) -> None:
        self.kv = kv
        self.registry = registry or default_registry()
        self.clock = clock or now_iso
        self.normalizer = Normalizer(self.registry, clock=self.clock, strict=strict_toggles)
        self.display = DisplayBuilder(self.registry)
        self.index = DocumentLinkIndex(kv)
        self.records = RecordStore(kv, self.index, self.normalizer, self.clock)
        self.documents = DocumentStore(kv, self.clock)

    # normalization

    def normalize_for_save(self, record_type: str, raw: Any) -> dict:
        return self.normalizer.normalize_for_save(record_type, raw)

    def normalize_for_edit(self, record_type: str, raw: Any) -> dict:
        return self.normalizer.normalize_for_edit(record_type, raw)

    def get_display_rows(self, record_type: str, payload: Any) -> List[dict]:
        return self.display.to_display_rows(record_type, payload)

    def get_display_tables(self, record_type: str, payload: Any) -> List[dict]:
        return self.display.to_display_tables(record_type, payload)

    # records

    async def upsert_record(self, entity_id: str, record: Any) -> dict:
        return await self.records.upsert(entity_id, record)

    async def delete_record(self, entity_id: str, record_id: str) -> bool:
        return await self.records.delete(entity_id, record_id)

    async def list_records(self, entity_id: str) -> List[dict]:
        return await self.records.list_for_entity(entity_id)

    async def get_record(self, entity_id: str, record_id: str) -> dict | None:
        return await self.records.get_by_id(entity_id, record_id)

    # document links

    async def lookup_records_for_document(self, document_id: str) -> List[dict]:
        return await self.index.lookup(document_id)

    async def rebuild_document_index(self) -> None:
        await self.index.rebuild_all()

    async def link_document(
        self,
        entity_id: str,
        record_id: str,
        document_id: str,
        role: str | None = None,
        label: str | None = None,
    ) -> dict | None:
        record = await self.records.get_by_id(entity_id, record_id)
        if record is None:
            return None
        linked = link_document(record, document_id, role=role, label=label, clock=self.clock)
        return await self.records.upsert(entity_id, linked)

    async def unlink_document(self, entity_id: str, record_id: str, document_id: str) -> dict | None:
        record = await self.records.get_by_id(entity_id, record_id)
        if record is None:
            return None
        return await self.records.upsert(entity_id, unlink_document(record, document_id))

    # documents

    async def create_document(self, raw: Any) -> dict | None:
        return await self.documents.create(raw)

    async def get_document(self, document_id: str) -> dict | None:
        return await self.documents.get(document_id)

    async def list_documents(self) -> List[dict]:
        return await self.documents.list()

    async def delete_document(self, document_id: str) -> bool:
        return await self.documents.delete(document_id)

    async def migrate_legacy_attachments(self) -> int:
        migrated = await self.documents.migrate_legacy_attachments()
        await self.index.rebuild_all()
        return migrated

    async def startup(self) -> None:
        """Load the persisted index, rebuilding it when missing or corrupt."""
        await self.index.ensure_ready()


def build_kv_store() -> KeyValueStore:
    if os.getenv("USE_DB", "").strip() == "1":
        from app.stores_db import PostgresKeyValueStore

        logger.info("kv_store backend=postgres")
        return PostgresKeyValueStore()
    logger.info("kv_store backend=memory")
    return InMemoryKeyValueStore()


def build_vault() -> Vault:
    return Vault(build_kv_store())
