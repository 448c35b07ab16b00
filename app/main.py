"""FastAPI surface over the records vault."""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


_load_env_file(ROOT / "app" / ".env")

import time
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.db import close_pool, get_db_stats, reset_db_stats
from app.record_types import get_record_meta, is_singleton_type, types_for_category
from app.records_display import default_title
from app.schema_registry import FieldDecl
from app.vault import build_vault

logger = logging.getLogger("lifevault")
logging.basicConfig(level=logging.INFO)

USE_DB = os.getenv("USE_DB", "").strip() == "1"
REQ_SLOW_MS = float(os.getenv("LIFEVAULT_REQ_SLOW_MS", "250"))

vault = build_vault()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await vault.startup()
    yield
    if USE_DB:
        close_pool()


app = FastAPI(title="LifeVault records", lifespan=lifespan)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        reset_db_stats()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Req-MS"] = f"{elapsed_ms:.1f}"
        response.headers["X-Queries"] = str(get_db_stats().get("queries", 0))
        if elapsed_ms >= REQ_SLOW_MS:
            logger.warning("slow_request method=%s path=%s ms=%.2f", request.method, request.url.path, elapsed_ms)
        return response


app.add_middleware(RequestTimingMiddleware)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error path=%s", request.url.path)
    return _error_response("INTERNAL_ERROR", "Unexpected server error", detail={"error": str(exc)}, status=500)


def _error_response(code: str, message: str, path: str | None = None, detail: dict | None = None, status: int = 400) -> JSONResponse:
    body = {
        "ok": False,
        "errors": [{"code": code, "message": message, "path": path, "detail": detail}],
        "warnings": [],
    }
    return JSONResponse(jsonable_encoder(body), status_code=status)


def _ok_response(payload: dict, warnings: list | None = None, status: int = 200) -> JSONResponse:
    body = {"ok": True, **payload, "errors": [], "warnings": warnings or []}
    return JSONResponse(jsonable_encoder(body), status_code=status)


async def _safe_json(request: Request) -> Any:
    try:
        return await request.json()
    except Exception:
        return None


def _field_payload(decl: FieldDecl, values: dict | None = None) -> dict:
    payload = {
        "key": decl.key,
        "label": decl.resolve_label(values),
        "type": decl.type,
    }
    if decl.options:
        payload["options"] = list(decl.options)
    if decl.show_when:
        payload["showWhen"] = {"key": decl.show_when.key, "equals": decl.show_when.equals}
    if decl.placeholder:
        payload["placeholder"] = decl.placeholder
    if decl.content:
        payload["content"] = decl.content
    if decl.add_label:
        payload["addLabel"] = decl.add_label
    if decl.item_fields:
        payload["itemFields"] = [_field_payload(item) for item in decl.item_fields]
    return payload


def _record_type_payload(record_type: str) -> dict:
    meta = get_record_meta(record_type)
    return {
        "recordType": record_type,
        "label": default_title(record_type),
        "category": meta.category if meta else None,
        "cardinality": meta.cardinality if meta else None,
        "singleton": is_singleton_type(record_type),
        "hasSchema": vault.registry.has_schema(record_type),
    }


def _with_display(record: dict) -> dict:
    return {
        **record,
        "rows": vault.get_display_rows(record.get("recordType"), record.get("data")),
        "tables": vault.get_display_tables(record.get("recordType"), record.get("data")),
    }


@app.get("/health")
async def health() -> dict:
    return {"ok": True, "db": USE_DB}


@app.get("/record-types")
async def list_record_types(category: str | None = None) -> JSONResponse:
    record_types = types_for_category(category) if category else vault.registry.list_record_types()
    types = [_record_type_payload(t) for t in record_types]
    return _ok_response({"record_types": types})


@app.get("/record-types/{record_type}/fields")
async def get_record_type_fields(record_type: str) -> JSONResponse:
    if not vault.registry.has_schema(record_type):
        return _error_response("RECORD_TYPE_NOT_FOUND", "Record type not found", "record_type", status=404)
    fields = [_field_payload(decl) for decl in vault.registry.get_fields(record_type)]
    return _ok_response({"record_type": record_type, "fields": fields})


@app.get("/record-types/{record_type}/default")
async def get_record_type_default(record_type: str) -> JSONResponse:
    if not vault.registry.has_schema(record_type):
        return _error_response("RECORD_TYPE_NOT_FOUND", "Record type not found", "record_type", status=404)
    return _ok_response({"record_type": record_type, "data": vault.registry.get_canonical_default(record_type)})


@app.post("/record-types/{record_type}/normalize")
async def normalize_record_data(request: Request, record_type: str) -> JSONResponse:
    body = await _safe_json(request)
    data = body.get("data") if isinstance(body, dict) and "data" in body else body
    return _ok_response({"record_type": record_type, "data": vault.normalize_for_save(record_type, data)})


@app.post("/record-types/{record_type}/display")
async def display_record_data(request: Request, record_type: str) -> JSONResponse:
    body = await _safe_json(request)
    data = body.get("data") if isinstance(body, dict) and "data" in body else body
    return _ok_response(
        {
            "rows": vault.get_display_rows(record_type, data),
            "tables": vault.get_display_tables(record_type, data),
        }
    )


@app.get("/entities/{entity_id}/records")
async def list_entity_records(entity_id: str) -> JSONResponse:
    return _ok_response({"entity_id": entity_id, "records": await vault.list_records(entity_id)})


@app.get("/entities/{entity_id}/records/{record_id}")
async def get_entity_record(entity_id: str, record_id: str) -> JSONResponse:
    record = await vault.get_record(entity_id, record_id)
    if record is None:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    return _ok_response({"record": _with_display(record)})


@app.post("/entities/{entity_id}/records")
async def upsert_entity_record(request: Request, entity_id: str) -> JSONResponse:
    body = await _safe_json(request)
    record = body.get("record") if isinstance(body, dict) and "record" in body else body
    if not isinstance(record, dict):
        return _error_response("RECORD_INVALID", "Record body must be an object", "record")
    if not isinstance(record.get("recordType"), str) or not record.get("recordType").strip():
        return _error_response("RECORD_TYPE_REQUIRED", "recordType is required", "record.recordType")
    stored = await vault.upsert_record(entity_id, record)
    return _ok_response({"record": _with_display(stored), "record_id": stored["id"]})


@app.delete("/entities/{entity_id}/records/{record_id}")
async def delete_entity_record(entity_id: str, record_id: str) -> JSONResponse:
    removed = await vault.delete_record(entity_id, record_id)
    if not removed:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    return _ok_response({"deleted": record_id})


@app.post("/entities/{entity_id}/records/{record_id}/attachments")
async def link_record_attachment(request: Request, entity_id: str, record_id: str) -> JSONResponse:
    body = await _safe_json(request)
    if not isinstance(body, dict) or not isinstance(body.get("documentId"), str) or not body["documentId"].strip():
        return _error_response("DOCUMENT_ID_REQUIRED", "documentId is required", "documentId")
    if await vault.get_document(body["documentId"].strip()) is None:
        return _error_response("DOCUMENT_NOT_FOUND", "Document not found", "documentId", status=404)
    record = await vault.link_document(
        entity_id,
        record_id,
        body["documentId"],
        role=body.get("role"),
        label=body.get("label"),
    )
    if record is None:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    return _ok_response({"record": record})


@app.delete("/entities/{entity_id}/records/{record_id}/attachments/{document_id}")
async def unlink_record_attachment(entity_id: str, record_id: str, document_id: str) -> JSONResponse:
    record = await vault.unlink_document(entity_id, record_id, document_id)
    if record is None:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    return _ok_response({"record": record})


@app.post("/documents/rebuild-index")
async def rebuild_document_index() -> JSONResponse:
    await vault.rebuild_document_index()
    return _ok_response({"rebuilt": True})


@app.post("/documents/migrate-legacy")
async def migrate_legacy_documents() -> JSONResponse:
    migrated = await vault.migrate_legacy_attachments()
    return _ok_response({"migrated_records": migrated})


@app.post("/documents")
async def create_document(request: Request) -> JSONResponse:
    body = await _safe_json(request)
    document = body.get("document") if isinstance(body, dict) and "document" in body else body
    if not isinstance(document, dict):
        return _error_response("DOCUMENT_INVALID", "Document body must be an object", "document")
    created = await vault.create_document(document)
    if created is None:
        return _error_response("DOCUMENT_URI_REQUIRED", "uri is required", "document.uri")
    return _ok_response({"document": created}, status=201)


@app.get("/documents")
async def list_documents() -> JSONResponse:
    return _ok_response({"documents": await vault.list_documents()})


@app.get("/documents/{document_id}")
async def get_document(document_id: str) -> JSONResponse:
    document = await vault.get_document(document_id)
    if document is None:
        return _error_response("DOCUMENT_NOT_FOUND", "Document not found", "document_id", status=404)
    return _ok_response({"document": document})


@app.get("/documents/{document_id}/links")
async def get_document_links(document_id: str) -> JSONResponse:
    return _ok_response({"document_id": document_id, "links": await vault.lookup_records_for_document(document_id)})


@app.delete("/documents/{document_id}")
async def delete_document(document_id: str) -> JSONResponse:
    removed = await vault.delete_document(document_id)
    if not removed:
        return _error_response("DOCUMENT_NOT_FOUND", "Document not found", "document_id", status=404)
    return _ok_response({"deleted": document_id})
