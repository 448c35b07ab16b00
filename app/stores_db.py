"""DB-backed key-value store for record persistence."""

from __future__ import annotations

import logging
import os
from typing import Callable, List

import anyio

from app.db import execute, fetch_all, fetch_one, get_conn

logger = logging.getLogger("lifevault.db")

KV_NAMESPACE = os.getenv("LIFEVAULT_KV_NAMESPACE", "lifevault").strip() or "lifevault"

_SCHEMA_SQL = """
create table if not exists lifevault_kv (
  namespace text not null,
  key text not null,
  value text not null,
  updated_at timestamptz not null default now(),
  primary key (namespace, key)
)
"""


class PostgresKeyValueStore:
    """Rows of ``lifevault_kv`` scoped to one namespace.

    psycopg2 is blocking, so each call runs in a worker thread.
    """

    def __init__(self, namespace: str | None = None, conn_factory: Callable = get_conn) -> None:
        self.namespace = namespace or KV_NAMESPACE
        self._conn_factory = conn_factory
        self._schema_ready = False

    def _ensure_schema(self, conn) -> None:
        if self._schema_ready:
            return
        execute(conn, _SCHEMA_SQL, query_name="kv.ensure_schema")
        self._schema_ready = True
        logger.info("kv_schema_ready namespace=%s", self.namespace)

    def _get(self, key: str) -> str | None:
        with self._conn_factory() as conn:
            self._ensure_schema(conn)
            row = fetch_one(
                conn,
                "select value from lifevault_kv where namespace=%s and key=%s",
                [self.namespace, key],
                query_name="kv.get",
            )
            return row.get("value") if row else None

    def _set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        with self._conn_factory() as conn:
            self._ensure_schema(conn)
            execute(
                conn,
                """
                insert into lifevault_kv (namespace, key, value, updated_at)
                values (%s,%s,%s,now())
                on conflict (namespace, key)
                do update set value=excluded.value, updated_at=now()
                """,
                [self.namespace, key, value],
                query_name="kv.set",
            )

    def _list_keys(self) -> List[str]:
        with self._conn_factory() as conn:
            self._ensure_schema(conn)
            rows = fetch_all(
                conn,
                "select key from lifevault_kv where namespace=%s order by key asc",
                [self.namespace],
                query_name="kv.list_keys",
            )
            return [row["key"] for row in rows]

    async def get(self, key: str) -> str | None:
        return await anyio.to_thread.run_sync(self._get, key)

    async def set(self, key: str, value: str) -> None:
        await anyio.to_thread.run_sync(self._set, key, value)

    async def list_keys(self) -> List[str]:
        return await anyio.to_thread.run_sync(self._list_keys)
