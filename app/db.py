"""Postgres connection pool and timed query helpers."""

from __future__ import annotations

import logging
import os
import threading
import time
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

import psycopg2.extras
from psycopg2.pool import SimpleConnectionPool

_logger = logging.getLogger("lifevault.db")
_query_logger = logging.getLogger("lifevault.db.query")

QUERY_SLOW_MS = float(os.getenv("LIFEVAULT_QUERY_SLOW_MS", "200"))
QUERY_LOG_ALL = os.getenv("LIFEVAULT_QUERY_LOG", "").strip() == "1"
MAX_LOGGED_PARAM = 80

_pool: SimpleConnectionPool | None = None
_pool_lock = threading.Lock()
_stats = {"queries": 0, "total_ms": 0.0}
_stats_lock = threading.Lock()


def get_db_url() -> str:
    url = os.getenv("SUPABASE_DB_URL") or os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("SUPABASE_DB_URL or DATABASE_URL is required when USE_DB=1")
    return url


def init_pool(minconn: int | None = None, maxconn: int | None = None) -> SimpleConnectionPool:
    global _pool
    with _pool_lock:
        if _pool is None:
            low = minconn if minconn is not None else int(os.getenv("LIFEVAULT_DB_POOL_MIN", "1"))
            high = maxconn if maxconn is not None else int(os.getenv("LIFEVAULT_DB_POOL_MAX", "10"))
            _pool = SimpleConnectionPool(low, high, dsn=get_db_url())
            _logger.info("db_pool_ready min=%s max=%s", low, high)
        return _pool


def close_pool() -> None:
    global _pool
    with _pool_lock:
        if _pool is not None:
            _pool.closeall()
            _pool = None
            _logger.info("db_pool_closed")


def reset_db_stats() -> None:
    with _stats_lock:
        _stats["queries"] = 0
        _stats["total_ms"] = 0.0


def _record_query(elapsed_ms: float) -> None:
    with _stats_lock:
        _stats["queries"] += 1
        _stats["total_ms"] += elapsed_ms


def get_db_stats() -> dict:
    with _stats_lock:
        return {"queries": _stats["queries"], "total_ms": round(_stats["total_ms"], 2)}


@contextmanager
def get_conn() -> Iterator[Any]:
    """Borrow a pooled connection; commit on success, roll back on error."""
    pool = _pool or init_pool()
    conn = pool.getconn()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        pool.putconn(conn)


def _loggable(params: Iterable[Any] | None) -> list | None:
    # stored values are whole JSON documents; keep log lines short
    if params is None:
        return None
    out = []
    for value in params:
        if isinstance(value, str) and len(value) > MAX_LOGGED_PARAM:
            out.append(f"<str:{len(value)}>")
        else:
            out.append(value)
    return out


@contextmanager
def _timed_cursor(conn, query_name: str | None, params: Iterable[Any] | None, dict_rows: bool) -> Iterator[Any]:
    factory = psycopg2.extras.RealDictCursor if dict_rows else None
    start = time.perf_counter()
    rowcount = None
    try:
        with conn.cursor(cursor_factory=factory) as cur:
            yield cur
            rowcount = cur.rowcount
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        _record_query(elapsed_ms)
        if QUERY_LOG_ALL or elapsed_ms >= QUERY_SLOW_MS:
            level = logging.WARNING if elapsed_ms >= QUERY_SLOW_MS else logging.INFO
            _query_logger.log(
                level,
                "db_query name=%s ms=%.2f rowcount=%s params=%s",
                query_name or "unnamed",
                elapsed_ms,
                rowcount,
                _loggable(params),
            )


def fetch_one(conn, sql: str, params: Iterable[Any] | None = None, query_name: str | None = None) -> dict | None:
    with _timed_cursor(conn, query_name, params, dict_rows=True) as cur:
        cur.execute(sql, params or [])
        row = cur.fetchone()
    return dict(row) if row else None


def fetch_all(conn, sql: str, params: Iterable[Any] | None = None, query_name: str | None = None) -> list[dict]:
    with _timed_cursor(conn, query_name, params, dict_rows=True) as cur:
        cur.execute(sql, params or [])
        rows = cur.fetchall()
    return [dict(row) for row in rows]


def execute(conn, sql: str, params: Iterable[Any] | None = None, query_name: str | None = None) -> int:
    with _timed_cursor(conn, query_name, params, dict_rows=False) as cur:
        cur.execute(sql, params or [])
        count = cur.rowcount
    return count
