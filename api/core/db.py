"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Multi-statement writes that must land together go through `transaction()`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .config import Settings

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

# libpq sslmode values that require TLS.
_SSL_REQUIRED_MODES = {"require", "verify-ca", "verify-full"}


def split_sslmode(url: str) -> tuple[str, str | None]:
    """
    Strip `sslmode` from a libpq-style URL (Supabase connection strings carry
    it) and return it separately so it can be passed to asyncpg as `ssl=`.
    """
    parts = urlsplit(url)
    if not parts.query:
        return url, None

    sslmode: str | None = None
    params = []
    for k, v in parse_qsl(parts.query, keep_blank_values=True):
        if k == "sslmode":
            sslmode = v.strip().lower() or None
            continue
        params.append((k, v))
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment)), sslmode


async def init_pool(settings: Settings) -> None:
    global _pool
    if _pool is not None:
        return None

    dsn, sslmode = split_sslmode(settings.database_url.strip())
    ssl: str | None = "require" if sslmode in _SSL_REQUIRED_MODES else None
    _pool = await asyncpg.create_pool(
        dsn=dsn,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
        ssl=ssl,
    )
    logger.info(
        "db_pool_ready min_size=%s max_size=%s ssl=%s",
        settings.db_pool_min_size,
        settings.db_pool_max_size,
        ssl or "off",
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def affected_rows(status: str) -> int:
    """
    Parse the row count out of an asyncpg command status ("DELETE 3" -> 3).
    """
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, AttributeError):
        return 0


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
    """
    status = await pool().execute(sql, *args)
    return affected_rows(status)


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire a connection and open a transaction on it.

    Commits when the block exits normally; any exception rolls back every
    statement issued on the yielded connection and is re-raised.
    """
    async with pool().acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            yield conn


async def ping() -> None:
    """
    Minimal round trip used by the health check. Raises on failure.
    """
    await pool().fetchval("SELECT 1")
