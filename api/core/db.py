"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

Connection settings:
- `DATABASE_URL` wins when set.
- Otherwise the DSN is built from POSTGRES_HOST / POSTGRES_PORT / POSTGRES_DB /
  POSTGRES_USER / POSTGRES_PASSWORD.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg

# Query/transaction failures surface as the driver's own exceptions.
StorageError = asyncpg.PostgresError

_pool: asyncpg.Pool | None = None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return _sanitize_database_url(url)

    host = _env_str("POSTGRES_HOST", "localhost")
    port = _env_int("POSTGRES_PORT", 5432)
    name = _env_str("POSTGRES_DB", "geogrimoire")
    user = quote(_env_str("POSTGRES_USER", "geouser"), safe="")
    password = quote(_env_str("POSTGRES_PASSWORD", "geopassword"), safe="")
    return f"postgresql://{user}:{password}@{host}:{port}/{name}"


def pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 2))


def pool_max_size() -> int:
    return max(1, pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 10))


def acquire_timeout_s() -> float:
    return float(_env_int("DB_ACQUIRE_TIMEOUT_S", 30))


def command_timeout_s() -> float:
    return float(_env_int("DB_COMMAND_TIMEOUT_S", 30))


async def init_pool(dsn: str | None = None) -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=dsn or database_url(),
        min_size=pool_min_size(),
        max_size=pool_max_size(),
        command_timeout=command_timeout_s(),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


@asynccontextmanager
async def connection() -> AsyncIterator[asyncpg.Connection]:
    """
    Borrow one pooled connection.

    Waiting longer than DB_ACQUIRE_TIMEOUT_S raises asyncio.TimeoutError.
    """
    async with pool().acquire(timeout=acquire_timeout_s()) as conn:
        yield conn


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connection() as conn:
        row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connection() as conn:
        rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def fetch_val(sql: str, *args: Any) -> Any:
    """
    Run a query and return the first column of the first row.
    """
    async with connection() as conn:
        return await conn.fetchval(sql, *args)


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    async with connection() as conn:
        await conn.execute(sql, *args)
