"""
Indice tables (DDL).

There is no migration tool here: every statement is create-if-absent and runs
on each process start, before seeding.
"""

from __future__ import annotations

import logging

import asyncpg

from core import db

logger = logging.getLogger(__name__)


class SchemaError(RuntimeError):
    pass


# (object name, statement), executed in order.
SCHEMA_STATEMENTS: list[tuple[str, str]] = [
    (
        "indice",
        """
        CREATE TABLE IF NOT EXISTS indice (
          id BIGSERIAL PRIMARY KEY,
          country TEXT NOT NULL,
          region TEXT NOT NULL,
          category TEXT NOT NULL,
          content TEXT NOT NULL
        )
        """,
    ),
    (
        "keyword",
        """
        CREATE TABLE IF NOT EXISTS keyword (
          id BIGSERIAL PRIMARY KEY,
          keyword TEXT NOT NULL UNIQUE
        )
        """,
    ),
    (
        "indice_keyword",
        """
        CREATE TABLE IF NOT EXISTS indice_keyword (
          indice_id BIGINT NOT NULL REFERENCES indice(id) ON DELETE CASCADE,
          keyword_id BIGINT NOT NULL REFERENCES keyword(id) ON DELETE CASCADE,
          PRIMARY KEY (indice_id, keyword_id)
        )
        """,
    ),
    (
        "idx_keyword_keyword",
        """
        CREATE INDEX IF NOT EXISTS idx_keyword_keyword
        ON keyword(keyword)
        """,
    ),
]


async def ensure_schema() -> None:
    """
    Create the indice/keyword/link tables and the keyword index if missing.

    Any failure is fatal for startup and is raised as SchemaError.
    """
    try:
        async with db.connection() as conn:
            for name, statement in SCHEMA_STATEMENTS:
                await conn.execute(statement)
                logger.info("schema_ready object=%s", name)
    except (asyncpg.PostgresError, OSError) as exc:
        raise SchemaError(f"Failed to create database schema: {exc}") from exc
