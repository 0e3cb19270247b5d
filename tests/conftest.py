"""Shared fixtures: a real PostgreSQL database for repository-level tests."""

from __future__ import annotations

import os

import pytest
import pytest_asyncio

from core import db
from indices import schema

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "").strip()


@pytest_asyncio.fixture
async def pg_store():
    """Pool + schema on an emptied database; closed after the test."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")

    await db.init_pool(TEST_DATABASE_URL)
    try:
        await schema.ensure_schema()
        await db.execute("TRUNCATE indice_keyword, indice, keyword RESTART IDENTITY CASCADE")
        yield db.pool()
    finally:
        await db.close_pool()
