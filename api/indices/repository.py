"""
Indice persistence.
This module is where indice-related SQL lives.

Tables (see `schema.py`):
- indice(id, country, region, category, content)
- keyword(id, keyword UNIQUE)
- indice_keyword(indice_id, keyword_id)

Keyword dedup is exact and case-sensitive; filtering is case-insensitive.
Errors from asyncpg are not caught here.
"""

from __future__ import annotations

import random

import asyncpg

from core import db

from .schemas import GeoIndice, from_row

# Scalar columns + keywords aggregated over the link table.
# Keywords come back ordered by keyword id, not by the order they were added.
_SELECT_INDICES = """
    SELECT
      i.id,
      i.country,
      i.region,
      i.category,
      i.content,
      COALESCE(
        array_agg(k.keyword ORDER BY k.id) FILTER (WHERE k.id IS NOT NULL),
        ARRAY[]::text[]
      ) AS keywords
    FROM indice i
    LEFT JOIN indice_keyword ik ON ik.indice_id = i.id
    LEFT JOIN keyword k ON k.id = ik.keyword_id
"""


async def list_all() -> list[GeoIndice]:
    """
    All indices in insertion order, each with its keywords.
    """
    rows = await db.fetch_all(
        _SELECT_INDICES
        + """
        GROUP BY i.id
        ORDER BY i.id
        """
    )
    return [from_row(row) for row in rows]


async def list_filtered(
    *,
    country: str | None = None,
    region: str | None = None,
    category: str | None = None,
    search_term: str | None = None,
) -> list[GeoIndice]:
    """
    Indices matching every supplied filter (logical AND).

    - country/region/category: case-insensitive substring of that column
    - search_term: case-insensitive substring of content or of any keyword

    None or "" means "no constraint". strpos() is used instead of LIKE so
    that '%' and '_' are matched literally.
    """
    rows = await db.fetch_all(
        _SELECT_INDICES
        + """
        WHERE ($1::text IS NULL OR $1 = '' OR strpos(lower(i.country), lower($1)) > 0)
          AND ($2::text IS NULL OR $2 = '' OR strpos(lower(i.region), lower($2)) > 0)
          AND ($3::text IS NULL OR $3 = '' OR strpos(lower(i.category), lower($3)) > 0)
          AND (
            $4::text IS NULL
            OR $4 = ''
            OR strpos(lower(i.content), lower($4)) > 0
            OR EXISTS (
              SELECT 1
              FROM indice_keyword sik
              JOIN keyword sk ON sk.id = sik.keyword_id
              WHERE sik.indice_id = i.id
                AND strpos(lower(sk.keyword), lower($4)) > 0
            )
          )
        GROUP BY i.id
        ORDER BY i.id
        """,
        country,
        region,
        category,
        search_term,
    )
    return [from_row(row) for row in rows]


async def count() -> int:
    value = await db.fetch_val("SELECT count(*) FROM indice")
    return int(value or 0)


async def get_random() -> GeoIndice | None:
    """
    Pick one indice: count, draw an offset in [0, count), fetch that row.

    The two steps are not in one transaction, so a concurrent write can bias
    the draw or make the offset miss (then None is returned).
    """
    total = await count()
    if total <= 0:
        return None

    offset = random.randrange(total)
    row = await db.fetch_one(
        _SELECT_INDICES
        + """
        WHERE i.id = (
          SELECT id
          FROM indice
          ORDER BY id
          OFFSET $1
          LIMIT 1
        )
        GROUP BY i.id
        """,
        offset,
    )
    return from_row(row) if row is not None else None


async def add(indice: GeoIndice) -> int:
    """
    Insert an indice + its keyword links in a single transaction.

    Existing keywords (exact text match) are reused, new ones are created.
    Returns the new indice id.
    """
    async with db.connection() as conn:
        async with conn.transaction():
            indice_id = await conn.fetchval(
                """
                INSERT INTO indice (country, region, category, content)
                VALUES ($1, $2, $3, $4)
                RETURNING id
                """,
                indice.country,
                indice.region,
                indice.category,
                indice.content,
            )
            if indice_id is None:
                raise RuntimeError("Failed to insert indice.")

            for keyword in indice.distinct_keywords():
                await _link_keyword(conn, int(indice_id), keyword)

            return int(indice_id)


async def _link_keyword(conn: asyncpg.Connection, indice_id: int, keyword: str) -> None:
    # The no-op DO UPDATE makes RETURNING yield the existing row's id too.
    keyword_id = await conn.fetchval(
        """
        INSERT INTO keyword (keyword)
        VALUES ($1)
        ON CONFLICT (keyword) DO UPDATE
        SET keyword = EXCLUDED.keyword
        RETURNING id
        """,
        keyword,
    )
    await conn.execute(
        """
        INSERT INTO indice_keyword (indice_id, keyword_id)
        VALUES ($1, $2)
        """,
        indice_id,
        int(keyword_id),
    )
