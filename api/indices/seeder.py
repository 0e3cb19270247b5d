"""
Seed-on-empty initialization.

Runs once per process start, after `schema.ensure_schema()` and before the
app serves requests (see `api/main.py`).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from . import repository
from .corpus import INITIAL_INDICES
from .schemas import GeoIndice

logger = logging.getLogger(__name__)


def seed_on_startup() -> bool:
    raw = os.environ.get("SEED_ON_STARTUP", "").strip().lower()
    return raw not in {"0", "false", "no", "off"}


async def seed_if_empty(corpus: Sequence[GeoIndice] = INITIAL_INDICES) -> int:
    """
    Insert every corpus record when the indice table is empty.

    Records are added one by one (one transaction each), so a failure midway
    leaves the records inserted so far in place. Returns how many were added.
    """
    existing = await repository.count()
    if existing > 0:
        logger.info("seed_skipped existing=%s", existing)
        return 0

    logger.info("seed_started records=%s", len(corpus))
    for indice in corpus:
        indice_id = await repository.add(indice)
        logger.info("seed_inserted country=%s id=%s", indice.country, indice_id)

    total = await repository.count()
    logger.info("seed_finished total=%s", total)
    return len(corpus)
