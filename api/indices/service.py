"""
Indice service (orchestration).

Thin layer between the router and the repository:
- empty filters become "no filter"
- POST payloads are validated into a CreateIndiceRequest before anything is written
"""

from __future__ import annotations

from typing import Any

from . import repository
from .schemas import CreateIndiceRequest, GeoIndice


def _clean_filter(value: str | None) -> str | None:
    return value or None


async def list_all() -> list[GeoIndice]:
    return await repository.list_all()


async def list_filtered(
    *,
    country: str | None = None,
    region: str | None = None,
    category: str | None = None,
    q: str | None = None,
) -> list[GeoIndice]:
    return await repository.list_filtered(
        country=_clean_filter(country),
        region=_clean_filter(region),
        category=_clean_filter(category),
        search_term=_clean_filter(q),
    )


async def get_random_one() -> GeoIndice | None:
    return await repository.get_random()


async def add_one(indice: GeoIndice | dict[str, Any]) -> int:
    """
    Store one indice and return its id.

    Raises pydantic.ValidationError for malformed input (nothing is written).
    """
    if isinstance(indice, GeoIndice):
        indice = indice.model_dump()
    request = CreateIndiceRequest.model_validate(indice)
    return await repository.add(request)
