"""
FastAPI router for indice endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/indices")
async def list_indices(
    country: str | None = None,
    region: str | None = None,
    category: str | None = None,
    q: str | None = None,
) -> list[schemas.GeoIndice]:
    """
    List indices, optionally filtered (all filters combine with AND).
    """
    logger.info(
        "list_indices country=%s region=%s category=%s q=%s",
        country,
        region,
        category,
        q,
    )
    indices = await service.list_filtered(country=country, region=region, category=category, q=q)
    logger.info("list_indices results=%s", len(indices))
    return indices


@router.get("/indices/random")
async def random_indice() -> schemas.GeoIndice:
    indice = await service.get_random_one()
    if indice is None:
        logger.warning("random_indice store_empty")
        raise HTTPException(status_code=404, detail="No indice available.")
    logger.info("random_indice country=%s", indice.country)
    return indice


@router.post("/indices", status_code=status.HTTP_201_CREATED)
async def create_indice(request: schemas.CreateIndiceRequest) -> schemas.IndiceCreatedResponse:
    """
    Add one indice with its keywords. Malformed bodies are rejected with 422.
    """
    indice_id = await service.add_one(request)
    logger.info("indice_created id=%s country=%s category=%s", indice_id, request.country, request.category)
    return schemas.IndiceCreatedResponse(id=indice_id)
