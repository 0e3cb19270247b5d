"""
Indice API schemas (request/response models).

Wire shape of one indice:
{country, region, category, content, keywords: [...]}

`GeoIndice` encodes whatever is stored; `CreateIndiceRequest` adds the
input constraints checked before a write.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GeoIndice(BaseModel):
    model_config = ConfigDict(extra="forbid")

    country: str
    region: str
    category: str
    content: str
    keywords: list[str]

    def distinct_keywords(self) -> list[str]:
        # Exact-match dedup, first occurrence wins.
        return list(dict.fromkeys(self.keywords))


class CreateIndiceRequest(GeoIndice):
    country: str = Field(..., min_length=1, max_length=255)
    region: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)


class IndiceCreatedResponse(BaseModel):
    ok: bool = True
    id: int


def from_row(row: dict[str, Any]) -> GeoIndice:
    return GeoIndice(
        country=str(row["country"]),
        region=str(row["region"]),
        category=str(row["category"]),
        content=str(row["content"]),
        keywords=[str(k) for k in (row.get("keywords") or [])],
    )
