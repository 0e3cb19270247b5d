"""Unit tests for the indice service layer (repository is faked)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from indices import repository, service
from indices.schemas import GeoIndice

JAPON = GeoIndice(
    country="Japon",
    region="Asie de l'Est",
    category="Conduite",
    content="Conduite à gauche",
    keywords=["gauche"],
)


class FakeRepository:
    """Captures repository calls for assertion."""

    def __init__(self) -> None:
        self.filtered_calls: list[dict] = []
        self.added: list[GeoIndice] = []
        self.random_result: GeoIndice | None = JAPON

    async def list_all(self) -> list[GeoIndice]:
        return [JAPON]

    async def list_filtered(self, **filters) -> list[GeoIndice]:
        self.filtered_calls.append(filters)
        return [JAPON]

    async def get_random(self) -> GeoIndice | None:
        return self.random_result

    async def add(self, indice: GeoIndice) -> int:
        self.added.append(indice)
        return 42


@pytest.fixture
def fake_repo(monkeypatch) -> FakeRepository:
    fake = FakeRepository()
    monkeypatch.setattr(repository, "list_all", fake.list_all)
    monkeypatch.setattr(repository, "list_filtered", fake.list_filtered)
    monkeypatch.setattr(repository, "get_random", fake.get_random)
    monkeypatch.setattr(repository, "add", fake.add)
    return fake


@pytest.mark.asyncio
async def test_empty_filters_become_absent(fake_repo):
    await service.list_filtered(country="", region="", category=None, q="")

    assert fake_repo.filtered_calls == [
        {"country": None, "region": None, "category": None, "search_term": None}
    ]


@pytest.mark.asyncio
async def test_filters_are_passed_through_unchanged(fake_repo):
    await service.list_filtered(country=" Japon ", region="Asie", category="conduite", q=" ")

    assert fake_repo.filtered_calls == [
        {"country": " Japon ", "region": "Asie", "category": "conduite", "search_term": " "}
    ]


@pytest.mark.asyncio
async def test_list_all_delegates(fake_repo):
    assert await service.list_all() == [JAPON]


@pytest.mark.asyncio
async def test_get_random_one_may_be_empty(fake_repo):
    fake_repo.random_result = None

    assert await service.get_random_one() is None


@pytest.mark.asyncio
async def test_add_one_accepts_dict_payload(fake_repo):
    new_id = await service.add_one(JAPON.model_dump())

    assert new_id == 42
    assert [i.model_dump() for i in fake_repo.added] == [JAPON.model_dump()]


@pytest.mark.asyncio
async def test_add_one_rejects_malformed_payload_before_writing(fake_repo):
    payload = JAPON.model_dump()
    payload.pop("content")

    with pytest.raises(ValidationError):
        await service.add_one(payload)

    assert fake_repo.added == []


@pytest.mark.asyncio
async def test_add_one_checks_constraints_on_model_input(fake_repo):
    blank = JAPON.model_copy(update={"country": ""})

    with pytest.raises(ValidationError):
        await service.add_one(blank)

    assert fake_repo.added == []
