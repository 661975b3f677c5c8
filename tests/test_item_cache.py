"""
Item detail cache tests - Redis replaced by an in-memory double.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from rentkaro.cache import redis_client
from rentkaro.db.models import Item
from rentkaro.db.repositories.base_repository import BaseRepository
from rentkaro.db.repositories.item_repository import ItemRepository

DRILL = {"name": "Drill", "pricePerDay": 15, "category": "Tools"}


class FakeRedis:
    def __init__(self, events: list | None = None):
        self.store: dict[str, str] = {}
        self.events = events if events is not None else []

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value

    async def delete(self, key):
        self.events.append(("delete", key))
        self.store.pop(key, None)


class BrokenRedis:
    async def get(self, key):
        raise RedisConnectionError("redis down")

    async def setex(self, key, ttl, value):
        raise RedisConnectionError("redis down")

    async def delete(self, key):
        raise RedisConnectionError("redis down")


def _use_redis(monkeypatch, fake) -> None:
    async def get_redis():
        return fake

    monkeypatch.setattr(redis_client.settings, "cache_enabled", True)
    monkeypatch.setattr(redis_client, "get_redis", get_redis)


@pytest.fixture
def fake_redis(monkeypatch) -> FakeRedis:
    fake = FakeRedis()
    _use_redis(monkeypatch, fake)
    return fake


@pytest_asyncio.fixture
async def item_id(client: AsyncClient, auth_headers: dict) -> int:
    response = await client.post("/api/v1/items", headers=auth_headers, json=DRILL)
    assert response.status_code == 201
    return response.json()["id"]


async def _rename_in_db(session, item_id: int, name: str) -> None:
    item = await session.get(Item, item_id)
    item.name = name
    await session.flush()


@pytest.mark.asyncio
async def test_get_is_served_from_cache(client: AsyncClient, session, fake_redis: FakeRedis, item_id: int):
    first = await client.get(f"/api/v1/items/{item_id}")
    assert first.status_code == 200
    assert f"item:{item_id}" in fake_redis.store

    # Change the row behind the cache's back; the cached copy still answers.
    await _rename_in_db(session, item_id, "Renamed")
    second = await client.get(f"/api/v1/items/{item_id}")
    assert second.json()["item"]["name"] == "Drill"


@pytest.mark.asyncio
async def test_update_invalidates_cached_item(
    client: AsyncClient, auth_headers: dict, fake_redis: FakeRedis, item_id: int
):
    await client.get(f"/api/v1/items/{item_id}")
    response = await client.patch(f"/api/v1/items/{item_id}", headers=auth_headers, json={"name": "Hammer"})
    assert response.status_code == 200
    assert f"item:{item_id}" not in fake_redis.store

    item = (await client.get(f"/api/v1/items/{item_id}")).json()["item"]
    assert item["name"] == "Hammer"


@pytest.mark.asyncio
async def test_delete_invalidates_cached_item(
    client: AsyncClient, auth_headers: dict, fake_redis: FakeRedis, item_id: int
):
    await client.get(f"/api/v1/items/{item_id}")
    response = await client.delete(f"/api/v1/items/{item_id}", headers=auth_headers)
    assert response.status_code == 200
    assert f"item:{item_id}" not in fake_redis.store

    gone = await client.get(f"/api/v1/items/{item_id}")
    assert gone.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["patch", "delete"])
async def test_cache_dropped_only_after_commit(
    client: AsyncClient, auth_headers: dict, monkeypatch, item_id: int, method
):
    events: list = []
    _use_redis(monkeypatch, FakeRedis(events))
    original_commit = BaseRepository.commit

    async def recording_commit(self):
        events.append("commit")
        await original_commit(self)

    monkeypatch.setattr(ItemRepository, "commit", recording_commit)

    url = f"/api/v1/items/{item_id}"
    if method == "patch":
        response = await client.patch(url, headers=auth_headers, json={"pricePerDay": 20})
    else:
        response = await client.delete(url, headers=auth_headers)
    assert response.status_code == 200
    assert events == ["commit", ("delete", f"item:{item_id}")]


@pytest.mark.asyncio
async def test_unreachable_redis_falls_back_to_database(
    client: AsyncClient, auth_headers: dict, monkeypatch, item_id: int
):
    _use_redis(monkeypatch, BrokenRedis())

    response = await client.get(f"/api/v1/items/{item_id}")
    assert response.status_code == 200
    assert response.json()["item"]["name"] == "Drill"

    patch = await client.patch(f"/api/v1/items/{item_id}", headers=auth_headers, json={"name": "Hammer"})
    assert patch.status_code == 200
    assert (await client.get(f"/api/v1/items/{item_id}")).json()["item"]["name"] == "Hammer"
