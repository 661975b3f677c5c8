"""
Browse history tests - append-only, per user, newest first.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_history_requires_auth(client: AsyncClient):
    assert (await client.get("/api/v1/history")).status_code == 401
    assert (await client.post("/api/v1/history", json={"query": "drill"})).status_code == 401


@pytest.mark.asyncio
async def test_record_and_list_newest_first(client: AsyncClient, auth_headers: dict):
    first = await client.post("/api/v1/history", headers=auth_headers, json={"query": "drill"})
    assert first.status_code == 201
    second = await client.post("/api/v1/history", headers=auth_headers, json={"itemId": "7"})

    history = (await client.get("/api/v1/history", headers=auth_headers)).json()["history"]
    assert [h["id"] for h in history] == [second.json()["id"], first.json()["id"]]
    assert history[0]["itemId"] == "7"
    assert history[0]["query"] is None
    assert history[1]["query"] == "drill"
    assert "createdAt" in history[0]


@pytest.mark.asyncio
async def test_unusable_values_are_stored_as_null(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        "/api/v1/history",
        headers=auth_headers,
        json={"query": "q" * 501, "itemId": 42},
    )
    assert response.status_code == 201
    entry = (await client.get("/api/v1/history", headers=auth_headers)).json()["history"][0]
    assert entry["query"] is None
    assert entry["itemId"] is None


@pytest.mark.asyncio
async def test_history_is_per_user(client: AsyncClient, auth_headers: dict, other_headers: dict):
    await client.post("/api/v1/history", headers=auth_headers, json={"query": "tent"})
    history = (await client.get("/api/v1/history", headers=other_headers)).json()["history"]
    assert history == []
