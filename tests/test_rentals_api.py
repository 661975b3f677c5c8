"""
Rental ledger tests - creation always Ongoing, status updates, ownership isolation.
"""

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, headers: dict, **body) -> int:
    response = await client.post("/api/v1/rentals", headers=headers, json={"itemId": "1", **body})
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.asyncio
async def test_rentals_require_auth(client: AsyncClient):
    assert (await client.get("/api/v1/rentals")).status_code == 401
    assert (await client.post("/api/v1/rentals", json={"itemId": "1"})).status_code == 401
    assert (await client.patch("/api/v1/rentals", json={"id": 1, "status": "Completed"})).status_code == 401


@pytest.mark.asyncio
async def test_create_is_ongoing_even_when_status_smuggled(client: AsyncClient, auth_headers: dict):
    rental_id = await _create(client, auth_headers, status="Completed", paymentId="pay_1_abcd")
    rental = (await client.get(f"/api/v1/rentals/{rental_id}", headers=auth_headers)).json()["rental"]
    assert rental["status"] == "Ongoing"
    assert rental["type"] == "Rented"
    assert rental["paymentId"] == "pay_1_abcd"
    assert rental["itemId"] == "1"


@pytest.mark.asyncio
@pytest.mark.parametrize("given, stored", [("Lent", "Lent"), ("Rented", "Rented"), ("Borrowed", "Rented"), (None, "Rented")])
async def test_type_falls_back_to_rented(client: AsyncClient, auth_headers: dict, given, stored):
    rental_id = await _create(client, auth_headers, type=given)
    rental = (await client.get(f"/api/v1/rentals/{rental_id}", headers=auth_headers)).json()["rental"]
    assert rental["type"] == stored


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"itemId": ""}, {"itemId": "x" * 101}, {"itemId": 5}])
async def test_create_rejects_bad_item_id(client: AsyncClient, auth_headers: dict, body):
    response = await client.post("/api/v1/rentals", headers=auth_headers, json=body)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_status_can_be_completed_and_reopened(client: AsyncClient, auth_headers: dict):
    rental_id = await _create(client, auth_headers)

    done = await client.patch("/api/v1/rentals", headers=auth_headers, json={"id": rental_id, "status": "Completed"})
    assert done.status_code == 200
    assert done.json() == {"ok": True}
    rental = (await client.get(f"/api/v1/rentals/{rental_id}", headers=auth_headers)).json()["rental"]
    assert rental["status"] == "Completed"

    reopened = await client.patch("/api/v1/rentals", headers=auth_headers, json={"id": rental_id, "status": "Ongoing"})
    assert reopened.status_code == 200
    rental = (await client.get(f"/api/v1/rentals/{rental_id}", headers=auth_headers)).json()["rental"]
    assert rental["status"] == "Ongoing"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["completed", "Cancelled", "", None])
async def test_update_rejects_unknown_status(client: AsyncClient, auth_headers: dict, status):
    rental_id = await _create(client, auth_headers)
    response = await client.patch("/api/v1/rentals", headers=auth_headers, json={"id": rental_id, "status": status})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid payload"}


@pytest.mark.asyncio
async def test_update_missing_rental(client: AsyncClient, auth_headers: dict):
    response = await client.patch("/api/v1/rentals", headers=auth_headers, json={"id": 999, "status": "Completed"})
    assert response.status_code == 404
    assert response.json() == {"error": "Rental not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("rental_id", [10**20, 2**31])
async def test_out_of_range_rental_id_is_not_found(client: AsyncClient, auth_headers: dict, rental_id):
    patch = await client.patch("/api/v1/rentals", headers=auth_headers, json={"id": rental_id, "status": "Completed"})
    assert patch.status_code == 404
    assert patch.json() == {"error": "Rental not found"}

    get = await client.get(f"/api/v1/rentals/{rental_id}", headers=auth_headers)
    assert 400 <= get.status_code < 500
    assert set(get.json()) == {"error"}


@pytest.mark.asyncio
async def test_other_user_sees_not_found(client: AsyncClient, auth_headers: dict, other_headers: dict):
    rental_id = await _create(client, auth_headers)

    get = await client.get(f"/api/v1/rentals/{rental_id}", headers=other_headers)
    assert get.status_code == 404
    patch = await client.patch("/api/v1/rentals", headers=other_headers, json={"id": rental_id, "status": "Completed"})
    assert patch.status_code == 404
    assert (await client.get("/api/v1/rentals", headers=other_headers)).json() == {"rentals": []}

    rental = (await client.get(f"/api/v1/rentals/{rental_id}", headers=auth_headers)).json()["rental"]
    assert rental["status"] == "Ongoing"


@pytest.mark.asyncio
async def test_list_newest_first(client: AsyncClient, auth_headers: dict):
    first = await _create(client, auth_headers, itemId="a")
    second = await _create(client, auth_headers, itemId="b")
    rentals = (await client.get("/api/v1/rentals", headers=auth_headers)).json()["rentals"]
    assert [r["id"] for r in rentals] == [second, first]
