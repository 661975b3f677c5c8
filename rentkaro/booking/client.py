"""
Async HTTP client for the Rentkaro API.
Non-2xx responses are raised as the matching error from rentkaro.core.exceptions.
"""

import logging
from typing import Any

import httpx

from rentkaro.core.exceptions import AppError, AuthError, error_for_status

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api/v1"


class RentkaroClient:
    """Thin wrapper over httpx.AsyncClient that carries the bearer token."""

    def __init__(self, http: httpx.AsyncClient, token: str | None = None):
        self.http = http
        self.token = token

    @classmethod
    def from_url(cls, base_url: str = DEFAULT_BASE_URL, timeout: float = 30.0) -> "RentkaroClient":
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "RentkaroClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            r = await self.http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise AppError("Network error") from e

        is_json = "application/json" in r.headers.get("content-type", "")
        payload = r.json() if is_json else None
        if r.is_success:
            return payload or {}
        message = payload.get("error") if isinstance(payload, dict) else None
        err = error_for_status(r.status_code, message or "Request failed")
        if isinstance(err, AuthError):
            # Server rejected the session: forget it
            self.token = None
        raise err

    # --- auth ---

    async def signup(self, password: str, email: str | None = None, phone: str | None = None) -> dict:
        data = await self._request("POST", "/signup", {"email": email, "phone": phone, "password": password})
        self.token = data["token"]
        return data["user"]

    async def login(self, password: str, email: str | None = None, phone: str | None = None) -> dict:
        data = await self._request("POST", "/login", {"email": email, "phone": phone, "password": password})
        self.token = data["token"]
        return data["user"]

    # --- browse history ---

    async def history(self) -> list[dict]:
        return (await self._request("GET", "/history"))["history"]

    async def record_history(self, query: str | None = None, item_id: str | None = None) -> int:
        return (await self._request("POST", "/history", {"query": query, "itemId": item_id}))["id"]

    # --- catalog ---

    async def list_items(self) -> list[dict]:
        return (await self._request("GET", "/items"))["items"]

    async def get_item(self, item_id: int) -> dict:
        return (await self._request("GET", f"/items/{item_id}"))["item"]

    async def create_item(self, name: str, price_per_day: float, **fields: Any) -> int:
        body = {"name": name, "pricePerDay": price_per_day, **fields}
        return (await self._request("POST", "/items", body))["id"]

    async def update_item(self, item_id: int, **fields: Any) -> None:
        await self._request("PATCH", f"/items/{item_id}", fields)

    async def delete_item(self, item_id: int) -> None:
        await self._request("DELETE", f"/items/{item_id}")

    # --- rentals ---

    async def rentals(self) -> list[dict]:
        return (await self._request("GET", "/rentals"))["rentals"]

    async def get_rental(self, rental_id: int) -> dict:
        return (await self._request("GET", f"/rentals/{rental_id}"))["rental"]

    async def create_rental(self, item_id: str, type: str = "Rented", payment_id: str | None = None) -> int:
        body = {"itemId": item_id, "type": type, "paymentId": payment_id}
        return (await self._request("POST", "/rentals", body))["id"]

    async def update_rental(self, rental_id: int, status: str) -> None:
        await self._request("PATCH", "/rentals", {"id": rental_id, "status": status})

    # --- payments ---

    async def pay(self, amount: float) -> str:
        return (await self._request("POST", "/pay", {"amount": amount}))["paymentId"]
