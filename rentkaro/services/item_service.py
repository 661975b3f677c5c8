"""
Item service: catalog use cases with owner-gated writes and a Redis detail cache.
"""

import logging

from rentkaro.cache.redis_client import cache_delete, cache_get, cache_set
from rentkaro.config import get_settings
from rentkaro.core.authorization import authorize
from rentkaro.core.exceptions import NotFoundError, ValidationError
from rentkaro.db.models.item import Item
from rentkaro.db.repositories.item_repository import ItemRepository
from rentkaro.schemas.item import ItemCreate, ItemResponse, ItemUpdate

logger = logging.getLogger(__name__)
settings = get_settings()

CACHE_PREFIX = "item:"
NOT_FOUND = "Item not found"


class ItemService:
    """Public reads, owner-only writes.

    Writes are committed before the cached copy is dropped.
    """

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def list_items(self) -> list[ItemResponse]:
        items = await self.item_repo.list_all()
        return [ItemResponse.model_validate(i) for i in items]

    async def get(self, id: int) -> ItemResponse:
        """Get item by id, served from Redis when cached."""
        cached = await cache_get(CACHE_PREFIX + str(id))
        if cached:
            return ItemResponse.model_validate(cached)
        item = await self.item_repo.get_by_id(id)
        if not item:
            raise NotFoundError(NOT_FOUND)
        resp = ItemResponse.model_validate(item)
        await cache_set(CACHE_PREFIX + str(id), resp.model_dump(mode="json"), settings.item_cache_ttl)
        return resp

    async def create(self, owner_id: int, data: ItemCreate) -> int:
        name = data.name.strip()
        if not name:
            raise ValidationError("Name is required")
        item = Item(**data.model_dump(exclude={"name"}), name=name, owner_id=owner_id)
        item = await self.item_repo.add(item)
        logger.info("item created: id=%s owner=%s", item.id, owner_id)
        return item.id

    async def update(self, owner_id: int, id: int, data: ItemUpdate) -> None:
        """Apply only the fields present in the request."""
        changes = data.model_dump(exclude_unset=True)
        if "name" in changes:
            changes["name"] = (changes["name"] or "").strip()
            if not changes["name"]:
                raise ValidationError("Name is required")
        if "price_per_day" in changes and changes["price_per_day"] is None:
            raise ValidationError("Price per day must be positive")
        if "rating" in changes and changes["rating"] is None:
            del changes["rating"]

        item = authorize(owner_id, await self.item_repo.get_by_id(id), NOT_FOUND)
        for field, value in changes.items():
            setattr(item, field, value)
        await self.item_repo.save(item)
        await self.item_repo.commit()
        await cache_delete(CACHE_PREFIX + str(id))

    async def delete(self, owner_id: int, id: int) -> None:
        item = authorize(owner_id, await self.item_repo.get_by_id(id), NOT_FOUND)
        await self.item_repo.delete(item)
        await self.item_repo.commit()
        await cache_delete(CACHE_PREFIX + str(id))
        logger.info("item deleted: id=%s owner=%s", id, owner_id)
