"""
Item repository: catalog data access.
"""

from rentkaro.db.models.item import Item
from rentkaro.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    def __init__(self, session):
        super().__init__(session, Item)

    async def list_all(self) -> list[Item]:
        """Whole catalog, newest first. Filtering happens in the browsing client."""
        return await self.list_newest()
