"""
Browse history repository: append and read back, never update.
"""

from rentkaro.db.models.browse_history import BrowseHistoryEntry
from rentkaro.db.repositories.base_repository import BaseRepository


class HistoryRepository(BaseRepository[BrowseHistoryEntry]):
    def __init__(self, session):
        super().__init__(session, BrowseHistoryEntry)

    async def list_for_user(self, user_id: int) -> list[BrowseHistoryEntry]:
        return await self.list_newest(BrowseHistoryEntry.user_id == user_id)
