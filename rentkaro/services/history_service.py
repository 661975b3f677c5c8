"""
History service: append-only browse log per user.
"""

from typing import Any

from rentkaro.db.models.browse_history import (
    MAX_ITEM_ID_LENGTH,
    MAX_QUERY_LENGTH,
    BrowseHistoryEntry,
)
from rentkaro.db.repositories.history_repository import HistoryRepository
from rentkaro.schemas.history import HistoryEntryResponse


def _bounded(value: Any, limit: int) -> str | None:
    """Keep strings within `limit`; anything else is recorded as null."""
    if isinstance(value, str) and len(value) <= limit:
        return value
    return None


class HistoryService:
    def __init__(self, history_repo: HistoryRepository):
        self.history_repo = history_repo

    async def list_for_user(self, user_id: int) -> list[HistoryEntryResponse]:
        entries = await self.history_repo.list_for_user(user_id)
        return [HistoryEntryResponse.model_validate(e) for e in entries]

    async def record(self, user_id: int, query: Any = None, item_id: Any = None) -> int:
        entry = BrowseHistoryEntry(
            user_id=user_id,
            query=_bounded(query, MAX_QUERY_LENGTH),
            item_id=_bounded(item_id, MAX_ITEM_ID_LENGTH),
        )
        entry = await self.history_repo.add(entry)
        return entry.id
