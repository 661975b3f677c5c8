"""Browse history schemas."""

from datetime import datetime
from typing import Any

from rentkaro.schemas.base import CamelModel


class HistoryCreate(CamelModel):
    # Loosely typed: unusable values are stored as null, not rejected.
    query: Any = None
    item_id: Any = None


class HistoryEntryResponse(CamelModel):
    id: int
    query: str | None = None
    item_id: str | None = None
    created_at: datetime


class HistoryListResponse(CamelModel):
    history: list[HistoryEntryResponse]
