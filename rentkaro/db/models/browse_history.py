"""
Browse history model: append-only log of searches and item views.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column

from rentkaro.db.base import Base

MAX_QUERY_LENGTH = 500
MAX_ITEM_ID_LENGTH = 100


class BrowseHistoryEntry(Base):
    __tablename__ = "browse_history"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    query: Mapped[str | None] = mapped_column(String(MAX_QUERY_LENGTH), nullable=True)
    item_id: Mapped[str | None] = mapped_column(String(MAX_ITEM_ID_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<BrowseHistoryEntry(id={self.id}, user_id={self.user_id})>"
