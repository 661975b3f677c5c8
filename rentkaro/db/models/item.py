"""
Item model: a listing available for rental.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from rentkaro.db.base import Base


class Item(Base):
    """Catalog entry. `owner_id` is null for pre-seeded demo items."""

    __tablename__ = "items"
    __table_args__ = (CheckConstraint("price_per_day > 0", name="ck_items_price_positive"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_per_day: Mapped[float] = mapped_column(Float, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    available_dates: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_contact: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=5.0, server_default="5.0")
    owner_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name})>"
