"""
Rental model: one booked item for one renter, with a lifecycle status.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column

from rentkaro.db.base import Base

STATUS_ONGOING = "Ongoing"
STATUS_COMPLETED = "Completed"
RENTAL_STATUSES = (STATUS_ONGOING, STATUS_COMPLETED)

TYPE_RENTED = "Rented"
TYPE_LENT = "Lent"
RENTAL_TYPES = (TYPE_RENTED, TYPE_LENT)


class Rental(Base):
    """Ledger row. `item_id` is an opaque string, not a foreign key into items."""

    __tablename__ = "rentals"
    __table_args__ = (
        CheckConstraint("status IN ('Completed','Ongoing')", name="ck_rentals_status"),
        CheckConstraint("type IN ('Rented','Lent')", name="ck_rentals_type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    item_id: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=STATUS_ONGOING)
    type: Mapped[str] = mapped_column(String(16), nullable=False, default=TYPE_RENTED, server_default=TYPE_RENTED)
    payment_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    @property
    def owner_id(self) -> int:
        """The renter owns the rental row."""
        return self.user_id

    def __repr__(self) -> str:
        return f"<Rental(id={self.id}, item_id={self.item_id}, status={self.status})>"
