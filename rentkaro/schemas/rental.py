"""Rental ledger schemas. Create requests never carry a status."""

from datetime import datetime

from pydantic import Field

from rentkaro.schemas.base import CamelModel


class RentalCreate(CamelModel):
    item_id: str | None = None
    type: str | None = None
    payment_id: str | None = Field(None, max_length=64)


class RentalStatusUpdate(CamelModel):
    id: int
    status: str | None = None


class RentalResponse(CamelModel):
    id: int
    item_id: str
    status: str
    type: str
    payment_id: str | None = None
    created_at: datetime


class RentalListResponse(CamelModel):
    rentals: list[RentalResponse]


class RentalEnvelope(CamelModel):
    rental: RentalResponse
