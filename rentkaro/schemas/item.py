"""Item request/response schemas - REST API contract."""

from datetime import datetime

from pydantic import Field

from rentkaro.schemas.base import CamelModel


class ItemCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    price_per_day: float = Field(..., gt=0, allow_inf_nan=False)
    image: str | None = None
    category: str | None = Field(None, max_length=100)
    available_dates: str | None = Field(None, max_length=255)
    owner_contact: str | None = Field(None, max_length=255)
    owner_address: str | None = Field(None, max_length=255)
    description: str | None = None
    rating: float = Field(5.0, ge=0, le=5)


class ItemUpdate(CamelModel):
    """Partial update: only fields present in the request body are applied."""

    name: str | None = Field(None, min_length=1, max_length=255)
    price_per_day: float | None = Field(None, gt=0, allow_inf_nan=False)
    image: str | None = None
    category: str | None = Field(None, max_length=100)
    available_dates: str | None = Field(None, max_length=255)
    owner_contact: str | None = Field(None, max_length=255)
    owner_address: str | None = Field(None, max_length=255)
    description: str | None = None
    rating: float | None = Field(None, ge=0, le=5)


class ItemResponse(CamelModel):
    id: int
    name: str
    image: str | None = None
    price_per_day: float
    category: str | None = None
    available_dates: str | None = None
    owner_contact: str | None = None
    owner_address: str | None = None
    description: str | None = None
    rating: float
    owner_id: int | None = None
    created_at: datetime


class ItemListResponse(CamelModel):
    items: list[ItemResponse]


class ItemEnvelope(CamelModel):
    item: ItemResponse
