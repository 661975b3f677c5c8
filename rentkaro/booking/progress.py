"""Rental progress view: the four stages a booking moves through."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from rentkaro.db.models.rental import STATUS_COMPLETED
from rentkaro.schemas.rental import RentalResponse

STAGES = (
    ("slot", "Slot Booked"),
    ("payment", "Payment"),
    ("ongoing", "Ongoing"),
    ("returned", "Returned"),
)


class ProgressStep(BaseModel):
    key: str
    label: str
    reached: bool


def rental_progress(rental: RentalResponse | Mapping[str, Any]) -> list[ProgressStep]:
    if isinstance(rental, Mapping):
        rental = RentalResponse.model_validate(rental)
    reached = {
        "slot": True,
        "payment": bool(rental.payment_id),
        # Every rental is created Ongoing
        "ongoing": True,
        "returned": rental.status == STATUS_COMPLETED,
    }
    return [ProgressStep(key=key, label=label, reached=reached[key]) for key, label in STAGES]
