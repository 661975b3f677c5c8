"""
Cart aggregate: the bookings a user has staged but not yet paid for.

A Cart is an immutable value. Staging or removing a line returns a new cart,
so checkout can be handed a cart by value and the caller's copy survives a
failed payment untouched.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from rentkaro.core.exceptions import ValidationError
from rentkaro.schemas.item import ItemResponse

TIME_SLOTS = (
    "09:00 - 11:00",
    "11:00 - 13:00",
    "13:00 - 15:00",
    "15:00 - 17:00",
    "17:00 - 19:00",
)


class CartLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    name: str
    image: str | None = None
    price: float
    date: str
    slot: str


class Cart(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: tuple[CartLine, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def subtotal(self) -> float:
        return sum(line.price for line in self.lines)

    def stage(self, item: ItemResponse | Mapping[str, Any], date: str, slot: str) -> "Cart":
        """Add a booking for `item` on `date` in `slot`, snapshotting its current price.

        Availability is not checked; two users may stage the same item and slot.
        """
        if not (date or "").strip() or not (slot or "").strip():
            raise ValidationError("Choose a date and a time slot")
        if isinstance(item, Mapping):
            item = ItemResponse.model_validate(item)
        line = CartLine(
            item_id=str(item.id),
            name=item.name,
            image=item.image,
            price=item.price_per_day,
            date=date.strip(),
            slot=slot.strip(),
        )
        return Cart(lines=self.lines + (line,))

    def remove(self, index: int) -> "Cart":
        if not 0 <= index < len(self.lines):
            raise ValidationError("No such cart line")
        return Cart(lines=self.lines[:index] + self.lines[index + 1:])
