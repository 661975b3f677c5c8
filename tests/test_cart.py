"""
Cart aggregate tests - staging requires a date and slot; carts are values.
"""

from datetime import datetime

import pytest

from rentkaro.booking.cart import TIME_SLOTS, Cart
from rentkaro.core.exceptions import ValidationError
from rentkaro.schemas.item import ItemResponse

DRILL = ItemResponse(
    id=7,
    name="Drill",
    image="drill.jpg",
    price_per_day=15,
    rating=5.0,
    created_at=datetime(2026, 1, 1),
)


def test_stage_snapshots_item_and_leaves_original_cart_alone():
    empty = Cart()
    cart = empty.stage(DRILL, "2026-11-02", TIME_SLOTS[0])

    assert empty.is_empty
    assert len(cart.lines) == 1
    line = cart.lines[0]
    assert line.item_id == "7"
    assert line.name == "Drill"
    assert line.price == 15
    assert line.slot == "09:00 - 11:00"


def test_stage_accepts_api_json():
    item = {"id": 3, "name": "Tent", "pricePerDay": 20, "rating": 4.5, "createdAt": "2026-01-01T00:00:00"}
    cart = Cart().stage(item, "2026-11-02", TIME_SLOTS[1])
    assert cart.lines[0].item_id == "3"
    assert cart.subtotal == 20


@pytest.mark.parametrize("date, slot", [("", TIME_SLOTS[0]), ("2026-11-02", ""), ("  ", "  ")])
def test_stage_requires_date_and_slot(date, slot):
    with pytest.raises(ValidationError):
        Cart().stage(DRILL, date, slot)


def test_same_item_and_slot_can_be_staged_twice():
    cart = Cart().stage(DRILL, "2026-11-02", TIME_SLOTS[0]).stage(DRILL, "2026-11-02", TIME_SLOTS[0])
    assert len(cart.lines) == 2
    assert cart.subtotal == 30


def test_remove_line():
    cart = Cart().stage(DRILL, "2026-11-02", TIME_SLOTS[0]).stage(DRILL, "2026-11-03", TIME_SLOTS[2])
    trimmed = cart.remove(0)
    assert [line.date for line in trimmed.lines] == ["2026-11-03"]
    assert len(cart.lines) == 2
    with pytest.raises(ValidationError):
        trimmed.remove(5)
