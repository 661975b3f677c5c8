"""
Checkout: turn a cart into one mock payment and one rental per line.

`plan_checkout` is pure: it prices the cart and lists the ledger writes.
`checkout` executes a plan against the API. Payment always comes first; if it
fails nothing is written and the error propagates. Once paid, every line is
attempted in order even if an earlier one fails, and nothing is rolled back.
"""

import logging
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from pydantic import BaseModel

from rentkaro.booking.cart import Cart
from rentkaro.core.exceptions import AppError
from rentkaro.db.models.rental import TYPE_RENTED

logger = logging.getLogger(__name__)

COUPON_CODE = "SAVE10"
COUPON_PERCENT = 10


class LedgerClient(Protocol):
    async def pay(self, amount: float) -> str: ...

    async def create_rental(self, item_id: str, type: str = TYPE_RENTED, payment_id: str | None = None) -> int: ...


class RentalRequest(BaseModel):
    item_id: str
    type: str = TYPE_RENTED


class CheckoutPlan(BaseModel):
    subtotal: float
    discount: float
    total: float
    rentals: list[RentalRequest]


class FailedLine(BaseModel):
    index: int
    item_id: str
    error: str


class CheckoutResult(BaseModel):
    plan: CheckoutPlan
    cart: Cart
    payment_id: str | None = None
    rental_ids: list[int] = []
    failed: list[FailedLine] = []


def coupon_discount(subtotal: float, code: str | None) -> float:
    """10% off for SAVE10, rounded half-up to whole units; zero for any other code."""
    if (code or "").strip().upper() != COUPON_CODE:
        return 0.0
    off = Decimal(str(subtotal)) * COUPON_PERCENT / 100
    return float(off.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def plan_checkout(cart: Cart, coupon: str | None = None) -> CheckoutPlan:
    subtotal = cart.subtotal
    discount = coupon_discount(subtotal, coupon)
    return CheckoutPlan(
        subtotal=subtotal,
        discount=discount,
        total=subtotal - discount,
        rentals=[RentalRequest(item_id=line.item_id) for line in cart.lines],
    )


async def checkout(
    cart: Cart,
    coupon: str | None,
    client: LedgerClient,
    on_cart_change: Callable[[Cart], None] | None = None,
) -> CheckoutResult:
    """Pay for `cart` and record its rentals. Returns the emptied cart in the result."""
    plan = plan_checkout(cart, coupon)
    if cart.is_empty:
        return CheckoutResult(plan=plan, cart=cart)

    payment_id = await client.pay(plan.total)

    rental_ids: list[int] = []
    failed: list[FailedLine] = []
    for index, request in enumerate(plan.rentals):
        try:
            rental_id = await client.create_rental(request.item_id, type=request.type, payment_id=payment_id)
        except AppError as e:
            logger.warning("rental for cart line %d (item %s) failed: %s", index, request.item_id, e.message)
            failed.append(FailedLine(index=index, item_id=request.item_id, error=e.message))
        else:
            rental_ids.append(rental_id)

    cleared = Cart()
    if on_cart_change is not None:
        on_cart_change(cleared)
    return CheckoutResult(
        plan=plan,
        cart=cleared,
        payment_id=payment_id,
        rental_ids=rental_ids,
        failed=failed,
    )
