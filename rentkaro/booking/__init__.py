# Client-side booking workflow: cart -> payment -> rentals -> progress

from rentkaro.booking.cart import TIME_SLOTS, Cart, CartLine
from rentkaro.booking.checkout import (
    COUPON_CODE,
    CheckoutPlan,
    CheckoutResult,
    checkout,
    coupon_discount,
    plan_checkout,
)
from rentkaro.booking.client import RentkaroClient
from rentkaro.booking.progress import rental_progress

__all__ = [
    "TIME_SLOTS",
    "Cart",
    "CartLine",
    "COUPON_CODE",
    "CheckoutPlan",
    "CheckoutResult",
    "checkout",
    "coupon_discount",
    "plan_checkout",
    "RentkaroClient",
    "rental_progress",
]
