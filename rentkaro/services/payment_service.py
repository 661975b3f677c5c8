"""
Payment service: synchronous mock gateway. Moves no money and keeps no ledger.
Retried calls for the same charge get distinct ids; nothing is deduplicated.
"""

import logging
import math
import secrets
import time

from prometheus_client import Counter

from rentkaro.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

PAYMENTS_TOTAL = Counter("rentkaro_payments_total", "Mock payments accepted")


def new_payment_id() -> str:
    """`pay_<epoch millis>_<random hex>`: unique per call."""
    return f"pay_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


def pay(amount) -> str:
    """Accept a positive finite amount and return a fresh payment id."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValidationError("Invalid amount")
    try:
        value = float(amount)
    except OverflowError:
        raise ValidationError("Invalid amount")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError("Invalid amount")
    payment_id = new_payment_id()
    PAYMENTS_TOTAL.inc()
    logger.info("mock payment accepted: id=%s amount=%s", payment_id, amount)
    return payment_id
