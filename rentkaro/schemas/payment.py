"""Mock payment schemas."""

from typing import Any

from rentkaro.schemas.base import CamelModel


class PaymentRequest(CamelModel):
    # Checked by the payment service so non-numbers surface as a clean 400.
    amount: Any = None


class PaymentResponse(CamelModel):
    ok: bool = True
    payment_id: str
