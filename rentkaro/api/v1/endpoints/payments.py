"""
Mock payment endpoint.
"""

from fastapi import APIRouter

from rentkaro.core.dependencies import CurrentUserId
from rentkaro.schemas.payment import PaymentRequest, PaymentResponse
from rentkaro.services import payment_service

router = APIRouter()


@router.post("", response_model=PaymentResponse)
async def pay(data: PaymentRequest, user_id: CurrentUserId):
    """Accept a positive amount and return an opaque payment id."""
    return PaymentResponse(payment_id=payment_service.pay(data.amount))
