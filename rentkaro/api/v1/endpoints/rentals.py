"""
Rental ledger endpoints (authenticated, scoped to the caller).
"""

from fastapi import APIRouter, status

from rentkaro.core.dependencies import CurrentUserId
from rentkaro.db.repositories.rental_repository import RentalRepository
from rentkaro.db.session import DbSession
from rentkaro.schemas.base import CreatedResponse, OkResponse
from rentkaro.schemas.rental import (
    RentalCreate,
    RentalEnvelope,
    RentalListResponse,
    RentalStatusUpdate,
)
from rentkaro.services.rental_service import RentalService

router = APIRouter()


def _get_rental_service(session: DbSession) -> RentalService:
    return RentalService(RentalRepository(session))


@router.get("", response_model=RentalListResponse)
async def list_rentals(session: DbSession, user_id: CurrentUserId):
    return RentalListResponse(rentals=await _get_rental_service(session).list_for_user(user_id))


@router.get("/{rental_id}", response_model=RentalEnvelope)
async def get_rental(session: DbSession, rental_id: int, user_id: CurrentUserId):
    return RentalEnvelope(rental=await _get_rental_service(session).get(user_id, rental_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_rental(session: DbSession, data: RentalCreate, user_id: CurrentUserId):
    """Create a rental. Status is always Ongoing; a `status` field in the body is ignored."""
    svc = _get_rental_service(session)
    return CreatedResponse(id=await svc.create(user_id, data.item_id, data.type, data.payment_id))


@router.patch("", response_model=OkResponse)
async def update_rental_status(session: DbSession, data: RentalStatusUpdate, user_id: CurrentUserId):
    await _get_rental_service(session).update_status(user_id, data.id, data.status)
    return OkResponse()
