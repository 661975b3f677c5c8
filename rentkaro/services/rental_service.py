"""
Rental service: the ledger behind the booking workflow.

Every rental is created `Ongoing`; a caller cannot choose the initial status.
`update_status` is the only way status changes afterwards, and it accepts
exactly the two ledger states.
"""

import logging

from rentkaro.core.authorization import authorize
from rentkaro.core.exceptions import ValidationError
from rentkaro.db.models.rental import (
    RENTAL_STATUSES,
    RENTAL_TYPES,
    STATUS_ONGOING,
    TYPE_RENTED,
    Rental,
)
from rentkaro.db.repositories.rental_repository import RentalRepository
from rentkaro.schemas.rental import RentalResponse

logger = logging.getLogger(__name__)

MAX_ITEM_ID_LENGTH = 100
NOT_FOUND = "Rental not found"


class RentalService:
    def __init__(self, rental_repo: RentalRepository):
        self.rental_repo = rental_repo

    async def list_for_user(self, user_id: int) -> list[RentalResponse]:
        rentals = await self.rental_repo.list_for_user(user_id)
        return [RentalResponse.model_validate(r) for r in rentals]

    async def get(self, user_id: int, id: int) -> RentalResponse:
        rental = authorize(user_id, await self.rental_repo.get_by_id(id), NOT_FOUND)
        return RentalResponse.model_validate(rental)

    async def create(
        self,
        user_id: int,
        item_id: str | None,
        type: str | None = None,
        payment_id: str | None = None,
    ) -> int:
        """Record a booking. Unknown types fall back to Rented."""
        if not isinstance(item_id, str) or not item_id or len(item_id) > MAX_ITEM_ID_LENGTH:
            raise ValidationError("Invalid itemId")
        rental = Rental(
            user_id=user_id,
            item_id=item_id,
            status=STATUS_ONGOING,
            type=type if type in RENTAL_TYPES else TYPE_RENTED,
            payment_id=payment_id,
        )
        rental = await self.rental_repo.add(rental)
        logger.info("rental created: id=%s user=%s payment=%s", rental.id, user_id, payment_id)
        return rental.id

    async def update_status(self, user_id: int, id: int, status: str | None) -> None:
        # Completed -> Ongoing is allowed: both are valid ledger states.
        if status not in RENTAL_STATUSES or not id:
            raise ValidationError("Invalid payload")
        rental = authorize(user_id, await self.rental_repo.get_by_id(id), NOT_FOUND)
        rental.status = status
        await self.rental_repo.save(rental)
        logger.info("rental status changed: id=%s status=%s", id, status)
