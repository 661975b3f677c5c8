"""
Rental repository: ledger rows, always scoped to the renter.
"""

from rentkaro.db.models.rental import Rental
from rentkaro.db.repositories.base_repository import BaseRepository


class RentalRepository(BaseRepository[Rental]):
    def __init__(self, session):
        super().__init__(session, Rental)

    async def list_for_user(self, user_id: int) -> list[Rental]:
        return await self.list_newest(Rental.user_id == user_id)
