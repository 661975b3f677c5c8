"""
User repository: all credential lookups.
"""

from sqlalchemy import or_, select

from rentkaro.db.models.user import User
from rentkaro.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_identifier(self, email: str | None, phone: str | None) -> User | None:
        """Find a user matching the email or the phone. Absent identifiers never match."""
        conditions = []
        if email:
            conditions.append(User.email == email)
        if phone:
            conditions.append(User.phone == phone)
        if not conditions:
            return None
        result = await self.session.execute(
            select(User).where(or_(*conditions)).order_by(User.id).limit(1)
        )
        return result.scalar_one_or_none()
