"""
FastAPI dependencies: bearer-token verification for protected routes.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from rentkaro.core.exceptions import AuthError
from rentkaro.core.security import token_user_id
from rentkaro.db.repositories.user_repository import UserRepository
from rentkaro.db.session import DbSession

security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> int:
    """Resolve the bearer token to a user id. Raises AuthError if missing, invalid or expired."""
    if not credentials:
        raise AuthError("Missing token")
    user_id = token_user_id(credentials.credentials)
    if user_id is None or not await UserRepository(session).get_by_id(user_id):
        raise AuthError("Invalid token")
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
