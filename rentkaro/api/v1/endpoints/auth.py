"""
Signup and login endpoints.
"""

from fastapi import APIRouter, status

from rentkaro.db.repositories.user_repository import UserRepository
from rentkaro.db.session import DbSession
from rentkaro.schemas.user import AuthResponse, Credentials
from rentkaro.services.auth_service import AuthService

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(session: DbSession, data: Credentials):
    """Create an account from an email and/or phone and return a session token."""
    return await AuthService(UserRepository(session)).signup(data)


@router.post("/login", response_model=AuthResponse)
async def login(session: DbSession, data: Credentials):
    """Authenticate and return a session token valid for 7 days."""
    return await AuthService(UserRepository(session)).login(data)
