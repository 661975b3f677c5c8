"""
Auth service: signup and login against the credential store.
Design: routes stay thin; every rule about identifiers and passwords lives here.
"""

import logging
import re

from sqlalchemy.exc import IntegrityError

from rentkaro.config import get_settings
from rentkaro.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from rentkaro.core.security import create_access_token, hash_password, verify_password
from rentkaro.db.models.user import User
from rentkaro.db.repositories.user_repository import UserRepository
from rentkaro.schemas.user import AuthResponse, Credentials, PublicUser

logger = logging.getLogger(__name__)
settings = get_settings()

EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
PHONE_RE = re.compile(r"^\+?[\d\s\-()]{7,}$")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _validate_identifiers(data: Credentials) -> tuple[str | None, str | None, str]:
    """Shared presence and format checks for signup and login."""
    email = _clean(data.email)
    phone = _clean(data.phone)
    if (not email and not phone) or not data.password:
        raise ValidationError("Email or phone and password required")
    if email and not EMAIL_RE.search(email):
        raise ValidationError("Invalid email format")
    if phone and not PHONE_RE.match(phone):
        raise ValidationError("Invalid phone format")
    return email, phone, data.password


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        token=create_access_token(user.id),
        user=PublicUser.model_validate(user),
    )


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def signup(self, data: Credentials) -> AuthResponse:
        """Create a user with a hashed password and return a session token."""
        email, phone, password = _validate_identifiers(data)
        if len(password) < settings.password_min_length:
            raise ValidationError("Password too short")

        if await self.user_repo.get_by_identifier(email, phone):
            raise ConflictError("Email or phone already registered")

        user = User(email=email, phone=phone, password_hash=hash_password(password))
        try:
            user = await self.user_repo.add(user)
        except IntegrityError:
            # Lost a race with a concurrent signup for the same identifier
            await self.user_repo.session.rollback()
            raise ConflictError("Email or phone already registered")
        logger.info("user signed up: id=%s", user.id)
        return _auth_response(user)

    async def login(self, data: Credentials) -> AuthResponse:
        email, phone, password = _validate_identifiers(data)
        user = await self.user_repo.get_by_identifier(email, phone)
        if not user:
            raise NotFoundError("User not found")
        if not verify_password(password, user.password_hash):
            raise AuthError("Invalid credentials")
        return _auth_response(user)
