"""Credential request/response schemas. Presence and format rules live in the auth service."""

from pydantic import BaseModel, Field

from rentkaro.schemas.base import CamelModel


class Credentials(BaseModel):
    email: str | None = None
    phone: str | None = None
    # bcrypt accepts max 72 bytes; longer passwords are rejected up front.
    password: str | None = Field(None, max_length=72)


class PublicUser(CamelModel):
    id: int
    email: str | None = None
    phone: str | None = None


class AuthResponse(BaseModel):
    token: str
    user: PublicUser
