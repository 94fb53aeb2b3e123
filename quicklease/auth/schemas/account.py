"""Pydantic schemas for account and authentication payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AccountView(BaseModel):
    """Externally-facing account representation.

    ``password`` is write-only: it is accepted on create, register and
    update requests, never populated when reading an account back and
    never serialized.
    """

    id: int | None = None
    email: EmailStr
    password: str | None = Field(default=None, exclude=True, repr=False)
    full_name: str | None = None
    phone_number: str | None = None
    date_of_birth: date | None = None
    gender: bool = False


class Credentials(BaseModel):
    """Login request body."""

    email: EmailStr
    password: str


class AuthResult(BaseModel):
    """Token returned after a successful registration or login."""

    token: str


class AuthenticatedIdentity(BaseModel):
    """Identity established by a successful credential check."""

    model_config = ConfigDict(frozen=True)

    account_id: int
    email: str


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    sub: str
    email: str
    iat: int
    exp: int
