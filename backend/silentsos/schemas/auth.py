"""Auth schemas."""

from pydantic import BaseModel

from silentsos.db.base import Base


class SignupRequest(BaseModel):
    # Optional so a missing field is reported by the service with a single message
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class PublicUser(Base):
    id: str
    email: str
    name: str


class TokenResponse(Base):
    token: str
    user: PublicUser
