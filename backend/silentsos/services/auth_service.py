"""Auth service."""

from __future__ import annotations

import logging

from silentsos.core.errors import ConflictError, InvalidCredentialsError, NotFoundError, ValidationError
from silentsos.core.security import generate_token, hash_password, verify_password
from silentsos.core.sessions import SessionStore
from silentsos.core.util import new_id
from silentsos.db.session import Session
from silentsos.models import Profile, User, UserSettings
from silentsos.schemas.auth import PublicUser, TokenResponse

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> User:
    """Load the user a session points at. Raises NotFoundError if it is gone."""
    user = db.users.get(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def public_view(user: User) -> PublicUser:
    return PublicUser(id=user.id, email=user.email, name=user.profile.name)


def _issue_session(sessions: SessionStore, user: User) -> TokenResponse:
    token = generate_token()
    sessions.put(token, user.id)
    return TokenResponse(token=token, user=public_view(user))


def signup(db: Session, sessions: SessionStore, name: str | None, email: str | None, password: str | None) -> TokenResponse:
    """Create a user with default settings and log them in."""
    if not name or not email or not password:
        raise ValidationError("Name, email and password are required")
    if db.users.get_by_email(email):
        raise ConflictError("Email already registered")

    salt, password_hash = hash_password(password)
    user = User(
        id=new_id(),
        email=email,
        salt=salt,
        password_hash=password_hash,
        profile=Profile(name=name, phone="", email=email),
        settings=UserSettings(),
    )
    db.users.add(user)
    db.commit()
    logger.info("User signed up: id=%s", user.id)
    return _issue_session(sessions, user)


def login(db: Session, sessions: SessionStore, email: str | None, password: str | None) -> TokenResponse:
    """Verify credentials and issue an additional token.

    Unknown email and wrong password fail identically.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")
    user = db.users.get_by_email(email)
    if not user or not verify_password(password, user.salt, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()
    logger.info("User logged in: id=%s", user.id)
    return _issue_session(sessions, user)


def logout(sessions: SessionStore, token: str) -> None:
    """Revoke one token. Other sessions of the same user stay valid."""
    sessions.revoke(token)
