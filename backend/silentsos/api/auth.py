"""Auth endpoints."""

from fastapi import APIRouter, Depends

from silentsos.core.config import settings
from silentsos.core.deps import get_current_token, get_current_user_id
from silentsos.core.sessions import SessionStore, get_session_store
from silentsos.db.session import DocumentStore, get_store
from silentsos.schemas.auth import LoginRequest, PublicUser, SignupRequest, TokenResponse
from silentsos.services import auth_service

router = APIRouter(prefix=f"{settings.api_prefix}/auth", tags=["auth"])


@router.post("/signup", response_model=TokenResponse)
def signup(
    data: SignupRequest,
    store: DocumentStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
):
    """Register a new user and return a session token."""
    with store.session() as db:
        return auth_service.signup(db, sessions, data.name, data.email, data.password)


@router.post("/login", response_model=TokenResponse)
def login(
    data: LoginRequest,
    store: DocumentStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
):
    """Login and return a new session token."""
    with store.session() as db:
        return auth_service.login(db, sessions, data.email, data.password)


@router.get("/me", response_model=PublicUser)
def me(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Get current authenticated user."""
    with store.session() as db:
        return auth_service.public_view(auth_service.get_user(db, user_id))


@router.post("/logout")
def logout(
    token: str = Depends(get_current_token),
    sessions: SessionStore = Depends(get_session_store),
):
    """Revoke the token used for this request."""
    auth_service.logout(sessions, token)
    return {"ok": True}
