"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from silentsos.core.errors import AuthError
from silentsos.core.sessions import SessionStore, get_session_store

security = HTTPBearer(auto_error=False)


def get_current_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> str:
    """Require a known bearer token. Raises 401 otherwise."""
    if not credentials or sessions.get(credentials.credentials) is None:
        raise AuthError("Unauthorized")
    return credentials.credentials


def get_current_user_id(
    token: Annotated[str, Depends(get_current_token)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> str:
    """Resolve the token to the id of the user it was issued to.

    The user record itself may have vanished; services raise 404 for that.
    """
    user_id = sessions.get(token)
    if user_id is None:
        raise AuthError("Unauthorized")
    return user_id
