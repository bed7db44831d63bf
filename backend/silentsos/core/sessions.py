"""Session registry: opaque bearer token -> user id."""

from __future__ import annotations

import threading
from typing import Protocol


class SessionStore(Protocol):
    """Where issued tokens live. Swappable for a persisted or expiring store."""

    def get(self, token: str) -> str | None: ...

    def put(self, token: str, user_id: str) -> None: ...

    def revoke(self, token: str) -> None: ...


class InMemorySessionStore:
    """Process-local sessions. Tokens never expire and are lost on restart."""

    def __init__(self) -> None:
        self._tokens: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> str | None:
        with self._lock:
            return self._tokens.get(token)

    def put(self, token: str, user_id: str) -> None:
        with self._lock:
            self._tokens[token] = user_id

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


# Singleton instance used across the app
session_registry = InMemorySessionStore()


def get_session_store() -> SessionStore:
    """Dependency for FastAPI to get the session registry."""
    return session_registry
