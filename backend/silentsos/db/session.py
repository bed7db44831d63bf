"""Document store sessions.

Every request works inside one session: the store lock is held, the whole
document is loaded, services mutate it through the repositories, and
``commit()`` writes the whole document back. Leaving the session without
committing discards the changes.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from silentsos.core.config import settings
from silentsos.core.errors import StoreError
from silentsos.db.backends import DocumentBackend, JsonFileBackend
from silentsos.db.base import Base
from silentsos.db.repositories import AlertRepository, SosEventRepository, UserRepository
from silentsos.models import Alert, SosEvent, User


class Document(Base):
    users: list[User] = Field(default_factory=list)
    sos_events: list[SosEvent] = Field(default_factory=list)
    alerts: list[Alert] = Field(default_factory=list)


class Session:
    """One loaded copy of the document plus its repositories."""

    def __init__(self, backend: DocumentBackend) -> None:
        self._backend = backend
        try:
            self._document = Document.model_validate(backend.read())
        except PydanticValidationError as e:
            raise StoreError(f"Data file has an invalid layout: {e}") from e
        self.users = UserRepository(self._document.users)
        self.sos_events = SosEventRepository(self._document.sos_events)
        self.alerts = AlertRepository(self._document.alerts)

    def commit(self) -> None:
        """Persist the whole document."""
        self._backend.write(self._document.model_dump(mode="json", by_alias=True))


class DocumentStore:
    """Serializes all access to the document behind a single lock."""

    def __init__(self, backend: DocumentBackend) -> None:
        self.backend = backend
        self._lock = threading.Lock()

    @contextmanager
    def session(self) -> Iterator[Session]:
        with self._lock:
            yield Session(self.backend)


store = DocumentStore(JsonFileBackend(settings.data_file))


def get_store() -> DocumentStore:
    """Dependency for FastAPI to get the document store."""
    return store
