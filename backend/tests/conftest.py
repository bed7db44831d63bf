"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from silentsos.core.sessions import InMemorySessionStore, get_session_store
from silentsos.db.backends import MemoryBackend
from silentsos.db.session import DocumentStore, get_store
from silentsos.main import app


@pytest.fixture
def store():
    """Fresh in-memory document per test."""
    return DocumentStore(MemoryBackend())


@pytest.fixture
def sessions():
    return InMemorySessionStore()


@pytest.fixture
def client(store, sessions):
    """Test client with overridden store and session registry."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_session_store] = lambda: sessions
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
