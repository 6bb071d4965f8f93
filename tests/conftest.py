from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from stackcontrol.api.deps import get_store
from stackcontrol.main import app
from stackcontrol.pieces import PieceFactory
from stackcontrol.session import SessionController
from stackcontrol.session_store import SessionStore


@pytest.fixture()
def factory() -> PieceFactory:
    # Ids are deterministic regardless of seed; the seed only pins the piece types.
    return PieceFactory.from_seed(1234)


@pytest.fixture()
def controller(factory: PieceFactory) -> SessionController:
    return SessionController(factory=factory)


@pytest.fixture()
def store() -> SessionStore:
    return SessionStore(default_seed=7)


@pytest.fixture()
def client(store: SessionStore) -> Generator[TestClient, None, None]:
    """FastAPI TestClient backed by a fresh in-memory store per test."""

    def _override() -> SessionStore:
        return store

    app.dependency_overrides[get_store] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
