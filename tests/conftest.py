"""Shared pytest fixtures.

Every test gets a fresh in‑memory store, an application built over
it, a FastAPI ``TestClient`` and a :class:`PersonAPI` whose session is
that test client, so the client wrapper talks to the real routes
without opening a socket.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from person_api.app.core.db import PersonStore
from person_api.app.main import create_app
from person_api.app.schemas.person import PersonCreate
from person_client import PersonAPI


@pytest.fixture
def store() -> PersonStore:
    return PersonStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api(client) -> PersonAPI:
    return PersonAPI(base_url="http://testserver/api", session=client)


@pytest.fixture
def ada() -> PersonCreate:
    return PersonCreate(first_name="Ada", last_name="Lovelace")
