"""
Shared pytest fixtures.

Settings are read once at import time, so the environment is pinned
here before any application module is imported: an in-memory database
and no rate limiting.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.domain.persons.entities import Color, PersonCandidate
from app.infrastructure.persons.database import create_db_engine, create_tables
from app.infrastructure.persons.person_repository import SqlPersonRepositoryAdapter
from app.interfaces.persons.dependencies import get_person_repository
from app.main import app


@pytest.fixture
def engine():
    """A fresh in-memory database with the persons schema."""
    engine = create_db_engine("sqlite://")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> SqlPersonRepositoryAdapter:
    return SqlPersonRepositoryAdapter(engine)


@pytest.fixture
def client(repository):
    """TestClient whose routes use the in-memory repository."""
    app.dependency_overrides[get_person_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_candidate():
    """Factory for PersonCandidate with sensible defaults."""

    def _make(
        first_name: str = "Hans",
        last_name: str = "Müller",
        address: str = "67742 Lauterecken",
        color: Color = Color.BLUE,
    ) -> PersonCandidate:
        return PersonCandidate(
            first_name=first_name,
            last_name=last_name,
            address=address,
            color=color,
        )

    return _make
