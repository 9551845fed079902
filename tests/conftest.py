"""
Shared test fixtures.

API tests run against an app built around an in-memory SQLite database, so
every test starts from an empty movies table.
"""

import pytest
from fastapi.testclient import TestClient

from movie_catalog.api.main import create_app
from movie_catalog.database.connection import DatabaseManager


@pytest.fixture
def db_manager():
    """In-memory database shared by every session of one test."""
    manager = DatabaseManager("sqlite://")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def client(db_manager):
    """TestClient with the application lifespan running."""
    with TestClient(create_app(db_manager)) as test_client:
        yield test_client


@pytest.fixture
def create_movie(client):
    """POST a movie and return the created record."""

    def _create(name="Inception", duration=148, price=12.5, **extra):
        payload = {"name": name, "duration": duration, "price": price, **extra}
        r = client.post("/movies", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _create
