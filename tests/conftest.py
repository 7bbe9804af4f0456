# tests/conftest.py

"""
Shared fixtures. Every test gets its own application backed by a fresh
in-memory SQLite database, so tests never see each other's rows.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from products_api.config import Settings
from products_api.main import create_app

FRONTEND_URL = "http://localhost:5173"

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("products_api").setLevel(logging.WARNING)


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", allowed_origins=[FRONTEND_URL])


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """
    TestClient used as a context manager so the lifespan handler runs and
    creates the products table.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    """A session on the same database the app uses, for direct assertions."""
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def product(client):
    """A product created through the API."""
    response = client.post(
        "/api/products", json={"name": "Monitor curvo", "price": 300}
    )
    assert response.status_code == 201
    return response.json()["data"]
