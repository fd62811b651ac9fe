import os

# Settings are read at import time, so point them at SQLite before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DB_CONNECT_ATTEMPTS"] = "1"

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.database import Base, engine, get_db
from app.main import app


@pytest.fixture(autouse=True)
def reset_tables():
    """Every test starts from empty tables"""
    from app.models import product, user  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    # Context manager runs the lifespan (database check + create_all)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_db():
    """
    Replace the session dependency with one whose store calls fail.

    Returns the mock so a test can narrow down which call fails.
    """
    failure = OperationalError("SELECT 1", {}, Exception("server has gone away"))
    db = MagicMock(spec=Session)
    db.query.side_effect = failure
    db.commit.side_effect = failure

    def _get_broken_db():
        yield db

    app.dependency_overrides[get_db] = _get_broken_db
    return db


@pytest.fixture
def register(client):
    def _register(username="alice", password="s3cret"):
        return client.post("/api/register", json={"username": username, "password": password})

    return _register


@pytest.fixture
def product_payload():
    return {
        "name": "A",
        "description": "d",
        "category": "c",
        "price": 1.5,
        "quantity": 3,
    }
