import logging

import pytest
from sqlalchemy.engine import URL

from app.core.config import Settings


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_cors_allows_any_origin(client):
    response = client.get("/products", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.main"):
        client.get("/products")

    assert "GET /products" in caplog.text


def test_database_url_composed_from_parts():
    settings = Settings(
        DATABASE_URL=None,
        DB_HOST="db.internal",
        DB_PORT=3307,
        DB_USER="shop",
        DB_PASSWORD="p@ss",
        DB_NAME="inventory",
    )

    url = settings.get_database_url()

    assert isinstance(url, URL)
    assert url.drivername == "mysql+pymysql"
    assert url.host == "db.internal"
    assert url.port == 3307
    assert url.password == "p@ss"
    assert url.database == "inventory"


def test_database_url_override():
    settings = Settings(DATABASE_URL="sqlite:///local.db")

    assert settings.get_database_url() == "sqlite:///local.db"
    assert settings.is_sqlite()


def test_cors_origins_parsing():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test,")

    assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]


def test_wait_for_database_reraises_after_last_attempt(monkeypatch):
    from sqlalchemy.exc import OperationalError
    from app.core import database

    calls = []

    def _connect():
        calls.append(1)
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(database.engine, "connect", _connect)

    with pytest.raises(OperationalError):
        database.wait_for_database()

    # conftest sets DB_CONNECT_ATTEMPTS=1
    assert len(calls) == 1


def test_wait_for_database_retries_until_connected(monkeypatch):
    from unittest.mock import MagicMock
    from sqlalchemy.exc import OperationalError
    from tenacity import stop_after_attempt, wait_none
    from app.core import database

    calls = []

    def _connect():
        calls.append(1)
        if len(calls) < 3:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        return MagicMock()

    monkeypatch.setattr(database.engine, "connect", _connect)

    database.wait_for_database.retry_with(stop=stop_after_attempt(3), wait=wait_none())()

    assert len(calls) == 3


def test_request_log_includes_query_string(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.main"):
        client.get("/products?category=c")

    assert "GET /products?category=c" in caplog.text


def test_setup_logging_installs_one_named_handler():
    from app.core.logging import HANDLER_NAME, setup_logging

    setup_logging()
    setup_logging()

    named = [handler for handler in logging.getLogger().handlers if handler.get_name() == HANDLER_NAME]
    assert len(named) == 1
