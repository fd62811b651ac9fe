import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs() -> dict:
    if settings.is_sqlite():
        kwargs = {"connect_args": {"check_same_thread": False}}
        if make_url(settings.get_database_url()).database in (None, "", ":memory:"):
            # In-memory SQLite lives inside a single connection, so share it across threads
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        # Validate connections on checkout so a dropped server connection is replaced
        "pool_pre_ping": True,
    }


# Create database engine - manages the connection pool
engine = create_engine(settings.get_database_url(), **_engine_kwargs())

# Create session factory - each request gets a new session
# autocommit=False: Changes require explicit commit
# autoflush=False: Don't auto-flush before queries
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all database models
Base = declarative_base()


@retry(
    stop=stop_after_attempt(settings.DB_CONNECT_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=1, max=settings.DB_CONNECT_BACKOFF_MAX),
    retry=retry_if_exception_type(OperationalError),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
def wait_for_database() -> None:
    """Open one pooled connection, retrying with exponential backoff until the server answers"""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def init_db() -> None:
    """
    Make sure the store is reachable and the tables exist.

    Tables are normally pre-existing; create_all only issues
    CREATE TABLE for the ones that are missing.
    """
    # Import models so they are registered on Base.metadata
    from app.models import product, user  # noqa: F401

    wait_for_database()
    Base.metadata.create_all(bind=engine)
    logger.info("Connected to database.")


def dispose_db() -> None:
    engine.dispose()
    logger.info("Database connection pool closed.")


def get_db():
    """
    Dependency for getting database session.

    Checks a connection out of the pool for the duration of one request.
    The session is always closed after the request completes, returning
    the connection to the pool.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
