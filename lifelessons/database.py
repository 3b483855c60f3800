"""Engine lifecycle and request-scoped sessions."""

import logging
from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lifelessons.config import Settings, get_settings
from lifelessons.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for the lesson, engagement and user tables."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(database_url: str, settings: Settings) -> dict[str, Any]:
    if not database_url.startswith("sqlite"):
        return {
            "pool_size": settings.DATABASE_POOL_SIZE,
            "max_overflow": settings.DATABASE_MAX_OVERFLOW,
            "pool_pre_ping": True,
            "pool_recycle": 3600,
        }
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url:
        # Every session must share the one connection that holds the database
        options["poolclass"] = StaticPool
    return options


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory. Called once from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_engine(
        settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL, settings)
    )
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def ping_database(engine: Engine | None = None) -> None:
    """
    Run a trivial statement to confirm the store is reachable.

    Raises:
        StorageUnavailableError: If the statement fails
    """
    target = engine or get_engine()
    try:
        with target.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database ping failed: {e!s}")
        raise StorageUnavailableError("Database ping failed") from e


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory, initializing lazily when the lifespan has not run."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request, closed when the response is sent."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
