"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from forum.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

# Backends that support the filtered unique index on open content reports.
SUPPORTED_BACKENDS = frozenset({"sqlite", "postgresql", "mssql"})


def _engine_options(database_url: str) -> dict:
    """Return dialect specific keyword arguments for :func:`create_engine`."""

    if database_url.startswith("sqlite"):
        # Request handlers run in a threadpool while the session is opened in
        # the dependency, so the connection crosses threads.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def ensure_supported_backend(backend_name: str) -> None:
    """Raise ``RuntimeError`` when ``backend_name`` lacks filtered unique indexes."""

    if backend_name not in SUPPORTED_BACKENDS:
        msg = (
            f"Unsupported database backend {backend_name!r}; "
            f"expected one of {', '.join(sorted(SUPPORTED_BACKENDS))}"
        )
        raise RuntimeError(msg)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    ensure_supported_backend(engine.url.get_backend_name())
    from forum.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database tables verified on %s", engine.url.get_backend_name())


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "SUPPORTED_BACKENDS",
    "SessionLocal",
    "engine",
    "ensure_supported_backend",
    "get_db",
    "initialize_database",
]
