"""
Database engine and session management.

Engines and session factories are built by ``create_app`` and kept on
``app.state``; request handlers reach them through ``get_db``.
"""
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from backpacker.core.config import Settings
from backpacker.db.base import Base


def build_engine(settings: Settings) -> Engine:
    """Create the engine for the configured database URL."""
    url = settings.DATABASE_URL
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.DB_ECHO, **kwargs)

    return create_engine(
        url,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
        pool_recycle=3600
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting database session."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    # Register models on the metadata before creating tables
    import backpacker.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
