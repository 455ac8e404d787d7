"""Engine setup and per-request sessions."""

from collections.abc import Iterator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from wordtree.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base of the tables in ``wordtree.models``."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # A single shared connection keeps an in-memory database alive between sessions
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 20, "max_overflow": 30, "pool_pre_ping": True, "pool_recycle": 3600}


def initialize_database(settings: Settings) -> sessionmaker[Session]:
    """Create the engine and session factory. Called once from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    _session_factory = sessionmaker(bind=_engine, autoflush=False)
    return _session_factory


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db() -> Iterator[Session]:
    """Yield a session for one request; it is closed once the response is sent."""
    session_factory = _session_factory or initialize_database(get_settings())
    with session_factory() as session:
        yield session


DatabaseSession = Annotated[Session, Depends(get_db)]
