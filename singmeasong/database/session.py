from __future__ import annotations

import logging
from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DEFAULT_DATABASE_CONFIG, DatabaseConfig

logger = logging.getLogger(__name__)


def build_engine(config: DatabaseConfig = DEFAULT_DATABASE_CONFIG) -> Engine:
    kwargs: dict = {"echo": config.echo}
    if config.is_sqlite:
        # The threadpool serving sync routes shares connections across threads
        kwargs["connect_args"] = {"check_same_thread": False}
    if config.is_in_memory:
        # One shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(config.url, **kwargs)


engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def create_tables() -> None:
    """Create every table registered on ``Base``."""
    from ..recommendations import data_store  # noqa: F401  (registers the model)

    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


def get_db() -> Iterator[Session]:
    """FastAPI dependency yielding a session that is closed after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
