import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Build an engine; SQLite is shared across the request threadpool"""
    kwargs = {"echo": echo, "future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine, autoflush=False, expire_on_commit=False
    )


def init_db(engine: Engine) -> None:
    """Create all tables. Fails loudly if the database is unreachable."""
    # Register the models on Base.metadata
    from .models import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready on %s", engine.url.render_as_string())
