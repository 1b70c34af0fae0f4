"""Database configuration and session management."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy import create_engine, event, make_url
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from studyhub.config import Settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:  # noqa: ANN401
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, settings: Settings | None = None) -> Engine:
    """Create an engine with the connection pool suited to the backend."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        # An in-memory database lives only as long as its one connection
        in_memory = url.database in (None, "", ":memory:")
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool if in_memory else NullPool,
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    settings = settings or Settings()
    return create_engine(
        database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


class Database:
    """
    Process-wide handle on the relational store.

    Owns the engine (and with it the connection pool) and the session
    factory. Constructed once at startup and passed to whatever needs
    the store; tests build their own isolated instance.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory: sessionmaker[Session] = sessionmaker(
            autocommit=False, autoflush=False, bind=engine
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the handle from settings; a missing DATABASE_URL is fatal."""
        database_url = settings.require_database_url()
        database = cls(create_db_engine(database_url, settings))
        logger.info("database_initialized", backend=database.engine.dialect.name)
        return database

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Yield a session wrapped in a single transaction.

        Commits when the block exits cleanly, rolls back otherwise. The
        pooled connection is released when the block ends.
        """
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        """Drop all tables."""
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
