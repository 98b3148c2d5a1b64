"""Database configuration and session management."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:  # noqa: ANN401
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Process-wide handle on the engine, its connection pool and the session factory.

    Created once at startup and handed to request dependencies through
    ``app.state`` rather than living in a module global.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory: sessionmaker[Session] = sessionmaker(
            autoflush=False, bind=engine
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the engine and pool described by the settings."""
        if settings.is_sqlite:
            engine = create_engine(
                settings.DATABASE_URL,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_engine(
                settings.DATABASE_URL,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,  # Wait for a free connection
                pool_pre_ping=True,  # Verify connections before use
                pool_recycle=settings.DB_POOL_RECYCLE,
                connect_args={
                    "connect_timeout": settings.DB_CONNECT_TIMEOUT,
                    "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
                },
            )
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session and always return its connection to the pool."""
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    def ping(self, timeout_ms: int) -> bool:
        """Check that the database answers a trivial query within timeout_ms."""
        try:
            with self.engine.connect() as connection:
                if self.engine.dialect.name == "postgresql":
                    connection.execute(text(f"SET LOCAL statement_timeout = {int(timeout_ms)}"))
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Database health check failed: {e!s}")
            return False
        return True

    def dispose(self) -> None:
        """Close every pooled connection on shutdown."""
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Get the database handle created at startup."""
    database: Database = request.app.state.database
    return database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """Get database session."""
    with database.session() as db:
        yield db


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
