"""
Classification of raw storage failures.

This is the only module that knows how PostgreSQL and SQLite report
constraint violations. Repositories use ``classified_errors`` around every
storage call so that nothing but domain errors leaves them.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.common.exceptions import DomainError, UnexpectedError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes (class 23, integrity constraint violation)
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"

# SQLite extended result code names (Python 3.11+) and message prefixes
SQLITE_UNIQUE_NAMES = {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}
SQLITE_FOREIGN_KEY_NAMES = {"SQLITE_CONSTRAINT_FOREIGNKEY"}
SQLITE_UNIQUE_MESSAGE = "UNIQUE constraint failed"
SQLITE_FOREIGN_KEY_MESSAGE = "FOREIGN KEY constraint failed"


class ConstraintViolation(Enum):
    """Which kind of constraint an IntegrityError reports."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


def classify_integrity_error(error: IntegrityError) -> ConstraintViolation:
    """
    Work out which constraint a driver-level integrity error is about.

    Args:
        error: The IntegrityError raised by SQLAlchemy

    Returns:
        The violated constraint kind, OTHER when it cannot be recognised
    """
    orig = error.orig

    # psycopg 3 exposes ``sqlstate``, psycopg2 exposes ``pgcode``
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        return ConstraintViolation.UNIQUE
    if sqlstate == PG_FOREIGN_KEY_VIOLATION:
        return ConstraintViolation.FOREIGN_KEY

    error_name = getattr(orig, "sqlite_errorname", None)
    if error_name in SQLITE_UNIQUE_NAMES:
        return ConstraintViolation.UNIQUE
    if error_name in SQLITE_FOREIGN_KEY_NAMES:
        return ConstraintViolation.FOREIGN_KEY

    message = str(orig)
    if SQLITE_UNIQUE_MESSAGE in message:
        return ConstraintViolation.UNIQUE
    if SQLITE_FOREIGN_KEY_MESSAGE in message:
        return ConstraintViolation.FOREIGN_KEY

    return ConstraintViolation.OTHER


def _rollback(db: Session, operation: str) -> None:
    try:
        db.rollback()
    except SQLAlchemyError as e:
        # The connection is already broken; the caller still gets UnexpectedError
        logger.error(f"Rollback failed during {operation}: {e!s}")


@contextmanager
def classified_errors(
    db: Session,
    operation: str,
    *,
    on_unique: Callable[[], DomainError] | None = None,
    on_foreign_key: Callable[[], DomainError] | None = None,
) -> Iterator[None]:
    """
    Translate storage failures raised inside the block into domain errors.

    Args:
        db: The session the block works with; rolled back on any failure
        operation: Name used in logs and in UnexpectedError, e.g. "users.create"
        on_unique: Builds the error for a unique constraint violation
        on_foreign_key: Builds the error for a foreign key violation

    Raises:
        DomainError: Produced by on_unique / on_foreign_key when they apply
        UnexpectedError: For every other failure; only domain errors leave the block
    """
    try:
        yield
    except IntegrityError as e:
        _rollback(db, operation)
        violation = classify_integrity_error(e)
        if violation is ConstraintViolation.UNIQUE and on_unique is not None:
            raise on_unique() from e
        if violation is ConstraintViolation.FOREIGN_KEY and on_foreign_key is not None:
            raise on_foreign_key() from e
        logger.error(f"Unhandled integrity error during {operation}: {e!s}", exc_info=True)
        raise UnexpectedError(operation) from e
    except SQLAlchemyError as e:
        _rollback(db, operation)
        logger.error(f"Storage failure during {operation}: {e!s}", exc_info=True)
        raise UnexpectedError(operation) from e
    except DomainError:
        raise
    except Exception as e:
        # Driver-level errors that bypass SQLAlchemy wrapping, e.g. OverflowError from sqlite3
        _rollback(db, operation)
        logger.error(f"Unexpected failure during {operation}: {e!s}", exc_info=True)
        raise UnexpectedError(operation) from e

