"""
Unit-of-work session scope for repository operations
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from customer_manager.infrastructure.database.operations import get_session
from customer_manager.infrastructure.utilities.exceptions import DatabaseOperationError

logger = logging.getLogger(__name__)


@contextmanager
def managed_session(operation: str = "database operation") -> Generator[Session, None, None]:
    """
    Run one repository operation in its own session

    The session commits when the block exits cleanly and is rolled back on
    any error. Constraint violations are re-raised unchanged so callers can
    map them to domain errors; other SQLAlchemy failures surface as
    DatabaseOperationError tagged with ``operation``.

    Yields:
        Session: The SQLAlchemy session object.
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        logger.warning("Constraint violation during %s, rolling back: %s", operation, e.orig)
        session.rollback()
        raise
    except SQLAlchemyError as e:
        logger.error("Database error during %s, rolling back: %s", operation, e)
        session.rollback()
        raise DatabaseOperationError(f"{operation} failed: {e}", operation=operation) from e
    except Exception as e:
        logger.error("Unexpected error during %s, rolling back: %s", operation, e)
        session.rollback()
        raise
    finally:
        session.close()
