from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from src.shop.core.errors import Conflict, StoreError, StoreUnavailable


@contextmanager
def unit_of_work(session: Session, action: str) -> Iterator[Session]:
    """Commit on success, roll back on failure and translate store errors.

    ``IntegrityError`` becomes ``Conflict`` and any other SQLAlchemy error
    becomes ``StoreUnavailable``; domain errors pass through unchanged.
    """
    try:
        yield session
        session.commit()
    except StoreError:
        session.rollback()
        raise
    except IntegrityError as e:
        session.rollback()
        logger.bind(action=action).warning("Unique constraint violated: {}", e.orig)
        raise Conflict(f"{action}: duplicate key") from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.bind(action=action, error_type=type(e).__name__).error(
            "Database transaction failed"
        )
        raise StoreUnavailable(f"{action}: store unavailable") from e
    except Exception:
        session.rollback()
        raise
