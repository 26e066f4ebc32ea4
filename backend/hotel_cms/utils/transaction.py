from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from hotel_cms.extensions import db
from hotel_cms.domain.exceptions import PersistenceError


@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Database transaction rolled back")
        raise PersistenceError("The operation could not be saved. Please try again.") from exc
    except Exception:
        db.session.rollback()
        raise
