from functools import wraps
import logging

from sqlalchemy.exc import SQLAlchemyError

from church_records.exceptions import StorageError
from church_records.extensions import db

logger = logging.getLogger(__name__)


def storage_errors(func):
    """Roll back and re-raise database failures as StorageError."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Storage failure in {func.__qualname__}: {e}")
            raise StorageError(f"Storage failure: {e}") from e

    return wrapper


class BaseRepository:
    model = None

    @classmethod
    @storage_errors
    def find_by_id(cls, record_id: int):
        """Gets a record by primary key, or None if it does not exist."""
        return db.session.get(cls.model, record_id)

    @classmethod
    @storage_errors
    def find_all(cls, **filters):
        """Gets all records matching the filters, newest first."""
        filters = {key: value for key, value in filters.items() if value is not None}
        return (
            cls.model.query.filter_by(**filters)
            .order_by(cls.model.created_at.desc(), cls.model.id.desc())
            .all()
        )

    @classmethod
    @storage_errors
    def count(cls, **filters) -> int:
        """Counts the records matching the filters."""
        filters = {key: value for key, value in filters.items() if value is not None}
        return cls.model.query.filter_by(**filters).count()

    @classmethod
    @storage_errors
    def add(cls, record):
        """Inserts a new record."""
        db.session.add(record)
        db.session.commit()
        return record

    @classmethod
    @storage_errors
    def save(cls, record):
        """Commits changes made to a loaded record."""
        db.session.commit()
        return record

    @classmethod
    @storage_errors
    def delete(cls, record):
        """Deletes a record."""
        db.session.delete(record)
        db.session.commit()
