"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Every write commits its own transaction so a single call is a
    complete unit of work. A failed write is rolled back and re-raised
    as DatabaseError.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def find_all(self) -> List[T]:
        """
        Retrieve all records ordered by id.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def save(self, obj: T) -> T:
        """
        Insert a new record or update an existing one.

        Args:
            obj: Model instance, transient or already attached to the session

        Returns:
            The saved instance with database-generated values loaded

        Raises:
            DatabaseError: If the write fails
        """
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            self._rollback("save", e)
        return obj

    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.find_by_id(id)
        if obj is None:
            return False
        try:
            self.db.delete(obj)
            self.db.commit()
        except SQLAlchemyError as e:
            self._rollback("delete", e)
        return True

    def _rollback(self, operation: str, error: SQLAlchemyError):
        """Roll back the failed transaction and raise DatabaseError."""
        self.db.rollback()
        logger.warning(f"{self.model.__name__} {operation} failed, rolled back: {error}")
        raise DatabaseError(operation, f"Could not {operation} {self.model.__name__.lower()}") from error
