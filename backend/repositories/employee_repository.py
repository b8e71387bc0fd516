"""
Employee repository for employee-specific data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import Employee
from .base_repository import BaseRepository
from .interfaces import IEmployeeRepository


class EmployeeRepository(BaseRepository[Employee], IEmployeeRepository):
    """Repository for Employee model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Employee)

    def find_by_email(self, email: str) -> Optional[Employee]:
        """
        Find an employee by email address.

        Email is not unique in the schema; the lowest id wins.

        Args:
            email: Email to match exactly

        Returns:
            Employee instance or None if not found
        """
        return self.db.query(self.model).filter(
            self.model.email == email
        ).order_by(self.model.id).first()
