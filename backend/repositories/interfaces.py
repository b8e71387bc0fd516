"""
Repository Interfaces

Abstract base classes for persistence access. The service layer depends only
on these, so the SQLAlchemy implementation can be swapped for another store
or a mock in tests.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models import Employee


class IEmployeeRepository(ABC):
    """
    Abstract interface for employee persistence.
    """

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """
        Retrieve every stored employee.

        Returns:
            List of employees, possibly empty
        """
        pass

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Employee]:
        """
        Retrieve an employee by primary key.

        Args:
            id: Employee id

        Returns:
            Employee or None if not found
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Employee]:
        """
        Retrieve an employee by email address.

        Args:
            email: Email to match exactly

        Returns:
            First matching employee or None
        """
        pass

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """
        Persist an employee.

        Assigns an id when the employee has none, otherwise writes the
        updated fields of the existing row.

        Args:
            employee: Entity to persist

        Returns:
            The persisted entity with its id populated
        """
        pass

    @abstractmethod
    def delete_by_id(self, id: int) -> bool:
        """
        Delete an employee by id. A missing id is not an error.

        Args:
            id: Employee id

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
