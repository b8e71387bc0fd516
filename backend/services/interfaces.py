"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from fastapi import Response

from dtos.request.employee_request import EmployeeRequest
from dtos.response.employee_response import EmployeeDTO, EmployeeCollection


class IEmployeeService(ABC):
    """
    Abstract interface for employee CRUD operations.

    Implementations hold no state between calls; everything lives in the
    repository's backing store.
    """

    @abstractmethod
    def find_all(self) -> EmployeeCollection:
        """
        List all employees with hypermedia links.

        Returns:
            Collection representation, possibly empty
        """
        pass

    @abstractmethod
    def find_by_id(self, employee_id: int) -> EmployeeDTO:
        """
        Get a single employee.

        Raises:
            ResourceNotFoundError: If no employee has this id
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> EmployeeDTO:
        """
        Get a single employee by email.

        Raises:
            ResourceNotFoundError: If no employee has this email
        """
        pass

    @abstractmethod
    def new_employee(self, dto: EmployeeRequest) -> Response:
        """
        Create an employee.

        Returns:
            201 response with the linked representation and a Location header
        """
        pass

    @abstractmethod
    def save(self, dto: EmployeeRequest, employee_id: int) -> Response:
        """
        Replace an employee's fields, or create one if the id is unknown.

        Returns:
            201 response with the linked representation and a Location header
        """
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> Response:
        """
        Delete an employee.

        Returns:
            204 response, whether or not the employee existed
        """
        pass
