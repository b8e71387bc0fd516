"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends, Request
from config.app_config import PUBLIC_BASE_URL
from database import get_db
from repositories.employee_repository import EmployeeRepository
from repositories.interfaces import IEmployeeRepository
from services.employee_assembler import EmployeeModelAssembler
from services.employee_service import EmployeeService
from services.interfaces import IEmployeeService


def get_employee_repository(db: Session = Depends(get_db)) -> IEmployeeRepository:
    """
    Factory function for creating EmployeeRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        IEmployeeRepository: SQLAlchemy-backed repository
    """
    return EmployeeRepository(db)


def get_employee_assembler(request: Request) -> EmployeeModelAssembler:
    """
    Factory function for creating the hypermedia assembler.

    Uses the configured public base URL when set, otherwise the base URL
    of the incoming request.
    """
    return EmployeeModelAssembler(PUBLIC_BASE_URL or str(request.base_url))


def get_employee_service(
    repository: IEmployeeRepository = Depends(get_employee_repository),
    assembler: EmployeeModelAssembler = Depends(get_employee_assembler)
) -> IEmployeeService:
    """
    Factory function for creating EmployeeService instances.

    Returns:
        IEmployeeService: Employee service implementation
    """
    return EmployeeService(repository, assembler)
