"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .interfaces import IEmployeeRepository
from .base_repository import BaseRepository
from .employee_repository import EmployeeRepository

__all__ = [
    "IEmployeeRepository",
    "BaseRepository",
    "EmployeeRepository",
]
