"""
Mappers between persistence entities and transfer objects.
"""

from .employee_mapper import EmployeeMapper

__all__ = ["EmployeeMapper"]
