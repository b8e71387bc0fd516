"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .employee_request import EmployeeRequest

__all__ = ["EmployeeRequest"]
