"""
Response DTOs

DTOs for outgoing API responses. Each representation carries its hypermedia
links so clients can navigate without hardcoding URL structure.
"""

from .employee_response import Link, EmployeeDTO, EmployeeCollection

__all__ = ["Link", "EmployeeDTO", "EmployeeCollection"]
