"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(ApplicationError):
    """Raised when a lookup by id or by a secondary key yields no match"""

    def __init__(self, resource: str, key: str, value):
        details = {"resource": resource, "key": key, "value": value}
        super().__init__(f"Could not find {resource} with {key} {value}", details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
