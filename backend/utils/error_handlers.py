"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of application exceptions into
HTTP errors so individual endpoints stay free of try/except boilerplate.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from exceptions import (
    ResourceNotFoundError,
    DatabaseError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised by an endpoint to an HTTPException.

    Args:
        operation_name: Human-readable name of the operation
        error: The exception that escaped the endpoint

    Returns:
        HTTPException carrying the status code and detail for the client
    """
    if isinstance(error, ResourceNotFoundError):
        logger.info(f"{operation_name} - Not found: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail=error.message
        )
    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    This decorator catches application exceptions and converts them
    to appropriate HTTPException responses with consistent error messages.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get employee")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/employees/{employee_id}")
        @handle_api_errors("Get employee")
        def get_employee(...):
            return service.find_by_id(employee_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
