"""
Structured Logging Utilities

Adds request-scoped context (request id, method, path) and per-operation
context (employee id, email) to log messages.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments copied into the log context by log_operation
CONTEXT_KEYS = ("employee_id", "email")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Employee created", extra={"employee_id": employee.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the current request context with call-specific extras."""
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request.

    Every StructuredLogger call made while serving the request includes
    these values.

    Example:
        set_logging_context(request_id="abc-123", method="PUT", path="/employees/1")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator that logs the start, completion or failure of an operation.

    Keyword arguments named in CONTEXT_KEYS are added to the log context,
    so call sites pass identifiers by keyword to get them logged.

    Example:
        @log_operation("delete_employee")
        def delete_by_id(self, employee_id: int):
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        def _context(kwargs) -> Dict[str, Any]:
            context = {"operation": operation_name}
            context.update({key: kwargs[key] for key in CONTEXT_KEYS if key in kwargs})
            return context

        def _failed(context, error):
            context["error"] = str(error)
            context["error_type"] = type(error).__name__
            logger.error(f"Failed {operation_name}", extra=context, exc_info=True)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            context = _context(kwargs)
            logger.info(f"Starting {operation_name}", extra=context)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _failed(context, e)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            context = _context(kwargs)
            logger.info(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _failed(context, e)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
