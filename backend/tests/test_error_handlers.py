"""Tests for translating application exceptions into HTTP errors."""

import asyncio

import pytest
from fastapi import HTTPException

from exceptions import ResourceNotFoundError, DatabaseError, ApplicationError
from utils.error_handlers import handle_api_errors


def _raising(error):
    @handle_api_errors("Test operation")
    def endpoint():
        raise error
    return endpoint


@pytest.mark.parametrize("error, status", [
    (ResourceNotFoundError("employee", "id", 1), 404),
    (DatabaseError("save", "disk full"), 500),
    (ApplicationError("boom"), 500),
    (RuntimeError("unexpected"), 500),
])
def test_sync_errors_are_translated(error, status):
    with pytest.raises(HTTPException) as exc_info:
        _raising(error)()

    assert exc_info.value.status_code == status


def test_not_found_detail_is_message():
    with pytest.raises(HTTPException) as exc_info:
        _raising(ResourceNotFoundError("employee", "email", "x@example.com"))()

    assert exc_info.value.detail == "Could not find employee with email x@example.com"


def test_unexpected_error_hides_internals():
    with pytest.raises(HTTPException) as exc_info:
        _raising(RuntimeError("secret"))()

    assert "secret" not in exc_info.value.detail


def test_http_exception_passes_through():
    with pytest.raises(HTTPException) as exc_info:
        _raising(HTTPException(status_code=418, detail="teapot"))()

    assert exc_info.value.status_code == 418


def test_async_endpoint_is_wrapped():
    @handle_api_errors("Async operation")
    async def endpoint():
        raise ResourceNotFoundError("employee", "id", 3)

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(endpoint())

    assert exc_info.value.status_code == 404


def test_return_value_untouched():
    @handle_api_errors("Passthrough")
    def endpoint(value):
        return value

    assert endpoint(42) == 42
