"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application to improve maintainability and reduce duplication.
"""

SERVICE_NAME = "Employee Service API"
SERVICE_VERSION = "1.0.0"

EMPLOYEES_PATH = "/employees"


class LinkRelation:
    """Hypermedia link relation names"""

    SELF = "self"
    EMPLOYEES = "employees"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


# Primary keys are stored as signed 64-bit integers
MIN_EMPLOYEE_ID = -2**63
MAX_EMPLOYEE_ID = 2**63 - 1
