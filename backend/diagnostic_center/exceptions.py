"""Service-level errors mapped to HTTP responses by the global exception handlers."""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors a handler can raise to short-circuit a request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None, headers: dict | None = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class Unauthenticated(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHENTICATED"
    default_message = "Unauthorized access"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Forbidden access"


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Resource not found"


class InternalFailure(ServiceError):
    """Persistence failures and anything else the caller cannot fix."""


class InvalidIdentifier(InternalFailure):
    code = "INVALID_IDENTIFIER"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid identifier: {value!r}")
