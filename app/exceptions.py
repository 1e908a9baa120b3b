from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for domain errors surfaced to API clients.

    Attributes:
        message: human-readable message, returned verbatim in the response body
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: HTTP status code used by the exception handlers
    """

    http_status = 500
    default_message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DailyDietError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(DailyDietError):
    """Raised when a requested resource was not found.

    Also used for resources owned by another session, which must look missing.
    """

    http_status = 404
    default_message = "Not found"


class ConflictError(DailyDietError):
    """Raised when a resource conflict occurs (duplicate user name or session id).

    Answered with 400 to stay compatible with existing clients.
    """

    http_status = 400
    default_message = "Conflict"


class UnauthorizedError(DailyDietError):
    """Raised when a session-scoped route is called without a session cookie."""

    http_status = 401
    default_message = "Unauthorized"
