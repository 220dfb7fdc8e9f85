from typing import Any, Mapping, Optional


class DietLogError(Exception):
    """Base class for errors surfaced to API callers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
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


class ServiceValidationError(DietLogError):
    """Raised when a payload or identifier is malformed (http_status 400)."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(DietLogError):
    """Raised when a meal does not exist under the caller's ownership (404)."""

    http_status = 404
    default_message = "Not found"


class ConflictError(DietLogError):
    """Raised when a resource conflict occurs, e.g. a duplicate email (409)."""

    http_status = 409
    default_message = "Conflict"


class UnauthorizedError(DietLogError):
    """Raised when the session token is missing or unknown (401)."""

    http_status = 401
    default_message = "Unauthorized"
