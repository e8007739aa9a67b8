"""Domain errors raised by services and routers, mapped to HTTP in main.py."""
from typing import Optional

from volleytrack.validators.common import FieldError, ValidationResult


class VolleyTrackError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[list[FieldError]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class RequestValidationFailed(VolleyTrackError):
    status_code = 400
    code = "VALIDATION_ERROR"

    @classmethod
    def from_result(cls, result: ValidationResult) -> "RequestValidationFailed":
        return cls(result.message or "Validation failed", result.errors)


class ConflictError(VolleyTrackError):
    """Well-formed request that does not fit the stored state."""
    status_code = 400
    code = "VALIDATION_ERROR"


class UnauthorizedError(VolleyTrackError):
    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(VolleyTrackError):
    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(VolleyTrackError):
    status_code = 404
    code = "NOT_FOUND"
