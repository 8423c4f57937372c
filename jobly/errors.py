"""Error taxonomy and the classifier that turns failures into API errors."""

from jobly.domain.result import Failure, FailureKind
from jobly.domain.validation import ValidationResult

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
EXECUTION_ERROR = "EXECUTION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"
BAD_REQUEST = "BAD_REQUEST"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
HTTP_ERROR = "HTTP_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"

FAILURE_CODES = {
    FailureKind.NOT_FOUND: NOT_FOUND,
    FailureKind.CONFLICT: DUPLICATE_RESOURCE,
    FailureKind.EXECUTION: EXECUTION_ERROR,
}


class DomainError(Exception):
    """Base exception for errors that end a request with a client-facing response."""

    pass


class UnauthorizedError(DomainError):
    """Raised when the caller is not authenticated."""

    pass


class ForbiddenError(DomainError):
    """Raised when the caller is authenticated but lacks the required role."""

    pass


class APIError(DomainError):
    """A classified failure: message(s) plus the status code chosen by the route."""

    def __init__(self, message: str | list[str], status_code: int, code: str):
        super().__init__(message if isinstance(message, str) else "; ".join(message))
        self.message = message
        self.status_code = status_code
        self.code = code


def classify_validation(result: ValidationResult, status_code: int) -> APIError:
    """Build the error for a payload that failed schema validation."""
    return APIError(list(result.errors), status_code, VALIDATION_ERROR)


def classify_failure(failure: Failure, status_code: int) -> APIError:
    """Build the error for a failed data-access call.

    The status comes from the calling route; the failure kind only picks the code.
    """
    return APIError(failure.message, status_code, FAILURE_CODES[failure.kind])
