"""Central error-response writer.

Every failure that ends a request is rendered here as
``{"message": ..., "code": ...}``. No traceback or internal detail reaches
the response body.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobly.errors import (
    BAD_REQUEST,
    FORBIDDEN,
    HTTP_ERROR,
    INTERNAL_ERROR,
    METHOD_NOT_ALLOWED,
    NOT_FOUND,
    UNAUTHORIZED,
    APIError,
    ForbiddenError,
    UnauthorizedError,
)
from jobly.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_EXCEPTION_CODES = {
    status.HTTP_400_BAD_REQUEST: BAD_REQUEST,
    status.HTTP_401_UNAUTHORIZED: UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: FORBIDDEN,
    status.HTTP_404_NOT_FOUND: NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: METHOD_NOT_ALLOWED,
}


def _error_response(
    status_code: int,
    message: str | list[str],
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Return a standardized error response with message and machine-readable code."""
    body = ErrorResponse(message=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def api_error_handler(_request: Request, exc: APIError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message, exc.code)


def unauthorized_error_handler(_request: Request, exc: UnauthorizedError) -> JSONResponse:
    return _error_response(
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def forbidden_error_handler(_request: Request, exc: ForbiddenError) -> JSONResponse:
    return _error_response(
        status.HTTP_403_FORBIDDEN,
        str(exc),
        FORBIDDEN,
    )


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed query strings and form fields; JSON bodies are validated by the handlers.
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    return _error_response(status.HTTP_400_BAD_REQUEST, messages, BAD_REQUEST)


def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = HTTP_EXCEPTION_CODES.get(exc.status_code, HTTP_ERROR)
    return _error_response(exc.status_code, str(exc.detail), code, headers=exc.headers)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        INTERNAL_ERROR,
    )


def register_exception_handlers(app):
    """Register the error handlers on the FastAPI app."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(ForbiddenError, forbidden_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
