"""
Error taxonomy for the blog services and its HTTP mapping.

The stores are deliberately lenient and raise nothing under normal
operation.  These exceptions cover the opt‑in strict payload mode, a
store missing from the application and the (practically unreachable)
case of running out of identifiers.  ``register_exception_handlers``
turns them into JSON responses of the form ``{"error": "<message>"}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .logging_config import service_logger


class BlogServiceError(Exception):
    """Base class for errors raised by the blog services."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BlogServiceError):
    """A request payload is missing a required field."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BlogServiceError):
    """A requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreUnavailableError(BlogServiceError):
    """The application has no store to serve the request from."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class IdentifierExhaustedError(BlogServiceError):
    """No unused identifier could be generated."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def register_exception_handlers(app: FastAPI, service: str) -> None:
    """Map ``BlogServiceError`` subclasses to HTTP responses on ``app``."""
    logger = service_logger(service)

    @app.exception_handler(BlogServiceError)
    async def blog_service_error_handler(request: Request, exc: BlogServiceError) -> JSONResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
