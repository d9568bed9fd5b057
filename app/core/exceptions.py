"""
Application exceptions and their HTTP mapping.

Data-access code and the SQL builders raise these; the handlers registered
in main.py turn them into JSON responses of the form {"detail": message}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class JoblyError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal Server Error") -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class ValidationError(JoblyError):
    """Invalid input: empty update, inverted ranges, duplicates."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Bad Request") -> None:
        super().__init__(message)


class UnauthorizedError(JoblyError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ForbiddenError(JoblyError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class NotFoundError(JoblyError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message)


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never return stack traces to clients
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
