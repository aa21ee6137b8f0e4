"""Request errors and the handlers that turn them into HTTP responses.

Every error is answered as ``text/plain`` with the raw message as the body.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("filedrop.errors")


class FileDropError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(FileDropError):
    """Malformed multipart body or missing ``file`` part."""

    status_code = status.HTTP_400_BAD_REQUEST


class MethodNotAllowed(FileDropError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class InternalError(FileDropError):
    """Filesystem failure while writing or listing the storage directory."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FileDropError)
    async def filedrop_error_handler(request: Request, exc: FileDropError) -> PlainTextResponse:
        logger.warning(
            "HTTP %d: %s | method=%s path=%s",
            exc.status_code,
            exc.message,
            request.method,
            request.url.path,
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        """Starlette errors (static 404s and friends) in the same plain-text form."""
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
