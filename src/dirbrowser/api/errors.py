"""Mapping of browser failures to HTTP error responses.

Every error response has the body ``{"error": "<message>"}``.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dirbrowser.exceptions import (
    DirBrowserError,
    FileTooLargeError,
    InvalidArgumentError,
    IOFailureError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: Dict[Type[DirBrowserError], int] = {
    PathNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    FileTooLargeError: 413,  # Content Too Large
    IOFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(error: DirBrowserError) -> int:
    """Look up the status code for an error, walking its class hierarchy.

    Args:
        error: The failure raised by a browser operation.

    Returns:
        The mapped status code, or 500 for unmapped subclasses.
    """
    for cls in type(error).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_browser_error(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, DirBrowserError):
        raise exc
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.debug("%s %s rejected (%d): %s", request.method, request.url.path, status_code, exc)
    return error_response(status_code, str(exc))


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        raise exc
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request: " + "; ".join(problems))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or exc.__class__.__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DirBrowserError, handle_browser_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
