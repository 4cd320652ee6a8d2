"""
Boundary translator - the single place errors become HTTP responses.

Rules, in order:
1. A taxonomy error (TaskboardError bound to an ErrorKind) -> the kind's
   status and the error's message. Diagnostics stay in the log.
2. FastAPI request validation -> 400 with the first issue's message.
3. Anything else -> 500 with a fixed generic message; the original error is
   logged server-side only.

Every failure body has the shape {"message": str}.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.errors import GENERIC_ERROR_MESSAGE, Layer, TaskboardError

logger = logging.getLogger(__name__)

REQUEST_VALIDATION_STATUS = 400
UNEXPECTED_ERROR_STATUS = 500
DEFAULT_VALIDATION_MESSAGE = "Invalid request"


@dataclass(frozen=True)
class ErrorResponse:
    status: int
    message: str

    def body(self) -> dict[str, str]:
        return {"message": self.message}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status, content=self.body())


def first_validation_message(errors: Sequence[Any]) -> str:
    if not errors:
        return DEFAULT_VALIDATION_MESSAGE
    first = errors[0]
    if isinstance(first, dict):
        return str(first.get("msg") or DEFAULT_VALIDATION_MESSAGE)
    return str(first)


def translate_error(exc: BaseException) -> ErrorResponse:
    """Map any exception to (status, caller-visible message). Pure."""
    if isinstance(exc, TaskboardError) and exc.kind is not None:
        return ErrorResponse(exc.kind.status, exc.message)
    if isinstance(exc, RequestValidationError):
        return ErrorResponse(
            REQUEST_VALIDATION_STATUS, first_validation_message(exc.errors())
        )
    return ErrorResponse(UNEXPECTED_ERROR_STATUS, GENERIC_ERROR_MESSAGE)


def _log_taskboard_error(request: Request, exc: TaskboardError, status: int) -> None:
    details = exc.diagnostics()
    if exc.layer is Layer.INFRASTRUCTURE or status >= 500:
        logger.error(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            details,
        )
    else:
        logger.info(
            "%s %s rejected with %s (%s): %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            status,
            details,
        )


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaskboardError)
    async def taskboard_error_handler(request: Request, exc: TaskboardError):
        error = translate_error(exc)
        if exc.kind is None:
            logger.error(
                "Untyped %s reached the boundary", type(exc).__name__, exc_info=exc
            )
        else:
            _log_taskboard_error(request, exc, error.status)
        return error.to_response()

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.info("Request validation failed: %s", exc.errors())
        return translate_error(exc).to_response()

    # Routing-level errors (unknown path, wrong method) keep their status
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return translate_error(exc).to_response()
