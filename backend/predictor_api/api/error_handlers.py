"""Error Handlers — map exceptions raised while serving /predictors to the error envelope.

Invariants:
    - PredictorAPIError → its own http_status and to_response() body
    - Any unreadable body (bad JSON, wrong shape, bad name) → 400 VALIDATION_ERROR;
      the handler never ran, so the store was never called
    - Anything else → 500 INTERNAL_ERROR with no exception text in the body
    - Every body is built by core.errors.error_envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from predictor_api.core.errors import (
    ErrorCategory, ErrorSeverity, PredictorAPIError, error_envelope,
)

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Request body is not valid JSON"
INVALID_BODY_MESSAGE = "Invalid request data"


async def handle_predictor_api_error(request: Request, exc: PredictorAPIError):
    logger.error(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "operation": exc.context.operation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
):
    errors = exc.errors()
    logger.warning(
        f"Rejected body on {request.method} {request.url.path}: {errors}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    json_invalid = any(e["type"] == "json_invalid" for e in errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(
            "VALIDATION_ERROR",
            INVALID_JSON_MESSAGE if json_invalid else INVALID_BODY_MESSAGE,
            ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            details=[
                {
                    "field": _field_path(e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(PredictorAPIError, handle_predictor_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _field_path(loc: tuple) -> str:
    """("body", "name") → "name"; a whole-body error stays "body"."""
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] == "body":
        parts = parts[1:]
    return ".".join(parts)
