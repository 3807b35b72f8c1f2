"""
Error handling middleware.

Every API error response carries:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from cotacao.application.dto.responses import ErrorResponse
from cotacao.config import get_logger
from cotacao.core.exceptions import (
    CatalogError,
    ConcurrentModificationError,
    ConfigurationError,
    FileTooLargeError,
    LifecycleError,
    LinkAlreadyRespondedError,
    LinkNotFoundError,
    QuotationError,
    QuotationListNotFoundError,
    StorageError,
    SubmissionError,
    ValidationError,
)

logger = get_logger(__name__)


# First matching entry wins, so subclasses come before their base
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    QuotationListNotFoundError: status.HTTP_404_NOT_FOUND,
    LinkNotFoundError: status.HTTP_404_NOT_FOUND,
    ConcurrentModificationError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
    LifecycleError: status.HTTP_409_CONFLICT,
    LinkAlreadyRespondedError: status.HTTP_409_CONFLICT,
    FileTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    CatalogError: 422,
    SubmissionError: 422,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

HINT_MAP: dict[str, str] = {
    "LIST_NOT_FOUND": "Check the list ID and try GET /api/lists to list available lists.",
    "LINK_NOT_FOUND": "The link is invalid. Ask the buyer for a new link.",
    "LINK_ALREADY_RESPONDED": "This link was already used. Ask the buyer for a new link.",
    "LIST_FINALIZED": "The quotation is closed. Reuse it to start a new round.",
    "ALREADY_FINALIZED": "The list is already finalized.",
    "CONCURRENT_MODIFICATION": "The list changed meanwhile. Reload it and retry.",
    "EMPTY_CATALOG": "Each row needs internal code, description and barcode.",
    "EMPTY_RESPONSE": "Fill in at least one price before submitting.",
    "SHEET_UNREADABLE": "Upload a valid .xlsx or .csv file.",
    "STORAGE_UNAVAILABLE": "Storage is temporarily unavailable. Retry later.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
}

STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    409: "The resource is not in a state that allows this operation.",
    413: "The uploaded file is too large.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
    503: "The service is temporarily unavailable. Retry later.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def status_for(exc: Exception) -> int:
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Convert an exception to the standardized JSON error response."""
    status_code = status_for(exc)
    error_code = exc.code if isinstance(exc, QuotationError) else exc.__class__.__name__
    request_id = getattr(request.state, "request_id", None)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "request_error",
        request_id=request_id,
        path=request.url.path,
        error_type=error_code,
        error=str(exc),
        traceback=traceback.format_exc() if status_code >= 500 else None,
    )

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error_code=error_code,
            message=str(exc),
            hint=_get_hint(error_code, status_code),
            path=request.url.path,
        ).model_dump(mode="json"),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Converts uncaught exceptions to standardized JSON error responses."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(QuotationError)
    async def quotation_exception_handler(
        request: Request,
        exc: QuotationError,
    ) -> JSONResponse:
        """Handle domain errors raised by use cases."""
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint="Check the request body fields and types.",
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = {
            400: "BAD_REQUEST",
            404: "NOT_FOUND",
            405: "METHOD_NOT_ALLOWED",
            422: "UNPROCESSABLE_ENTITY",
        }.get(exc.status_code, "HTTP_ERROR")

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=exc.detail or "An error occurred",
                hint=_get_hint(error_code, exc.status_code),
                path=request.url.path,
            ).model_dump(mode="json"),
        )
