"""FastAPI exception handlers.

Every error leaves the API as an ``ErrorResponse`` body. Catalog fetch
failures never get here: the browser absorbs them during startup and
reports ``status="error"`` in the view instead.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_browser.domain.errors import DomainError
from catalog_browser.entrypoints.http.error_responses import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Leading loc element naming where FastAPI found the input
REQUEST_SOURCES = ("body", "query", "path")


def _request_extra(request: Request, **fields: Any) -> dict[str, Any]:
    return {"path": request.url.path, "method": request.method, **fields}


def _respond(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its status code (400 when unmapped).

    Server-side failures are logged as errors with their context, client
    mistakes at info level.
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    extra = _request_extra(request, error_code=exc.error_code, detail=exc.message)

    if status_code >= 500:
        logger.error("Domain error occurred", extra={**extra, "context": exc.context})
    else:
        logger.info("Client error", extra=extra)

    field_errors = exc.to_dict().get("errors") or []
    body = ErrorResponse(
        detail=exc.message,
        code=exc.error_code,
        errors=[ErrorDetail(**error) for error in field_errors] or None,
    )
    return _respond(status_code, body)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report pydantic request errors (page=0, unknown sort field, missing body field)."""
    details = []
    for error in exc.errors():
        loc = list(error["loc"])
        # A body field may itself be named "query"; only the first element is a source
        if loc and loc[0] in REQUEST_SOURCES:
            loc = loc[1:]
        details.append(
            ErrorDetail(
                field=".".join(str(part) for part in loc),
                message=error["msg"],
                code=error["type"],
            )
        )

    logger.info(
        "Request validation error",
        extra=_request_extra(request, errors=[detail.model_dump() for detail in details]),
    )

    body = ErrorResponse(
        detail="Invalid request parameters",
        code="VALIDATION_ERROR",
        errors=details,
    )
    return _respond(422, body)  # HTTP_422_UNPROCESSABLE_CONTENT


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, answer with a generic 500 body."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra=_request_extra(request, error_type=type(exc).__name__, detail=str(exc)),
    )

    body = ErrorResponse(detail="An unexpected error occurred", code="INTERNAL_ERROR")
    return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, body)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers above; call once while building the app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
