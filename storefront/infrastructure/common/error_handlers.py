"""
Translation of domain errors into HTTP responses.

Routers let DomainError propagate; the handlers registered here turn it into
an ErrorResponse body with a status code chosen only by the error's kind.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.common.exceptions import DomainError, ErrorKind
from storefront.infrastructure.common.schemas import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = "An unexpected error occurred. Please try again later."

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """Get the HTTP status code for an error kind."""
    return STATUS_BY_KIND[kind]


def _error_response(kind: ErrorKind, detail: str, context: dict[str, object]) -> JSONResponse:
    body = ErrorResponse(error=kind.value, detail=detail, context=jsonable_encoder(context))
    return JSONResponse(status_code=status_for(kind), content=body.model_dump())


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError; storage internals never reach the caller."""
    if exc.kind is ErrorKind.UNEXPECTED:
        logger.error(
            f"Unexpected error on {request.method} {request.url.path}: {exc!s}",
            exc_info=exc,
        )
        return _error_response(exc.kind, GENERIC_ERROR_DETAIL, {})
    return _error_response(exc.kind, exc.message, exc.details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and path parameters are validation failures too."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "path")]
    context: dict[str, object] = {}
    if location:
        context["field"] = ".".join(location)
    return _error_response(ErrorKind.VALIDATION, first.get("msg", "Invalid request"), context)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Give framework-level HTTP errors (unknown route, 500 from a router) the same body."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        kind, detail = ErrorKind.UNEXPECTED, GENERIC_ERROR_DETAIL
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        kind, detail = ErrorKind.NOT_FOUND, str(exc.detail)
    elif exc.status_code == status.HTTP_409_CONFLICT:
        kind, detail = ErrorKind.CONFLICT, str(exc.detail)
    else:
        kind, detail = ErrorKind.VALIDATION, str(exc.detail)
    body = ErrorResponse(error=kind.value, detail=detail)
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(), headers=exc.headers
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything that is not a DomainError."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc!s}", exc_info=exc
    )
    return _error_response(ErrorKind.UNEXPECTED, GENERIC_ERROR_DETAIL, {})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error translation handlers to the app."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
