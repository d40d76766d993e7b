"""Maps domain exceptions to the JSON error envelope.

Every error response has the shape::

    {"success": false, "message": ..., "data": null,
     "meta": {"errorCode", "statusCode", "timestamp", "path", "method", "details"?}}
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from event_platform.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidInputError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "DUPLICATE_RESOURCE",
    413: "PAYLOAD_TOO_LARGE",
}


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    meta: dict[str, Any] = {
        "errorCode": error_code,
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
        "method": request.method,
    }
    if details:
        meta["details"] = details
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None, "meta": meta},
        headers=headers,
    )


# ── Domain exceptions ───────────────────────────────────────────────


async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(request, status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(exc))


async def _duplicate(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    return error_response(
        request,
        status.HTTP_409_CONFLICT,
        "DUPLICATE_RESOURCE",
        str(exc),
        details=[{"field": exc.field, "message": "already in use"}],
    )


async def _invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
    details = [{"field": exc.field, "message": exc.message}] if exc.field else None
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", exc.message, details
    )


async def _unauthenticated(request: Request, exc: AuthenticationError) -> JSONResponse:
    return error_response(request, status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", exc.message)


async def _forbidden(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    return error_response(request, status.HTTP_403_FORBIDDEN, "FORBIDDEN", exc.message)


# ── Framework exceptions ────────────────────────────────────────────


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return error_response(
        request,
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        details,
    )


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(request, exc.status_code, code, str(exc.detail))


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(DuplicateEntityError, _duplicate)
    app.add_exception_handler(InvalidInputError, _invalid_input)
    app.add_exception_handler(AuthenticationError, _unauthenticated)
    app.add_exception_handler(PermissionDeniedError, _forbidden)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled)
