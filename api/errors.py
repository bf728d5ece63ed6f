"""
API error handling.

Standardized error envelope for all routers:

    {"error": "<human message>", "details": "<optional>", "code": "<MACHINE_CODE>"}

``details`` and ``code`` are omitted when empty. Exception handlers
registered by ``register_exception_handlers`` render every failure in this
shape, including FastAPI request validation errors (400, never 422) and
unexpected exceptions.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from application.exceptions import ApiError

logger = logging.getLogger(__name__)


def create_error_response(
    error: str,
    details: Optional[str] = None,
    code: Optional[str] = None,
    status: int = 500,
) -> JSONResponse:
    """Create a standardized error response."""
    body: Dict[str, Any] = {"error": error}
    if details:
        body["details"] = details
    if code:
        body["code"] = code
    return JSONResponse(status_code=status, content=body)


def validate_required_fields(body: Dict[str, Any], required_fields: Iterable[str]) -> List[str]:
    """
    Get the names of required fields that are missing.

    None, absent and empty-string values all count as missing.
    """
    missing = []
    for field_name in required_fields:
        value = body.get(field_name)
        if value is None or value == "":
            missing.append(field_name)
    return missing


def handle_api_error(error: Any, default_message: str = "An error occurred") -> JSONResponse:
    """
    Convert any raised value into an error envelope.

    ``ApiError`` renders itself. Other exceptions are classified by message so
    auth failures raised outside the auth dependency still map to 401/403.
    """
    if isinstance(error, ApiError):
        return create_error_response(error.message, error.details, error.code, error.status_code)

    logger.error(f"API Error: {error!r}")

    if isinstance(error, Exception):
        message = str(error)
        lowered = message.lower()

        if (
            "not authenticated" in lowered
            or "unauthorized" in lowered
            or "authentication" in lowered
            or "token expired" in lowered
        ):
            return create_error_response("Unauthorized", message, "UNAUTHORIZED", 401)

        if "forbidden" in lowered or "permission" in lowered:
            return create_error_response("Permission denied", message, "FORBIDDEN", 403)

        if "not found" in lowered or "does not exist" in lowered:
            return create_error_response("Resource not found", message, "NOT_FOUND", 404)

        if "validation" in lowered or "invalid" in lowered:
            return create_error_response("Validation error", message, "VALIDATION_ERROR", 400)

        return create_error_response(default_message, message, "INTERNAL_ERROR", 500)

    return create_error_response(default_message, str(error), "UNKNOWN_ERROR", 500)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location or 'body'}: {err.get('msg')}")
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""

    @app.exception_handler(ApiError)
    async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.message} ({exc.details})")
        return handle_api_error(exc)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return create_error_response(
            "Invalid request body",
            _format_validation_errors(exc),
            "VALIDATION_ERROR",
            400,
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return handle_api_error(exc, "Internal server error")
