"""
Application-layer exceptions.

These exceptions are used across application, infrastructure and API layers.
Every ``ApiError`` carries the machine code and HTTP status used to render the
error envelope, so use cases can fail without knowing about HTTP responses.
"""

from typing import Optional


class ApiError(Exception):
    """Base error rendered as ``{error, details?, code?}`` with ``status_code``."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Caller input is missing or malformed."""

    status_code = 400
    code = "VALIDATION_ERROR"


class UnauthorizedError(ApiError):
    """Identity is missing, invalid or expired."""

    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(ApiError):
    """Authenticated caller may not act on the requested resource."""

    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(ApiError):
    status_code = 404
    code = "NOT_FOUND"


class DatabaseError(ApiError):
    status_code = 500
    code = "DATABASE_ERROR"


class ProgressionError(ApiError):
    """The program progression procedure failed or reported an error."""

    status_code = 500
    code = "PROGRESSION_ERROR"


class RepositoryError(Exception):
    """Error raised by a store operation.

    Wraps the PostgREST error so use cases can decide how to surface it.
    ``code``, ``details`` and ``hint`` mirror the PostgREST error payload.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.hint = hint

    def describe(self) -> str:
        """Single-line diagnostic including code and hint when present."""
        parts = [self.message]
        if self.code:
            parts.append(f"code={self.code}")
        if self.hint:
            parts.append(f"hint={self.hint}")
        return " | ".join(parts)
