"""
Helpers for translating Supabase/PostgREST failures.
"""
from application.exceptions import RepositoryError

# PostgREST code for "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"

# Postgres unique_violation
UNIQUE_VIOLATION_CODE = "23505"


def to_repository_error(error: Exception) -> RepositoryError:
    """
    Wrap any client exception in a RepositoryError.

    postgrest ``APIError`` exposes ``message``, ``code``, ``details`` and
    ``hint``; transport errors (httpx) only carry a message.
    """
    if isinstance(error, RepositoryError):
        return error
    return RepositoryError(
        getattr(error, "message", None) or str(error),
        code=getattr(error, "code", None),
        details=getattr(error, "details", None),
        hint=getattr(error, "hint", None),
    )
