"""
FastAPI Dependency Providers.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) and use cases rather than module-level clients.
This enables clean separation of concerns and easy testing with fakes.

Architecture:
- Settings and the service role Supabase client are cached per-process (lru_cache)
- The user-scoped Supabase client is created per request from the caller's token
- ``AuthContext`` bundles both access contexts with the authenticated user
- Use case providers build repositories from the right context:
  only program progression runs as the user, everything else is elevated

Usage in routers:
    from api.deps import get_current_user, get_complete_workout_use_case

    @router.post("/complete-workout")
    def complete_workout(
        user: AuthenticatedUser = Depends(get_current_user),
        use_case: CompleteWorkoutUseCase = Depends(get_complete_workout_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_complete_workout_use_case] = lambda: use_case
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Type, TypeVar

from fastapi import Depends, Header, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError as PydanticValidationError
from supabase import Client, create_client

from api.schemas.completion import CompleteWorkoutRequest, MarkDayCompleteRequest
from application.exceptions import ApiError, ValidationError
from application.use_cases import CompleteWorkoutUseCase, MarkDayCompleteUseCase
from backend.auth import AuthenticatedUser, get_current_user as _get_current_user
from backend.services.achievement_service import AchievementService
from backend.services.goal_sync_service import GoalSyncService
from backend.settings import Settings, get_settings as _get_settings
from infrastructure import (
    SupabaseAchievementRepository,
    SupabaseCoachRepository,
    SupabaseGoalRepository,
    SupabaseProgramProgressRepository,
    SupabaseWorkoutLogRepository,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
) -> AuthenticatedUser:
    """
    Get the current authenticated user.

    Wraps backend.auth.get_current_user for dependency injection.

    Raises:
        UnauthorizedError: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization)


# =============================================================================
# Request Body Providers
# =============================================================================

ModelT = TypeVar("ModelT", bound=BaseModel)


async def _read_json_body(request: Request, model: Type[ModelT]) -> ModelT:
    """
    Decode and validate a JSON request body.

    Raises:
        ValidationError: 400 if the body is not valid JSON
        RequestValidationError: 400 if the body does not match ``model``
    """
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Invalid request body", "Body must be valid JSON")

    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


async def get_complete_workout_request(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
) -> CompleteWorkoutRequest:
    """
    Body of POST /complete-workout.

    Depends on the current user so authentication always fails first.
    """
    return await _read_json_body(request, CompleteWorkoutRequest)


async def get_mark_day_complete_request(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
) -> MarkDayCompleteRequest:
    """Body of POST /coach/pickup/mark-complete, read after authentication."""
    return await _read_json_body(request, MarkDayCompleteRequest)


# =============================================================================
# Supabase Client Providers
# =============================================================================


@lru_cache
def get_supabase_admin_client() -> Optional[Client]:
    """
    Get the service role Supabase client (cached).

    Returns None if the URL is not configured. This client bypasses
    row-level security.

    Raises:
        ApiError: 500 if the URL is set but the service role key is missing
    """
    settings = _get_settings()

    if not settings.supabase_url:
        return None
    if not settings.supabase_service_role_key:
        raise ApiError("Service role key not configured", code="CONFIGURATION_ERROR")

    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def get_supabase_admin_client_required() -> Client:
    """
    Get the service role client, raising if not configured.

    Raises:
        ApiError: 503 if Supabase is not configured
    """
    client = get_supabase_admin_client()
    if client is None:
        raise ApiError(
            "Database not available",
            "Supabase credentials not configured.",
            code="SERVICE_UNAVAILABLE",
            status_code=503,
        )
    return client


def get_supabase_user_client(
    user: AuthenticatedUser = Depends(get_current_user),
) -> Client:
    """
    Get a Supabase client acting as the authenticated user.

    Built per request from the anon key with the caller's access token
    attached to PostgREST, so row-level security and ``auth.uid()`` apply.

    Raises:
        ApiError: 503 if Supabase is not configured
    """
    settings = _get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise ApiError(
            "Database not available",
            "Supabase credentials not configured.",
            code="SERVICE_UNAVAILABLE",
            status_code=503,
        )

    client = create_client(settings.supabase_url, settings.supabase_anon_key)
    client.postgrest.auth(user.access_token)
    return client


@dataclass
class AuthContext:
    """Authenticated user plus both data access contexts."""
    user: AuthenticatedUser
    user_client: Client
    admin_client: Client


def get_auth_context(
    user: AuthenticatedUser = Depends(get_current_user),
    user_client: Client = Depends(get_supabase_user_client),
    admin_client: Client = Depends(get_supabase_admin_client_required),
) -> AuthContext:
    """
    Resolve the caller and both Supabase contexts.

    Authentication runs first, so unauthenticated requests fail with 401
    before any client is created.
    """
    return AuthContext(user=user, user_client=user_client, admin_client=admin_client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_complete_workout_use_case(
    ctx: AuthContext = Depends(get_auth_context),
) -> CompleteWorkoutUseCase:
    """
    Get CompleteWorkoutUseCase wired to Supabase repositories.

    Args:
        ctx: Auth context (injected)

    Returns:
        CompleteWorkoutUseCase: Use case for completing workouts
    """
    goal_repo = SupabaseGoalRepository(ctx.admin_client)
    return CompleteWorkoutUseCase(
        workout_log_repo=SupabaseWorkoutLogRepository(ctx.admin_client),
        progress_repo=SupabaseProgramProgressRepository(ctx.user_client),
        goal_repo=goal_repo,
        goal_sync=GoalSyncService(goal_repo),
        achievements=AchievementService(SupabaseAchievementRepository(ctx.admin_client)),
    )


def get_mark_day_complete_use_case(
    ctx: AuthContext = Depends(get_auth_context),
) -> MarkDayCompleteUseCase:
    """
    Get MarkDayCompleteUseCase wired to Supabase repositories.

    Args:
        ctx: Auth context (injected)

    Returns:
        MarkDayCompleteUseCase: Use case for coaches completing a client's day
    """
    return MarkDayCompleteUseCase(
        coach_repo=SupabaseCoachRepository(ctx.admin_client),
        progress_repo=SupabaseProgramProgressRepository(ctx.user_client),
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Authentication
    "get_current_user",
    "AuthContext",
    "get_auth_context",
    # Request bodies
    "get_complete_workout_request",
    "get_mark_day_complete_request",
    # Database
    "get_supabase_admin_client",
    "get_supabase_admin_client_required",
    "get_supabase_user_client",
    # Use cases
    "get_complete_workout_use_case",
    "get_mark_day_complete_use_case",
]
