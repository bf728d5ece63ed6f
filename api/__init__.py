"""
API package for the CoachHub API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Error envelope helpers and exception handlers
- schemas/: Request/response models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_current_user,
    get_auth_context,
    get_supabase_admin_client,
    get_supabase_admin_client_required,
    get_supabase_user_client,
    get_complete_workout_use_case,
    get_mark_day_complete_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Authentication
    "get_current_user",
    "get_auth_context",
    # Database
    "get_supabase_admin_client",
    "get_supabase_admin_client_required",
    "get_supabase_user_client",
    # Use cases
    "get_complete_workout_use_case",
    "get_mark_day_complete_use_case",
]
