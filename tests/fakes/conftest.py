"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for easily overriding
FastAPI dependencies with fake implementations.

Usage:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something():
        reset_overrides()  # Clear any previous overrides
        override_dependency(get_complete_workout_use_case, lambda: use_case)

        # Test code here...

        reset_overrides()  # Clean up after test
"""

from typing import Any, Callable, Dict

import pytest

from api import deps
from application.use_cases import CompleteWorkoutUseCase, MarkDayCompleteUseCase
from backend.auth import AuthenticatedUser


# Type for dependency getters
RepoGetter = Callable[..., Any]


# =============================================================================
# Reset and Override Functions
# =============================================================================


def reset_overrides() -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    from backend.main import app

    app.dependency_overrides.clear()


def override_dependency(
    getter: RepoGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        getter: The dependency getter function (e.g., get_complete_workout_use_case)
        implementation: The fake implementation instance or factory
    """
    from backend.main import app

    if callable(implementation) and not isinstance(implementation, type):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


def override_user(user_id: str) -> AuthenticatedUser:
    """Authenticate every request as ``user_id``."""
    user = AuthenticatedUser(id=user_id, access_token=f"token-{user_id}")

    async def _current_user() -> AuthenticatedUser:
        return user

    override_dependency(deps.get_current_user, _current_user)
    return user


# =============================================================================
# pytest Fixtures
# =============================================================================


@pytest.fixture
def override_deps() -> Callable[[RepoGetter, Any], None]:
    """
    Fixture that provides a dependency override helper.

    Automatically resets overrides before each test and cleans up after.

    Returns:
        Function that accepts (getter, implementation) and returns the implementation
    """
    reset_overrides()

    def _override(getter: RepoGetter, implementation: Any) -> Any:
        override_dependency(getter, implementation)
        return implementation

    yield _override

    reset_overrides()


@pytest.fixture
def completion_fakes() -> Dict[str, Any]:
    """
    Fresh fakes for every CompleteWorkoutUseCase collaborator.

    Returns:
        Dict mapping collaborator names to fake instances
    """
    from tests.fakes import (
        FakeAchievementChecker,
        FakeGoalRepository,
        FakeGoalSync,
        FakeProgramProgressRepository,
        FakeWorkoutLogRepository,
    )
    return {
        "workout_log_repo": FakeWorkoutLogRepository(),
        "progress_repo": FakeProgramProgressRepository(),
        "goal_repo": FakeGoalRepository(),
        "goal_sync": FakeGoalSync(),
        "achievements": FakeAchievementChecker(),
    }


@pytest.fixture
def app_with_fake_use_cases(completion_fakes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fixture that wires both use cases to fakes on the default app.

    Usage:
        def test_full_flow(app_with_fake_use_cases):
            app_with_fake_use_cases["workout_log_repo"].seed_logs([...])

    Returns:
        Dict of fake instances plus ``coach_repo``
    """
    from tests.fakes import FakeCoachRepository

    reset_overrides()

    coach_repo = FakeCoachRepository()
    complete_workout = CompleteWorkoutUseCase(**completion_fakes)
    mark_day_complete = MarkDayCompleteUseCase(
        coach_repo=coach_repo,
        progress_repo=completion_fakes["progress_repo"],
    )
    override_dependency(deps.get_complete_workout_use_case, lambda: complete_workout)
    override_dependency(deps.get_mark_day_complete_use_case, lambda: mark_day_complete)

    yield {**completion_fakes, "coach_repo": coach_repo}

    reset_overrides()


__all__ = [
    "reset_overrides",
    "override_dependency",
    "override_user",
    "override_deps",
    "completion_fakes",
    "app_with_fake_use_cases",
]
