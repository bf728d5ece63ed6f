"""
Unit tests for the completions router.

Tests POST /complete-workout end to end through FastAPI with the use case
wired to in-memory fakes:
- Authentication, validation and ownership failures
- 200 success body
- 409 conflicts for already completed days/programs
- Error envelopes for store and progression failures
"""

import pytest
from fastapi.testclient import TestClient

from application.exceptions import RepositoryError
from backend.main import app
from tests.fakes import network_failure
from tests.fakes.conftest import (  # noqa: F401 - fixtures
    app_with_fake_use_cases,
    completion_fakes,
    override_user,
)

pytestmark = pytest.mark.unit

# =============================================================================
# Test Constants
# =============================================================================

TEST_USER_ID = "client-completions-1"
TEST_LOG_ID = "log-123"
TEST_SESSION_ID = "0b7c8f0e-9b5d-4e4c-a7f2-3d1e2c3b4a59"
ENDPOINT = "/complete-workout"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fakes(app_with_fake_use_cases):
    repo = app_with_fake_use_cases["workout_log_repo"]
    repo.seed_logs([{
        "id": TEST_LOG_ID,
        "client_id": TEST_USER_ID,
        "started_at": None,
        "program_assignment_id": "assign-1",
        "program_schedule_id": "sched-1",
    }])
    repo.seed_set_logs([
        {"workout_log_id": TEST_LOG_ID, "client_id": TEST_USER_ID, "weight": 100, "reps": 5},
        {"workout_log_id": TEST_LOG_ID, "client_id": TEST_USER_ID, "weight": 100, "reps": 5},
    ])
    return app_with_fake_use_cases


@pytest.fixture
def client(fakes) -> TestClient:
    override_user(TEST_USER_ID)
    return TestClient(app, raise_server_exceptions=False)


def _payload(**overrides):
    return {"workout_log_id": TEST_LOG_ID, "client_id": TEST_USER_ID, **overrides}


# =============================================================================
# Auth and validation
# =============================================================================


class TestCompleteWorkoutRequestErrors:
    def test_unauthenticated(self, fakes):
        client = TestClient(app)

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 401
        assert response.json()["error"] == "User not authenticated"
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_unauthenticated_before_body_validation(self, fakes):
        client = TestClient(app)
        response = client.post(ENDPOINT, json={})
        assert response.status_code == 401

    def test_unauthenticated_malformed_body(self, fakes):
        client = TestClient(app)

        response = client.post(
            ENDPOINT, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_malformed_body(self, client):
        response = client.post(
            ENDPOINT, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Invalid request body",
            "details": "Body must be valid JSON",
            "code": "VALIDATION_ERROR",
        }

    def test_body_not_an_object(self, client):
        response = client.post(ENDPOINT, json=["log-123"])
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_missing_fields(self, client):
        response = client.post(ENDPOINT, json={})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields",
            "details": "Missing: workout_log_id, client_id",
            "code": "VALIDATION_ERROR",
        }

    def test_empty_client_id(self, client):
        response = client.post(ENDPOINT, json=_payload(client_id=""))
        assert response.status_code == 400
        assert response.json()["details"] == "Missing: client_id"

    @pytest.mark.parametrize("duration", ["abc", True, [1]])
    def test_non_numeric_duration(self, client, duration):
        response = client.post(ENDPOINT, json=_payload(duration_minutes=duration))

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "1e400"])
    def test_non_finite_duration(self, client, fakes, literal):
        body = f'{{"workout_log_id": "{TEST_LOG_ID}", "client_id": "{TEST_USER_ID}", "duration_minutes": {literal}}}'

        response = client.post(ENDPOINT, content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert fakes["progress_repo"].calls == []

    def test_other_clients_log(self, client, fakes):
        response = client.post(ENDPOINT, json=_payload(client_id="someone-else"))

        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden - Cannot access another user's resource"
        assert fakes["progress_repo"].calls == []

    def test_log_not_found(self, client):
        response = client.post(ENDPOINT, json=_payload(workout_log_id="missing"))

        assert response.status_code == 404
        assert response.json()["error"] == "Workout log not found"


# =============================================================================
# Success
# =============================================================================


class TestCompleteWorkoutSuccess:
    def test_success_body(self, client, fakes):
        fakes["progress_repo"].set_response({
            "status": "advanced",
            "message": "Advanced to week 0, day 2",
            "current_week_index": 0,
            "current_day_index": 2,
            "is_completed": False,
        })

        response = client.post(ENDPOINT, json=_payload(duration_minutes=47.6))

        assert response.status_code == 200, response.text
        data = response.json()
        assert data["success"] is True
        assert data["totals"] == {"sets": 2, "reps": 10, "weight": 1000, "duration_minutes": 48}
        assert data["workout_log"]["id"] == TEST_LOG_ID
        assert data["workout_log"]["total_duration_minutes"] == 48
        assert data["program_progression"]["status"] == "advanced"
        assert data["program_progression"]["current_day_index"] == 2
        assert data["program_day"] == {
            "program_assignment_id": "assign-1",
            "program_schedule_id": "sched-1",
        }

    def test_progression_runs_as_caller(self, client, fakes):
        client.post(ENDPOINT, json=_payload())
        assert fakes["progress_repo"].calls == [
            {"client_id": TEST_USER_ID, "completed_by": TEST_USER_ID, "notes": None},
        ]

    def test_started_at_with_trimmed_fraction(self, client, fakes):
        fakes["workout_log_repo"].seed_logs([{
            "id": "log-trimmed",
            "client_id": TEST_USER_ID,
            "started_at": "2026-03-04T18:00:00.12345+00:00",
            "program_assignment_id": None,
            "program_schedule_id": None,
        }])

        response = client.post(ENDPOINT, json=_payload(workout_log_id="log-trimmed"))

        assert response.status_code == 200, response.text
        assert response.json()["totals"]["duration_minutes"] > 0

    def test_session_marked_completed(self, client, fakes):
        repo = fakes["workout_log_repo"]
        repo.seed_sessions([{"id": TEST_SESSION_ID, "client_id": TEST_USER_ID}])

        response = client.post(ENDPOINT, json=_payload(session_id=TEST_SESSION_ID))

        assert response.status_code == 200
        assert repo.get_session(TEST_SESSION_ID)["status"] == "completed"

    def test_invalid_session_id_ignored(self, client, fakes):
        response = client.post(ENDPOINT, json=_payload(session_id="session-abc"))

        assert response.status_code == 200
        assert fakes["workout_log_repo"].session_updates == []

    def test_side_effect_failure_still_200(self, client, fakes):
        fakes["goal_repo"].fail_lookup = RuntimeError("goals down")
        response = client.post(ENDPOINT, json=_payload())
        assert response.status_code == 200


# =============================================================================
# Conflicts
# =============================================================================


class TestCompleteWorkoutConflicts:
    def test_day_already_completed(self, client, fakes):
        fakes["progress_repo"].set_response({
            "status": "already_completed",
            "message": "This day was already completed",
            "current_week_index": 1,
            "current_day_index": 0,
            "is_completed": False,
        })

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 409
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Day already completed"
        assert data["message"] == "This day was already completed"
        assert data["workout_log"]["id"] == TEST_LOG_ID
        assert data["program_progression"] == {
            "status": "already_completed",
            "current_week_index": 1,
            "current_day_index": 0,
            "is_completed": False,
        }
        # Totals were persisted before progression ran
        assert fakes["workout_log_repo"].get_log(TEST_LOG_ID)["total_sets_completed"] == 2

    def test_program_already_completed(self, client, fakes):
        fakes["progress_repo"].set_response({"status": "completed", "message": "Program finished"})

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 409
        data = response.json()
        assert data["error"] == "Program already completed"
        assert data["program_progression"]["is_completed"] is True


# =============================================================================
# Failures
# =============================================================================


class TestCompleteWorkoutFailures:
    def test_set_log_failure(self, client, fakes):
        fakes["workout_log_repo"].fail_set_logs = RepositoryError("timeout")

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch set logs"
        assert response.json()["code"] == "DATABASE_ERROR"

    def test_update_failure(self, client, fakes):
        fakes["workout_log_repo"].fail_finalize = RepositoryError("denied", code="42501")

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to update workout log"
        assert "code=42501" in response.json()["details"]

    def test_progression_error_status(self, client, fakes):
        fakes["progress_repo"].set_response({
            "status": "error",
            "error": "no_active_assignment",
            "message": "No active program",
        })

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to advance program progress",
            "details": "No active program",
            "code": "no_active_assignment",
        }

    def test_progression_transport_error(self, client, fakes):
        fakes["progress_repo"].set_error(network_failure())

        response = client.post(ENDPOINT, json=_payload())

        assert response.status_code == 500
        assert response.json()["code"] == "PROGRESSION_ERROR"
