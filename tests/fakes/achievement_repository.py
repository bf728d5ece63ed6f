"""
Fake Achievement Repository for Testing.

In-memory implementation of AchievementRepository, plus a recording
AchievementChecker fake.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime
import uuid


class FakeAchievementRepository:
    """In-memory fake implementation of AchievementRepository."""

    def __init__(self):
        self._templates: List[Dict[str, Any]] = []
        self._unlocked: List[Dict[str, Any]] = []
        self.workout_log_count = 0
        self.completed_programs = 0
        self.personal_records = 0
        self.completion_times: List[datetime] = []
        self.fail_templates: Optional[Exception] = None

    def reset(self) -> None:
        self.__init__()

    def seed_templates(self, templates: List[Dict[str, Any]]) -> None:
        for template in templates:
            self._templates.append({"id": str(uuid.uuid4()), "is_active": True, **template})

    def seed_unlocked(self, rows: List[Dict[str, Any]]) -> None:
        self._unlocked.extend(rows)

    def get_all_unlocked(self) -> List[Dict[str, Any]]:
        return list(self._unlocked)

    # =========================================================================
    # AchievementRepository Protocol Methods
    # =========================================================================

    def get_templates(self, achievement_type: str) -> List[Dict[str, Any]]:
        if self.fail_templates:
            raise self.fail_templates
        return [
            t for t in self._templates
            if t.get("is_active") and t.get("achievement_type") == achievement_type
        ]

    def get_unlocked(self, client_id: str) -> List[Dict[str, Any]]:
        return [u for u in self._unlocked if u.get("client_id") == client_id]

    def insert_unlocked(
        self,
        client_id: str,
        template_id: str,
        tier: Optional[str],
        metric_value: float,
    ) -> Optional[Dict[str, Any]]:
        for row in self._unlocked:
            if (
                row.get("client_id") == client_id
                and row.get("achievement_template_id") == template_id
                and row.get("tier") == tier
            ):
                return None
        row = {
            "id": str(uuid.uuid4()),
            "client_id": client_id,
            "achievement_template_id": template_id,
            "tier": tier,
            "metric_value": metric_value,
        }
        self._unlocked.append(row)
        return row

    def count_workout_logs(self, client_id: str) -> int:
        return self.workout_log_count

    def get_completion_times(self, client_id: str) -> List[datetime]:
        return list(self.completion_times)

    def count_completed_programs(self, client_id: str) -> int:
        return self.completed_programs

    def count_personal_records(self, client_id: str) -> int:
        return self.personal_records


class FakeAchievementChecker:
    """Records achievement checks; optionally raises."""

    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[tuple] = []
        self._error = error

    def check_and_unlock(self, client_id: str, achievement_type: str) -> List[Dict[str, Any]]:
        self.calls.append((client_id, achievement_type))
        if self._error:
            raise self._error
        return []
