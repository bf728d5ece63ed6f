"""
Achievement Service.

Evaluates achievement templates against a client's current metrics and
records newly unlocked tiers. Called after actions that may move a metric,
such as completing a workout.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Set
import logging

from application.ports.achievement_repository import AchievementRepository

logger = logging.getLogger(__name__)

TIER_NAMES = ("bronze", "silver", "gold", "platinum")
SINGLE_TIER = "single"


def calculate_day_streak(completion_times: Iterable[datetime], today: date) -> int:
    """
    Count consecutive days with at least one completed workout.

    The streak only counts as current when the most recent workout day is
    today or yesterday; otherwise it is broken and 0 is returned.
    """
    days = sorted({t.astimezone(timezone.utc).date() for t in completion_times}, reverse=True)
    if not days:
        return 0
    if days[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    expected = days[0]
    for day in days[1:]:
        expected -= timedelta(days=1)
        if day != expected:
            break
        streak += 1
    return streak


def template_tiers(template: Dict[str, Any]) -> List[tuple]:
    """
    Get ``(tier_name, threshold)`` pairs for a template.

    Tiered templates yield every tier with a threshold; non-tiered templates
    yield a single ``(None, single_threshold or 0)`` pair.
    """
    if template.get("is_tiered"):
        tiers = []
        for name in TIER_NAMES:
            threshold = template.get(f"tier_{name}_threshold")
            if threshold is not None:
                tiers.append((name, threshold))
        return tiers
    return [(None, template.get("single_threshold") or 0)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AchievementService:
    """Checks achievement thresholds and unlocks what has been earned."""

    def __init__(
        self,
        achievement_repo: AchievementRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repo = achievement_repo
        self._clock = clock

    def get_metric_value(self, client_id: str, achievement_type: str) -> float:
        """Current value of the metric an achievement type measures."""
        if achievement_type == "workout_count":
            return self._repo.count_workout_logs(client_id)
        if achievement_type == "streak_weeks":
            return calculate_day_streak(
                self._repo.get_completion_times(client_id),
                self._clock().date(),
            )
        if achievement_type == "program_completion":
            return self._repo.count_completed_programs(client_id)
        if achievement_type == "pr_count":
            return self._repo.count_personal_records(client_id)
        return 0

    def check_and_unlock(self, client_id: str, achievement_type: str) -> List[Dict[str, Any]]:
        """
        Unlock every tier of ``achievement_type`` the client has reached.

        Args:
            client_id: Client to evaluate
            achievement_type: Template type, e.g. "workout_count" or "streak_weeks"

        Returns:
            Newly unlocked achievement rows (empty on error)
        """
        try:
            templates = self._repo.get_templates(achievement_type)
            if not templates:
                return []

            current_value = self.get_metric_value(client_id, achievement_type)

            unlocked: Dict[str, Set[str]] = {}
            for row in self._repo.get_unlocked(client_id):
                unlocked.setdefault(row["achievement_template_id"], set()).add(
                    row.get("tier") or SINGLE_TIER
                )

            newly_unlocked = []
            for template in templates:
                have = unlocked.setdefault(template["id"], set())
                for tier, threshold in template_tiers(template):
                    key = tier or SINGLE_TIER
                    if key in have or current_value < threshold:
                        continue
                    row = self._unlock(client_id, template["id"], tier, current_value)
                    if row:
                        newly_unlocked.append(row)
                        have.add(key)
            return newly_unlocked
        except Exception as e:
            logger.error(f"Error checking and unlocking achievements for {achievement_type}: {e}")
            return []

    def _unlock(
        self,
        client_id: str,
        template_id: str,
        tier: Optional[str],
        metric_value: float,
    ) -> Optional[Dict[str, Any]]:
        try:
            row = self._repo.insert_unlocked(client_id, template_id, tier, metric_value)
        except Exception as e:
            logger.error(f"Error unlocking achievement: {e}")
            return None
        if row is None:
            logger.info(f"Achievement already unlocked: template={template_id}, tier={tier}")
            return None
        logger.info(f"Achievement unlocked! template={template_id}, tier={tier}, value={metric_value}")
        return row
