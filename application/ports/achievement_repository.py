"""
Achievement Repository Interface (Port).

Achievement templates, unlocked achievements, and the metric sources used
to decide whether a threshold has been reached.
"""
from datetime import datetime
from typing import Protocol, Optional, List, Dict, Any


class AchievementRepository(Protocol):
    """Abstract interface for achievement persistence."""

    def get_templates(self, achievement_type: str) -> List[Dict[str, Any]]:
        """Get active achievement templates of one type."""
        ...

    def get_unlocked(self, client_id: str) -> List[Dict[str, Any]]:
        """Get the client's unlocked achievements."""
        ...

    def insert_unlocked(
        self,
        client_id: str,
        template_id: str,
        tier: Optional[str],
        metric_value: float,
    ) -> Optional[Dict[str, Any]]:
        """
        Record an unlocked achievement tier.

        Returns:
            The inserted row, or None if it was already unlocked
        """
        ...

    def count_workout_logs(self, client_id: str) -> int:
        ...

    def get_completion_times(self, client_id: str) -> List[datetime]:
        """Completion timestamps of the client's completed workout logs."""
        ...

    def count_completed_programs(self, client_id: str) -> int:
        ...

    def count_personal_records(self, client_id: str) -> int:
        ...
