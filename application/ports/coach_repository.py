"""
Coach Repository Interface (Port).

Profile roles and the coach/client roster, used to authorize coaches acting
on behalf of their clients.
"""
from typing import Protocol, Optional


class CoachRepository(Protocol):
    """Abstract interface for coach access control lookups."""

    def get_role(self, user_id: str) -> Optional[str]:
        """
        Get a user's profile role.

        Returns:
            Role string ("client", "coach", "admin") or None if no profile exists
        """
        ...

    def has_client(self, coach_id: str, client_id: str) -> bool:
        """Check whether the client belongs to the coach."""
        ...
