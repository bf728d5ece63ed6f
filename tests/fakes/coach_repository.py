"""
Fake Coach Repository for Testing.

In-memory profile roles and coach/client roster.
"""
from typing import Optional, Dict, Set, Tuple


class FakeCoachRepository:
    """In-memory fake implementation of CoachRepository."""

    def __init__(self):
        self._roles: Dict[str, str] = {}
        self._roster: Set[Tuple[str, str]] = set()

    def reset(self) -> None:
        self._roles.clear()
        self._roster.clear()

    def add_profile(self, user_id: str, role: str) -> None:
        self._roles[user_id] = role

    def add_client(self, coach_id: str, client_id: str) -> None:
        self._roster.add((coach_id, client_id))

    def get_role(self, user_id: str) -> Optional[str]:
        return self._roles.get(user_id)

    def has_client(self, coach_id: str, client_id: str) -> bool:
        return (coach_id, client_id) in self._roster
