"""
In-memory registry of user fitness records.
"""

from typing import Iterator, Optional

from weekly_tracker.models import FitnessRecord
from weekly_tracker.reporter import render_not_found, render_report


class TrackerRegistry:
    """Ordered collection of FitnessRecord, looked up by name."""

    def __init__(self):
        self._users: list[FitnessRecord] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[FitnessRecord]:
        return iter(self._users)

    def add_user(self, record: FitnessRecord):
        # Duplicate names are allowed; lookups return the first one added.
        self._users.append(record)

    def names(self) -> list[str]:
        return [record.name for record in self._users]

    def get_user_by_name(self, name: str) -> Optional[FitnessRecord]:
        """
        Case-insensitive lookup. Returns None if no user matches.
        """
        wanted = name.lower()
        return next(
            (record for record in self._users if record.name.lower() == wanted),
            None
        )

    def generate_user_report(self, name: str) -> str:
        """
        Return the rendered report for a user, or a not-found notice.
        """
        record = self.get_user_by_name(name)
        if record is None:
            return render_not_found(name)
        return render_report(record)
