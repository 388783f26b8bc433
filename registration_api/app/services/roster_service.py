"""
Roster reader.

The ``RosterService`` answers every question about who is registered
by reading the whole sheet again.  There is no in‑process cache:
counts and duplicate checks always see the latest rows, at the cost of
one full read per query.
"""

from collections import Counter
from typing import Dict, Iterable, List

from registration_api.app.core.config import Settings
from registration_api.app.core.exceptions import RetrievalError, StoreError
from registration_api.app.core.sheets import StudentSheet
from registration_api.app.schemas.group import GroupStatus
from registration_api.app.schemas.student import Student


class RosterService:
    """Read‑only queries over the registration sheet."""

    def __init__(self, sheet: StudentSheet, settings: Settings) -> None:
        self._sheet = sheet
        self._settings = settings

    @property
    def capacity(self) -> int:
        return self._settings.max_students_per_group

    def list_students(self) -> List[Student]:
        """Return every registered student in sheet order.

        Raises
        ------
        RetrievalError
            If the sheet cannot be read.
        """
        try:
            rows = self._sheet.read_rows()
        except StoreError as exc:
            raise RetrievalError("Failed to get students") from exc
        return [Student.from_row(row) for row in rows]

    def group_counts(self) -> Dict[str, int]:
        """Count students per group.

        Groups with no registrants are absent from the result and rows
        with an empty group cell are ignored.
        """
        counts = Counter(student.group for student in self.list_students() if student.group)
        return dict(counts)

    def is_group_full(self, group_name: str) -> bool:
        return self.group_counts().get(group_name, 0) >= self.capacity

    def available_groups(self, all_names: Iterable[str]) -> List[str]:
        """Return the names in ``all_names`` that still have room, in order."""
        counts = self.group_counts()
        return [name for name in all_names if counts.get(name, 0) < self.capacity]

    def group_statuses(self) -> List[GroupStatus]:
        """Occupancy of every configured group, in configured order."""
        counts = self.group_counts()
        statuses = []
        for name in self._settings.group_names:
            count = counts.get(name, 0)
            statuses.append(
                GroupStatus(
                    name=name,
                    count=count,
                    is_full=count >= self.capacity,
                    max_students=self.capacity,
                )
            )
        return statuses
