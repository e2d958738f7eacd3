from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import now_utc, to_iso_timestamp
from ..core.constants import VISITS_LIMIT
from ..core.exceptions import NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import VisitEntry
from .repository import VisitRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    student: Student
    visit_id: int
    visit_time: str

    @property
    def message(self) -> str:
        return f"Checked in: {self.student.full_name}"


class VisitService:
    def __init__(self, visits: VisitRepository, students: StudentRepository, *, limit: int = VISITS_LIMIT):
        self._visits = visits
        self._students = students
        self._limit = int(limit)

    def check_in(self, student_number: Optional[str], *, now: datetime | None = None) -> CheckInResult:
        student = self._students.get(student_number)
        if not student:
            logger.warning("check-in for unknown student %s", student_number)
            raise NotFoundError("Student not found")

        visit_time = to_iso_timestamp(now or now_utc())
        visit_id = self._visits.add(student_number=student_number, visit_time=visit_time)
        logger.info("checked in %s at %s", student_number, visit_time)
        return CheckInResult(student=student, visit_id=visit_id, visit_time=visit_time)

    def list_visits(self, search: str = "") -> list[dict]:
        """Newest visits first, at most `limit`, matching number, name or course."""
        rows = self._visits.search(search or "", limit=self._limit)
        return [r.to_dict() for r in rows]

    def restore(self, visits: Iterable[Mapping]) -> int:
        """Re-insert exported visits keeping their original timestamps.

        Referenced students are not checked; entries may become orphans.
        """
        entries = [
            VisitEntry(id=None, student_number=v.get("student_number"), visit_time=v.get("visit_time"))
            for v in visits
        ]
        restored = self._visits.add_many(entries)
        logger.info("restored %d visits", restored)
        return restored

    def clear(self) -> int:
        removed = self._visits.clear()
        logger.warning("cleared visitor_log table (%d rows)", removed)
        return removed
