from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.constants import NOT_AVAILABLE
from ..students.repository import StudentRepository
from ..visits.repository import VisitRepository


@dataclass(frozen=True)
class ReportData:
    total_students: int
    total_visits: int
    top_course: str | None
    peak_month: str | None

    def to_dict(self) -> dict:
        return asdict(self)


class ReportService:
    """Aggregate statistics over the roster and the visit log.

    The four queries run one after another with no transaction around them.
    """

    def __init__(self, students: StudentRepository, visits: VisitRepository):
        self._students = students
        self._visits = visits

    def build_report(self) -> ReportData:
        total_students = self._students.count()
        total_visits = self._visits.count()

        top = self._visits.top_course()
        peak = self._visits.peak_month()

        return ReportData(
            total_students=total_students,
            total_visits=total_visits,
            top_course=top.value if top else NOT_AVAILABLE,
            peak_month=peak.value if peak else NOT_AVAILABLE,
        )
