from __future__ import annotations

from visitor_log.reports.service import ReportService
from visitor_log.visits.model import CountedValue


class FakeStudents:
    def __init__(self, total: int):
        self._total = total

    def count(self) -> int:
        return self._total


class FakeVisits:
    def __init__(self, total: int, top=None, peak=None):
        self._total = total
        self._top = top
        self._peak = peak

    def count(self) -> int:
        return self._total

    def top_course(self):
        return self._top

    def peak_month(self):
        return self._peak


def test_report_on_empty_store_uses_sentinels():
    report = ReportService(FakeStudents(0), FakeVisits(0)).build_report()

    assert report.to_dict() == {
        "total_students": 0,
        "total_visits": 0,
        "top_course": "N/A",
        "peak_month": "N/A",
    }


def test_report_takes_top_rows():
    svc = ReportService(
        FakeStudents(3),
        FakeVisits(7, top=CountedValue("BSIT", 5), peak=CountedValue("2025-02", 4)),
    )

    report = svc.build_report()

    assert report.total_students == 3
    assert report.total_visits == 7
    assert report.top_course == "BSIT"
    assert report.peak_month == "2025-02"
