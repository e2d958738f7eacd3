from __future__ import annotations

import io

from openpyxl import load_workbook

from visitor_log.exports.service import ExportService, write_workbook
from visitor_log.students.model import Student
from visitor_log.visits.model import VisitRow


class FakeStudents:
    def __init__(self, rows):
        self._rows = rows

    def list_by_name(self):
        return self._rows


class FakeVisits:
    def __init__(self, rows):
        self._rows = rows

    def list_joined(self):
        return self._rows


def _sheet(data: bytes):
    wb = load_workbook(io.BytesIO(data))
    assert len(wb.sheetnames) == 1
    return wb[wb.sheetnames[0]]


def test_students_workbook_keeps_query_columns():
    students = [
        Student("1", "Ana Cruz", "BSIT"),
        Student("2", "Ben Dela", "BSCS"),
    ]
    svc = ExportService(FakeStudents(students), FakeVisits([]))

    ws = _sheet(svc.students_workbook())
    rows = list(ws.iter_rows(values_only=True))

    assert ws.title == "Students"
    assert rows[0] == ("student_number", "full_name", "course")
    assert rows[1:] == [("1", "Ana Cruz", "BSIT"), ("2", "Ben Dela", "BSCS")]


def test_visits_workbook_relabels_columns():
    visits = [
        VisitRow(id=2, student_number="1", full_name="Ana Cruz", course="BSIT", visit_time="2025-03-01T08:15:30.250Z"),
        VisitRow(id=1, student_number="2", full_name="Ben Dela", course="BSCS", visit_time="legacy"),
    ]
    svc = ExportService(FakeStudents([]), FakeVisits(visits))

    ws = _sheet(svc.visits_workbook())
    rows = list(ws.iter_rows(values_only=True))

    assert ws.title == "Visits"
    assert rows[0] == ("Student Number", "Full Name", "Course", "Date & Time")
    assert len(rows) - 1 == len(visits)
    assert rows[2] == ("2", "Ben Dela", "BSCS", "legacy")
    assert "T" not in rows[1][3]


def test_empty_workbook_still_has_header():
    ws = _sheet(write_workbook([], columns=["a", "b"], sheet_name="Empty"))

    assert list(ws.iter_rows(values_only=True)) == [("a", "b")]
