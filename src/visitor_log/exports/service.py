from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..common.datetime_utils import to_local_display
from ..students.repository import StudentRepository
from ..visits.repository import VisitRepository

STUDENT_COLUMNS = ["student_number", "full_name", "course"]
VISIT_COLUMNS = ["Student Number", "Full Name", "Course", "Date & Time"]


def write_workbook(rows: Sequence[dict], *, columns: Sequence[str], sheet_name: str) -> bytes:
    """Serialize rows into a single-sheet xlsx workbook held in memory."""
    df = pd.DataFrame(list(rows), columns=list(columns))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


class ExportService:
    def __init__(self, students: StudentRepository, visits: VisitRepository):
        self._students = students
        self._visits = visits

    def students_workbook(self) -> bytes:
        rows = [s.to_dict() for s in self._students.list_by_name()]
        return write_workbook(rows, columns=STUDENT_COLUMNS, sheet_name="Students")

    def visits_workbook(self) -> bytes:
        rows = [
            {
                "Student Number": v.student_number,
                "Full Name": v.full_name,
                "Course": v.course,
                "Date & Time": to_local_display(v.visit_time),
            }
            for v in self._visits.list_joined()
        ]
        return write_workbook(rows, columns=VISIT_COLUMNS, sheet_name="Visits")
