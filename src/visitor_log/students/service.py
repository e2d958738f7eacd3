from __future__ import annotations

import logging
from typing import Optional

from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage the student roster."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def register(self, *, student_number: Optional[str], full_name: Optional[str], course: Optional[str]) -> bool:
        """Register a student. An existing number is left untouched (no update-on-conflict)."""
        inserted = self._students.add_if_absent(
            Student(student_number=student_number, full_name=full_name, course=course)
        )
        if inserted:
            logger.info("registered student %s", student_number)
        else:
            logger.info("student %s already registered, skipped", student_number)
        return inserted

    def delete(self, student_number: str) -> bool:
        deleted = self._students.delete(student_number)
        logger.info("delete student %s (matched=%s)", student_number, deleted)
        return deleted

    def list_students(self) -> list[dict]:
        return [s.to_dict() for s in self._students.list_by_name()]

    def clear(self) -> int:
        removed = self._students.clear()
        logger.warning("cleared students table (%d rows)", removed)
        return removed
