from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


class SQLiteStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_if_absent(self, student: Student) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT OR IGNORE INTO students(student_number, full_name, course)
                VALUES (?, ?, ?)
                """,
                (student.student_number, student.full_name, student.course),
            )
            return cur.rowcount > 0

    def delete(self, student_number: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_number = ?", (student_number,))
            return cur.rowcount > 0

    def get(self, student_number: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_number, full_name, course
                FROM students
                WHERE student_number = ?
                """,
                (student_number,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Student(
                student_number=row["student_number"],
                full_name=row["full_name"],
                course=row["course"],
            )

    def list_by_name(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_number, full_name, course
                FROM students
                ORDER BY full_name
                """
            )
            return [
                Student(
                    student_number=r["student_number"],
                    full_name=r["full_name"],
                    course=r["course"],
                )
                for r in fetchall(cur)
            ]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total_students FROM students")
            return int(fetchone(cur)["total_students"])

    def clear(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students")
            return cur.rowcount
