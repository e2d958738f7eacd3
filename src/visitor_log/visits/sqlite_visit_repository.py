from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import CountedValue, VisitEntry, VisitRow
from .repository import VisitRepository

# Only log entries whose student still exists take part in the join.
_JOINED_SELECT = """
    SELECT v.id, s.student_number, s.full_name, s.course, v.visit_time
    FROM visitor_log v
    JOIN students s ON v.student_number = s.student_number
"""


def _to_row(r: Dict[str, Any]) -> VisitRow:
    return VisitRow(
        id=int(r["id"]),
        student_number=r["student_number"],
        full_name=r["full_name"],
        course=r["course"],
        visit_time=r["visit_time"],
    )


class SQLiteVisitRepository(VisitRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, *, student_number: str, visit_time: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO visitor_log(student_number, visit_time) VALUES (?, ?)",
                (student_number, visit_time),
            )
            return int(cur.lastrowid)

    def add_many(self, entries: Iterable[VisitEntry]) -> int:
        params = [(e.student_number, e.visit_time) for e in entries]
        if not params:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO visitor_log(student_number, visit_time) VALUES (?, ?)",
                params,
            )
            return len(params)

    def search(self, term: str, *, limit: int) -> Sequence[VisitRow]:
        pattern = f"%{term}%"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_JOINED_SELECT}
                WHERE s.student_number LIKE ? OR s.full_name LIKE ? OR s.course LIKE ?
                ORDER BY v.visit_time DESC
                LIMIT ?
                """,
                (pattern, pattern, pattern, int(limit)),
            )
            return [_to_row(r) for r in fetchall(cur)]

    def list_joined(self) -> Sequence[VisitRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_JOINED_SELECT} ORDER BY v.visit_time DESC")
            return [_to_row(r) for r in fetchall(cur)]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total_visits FROM visitor_log")
            return int(fetchone(cur)["total_visits"])

    def top_course(self) -> Optional[CountedValue]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.course AS course, COUNT(*) AS count
                FROM visitor_log v
                JOIN students s ON v.student_number = s.student_number
                GROUP BY s.course
                ORDER BY count DESC
                LIMIT 1
                """
            )
            row = fetchone(cur)
            if not row:
                return None
            return CountedValue(value=row["course"], count=int(row["count"]))

    def peak_month(self) -> Optional[CountedValue]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT substr(visit_time, 1, 7) AS month, COUNT(*) AS count
                FROM visitor_log
                GROUP BY month
                ORDER BY count DESC
                LIMIT 1
                """
            )
            row = fetchone(cur)
            if not row:
                return None
            return CountedValue(value=row["month"], count=int(row["count"]))

    def clear(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM visitor_log")
            return cur.rowcount
