from __future__ import annotations

import pytest

from visitor_log.core.exceptions import StoreError
from visitor_log.database.bootstrap import list_tables
from visitor_log.database.connection import DBConfig, DatabaseConnection
from visitor_log.students.model import Student
from visitor_log.students.sqlite_student_repository import SQLiteStudentRepository
from visitor_log.visits.model import VisitEntry
from visitor_log.visits.sqlite_visit_repository import SQLiteVisitRepository


@pytest.fixture
def students(conn):
    return SQLiteStudentRepository(conn)


@pytest.fixture
def visits(conn):
    return SQLiteVisitRepository(conn)


def test_schema_creates_both_tables(db_path):
    assert list_tables(db_path) == ["students", "visitor_log"]


def test_insert_or_ignore_does_not_overwrite(students):
    assert students.add_if_absent(Student("1", "Ana Cruz", "BSIT")) is True
    assert students.add_if_absent(Student("1", "Other", "BSCS")) is False

    assert students.get("1") == Student("1", "Ana Cruz", "BSIT")
    assert students.count() == 1


def test_search_matches_number_name_or_course(students, visits):
    students.add_if_absent(Student("2023-001", "Ana Cruz", "BSIT"))
    students.add_if_absent(Student("2023-002", "Ben Dela", "BSCS"))
    visits.add(student_number="2023-001", visit_time="2025-01-01T08:00:00.000Z")
    visits.add(student_number="2023-002", visit_time="2025-01-02T08:00:00.000Z")

    assert [r.student_number for r in visits.search("BSIT", limit=50)] == ["2023-001"]
    assert [r.student_number for r in visits.search("Dela", limit=50)] == ["2023-002"]
    assert [r.student_number for r in visits.search("2023-00", limit=50)] == ["2023-002", "2023-001"]


def test_search_empty_returns_latest_fifty_descending(students, visits):
    students.add_if_absent(Student("1", "Ana Cruz", "BSIT"))
    visits.add_many(
        VisitEntry(id=None, student_number="1", visit_time=f"2025-01-01T08:{m:02d}:00.000Z") for m in range(55)
    )

    rows = visits.search("", limit=50)

    assert len(rows) == 50
    times = [r.visit_time for r in rows]
    assert times == sorted(times, reverse=True)
    assert times[0] == "2025-01-01T08:54:00.000Z"


def test_orphaned_visits_are_excluded_from_join(students, visits):
    students.add_if_absent(Student("1", "Ana Cruz", "BSIT"))
    visits.add(student_number="1", visit_time="2025-01-01T08:00:00.000Z")
    visits.add(student_number="ghost", visit_time="2025-01-02T08:00:00.000Z")

    assert visits.count() == 2
    assert len(visits.list_joined()) == 1

    students.delete("1")
    assert visits.list_joined() == []
    assert visits.count() == 2


def test_aggregates(students, visits):
    students.add_if_absent(Student("1", "Ana Cruz", "BSIT"))
    students.add_if_absent(Student("2", "Ben Dela", "BSCS"))
    visits.add(student_number="1", visit_time="2025-01-05T08:00:00.000Z")
    visits.add(student_number="1", visit_time="2025-02-05T08:00:00.000Z")
    visits.add(student_number="1", visit_time="2025-02-06T08:00:00.000Z")
    visits.add(student_number="2", visit_time="2025-02-07T08:00:00.000Z")

    top = visits.top_course()
    peak = visits.peak_month()

    assert (top.value, top.count) == ("BSIT", 3)
    assert (peak.value, peak.count) == ("2025-02", 3)


def test_aggregates_on_empty_log(visits):
    assert visits.top_course() is None
    assert visits.peak_month() is None


def test_clear_reports_removed_rows(students, visits):
    students.add_if_absent(Student("1", "Ana Cruz", "BSIT"))
    visits.add(student_number="1", visit_time="2025-01-05T08:00:00.000Z")

    assert visits.clear() == 1
    assert students.clear() == 1
    assert students.list_by_name() == []


def test_missing_table_surfaces_as_store_error(tmp_path):
    repo = SQLiteStudentRepository(DatabaseConnection(DBConfig(path=str(tmp_path / "empty.db"))))

    with pytest.raises(StoreError):
        repo.list_by_name()
