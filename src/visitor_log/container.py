from __future__ import annotations

from dataclasses import dataclass

from .admin.service import AdminAuthService
from .database.connection import DBConfig, DatabaseConnection
from .exports.service import ExportService
from .reports.service import ReportService
from .students.service import StudentService
from .students.sqlite_student_repository import SQLiteStudentRepository
from .visits.service import VisitService
from .visits.sqlite_visit_repository import SQLiteVisitRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: SQLiteStudentRepository
    visits_repo: SQLiteVisitRepository

    student_service: StudentService
    visit_service: VisitService
    report_service: ReportService
    export_service: ExportService
    admin_auth_service: AdminAuthService


def build_container(*, db_path: str, admin_username: str, admin_password: str) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig(path=str(db_path)))

    students_repo = SQLiteStudentRepository(conn)
    visits_repo = SQLiteVisitRepository(conn)

    return Container(
        conn=conn,
        students_repo=students_repo,
        visits_repo=visits_repo,
        student_service=StudentService(students_repo),
        visit_service=VisitService(visits_repo, students_repo),
        report_service=ReportService(students_repo, visits_repo),
        export_service=ExportService(students_repo, visits_repo),
        admin_auth_service=AdminAuthService(username=admin_username, password=admin_password),
    )
