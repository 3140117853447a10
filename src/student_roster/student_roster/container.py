from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .reports.service import ReportService
from .roster.service import RosterService
from .students.json_student_repository import JsonStudentRepository
from .students.repository import StudentRepository


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository

    roster_service: RosterService
    report_service: ReportService


def build_container(*, data_file: str | Path | None = None, students_repo: StudentRepository | None = None) -> Container:
    if students_repo is None:
        if data_file is None:
            raise ValueError("build_container needs data_file or students_repo")
        students_repo = JsonStudentRepository(data_file)

    roster_service = RosterService(students_repo)
    report_service = ReportService(roster_service)

    return Container(
        students_repo=students_repo,
        roster_service=roster_service,
        report_service=report_service,
    )
