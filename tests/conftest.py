from __future__ import annotations

import pytest

from src.student_roster.student_roster.core.exceptions import StorageError
from src.student_roster.student_roster.roster import service as roster_service_module
from src.student_roster.student_roster.roster.service import RosterService
from src.student_roster.student_roster.students.model import Student

FIXED_TODAY = "2024-03-15"


class InMemoryStudents:
    """Fake repository keeping the last saved roster as plain dicts."""

    def __init__(self, students=None, *, fail_on_load: bool = False, fail_on_save: bool = False):
        self.snapshot = [s.to_dict() for s in (students or [])]
        self.fail_on_load = fail_on_load
        self.fail_on_save = fail_on_save
        self.saves = 0

    def load_all(self):
        if self.fail_on_load:
            raise StorageError("boom")
        return [Student.from_dict(d) for d in self.snapshot]

    def save_all(self, students):
        if self.fail_on_save:
            raise StorageError("disk full")
        self.saves += 1
        self.snapshot = [s.to_dict() for s in students]


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def roster(students_repo):
    return RosterService(students_repo)


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(roster_service_module, "today_str", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture
def make_student():
    def _make(student_id="S1", name="Alice", email="alice@example.com", class_name="CS101", attendance=None):
        return Student(
            student_id=student_id,
            name=name,
            email=email,
            class_name=class_name,
            attendance=dict(attendance or {}),
        )

    return _make


@pytest.fixture
def fake_repo():
    return InMemoryStudents
