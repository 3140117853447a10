from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.student_roster.student_roster.container import build_container
from src.student_roster.student_roster.students.model import Student

DEMO_STUDENTS = [
    ("S001", "John Doe", "john.doe@example.com", "CS101"),
    ("S002", "Jane Smith", "jane.smith@example.com", "CS101"),
    ("S003", "Bob Johnson", "bob.johnson@example.com", "MATH201"),
    ("S004", "Alice Brown", "alice.brown@example.com", "Engineering"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    roster = container.roster_service

    added = 0
    for student_id, name, email, class_name in DEMO_STUDENTS:
        if roster.add_student(Student(student_id, name, email, class_name)):
            added += 1

    print(f"OK: Seeded {added} students -> {settings.DATA_FILE} (total={len(roster.get_all_students())})")


if __name__ == "__main__":
    main()
