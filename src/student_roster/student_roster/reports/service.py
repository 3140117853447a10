from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import PERCENT_FORMAT
from ..roster.service import RosterService


def _pct(value: float) -> str:
    return PERCENT_FORMAT.format(value)


@dataclass(frozen=True)
class RosterStats:
    total_students: int
    total_classes: int
    overall_percentage: float
    today_percentage: float
    classes: list[dict]


class ReportService:
    """Read-only reports over the roster. Nothing here mutates state."""

    def __init__(self, roster: RosterService):
        self._roster = roster

    def individual_report(self, student_id: str) -> str:
        s = self._roster.get_student_by_id(student_id)
        if s is None:
            return "Student not found."

        lines = [
            "=== Individual Attendance Report ===",
            f"Student ID: {s.student_id}",
            f"Name: {s.name}",
            f"Email: {s.email}",
            f"Class: {s.class_name}",
            f"Total Classes: {s.total_classes()}",
            f"Present Classes: {s.present_classes()}",
            f"Absent Classes: {s.absent_classes()}",
            f"Attendance Percentage: {_pct(s.attendance_percentage())}",
        ]
        return "\n".join(lines) + "\n"

    def class_report(self, class_name: str) -> str:
        members = self._roster.get_students_by_class(class_name)
        if not members:
            return f"No students found in class: {class_name}"

        lines = [
            "=== Class Attendance Report ===",
            f"Class: {class_name}",
            f"Total Students: {len(members)}",
            f"Average Attendance: {_pct(self._roster.class_attendance_percentage(class_name))}",
            "",
            "Student Details:",
        ]
        for s in members:
            lines.append(f"- {s.name} ({s.student_id}): {_pct(s.attendance_percentage())}")
        return "\n".join(lines) + "\n"

    def stats(self, today: Optional[str] = None) -> RosterStats:
        classes = []
        for class_name in sorted(self._roster.get_all_classes()):
            classes.append(
                {
                    "class_name": class_name,
                    "students": len(self._roster.get_students_by_class(class_name)),
                    "average_percentage": self._roster.class_attendance_percentage(class_name),
                }
            )

        return RosterStats(
            total_students=len(self._roster.get_all_students()),
            total_classes=self._roster.total_classes(),
            overall_percentage=self._roster.overall_attendance_percentage(),
            today_percentage=self._roster.today_attendance_percentage(today),
            classes=classes,
        )

    def overall_stats(self, today: Optional[str] = None) -> str:
        st = self.stats(today)
        lines = [
            "=== Overall Statistics ===",
            f"Total Students: {st.total_students}",
            f"Total Classes: {st.total_classes}",
            f"Overall Average Attendance: {_pct(st.overall_percentage)}",
            f"Today's Attendance: {_pct(st.today_percentage)}",
            "",
            "Class-wise Statistics:",
        ]
        for c in st.classes:
            lines.append(
                f"- {c['class_name']}: {c['students']} students, "
                f"{_pct(c['average_percentage'])} average attendance"
            )
        return "\n".join(lines) + "\n"

    def summary_rows(self) -> list[dict]:
        """One flat row per student, used by CSV/JSON exports."""
        rows: list[dict] = []
        for s in self._roster.get_all_students():
            rows.append(
                {
                    "student_id": s.student_id,
                    "name": s.name,
                    "email": s.email,
                    "class_name": s.class_name,
                    "total_classes": s.total_classes(),
                    "present_classes": s.present_classes(),
                    "absent_classes": s.absent_classes(),
                    "attendance_percentage": f"{s.attendance_percentage():.1f}",
                }
            )
        rows.sort(key=lambda r: (r["class_name"], r["student_id"]))
        return rows
