from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..common.validators import require_bool, require_date, require_identifier, require_text
from ..core.exceptions import ValidationError

_TEXT_FIELDS = {"name": "Name", "email": "Email", "class_name": "Class"}


@dataclass(eq=False)
class Student:
    """Domain entity: a student and their per-date attendance.

    `attendance` maps a date string to True (present) / False (absent).
    A date that was never recorded reads as absent but is not stored.
    Equality and hashing use `student_id` only; it cannot be reassigned
    once set. Profile fields are always strings (None becomes "").
    """

    student_id: str
    name: str = ""
    email: str = ""
    class_name: str = ""
    attendance: Dict[str, bool] = field(default_factory=dict)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "student_id":
            if "student_id" in self.__dict__:
                raise ValidationError("Student ID cannot be changed")
            value = require_identifier(value, "Student ID")
        elif name in _TEXT_FIELDS:
            value = require_text(value, _TEXT_FIELDS[name])
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.student_id == other.student_id

    def __hash__(self) -> int:
        return hash(self.student_id)

    def __str__(self) -> str:
        return (
            f"Student{{ID='{self.student_id}', Name='{self.name}', Email='{self.email}', "
            f"Class='{self.class_name}', Attendance={self.attendance_percentage():.1f}%}}"
        )

    def mark_present(self, date: str) -> None:
        self.attendance[date] = True

    def mark_absent(self, date: str) -> None:
        self.attendance[date] = False

    def mark(self, date: str, present: bool) -> None:
        if present:
            self.mark_present(date)
        else:
            self.mark_absent(date)

    def is_present(self, date: str) -> bool:
        return self.attendance.get(date, False)

    def total_classes(self) -> int:
        return len(self.attendance)

    def present_classes(self) -> int:
        return sum(1 for present in self.attendance.values() if present)

    def absent_classes(self) -> int:
        return self.total_classes() - self.present_classes()

    def attendance_percentage(self) -> float:
        if not self.attendance:
            return 0.0
        return self.present_classes() / self.total_classes() * 100

    def summary(self) -> Dict[str, int]:
        return {
            "totalClasses": self.total_classes(),
            "presentClasses": self.present_classes(),
            "absentClasses": self.absent_classes(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "email": self.email,
            "class_name": self.class_name,
            "attendance": [
                {"date": d, "present": bool(self.attendance[d])} for d in sorted(self.attendance)
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        if not isinstance(data, dict):
            raise ValidationError("Student record must be an object")

        raw = data.get("attendance") or []
        attendance: Dict[str, bool] = {}
        if isinstance(raw, dict):
            # Older documents stored the mapping directly.
            items = raw.items()
        else:
            items = ((entry["date"], entry["present"]) for entry in raw)
        for day, present in items:
            attendance[require_date(day)] = require_bool(present, f"present on {day}")

        return cls(
            student_id=data.get("student_id"),
            name=data.get("name"),
            email=data.get("email"),
            class_name=data.get("class_name"),
            attendance=attendance,
        )
