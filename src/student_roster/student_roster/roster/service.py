from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Set

from ..common.datetime_utils import is_valid_date, today_str
from ..core.exceptions import StorageError
from ..students.model import Student
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)


def _mean(values: List[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


class RosterService:
    """Use case: keep the roster and its attendance.

    The service owns every Student it holds. State is loaded once from the
    repository and the whole roster is saved back after each mutation.
    Nothing here raises for unknown ids, duplicates, bad dates or storage
    failures: callers get False/None/0 and the problem is logged.
    """

    def __init__(self, students: StudentRepository):
        self._repo = students
        self._students: Dict[str, Student] = {}
        self._load()

    # ------------------------------------------------------------------
    # persistence

    def _load(self) -> None:
        try:
            loaded = self._repo.load_all()
        except StorageError as e:
            logger.warning("Could not load roster, starting empty: %s", e)
            self._students = {}
            return

        students: Dict[str, Student] = {}
        for s in loaded:
            if s.student_id in students:
                logger.warning("Ignoring duplicate student id %r in stored roster", s.student_id)
                continue
            students[s.student_id] = s
        self._students = students
        logger.debug("Loaded %d students", len(students))

    def _save(self) -> bool:
        try:
            self._repo.save_all(list(self._students.values()))
        except StorageError as e:
            logger.error("Error saving roster: %s", e)
            return False
        return True

    # ------------------------------------------------------------------
    # students

    def add_student(self, student: Student) -> bool:
        if student.student_id in self._students:
            return False
        self._students[student.student_id] = student
        self._save()
        logger.info("Added student %s", student.student_id)
        return True

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self._students.get(student_id)

    def get_all_students(self) -> List[Student]:
        return list(self._students.values())

    def remove_student(self, student_id: str) -> bool:
        if self._students.pop(student_id, None) is None:
            return False
        self._save()
        logger.info("Removed student %s", student_id)
        return True

    def get_students_by_class(self, class_name: str) -> List[Student]:
        return [s for s in self._students.values() if s.class_name == class_name]

    def get_all_classes(self) -> Set[str]:
        return {s.class_name for s in self._students.values()}

    def search_students(self, query: str) -> List[Student]:
        q = (query or "").lower()
        return [
            s
            for s in self._students.values()
            if q in s.student_id.lower()
            or q in s.name.lower()
            or q in s.email.lower()
            or q in s.class_name.lower()
        ]

    # ------------------------------------------------------------------
    # attendance

    def mark_attendance(self, student_id: str, date: str, present: bool) -> bool:
        student = self._students.get(student_id)
        if student is None:
            return False
        if not is_valid_date(date):
            logger.warning("Rejected attendance for %s: malformed date %r", student_id, date)
            return False

        student.mark(date, bool(present))
        self._save()
        return True

    def mark_attendance_for_class(self, class_name: str, date: str, attendance_map: Mapping[str, bool]) -> int:
        """Mark each class member the map has an entry for. Returns how many were marked."""
        marked = 0
        for student in self.get_students_by_class(class_name):
            present = attendance_map.get(student.student_id)
            if present is None:
                continue
            if self.mark_attendance(student.student_id, date, present):
                marked += 1
        return marked

    def mark_all_for_class(self, class_name: str, date: str, present: bool) -> int:
        members = {s.student_id: present for s in self.get_students_by_class(class_name)}
        return self.mark_attendance_for_class(class_name, date, members)

    def get_attendance(self, student_id: str, date: str) -> bool:
        student = self._students.get(student_id)
        return student.is_present(date) if student else False

    def get_attendance_for_date(self, date: str) -> Dict[str, bool]:
        return {sid: s.is_present(date) for sid, s in self._students.items()}

    def get_class_attendance_for_date(self, class_name: str, date: str) -> Dict[str, bool]:
        return {s.student_id: s.is_present(date) for s in self.get_students_by_class(class_name)}

    def get_attendance_summary(self, student_id: str) -> Optional[Dict[str, int]]:
        student = self._students.get(student_id)
        return student.summary() if student else None

    # ------------------------------------------------------------------
    # aggregates
    #
    # Class/overall averages are the plain mean of each student's own
    # percentage, not a pooled present/total ratio: a student at 100% and
    # one with no recorded dates average to 50%.

    def overall_attendance_percentage(self) -> float:
        return _mean([s.attendance_percentage() for s in self._students.values()])

    def class_attendance_percentage(self, class_name: str) -> float:
        return _mean([s.attendance_percentage() for s in self.get_students_by_class(class_name)])

    def today_attendance_percentage(self, today: Optional[str] = None) -> float:
        today = today or self.get_current_date()
        return _mean([100.0 if present else 0.0 for present in self.get_attendance_for_date(today).values()])

    def total_classes(self) -> int:
        """Largest number of recorded dates held by any single student."""
        return max((s.total_classes() for s in self._students.values()), default=0)

    # ------------------------------------------------------------------
    # dates

    def get_current_date(self) -> str:
        return today_str()

    def is_valid_date(self, value: str) -> bool:
        return is_valid_date(value)
