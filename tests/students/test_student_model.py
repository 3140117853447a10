from __future__ import annotations

import pytest

from src.student_roster.student_roster.common.datetime_utils import is_valid_date
from src.student_roster.student_roster.core.exceptions import ValidationError
from src.student_roster.student_roster.students.model import Student


def test_counts_add_up_to_recorded_dates(make_student):
    s = make_student(attendance={"2024-03-01": True, "2024-03-02": False, "2024-03-03": True})

    assert s.total_classes() == 3
    assert s.present_classes() == 2
    assert s.absent_classes() == 1
    assert s.present_classes() + s.absent_classes() == s.total_classes() == len(s.attendance)


def test_percentage_is_zero_without_records(make_student):
    assert make_student().attendance_percentage() == 0.0


def test_percentage_present_over_recorded(make_student):
    s = make_student(attendance={"2024-03-01": True, "2024-03-02": False, "2024-03-03": False, "2024-03-04": True})
    assert s.attendance_percentage() == pytest.approx(50.0)


def test_last_write_wins_per_date(make_student):
    s = make_student()
    s.mark_present("2024-03-01")
    assert s.is_present("2024-03-01") is True

    s.mark_absent("2024-03-01")
    assert s.is_present("2024-03-01") is False
    assert s.total_classes() == 1

    s.mark("2024-03-01", True)
    s.mark("2024-03-01", True)
    assert s.is_present("2024-03-01") is True
    assert s.total_classes() == 1


def test_unknown_date_reads_absent_without_recording(make_student):
    s = make_student()
    assert s.is_present("2024-01-01") is False
    assert s.attendance == {}


def test_equality_and_hash_use_id_only(make_student):
    a = make_student(student_id="S1", name="Alice")
    b = make_student(student_id="S1", name="Someone Else", class_name="Other")
    c = make_student(student_id="S2", name="Alice")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_blank_id_rejected():
    with pytest.raises(ValidationError):
        Student(student_id="   ")
    with pytest.raises(ValidationError):
        Student(student_id=None)


def test_id_cannot_be_reassigned(make_student):
    s = make_student("S1")

    with pytest.raises(ValidationError):
        s.student_id = "S2"
    assert s.student_id == "S1"


@pytest.mark.parametrize("student_id", [" S1", "S1 ", "\tS1"])
def test_id_with_surrounding_whitespace_rejected(student_id):
    with pytest.raises(ValidationError):
        Student(student_id=student_id)


def test_profile_fields_are_normalised_to_text():
    s = Student("S1", None, None, None)
    assert (s.name, s.email, s.class_name) == ("", "", "")

    s.name = "  Bob  "
    s.class_name = None
    assert s.name == "Bob"
    assert s.class_name == ""

    with pytest.raises(ValidationError):
        s.email = 42


def test_summary_and_str(make_student):
    s = make_student(attendance={"2024-03-01": True, "2024-03-02": False})

    assert s.summary() == {"totalClasses": 2, "presentClasses": 1, "absentClasses": 1}
    assert str(s) == "Student{ID='S1', Name='Alice', Email='alice@example.com', Class='CS101', Attendance=50.0%}"


def test_from_dict_accepts_pairs_and_legacy_mapping():
    pairs = Student.from_dict(
        {
            "student_id": "S9",
            "name": "Zed",
            "email": None,
            "class_name": "Art",
            "attendance": [{"date": "2024-03-02", "present": False}, {"date": "2024-03-01", "present": True}],
        }
    )
    legacy = Student.from_dict({"student_id": "S9", "attendance": {"2024-03-01": True, "2024-03-02": False}})

    assert pairs.attendance == legacy.attendance == {"2024-03-01": True, "2024-03-02": False}
    assert pairs.email == ""
    assert pairs.to_dict()["attendance"][0] == {"date": "2024-03-01", "present": True}


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-03-01", True),
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("01-03-2024", False),
        ("2024-3-1", False),
        ("2024-03-01 ", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_date(value, expected):
    assert is_valid_date(value) is expected
