# tests/test_session.py

import datetime

import pytest

from core.exceptions import FieldValidationError
from models.attendance_record import AttendanceRecord
from models.session import Session


def test_session_from_dict():
    session = Session.from_dict(
        {"id": 3, "student_id": 1, "date": "2025-03-03", "subject": "Mathematics"}
    )

    assert session.id == 3
    assert session.student_id == 1
    assert session.date == datetime.date(2025, 3, 3)
    assert session.subject == "Mathematics"
    assert session.to_dict()["date"] == "2025-03-03"


def test_session_from_dict_missing_date():
    with pytest.raises(FieldValidationError) as exc_info:
        Session.from_dict({"id": 3, "student_id": 1, "subject": "Mathematics"})

    assert str(exc_info.value) == "Session's date field is missing!"


def test_is_same_session_ignores_subject_case():
    session = Session(1, "2025-03-03", "Mathematics", id=1)

    assert session.is_same_session(Session(1, "2025-03-03", "mathematics", id=2))
    assert not session.is_same_session(Session(2, "2025-03-03", "Mathematics"))
    assert not session.is_same_session(Session(1, "2025-03-04", "Mathematics"))


def test_session_compare_orders_by_date_then_id():
    early = Session(1, "2025-03-03", "Physics", id=5)
    late = Session(1, "2025-03-10", "Physics", id=1)
    same_day = Session(2, "2025-03-03", "Physics", id=6)

    assert Session.compare(early, late) < 0
    assert Session.compare(early, same_day) < 0


def test_attendance_record_from_dict():
    record = AttendanceRecord.from_dict(
        {"student_id": 2, "session_id": 1, "is_present": False}
    )

    assert record.student_id == 2
    assert record.session_id == 1
    assert not record.is_present
    assert record.status == "'ABSENT'"
    assert record.feedback == ""


def test_attendance_record_requires_boolean_presence():
    with pytest.raises(FieldValidationError):
        AttendanceRecord.from_dict({"student_id": 2, "session_id": 1, "is_present": "yes"})

    with pytest.raises(FieldValidationError):
        AttendanceRecord(2, 1, "False")

    with pytest.raises(FieldValidationError):
        AttendanceRecord(2, 1, 1)


def test_attendance_records_for_same_pair_are_the_same_record():
    present = AttendanceRecord(2, 1, True, "Good effort")
    absent = AttendanceRecord(2, 1, False)

    assert present.is_same_record(absent)
    assert present != absent
    assert not present.is_same_record(AttendanceRecord(2, 3, True))
