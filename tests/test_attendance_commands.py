# tests/test_attendance_commands.py

import pytest

from core.exceptions import EntityNotFoundError, FieldValidationError
from logic.commands.attendance_commands import (
    MarkAttendanceCommand,
    UnmarkAttendanceCommand,
)
from logic.commands.command import TabKind
from models.attendance_record import AttendanceRecord
from models.identity import ById, ByName


def test_mark_new_attendance(sample_tutor_book):
    result = MarkAttendanceCommand(3, ByName("Alice Pauline"), True, "Joined late").execute(
        sample_tutor_book
    )

    assert sample_tutor_book.find_attendance_record(1, 3) == AttendanceRecord(
        1, 3, True, "Joined late"
    )
    assert result.feedback == (
        "Marked attendance: Session: 3; Student: 1; Present; Feedback: Joined late"
    )
    assert result.tab.kind is TabKind.ATTENDANCE
    assert result.tab.target_id == 3
    assert result.reverse_command == UnmarkAttendanceCommand(3, ById(1))

    result.reverse_command.execute(sample_tutor_book)

    assert sample_tutor_book.find_attendance_record(1, 3) is None


def test_mark_replaces_existing_attendance(sample_tutor_book):
    result = MarkAttendanceCommand(1, ById(2), True).execute(sample_tutor_book)

    assert sample_tutor_book.find_attendance_record(2, 1).is_present
    assert len(sample_tutor_book.get_attendance_for_session(1)) == 2
    assert result.reverse_command == MarkAttendanceCommand(1, ById(2), False, "")

    result.reverse_command.execute(sample_tutor_book)

    assert not sample_tutor_book.find_attendance_record(2, 1).is_present


def test_mark_attendance_missing_session(sample_tutor_book):
    with pytest.raises(EntityNotFoundError):
        MarkAttendanceCommand(99, ById(1)).execute(sample_tutor_book)


def test_mark_attendance_validates_feedback():
    with pytest.raises(FieldValidationError):
        MarkAttendanceCommand(1, ById(1), True, "  leading space")


def test_mark_attendance_requires_boolean_presence(sample_tutor_book):
    with pytest.raises(FieldValidationError):
        MarkAttendanceCommand(1, ById(1), "no")

    assert sample_tutor_book.find_attendance_record(2, 1) == AttendanceRecord(2, 1, False)


def test_unmark_attendance(sample_tutor_book):
    result = UnmarkAttendanceCommand(1, ById(1)).execute(sample_tutor_book)

    assert sample_tutor_book.find_attendance_record(1, 1) is None
    assert result.feedback.startswith("Unmarked attendance: Session: 1; Student: 1; Present")

    result.reverse_command.execute(sample_tutor_book)

    assert sample_tutor_book.find_attendance_record(1, 1) == AttendanceRecord(
        1, 1, True, "Worked through quadratics"
    )


def test_unmark_attendance_not_marked(sample_tutor_book):
    with pytest.raises(EntityNotFoundError) as exc_info:
        UnmarkAttendanceCommand(3, ById(1)).execute(sample_tutor_book)

    assert "No attendance has been marked" in str(exc_info.value)
