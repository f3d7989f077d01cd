# logic/commands/attendance_commands.py

"""
Commands that mark and unmark a student's attendance at a session.

    MarkAttendanceCommand (new record)       ->  UnmarkAttendanceCommand
    MarkAttendanceCommand (replaced record)  ->  MarkAttendanceCommand with the previous values
    UnmarkAttendanceCommand                  ->  MarkAttendanceCommand with the removed values
"""

from __future__ import annotations

from dataclasses import dataclass

import logic.messages as messages
from core.exceptions import EntityNotFoundError
from logic.commands.command import Command, CommandResult, Tab
from logic.commands.session_commands import get_session_or_raise
from models import fields
from models.attendance_record import AttendanceRecord
from models.identity import ById, Identity
from models.tutor_book import TutorBook

MESSAGE_MARK_SUCCESS = "Marked attendance: {}"
MESSAGE_UNMARK_SUCCESS = "Unmarked attendance: {}"


@dataclass(frozen=True)
class MarkAttendanceCommand(Command):
    """
    Records whether a student attended a session, replacing any earlier record for the pair.
    """

    session_id: int
    student_identity: Identity
    is_present: bool = True
    feedback: str = ""

    def __post_init__(self):
        fields.validate_is_present(self.is_present)
        fields.validate_feedback(self.feedback)

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        session = get_session_or_raise(tutor_book, self.session_id)
        student = tutor_book.resolve_student(self.student_identity)

        record = AttendanceRecord(student.id, session.id, self.is_present, self.feedback)
        existing = tutor_book.find_attendance_record(student.id, session.id)

        if existing is None:
            tutor_book.add_attendance_record(record)
            reverse_command = UnmarkAttendanceCommand(session.id, ById(student.id))

        else:
            tutor_book.set_attendance_record(existing, record)
            reverse_command = MarkAttendanceCommand(
                session.id, ById(student.id), existing.is_present, existing.feedback
            )

        return CommandResult(
            feedback=MESSAGE_MARK_SUCCESS.format(messages.format_attendance_record(record)),
            tab=Tab.attendance(session),
            reverse_command=reverse_command,
        )


@dataclass(frozen=True)
class UnmarkAttendanceCommand(Command):
    session_id: int
    student_identity: Identity

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        session = get_session_or_raise(tutor_book, self.session_id)
        student = tutor_book.resolve_student(self.student_identity)

        record = tutor_book.find_attendance_record(student.id, session.id)

        if record is None:
            raise EntityNotFoundError(messages.MESSAGE_ATTENDANCE_NOT_FOUND)

        tutor_book.remove_attendance_record(record)

        return CommandResult(
            feedback=MESSAGE_UNMARK_SUCCESS.format(messages.format_attendance_record(record)),
            tab=Tab.attendance(session),
            reverse_command=MarkAttendanceCommand(
                session.id, ById(student.id), record.is_present, record.feedback
            ),
        )
