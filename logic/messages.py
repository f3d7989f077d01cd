# logic/messages.py

"""
Container for user-visible messages and record formatters used in command feedback.
"""

import core.formatters as formatters
from models.attendance_record import AttendanceRecord
from models.session import Session
from models.student import Student

MESSAGE_SESSION_NOT_FOUND = "No session found with ID {}."
MESSAGE_ATTENDANCE_NOT_FOUND = "No attendance has been marked for this student in this session."
MESSAGE_DUPLICATE_STUDENT = "This student already exists in the tutor book."
MESSAGE_DUPLICATE_SESSION = "This session already exists in the tutor book."
MESSAGE_NOTHING_TO_UNDO = "No more commands to undo!"


def format_student(student: Student) -> str:
    tags = formatters.format_list_with_commas(sorted(student.tags))

    return (
        f"id: {student.id}; Name: {student.name}; Phone: {student.phone}; "
        f"Email: {student.email}; Address: {student.address}; "
        f"Tags: [{tags}]; Memo: {student.memo}"
    )


def format_session(session: Session) -> str:
    return (
        f"id: {session.id}; Student: {session.student_id}; "
        f"Date: {session.date.isoformat()}; Subject: {session.subject}"
    )


def format_attendance_record(record: AttendanceRecord) -> str:
    status = "Present" if record.is_present else "Absent"
    feedback = f"; Feedback: {record.feedback}" if record.feedback else ""

    return f"Session: {record.session_id}; Student: {record.student_id}; {status}{feedback}"
