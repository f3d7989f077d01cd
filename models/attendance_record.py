# models/attendance_record.py

"""
Represents a student's attendance at a session.

An `AttendanceRecord` has no ID of its own: it is identified by the (student, session) pair it
links, so two records for the same pair are duplicates regardless of presence or feedback.
"""

from __future__ import annotations

from typing import Any

from core.exceptions import FieldValidationError
from models import fields

MISSING_FIELD_MESSAGE_FORMAT = "Attendance record's {} field is missing!"


class AttendanceRecord:

    def __init__(
        self,
        student_id: int,
        session_id: int,
        is_present: bool,
        feedback: str = "",
    ):
        self._student_id: int = fields.validate_id(student_id, "student_id")
        self._session_id: int = fields.validate_id(session_id, "session_id")
        self._is_present: bool = fields.validate_is_present(is_present)
        self._feedback: str = fields.validate_feedback(feedback)

    # === properties ===

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def session_id(self) -> int:
        return self._session_id

    @property
    def is_present(self) -> bool:
        return self._is_present

    @property
    def status(self) -> str:
        return "'PRESENT'" if self._is_present else "'ABSENT'"

    @property
    def feedback(self) -> str:
        return self._feedback

    # === equivalence and ordering ===

    def is_same_record(self, other: AttendanceRecord) -> bool:
        return (
            self._student_id == other.student_id
            and self._session_id == other.session_id
        )

    @staticmethod
    def compare(record1: AttendanceRecord, record2: AttendanceRecord) -> int:
        key1 = (record1.session_id, record1.student_id)
        key2 = (record2.session_id, record2.student_id)
        return (key1 > key2) - (key1 < key2)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "student_id": self._student_id,
            "session_id": self._session_id,
            "is_present": self._is_present,
            "feedback": self._feedback,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AttendanceRecord:
        for required in ("student_id", "session_id", "is_present"):
            if data.get(required) is None:
                raise FieldValidationError(
                    required, MISSING_FIELD_MESSAGE_FORMAT.format(required)
                )

        return cls(
            student_id=data["student_id"],
            session_id=data["session_id"],
            is_present=data["is_present"],
            feedback=data.get("feedback", ""),
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (self._student_id, self._session_id, self._is_present, self._feedback)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttendanceRecord):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"AttendanceRecord({self._student_id}, {self._session_id}, {self._is_present}, {self._feedback})"

    def __str__(self) -> str:
        return f"ATTENDANCE: session id: {self._session_id}, student id: {self._student_id}, status: {self.status}"
