# models/session.py

"""
Represents a tutoring session held with one student on a given date.

A `Session` links to its student by ID. Sessions are immutable; edits build a new `Session` with the
same ID, which the `TutorBook` assigns on first insertion.
"""

from __future__ import annotations

import datetime
from typing import Any

from core.exceptions import FieldValidationError
from models import fields

MISSING_FIELD_MESSAGE_FORMAT = "Session's {} field is missing!"


class Session:

    def __init__(
        self,
        student_id: int,
        date: datetime.date | str,
        subject: str,
        id: int | None = None,
    ):
        self._id: int | None = None if id is None else fields.validate_id(id)
        self._student_id: int = fields.validate_id(student_id, "student_id")
        self._date: datetime.date = fields.validate_date(date)
        self._subject: str = fields.validate_subject(subject)

    # === properties ===

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def subject(self) -> str:
        return self._subject

    # === copy constructors ===

    def with_id(self, id: int) -> Session:
        return Session(self._student_id, self._date, self._subject, id=id)

    # === equivalence and ordering ===

    def is_same_session(self, other: Session) -> bool:
        """
        Returns True if both sessions are for the same student, on the same date, in the same subject (ignoring case).
        """
        return (
            self._student_id == other.student_id
            and self._date == other.date
            and self._subject.casefold() == other.subject.casefold()
        )

    @staticmethod
    def compare(session1: Session, session2: Session) -> int:
        key1 = (session1.date, session1.id or 0)
        key2 = (session2.date, session2.id or 0)
        return (key1 > key2) - (key1 < key2)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "student_id": self._student_id,
            "date": self._date.isoformat(),
            "subject": self._subject,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        for required in ("id", "student_id", "date", "subject"):
            if data.get(required) is None:
                raise FieldValidationError(
                    required, MISSING_FIELD_MESSAGE_FORMAT.format(required)
                )

        return cls(
            id=data["id"],
            student_id=data["student_id"],
            date=data["date"],
            subject=data["subject"],
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (self._id, self._student_id, self._date, self._subject)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Session({self._id}, {self._student_id}, {self._date.isoformat()}, {self._subject})"

    def __str__(self) -> str:
        return f"SESSION: id: {self._id}, date: {self._date.isoformat()}, subject: {self._subject}"
