# models/student.py

"""
Represents a student taught by the tutor.

Stores identifying and contact information (name, phone, email, address), a set of tags, and a
free-text memo. Every field is validated when the `Student` is constructed, so an invalid value
never reaches the `TutorBook`.

A `Student` is immutable. Edits build a new `Student` carrying the same ID, which the `TutorBook`
assigns on first insertion and never changes afterwards.

Includes functionality for:
- Equivalence checks (`is_same_student`) used for duplicate detection
- Ordering by ID for the student list
- Serializing to and from JSON-compatible dictionaries
"""

from __future__ import annotations

from typing import Any, Iterable

from core.exceptions import FieldValidationError
from models import fields

MISSING_FIELD_MESSAGE_FORMAT = "Student's {} field is missing!"


class Student:

    def __init__(
        self,
        name: str,
        phone: str = "",
        email: str = "",
        address: str = "",
        tags: Iterable[str] = (),
        memo: str = "",
        id: int | None = None,
    ):
        self._id: int | None = None if id is None else fields.validate_id(id)
        self._name: str = fields.validate_name(name)
        self._phone: str = fields.validate_phone(phone)
        self._email: str = fields.validate_email(email)
        self._address: str = fields.validate_address(address)
        self._tags: frozenset[str] = fields.validate_tags(tags)
        self._memo: str = fields.validate_memo(memo)

    # === properties ===

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> str:
        return self._address

    @property
    def tags(self) -> frozenset[str]:
        return self._tags

    @property
    def memo(self) -> str:
        return self._memo

    # === copy constructors ===

    def with_id(self, id: int) -> Student:
        return Student(
            name=self._name,
            phone=self._phone,
            email=self._email,
            address=self._address,
            tags=self._tags,
            memo=self._memo,
            id=id,
        )

    # === equivalence and ordering ===

    def is_same_student(self, other: Student) -> bool:
        """
        Returns True if both students have the same name (ignoring case) and phone number.

        This is a weaker notion of equality than `==`, used to detect duplicate students.
        """
        return (
            self._name.casefold() == other.name.casefold()
            and self._phone == other.phone
        )

    @staticmethod
    def compare(student1: Student, student2: Student) -> int:
        id1 = student1.id or 0
        id2 = student2.id or 0
        return (id1 > id2) - (id1 < id2)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "address": self._address,
            "tags": sorted(self._tags),
            "memo": self._memo,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Student:
        """
        Builds a `Student` from a serialized dictionary.

        Raises:
            FieldValidationError: If a required field ("id", "name") is missing, or any field is invalid.
        """
        for required in ("id", "name"):
            if data.get(required) is None:
                raise FieldValidationError(
                    required, MISSING_FIELD_MESSAGE_FORMAT.format(required)
                )

        return cls(
            id=data["id"],
            name=data["name"],
            phone=data.get("phone", ""),
            email=data.get("email", ""),
            address=data.get("address", ""),
            tags=data.get("tags", []),
            memo=data.get("memo", ""),
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (
            self._id,
            self._name,
            self._phone,
            self._email,
            self._address,
            self._tags,
            self._memo,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._phone}, {self._email}, {self._address}, {sorted(self._tags)}, {self._memo})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, id: {self._id}"
