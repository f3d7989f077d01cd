# logic/commands/student_commands.py

"""
Commands that add, edit, delete, and restore `Student` records.

Every command validates its preconditions against the `TutorBook` before mutating it, and returns a
reverse command that undoes its effect:

    AddStudentCommand      <->  DeleteStudentCommand
    DeleteStudentCommand    ->  RestoreStudentCommand (puts back the student and its cascaded records)
    EditStudentCommand      ->  EditStudentCommand carrying the pre-edit values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import logic.messages as messages
from core.exceptions import (
    DuplicateElementError,
    DuplicateEntityError,
    ElementNotFoundError,
    InvariantViolationError,
    NoFieldsEditedError,
)
from logic.commands.command import UNSET, Command, CommandResult, Tab, Unset
from models import fields
from models.identity import ById, Identity
from models.student import Student
from models.tutor_book import RemovedEntities, TutorBook

MESSAGE_ADD_STUDENT_SUCCESS = "New student added: {}"
MESSAGE_EDIT_STUDENT_SUCCESS = "Edited student: {}"
MESSAGE_DELETE_STUDENT_SUCCESS = "Deleted student: {}"
MESSAGE_RESTORE_STUDENT_SUCCESS = "Restored student: {}"


# === descriptor ===


@dataclass(frozen=True)
class EditStudentDescriptor:
    """
    The details to edit a student with.

    Each field left as `UNSET` keeps the student's current value; every other field replaces it. An empty
    string is a real value (it clears an optional field), not the same as `UNSET`.

    Field values are validated on construction.
    """

    name: str | Unset = UNSET
    phone: str | Unset = UNSET
    email: str | Unset = UNSET
    address: str | Unset = UNSET
    tags: frozenset[str] | Unset = UNSET
    memo: str | Unset = UNSET

    def __post_init__(self):
        validators = {
            "name": fields.validate_name,
            "phone": fields.validate_phone,
            "email": fields.validate_email,
            "address": fields.validate_address,
            "memo": fields.validate_memo,
        }
        for field_name, validate in validators.items():
            value = getattr(self, field_name)
            if value is not UNSET:
                validate(value)

        if self.tags is not UNSET:
            # frozen dataclass, so bypass __setattr__ to store the normalized set
            object.__setattr__(self, "tags", fields.validate_tags(self.tags))

    @classmethod
    def from_student(cls, student: Student) -> EditStudentDescriptor:
        """
        Returns a descriptor holding every field of `student`.
        """
        return cls(
            name=student.name,
            phone=student.phone,
            email=student.email,
            address=student.address,
            tags=student.tags,
            memo=student.memo,
        )

    def is_any_field_edited(self) -> bool:
        return any(
            value is not UNSET
            for value in (
                self.name,
                self.phone,
                self.email,
                self.address,
                self.tags,
                self.memo,
            )
        )

    def apply_to(self, student: Student) -> Student:
        """
        Builds a new `Student` from `student`, replacing only the fields set in this descriptor.

        The ID of the student is always carried over unchanged.
        """

        def pick(value: Any, current: Any) -> Any:
            return current if value is UNSET else value

        return Student(
            name=pick(self.name, student.name),
            phone=pick(self.phone, student.phone),
            email=pick(self.email, student.email),
            address=pick(self.address, student.address),
            tags=pick(self.tags, student.tags),
            memo=pick(self.memo, student.memo),
            id=student.id,
        )


# === commands ===


@dataclass(frozen=True)
class AddStudentCommand(Command):
    student: Student

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        if tutor_book.has_student(self.student):
            raise DuplicateEntityError(messages.MESSAGE_DUPLICATE_STUDENT)

        added = tutor_book.add_student(self.student)

        return CommandResult(
            feedback=MESSAGE_ADD_STUDENT_SUCCESS.format(messages.format_student(added)),
            tab=Tab.student(added),
            reverse_command=DeleteStudentCommand(ById(added.id)),
        )


@dataclass(frozen=True)
class EditStudentCommand(Command):
    """
    Edits the details of the student identified by an ID or full name.

    Raises:
        NoFieldsEditedError: On construction, if the descriptor sets no field.
    """

    identity: Identity
    descriptor: EditStudentDescriptor

    def __post_init__(self):
        if not self.descriptor.is_any_field_edited():
            raise NoFieldsEditedError()

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        student_to_edit = tutor_book.resolve_student(self.identity)
        edited_student = self.descriptor.apply_to(student_to_edit)

        if not student_to_edit.is_same_student(
            edited_student
        ) and tutor_book.has_student(edited_student):
            raise DuplicateEntityError(messages.MESSAGE_DUPLICATE_STUDENT)

        try:
            tutor_book.set_student(student_to_edit, edited_student)

        except (DuplicateElementError, ElementNotFoundError) as e:
            raise InvariantViolationError(
                f"Tutor book rejected a validated edit of student {student_to_edit.id}: {e}"
            ) from e

        return CommandResult(
            feedback=MESSAGE_EDIT_STUDENT_SUCCESS.format(
                messages.format_student(edited_student)
            ),
            tab=Tab.student(edited_student),
            reverse_command=EditStudentCommand(
                ById(student_to_edit.id),
                EditStudentDescriptor.from_student(student_to_edit),
            ),
        )


@dataclass(frozen=True)
class DeleteStudentCommand(Command):
    """
    Deletes a student along with their sessions and attendance records.
    """

    identity: Identity

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        student = tutor_book.resolve_student(self.identity)
        removed = tutor_book.remove_student(student)

        return CommandResult(
            feedback=MESSAGE_DELETE_STUDENT_SUCCESS.format(
                messages.format_student(student)
            ),
            tab=Tab.student(),
            reverse_command=RestoreStudentCommand(removed),
        )


@dataclass(frozen=True)
class RestoreStudentCommand(Command):
    """
    Puts back a student, with their original ID, and the records deleted along with them.
    """

    removed: RemovedEntities

    def __post_init__(self):
        if self.removed.student is None:
            raise ValueError("RestoreStudentCommand requires a removed student.")

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        student = self.removed.student

        try:
            tutor_book.restore(self.removed)

        except DuplicateElementError as e:
            raise DuplicateEntityError(
                f"{messages.MESSAGE_DUPLICATE_STUDENT} {e}"
            ) from e

        return CommandResult(
            feedback=MESSAGE_RESTORE_STUDENT_SUCCESS.format(
                messages.format_student(student)
            ),
            tab=Tab.student(student),
            reverse_command=DeleteStudentCommand(ById(student.id)),
        )
