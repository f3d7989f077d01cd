# logic/commands/session_commands.py

"""
Commands that add, edit, delete, and restore `Session` records.

    AddSessionCommand      <->  DeleteSessionCommand
    DeleteSessionCommand    ->  RestoreSessionCommand (puts back the session and its attendance records)
    EditSessionCommand      ->  EditSessionCommand carrying the pre-edit values
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any

import logic.messages as messages
from core.exceptions import (
    DuplicateElementError,
    DuplicateEntityError,
    ElementNotFoundError,
    EntityNotFoundError,
    InvariantViolationError,
    NoFieldsEditedError,
)
from logic.commands.command import UNSET, Command, CommandResult, Tab, Unset
from models import fields
from models.identity import Identity
from models.session import Session
from models.tutor_book import RemovedEntities, TutorBook

MESSAGE_ADD_SESSION_SUCCESS = "New session added: {}"
MESSAGE_EDIT_SESSION_SUCCESS = "Edited session: {}"
MESSAGE_DELETE_SESSION_SUCCESS = "Deleted session: {}"
MESSAGE_RESTORE_SESSION_SUCCESS = "Restored session: {}"


def get_session_or_raise(tutor_book: TutorBook, session_id: int) -> Session:
    session = tutor_book.get_session_by_id(session_id)

    if session is None:
        raise EntityNotFoundError(messages.MESSAGE_SESSION_NOT_FOUND.format(session_id))

    return session


# === descriptor ===


@dataclass(frozen=True)
class EditSessionDescriptor:
    """
    The details to edit a session with. Fields left as `UNSET` keep their current value.
    """

    date: datetime.date | Unset = UNSET
    subject: str | Unset = UNSET

    def __post_init__(self):
        if self.date is not UNSET:
            object.__setattr__(self, "date", fields.validate_date(self.date))

        if self.subject is not UNSET:
            fields.validate_subject(self.subject)

    @classmethod
    def from_session(cls, session: Session) -> EditSessionDescriptor:
        return cls(date=session.date, subject=session.subject)

    def is_any_field_edited(self) -> bool:
        return self.date is not UNSET or self.subject is not UNSET

    def apply_to(self, session: Session) -> Session:
        def pick(value: Any, current: Any) -> Any:
            return current if value is UNSET else value

        return Session(
            student_id=session.student_id,
            date=pick(self.date, session.date),
            subject=pick(self.subject, session.subject),
            id=session.id,
        )


# === commands ===


@dataclass(frozen=True)
class AddSessionCommand(Command):
    """
    Schedules a new session for the student identified by an ID or full name.
    """

    student_identity: Identity
    date: datetime.date
    subject: str

    def __post_init__(self):
        object.__setattr__(self, "date", fields.validate_date(self.date))
        fields.validate_subject(self.subject)

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        student = tutor_book.resolve_student(self.student_identity)
        session = Session(student.id, self.date, self.subject)

        if tutor_book.has_session(session):
            raise DuplicateEntityError(messages.MESSAGE_DUPLICATE_SESSION)

        added = tutor_book.add_session(session)

        return CommandResult(
            feedback=MESSAGE_ADD_SESSION_SUCCESS.format(messages.format_session(added)),
            tab=Tab.session(added),
            reverse_command=DeleteSessionCommand(added.id),
        )


@dataclass(frozen=True)
class EditSessionCommand(Command):
    """
    Raises:
        NoFieldsEditedError: On construction, if the descriptor sets no field.
    """

    session_id: int
    descriptor: EditSessionDescriptor

    def __post_init__(self):
        if not self.descriptor.is_any_field_edited():
            raise NoFieldsEditedError()

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        session_to_edit = get_session_or_raise(tutor_book, self.session_id)
        edited_session = self.descriptor.apply_to(session_to_edit)

        if not session_to_edit.is_same_session(
            edited_session
        ) and tutor_book.has_session(edited_session):
            raise DuplicateEntityError(messages.MESSAGE_DUPLICATE_SESSION)

        try:
            tutor_book.set_session(session_to_edit, edited_session)

        except (DuplicateElementError, ElementNotFoundError) as e:
            raise InvariantViolationError(
                f"Tutor book rejected a validated edit of session {session_to_edit.id}: {e}"
            ) from e

        return CommandResult(
            feedback=MESSAGE_EDIT_SESSION_SUCCESS.format(
                messages.format_session(edited_session)
            ),
            tab=Tab.session(edited_session),
            reverse_command=EditSessionCommand(
                session_to_edit.id,
                EditSessionDescriptor.from_session(session_to_edit),
            ),
        )


@dataclass(frozen=True)
class DeleteSessionCommand(Command):
    session_id: int

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        session = get_session_or_raise(tutor_book, self.session_id)
        removed = tutor_book.remove_session(session)

        return CommandResult(
            feedback=MESSAGE_DELETE_SESSION_SUCCESS.format(
                messages.format_session(session)
            ),
            tab=Tab.session(),
            reverse_command=RestoreSessionCommand(removed),
        )


@dataclass(frozen=True)
class RestoreSessionCommand(Command):
    removed: RemovedEntities

    def __post_init__(self):
        if len(self.removed.sessions) != 1:
            raise ValueError("RestoreSessionCommand requires exactly one removed session.")

    def execute(self, tutor_book: TutorBook) -> CommandResult:
        session = self.removed.sessions[0]

        try:
            tutor_book.restore(self.removed)

        except DuplicateElementError as e:
            raise DuplicateEntityError(
                f"{messages.MESSAGE_DUPLICATE_SESSION} {e}"
            ) from e

        return CommandResult(
            feedback=MESSAGE_RESTORE_SESSION_SUCCESS.format(
                messages.format_session(session)
            ),
            tab=Tab.session(session),
            reverse_command=DeleteSessionCommand(session.id),
        )
