# tests/test_session_commands.py

import datetime

import pytest

from core.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    FieldValidationError,
    NoFieldsEditedError,
)
from logic.commands.command import TabKind
from logic.commands.session_commands import (
    AddSessionCommand,
    DeleteSessionCommand,
    EditSessionCommand,
    EditSessionDescriptor,
    RestoreSessionCommand,
)
from models.identity import ById, ByName


def test_add_session_command(sample_tutor_book):
    result = AddSessionCommand(ByName("Benson Meier"), "2025-04-02", "Biology").execute(
        sample_tutor_book
    )

    session = sample_tutor_book.get_session_by_id(4)
    assert session.student_id == 2
    assert session.date == datetime.date(2025, 4, 2)
    assert result.feedback == (
        "New session added: id: 4; Student: 2; Date: 2025-04-02; Subject: Biology"
    )
    assert result.tab.kind is TabKind.SESSION
    assert result.reverse_command == DeleteSessionCommand(4)


def test_add_session_validates_on_construction():
    with pytest.raises(FieldValidationError):
        AddSessionCommand(ById(1), "2025-13-01", "Biology")

    with pytest.raises(FieldValidationError):
        AddSessionCommand(ById(1), "2025-04-02", "")


def test_add_duplicate_session(sample_tutor_book):
    with pytest.raises(DuplicateEntityError):
        AddSessionCommand(ById(1), datetime.date(2025, 3, 3), "MATHEMATICS").execute(
            sample_tutor_book
        )


def test_add_session_for_missing_student(sample_tutor_book):
    with pytest.raises(EntityNotFoundError):
        AddSessionCommand(ById(9), "2025-04-02", "Biology").execute(sample_tutor_book)


def test_edit_session_requires_a_field():
    with pytest.raises(NoFieldsEditedError):
        EditSessionCommand(1, EditSessionDescriptor())


def test_edit_session_and_reverse(sample_tutor_book):
    original = sample_tutor_book.get_session_by_id(2)

    result = EditSessionCommand(2, EditSessionDescriptor(date="2025-03-11")).execute(
        sample_tutor_book
    )

    edited = sample_tutor_book.get_session_by_id(2)
    assert edited.date == datetime.date(2025, 3, 11)
    assert edited.subject == original.subject

    result.reverse_command.execute(sample_tutor_book)

    assert sample_tutor_book.get_session_by_id(2) == original


def test_edit_session_into_duplicate(sample_tutor_book):
    with pytest.raises(DuplicateEntityError):
        EditSessionCommand(
            2, EditSessionDescriptor(date="2025-03-03", subject="Mathematics")
        ).execute(sample_tutor_book)


def test_edit_missing_session(sample_tutor_book):
    with pytest.raises(EntityNotFoundError) as exc_info:
        EditSessionCommand(99, EditSessionDescriptor(subject="Art")).execute(
            sample_tutor_book
        )

    assert str(exc_info.value) == "No session found with ID 99."


def test_delete_session_and_restore(sample_tutor_book):
    records = sample_tutor_book.attendance_records

    result = DeleteSessionCommand(1).execute(sample_tutor_book)

    assert sample_tutor_book.get_session_by_id(1) is None
    assert sample_tutor_book.get_attendance_for_session(1) == ()
    assert isinstance(result.reverse_command, RestoreSessionCommand)

    result.reverse_command.execute(sample_tutor_book)

    assert sample_tutor_book.get_session_by_id(1) is not None
    assert sample_tutor_book.attendance_records == records


def test_restore_session_after_student_deleted(sample_tutor_book):
    result = DeleteSessionCommand(3).execute(sample_tutor_book)
    sample_tutor_book.remove_student(sample_tutor_book.get_student_by_id(2))

    with pytest.raises(EntityNotFoundError):
        result.reverse_command.execute(sample_tutor_book)
