# tests/test_student_commands.py

import pytest

from core.exceptions import (
    AmbiguousIdentityError,
    DuplicateEntityError,
    EntityNotFoundError,
    FieldValidationError,
    NoFieldsEditedError,
)
from logic.commands.command import UNSET, TabKind
from logic.commands.student_commands import (
    AddStudentCommand,
    DeleteStudentCommand,
    EditStudentCommand,
    EditStudentDescriptor,
    RestoreStudentCommand,
)
from models.identity import ById, ByName
from models.student import Student
from models.tutor_book import RemovedEntities, TutorBook


def _snapshot(tutor_book):
    return (tutor_book.students, tutor_book.sessions, tutor_book.attendance_records)


# === add ===


def test_add_student_command(empty_tutor_book, sample_student):
    result = AddStudentCommand(sample_student).execute(empty_tutor_book)

    added = empty_tutor_book.students[0]
    assert added.id == 1
    assert result.feedback == (
        "New student added: id: 1; Name: Alice Pauline; Phone: 94351253; "
        "Email: alice@example.com; Address: 123, Jurong West Ave 6, #08-111; "
        "Tags: [friends]; Memo: Prefers morning sessions"
    )
    assert result.tab.kind is TabKind.STUDENT
    assert result.tab.target_id == 1
    assert result.reverse_command == DeleteStudentCommand(ById(1))


def test_add_duplicate_student(sample_tutor_book):
    before = _snapshot(sample_tutor_book)

    with pytest.raises(DuplicateEntityError):
        AddStudentCommand(Student("alice pauline", phone="94351253")).execute(
            sample_tutor_book
        )

    assert _snapshot(sample_tutor_book) == before


# === edit ===


def test_edit_descriptor_requires_a_field():
    with pytest.raises(NoFieldsEditedError):
        EditStudentCommand(ById(1), EditStudentDescriptor())


def test_edit_descriptor_validates_fields():
    with pytest.raises(FieldValidationError):
        EditStudentDescriptor(phone="12")

    with pytest.raises(FieldValidationError):
        EditStudentDescriptor(tags=["not a tag"])


def test_edit_descriptor_empty_string_is_an_edit():
    descriptor = EditStudentDescriptor(email="")

    assert descriptor.is_any_field_edited()
    assert descriptor.name is UNSET


def test_edit_student_changes_only_given_fields(sample_tutor_book):
    alice = sample_tutor_book.get_student_by_id(1)

    EditStudentCommand(ById(1), EditStudentDescriptor(email="", memo="Exam in May")).execute(
        sample_tutor_book
    )

    edited = sample_tutor_book.get_student_by_id(1)
    assert edited.email == ""
    assert edited.memo == "Exam in May"
    assert edited.name == alice.name
    assert edited.phone == alice.phone
    assert edited.tags == alice.tags


def test_edit_student_by_name(sample_tutor_book):
    result = EditStudentCommand(
        ByName("benson meier"), EditStudentDescriptor(tags=["math", "exam"])
    ).execute(sample_tutor_book)

    assert sample_tutor_book.get_student_by_id(2).tags == frozenset({"math", "exam"})
    assert result.feedback.startswith("Edited student: id: 2; Name: Benson Meier;")
    assert "Tags: [exam, math]" in result.feedback


def test_edit_student_into_duplicate_is_rejected(sample_tutor_book):
    before = _snapshot(sample_tutor_book)
    command = EditStudentCommand(
        ById(1), EditStudentDescriptor(name="Benson Meier", phone="98765432")
    )

    with pytest.raises(DuplicateEntityError):
        command.execute(sample_tutor_book)

    assert _snapshot(sample_tutor_book) == before


def test_edit_student_case_of_own_name(sample_tutor_book):
    EditStudentCommand(ById(1), EditStudentDescriptor(name="ALICE PAULINE")).execute(
        sample_tutor_book
    )

    assert sample_tutor_book.get_student_by_id(1).name == "ALICE PAULINE"


def test_edit_student_reverse_restores_original(sample_tutor_book):
    before = _snapshot(sample_tutor_book)

    result = EditStudentCommand(
        ById(1), EditStudentDescriptor(name="Alicia Pauline", phone="")
    ).execute(sample_tutor_book)
    result.reverse_command.execute(sample_tutor_book)

    assert _snapshot(sample_tutor_book) == before


def test_edit_missing_student(sample_tutor_book):
    with pytest.raises(EntityNotFoundError):
        EditStudentCommand(ById(42), EditStudentDescriptor(memo="x")).execute(
            sample_tutor_book
        )


def test_edit_ambiguous_student(sample_tutor_book):
    sample_tutor_book.add_student(Student("Benson Meier", phone="11112222"))

    with pytest.raises(AmbiguousIdentityError):
        EditStudentCommand(ByName("Benson Meier"), EditStudentDescriptor(memo="x")).execute(
            sample_tutor_book
        )


def test_descriptor_apply_to_keeps_id(sample_tutor_book):
    alice = sample_tutor_book.get_student_by_id(1)

    assert EditStudentDescriptor.from_student(alice).apply_to(alice) == alice


# === delete and restore ===


def test_delete_student_and_restore(sample_tutor_book):
    before = _snapshot(sample_tutor_book)

    result = DeleteStudentCommand(ByName("Alice Pauline")).execute(sample_tutor_book)

    assert result.feedback.startswith("Deleted student: id: 1;")
    assert result.tab.kind is TabKind.STUDENT
    assert result.tab.target_id is None
    assert sample_tutor_book.get_sessions_for_student(1) == ()
    assert isinstance(result.reverse_command, RestoreStudentCommand)

    restore_result = result.reverse_command.execute(sample_tutor_book)

    assert _snapshot(sample_tutor_book) == before
    assert restore_result.feedback.startswith("Restored student: id: 1;")
    assert restore_result.reverse_command == DeleteStudentCommand(ById(1))


def test_restore_clashing_student(sample_tutor_book):
    result = DeleteStudentCommand(ById(1)).execute(sample_tutor_book)
    sample_tutor_book.add_student(Student("Alice Pauline", phone="94351253"))

    with pytest.raises(DuplicateEntityError):
        result.reverse_command.execute(sample_tutor_book)


def test_restore_requires_a_student():
    with pytest.raises(ValueError):
        RestoreStudentCommand(RemovedEntities())


def test_add_then_undo_leaves_book_empty(sample_student):
    tutor_book = TutorBook()

    result = AddStudentCommand(sample_student).execute(tutor_book)
    result.reverse_command.execute(tutor_book)

    assert tutor_book.students == ()
