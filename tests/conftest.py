# tests/conftest.py

import datetime

import pytest

from logic.logic_manager import LogicManager
from models.attendance_record import AttendanceRecord
from models.session import Session
from models.student import Student
from models.tutor_book import TutorBook
from storage.json_storage import JsonStorage


@pytest.fixture
def sample_student():
    return Student(
        name="Alice Pauline",
        phone="94351253",
        email="alice@example.com",
        address="123, Jurong West Ave 6, #08-111",
        tags=["friends"],
        memo="Prefers morning sessions",
    )


@pytest.fixture
def sample_other_student():
    return Student(name="Benson Meier", phone="98765432", email="johnd@example.com")


@pytest.fixture
def empty_tutor_book():
    return TutorBook()


@pytest.fixture
def sample_tutor_book(sample_student, sample_other_student):
    """
    Alice (id 1) and Benson (id 2). Alice has two sessions; Benson attended Alice's first session.
    """
    tutor_book = TutorBook()
    tutor_book.reset_data(
        [sample_student.with_id(1), sample_other_student.with_id(2)],
        [
            Session(1, datetime.date(2025, 3, 3), "Mathematics", id=1),
            Session(1, datetime.date(2025, 3, 10), "Physics", id=2),
            Session(2, datetime.date(2025, 3, 5), "Chemistry", id=3),
        ],
        [
            AttendanceRecord(1, 1, True, "Worked through quadratics"),
            AttendanceRecord(2, 1, False),
            AttendanceRecord(2, 3, True),
        ],
    )
    tutor_book.mark_saved()
    return tutor_book


@pytest.fixture
def sample_storage(tmp_path):
    return JsonStorage(str(tmp_path / "data"))


@pytest.fixture
def sample_logic_manager(sample_tutor_book, sample_storage):
    return LogicManager(sample_tutor_book, sample_storage, undo_limit=10)
