# tests/test_json_storage.py

import json

from core.response import ErrorCode
from storage.json_storage import JsonStorage


def _write(dir_path, filename, data):
    dir_path.mkdir(parents=True, exist_ok=True)
    (dir_path / filename).write_text(json.dumps(data))


def test_load_missing_directory_gives_empty_book(tmp_path):
    response = JsonStorage(str(tmp_path / "nowhere")).load()

    assert response.success
    tutor_book = response.data["tutor_book"]
    assert tutor_book.students == ()
    assert response.data["skipped"] == []
    assert not tutor_book.has_unsaved_changes


def test_save_and_load(sample_tutor_book, sample_storage):
    save_response = sample_storage.save(sample_tutor_book)

    assert save_response.success
    assert save_response.detail == "Tutor book successfully saved to disk."

    load_response = sample_storage.load()

    assert load_response.success
    assert load_response.data["tutor_book"] == sample_tutor_book
    assert load_response.data["skipped"] == []


def test_save_writes_sorted_indented_json(sample_tutor_book, sample_storage, tmp_path):
    sample_storage.save(sample_tutor_book)

    text = (tmp_path / "data" / "students.json").read_text()
    students = json.loads(text)

    assert students[0]["name"] == "Alice Pauline"
    assert list(students[0]) == sorted(students[0])
    assert '\n  {' in text


def test_load_skips_invalid_records_and_dependents(tmp_path):
    data_dir = tmp_path / "data"
    _write(
        data_dir,
        "students.json",
        [
            {"id": 1, "name": "Amy Bee", "phone": "12345678"},
            {"id": 2, "name": "R@chel", "phone": "87654321"},
            {"id": 3, "phone": "11111111"},
        ],
    )
    _write(
        data_dir,
        "sessions.json",
        [
            {"id": 1, "student_id": 1, "date": "2025-03-03", "subject": "Art"},
            {"id": 2, "student_id": 2, "date": "2025-03-04", "subject": "Art"},
        ],
    )
    _write(
        data_dir,
        "attendance.json",
        [
            {"student_id": 1, "session_id": 1, "is_present": True},
            {"student_id": 1, "session_id": 2, "is_present": True},
        ],
    )

    response = JsonStorage(str(data_dir)).load()

    assert response.success
    tutor_book = response.data["tutor_book"]
    assert [s.id for s in tutor_book.students] == [1]
    assert [s.id for s in tutor_book.sessions] == [1]
    assert len(tutor_book.attendance_records) == 1
    assert len(response.data["skipped"]) == 4
    assert "student: Student's name field is missing!" in response.data["skipped"]


def test_load_duplicate_students_fails(tmp_path):
    data_dir = tmp_path / "data"
    _write(
        data_dir,
        "students.json",
        [
            {"id": 1, "name": "Amy Bee", "phone": "12345678"},
            {"id": 2, "name": "amy bee", "phone": "12345678"},
        ],
    )

    response = JsonStorage(str(data_dir)).load()

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED


def test_load_malformed_json(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "students.json").write_text("{ not json")

    response = JsonStorage(str(data_dir)).load()

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT


def test_load_rejects_non_list_file(tmp_path):
    data_dir = tmp_path / "data"
    _write(data_dir, "students.json", {"id": 1, "name": "Amy Bee"})

    response = JsonStorage(str(data_dir)).load()

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT


def test_save_marks_book_saved(sample_tutor_book, sample_storage):
    sample_tutor_book.reset_data(sample_tutor_book.students)

    assert sample_tutor_book.has_unsaved_changes

    sample_storage.save(sample_tutor_book)

    assert not sample_tutor_book.has_unsaved_changes
