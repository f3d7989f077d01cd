# storage/json_storage.py

"""
Reads and writes a `TutorBook` as JSON files in a directory.

Each record kind is stored as a list of `to_dict()` payloads in its own file: `students.json`,
`sessions.json`, and `attendance.json`. A missing directory or file loads as an empty list, so a first
run starts with an empty TutorBook.

Loading is forgiving per record and strict per batch:
    - a record that fails field validation is skipped and reported, along with any records that depend on it;
    - the surviving records are handed to `TutorBook.reset_data()`, which rejects the whole batch on duplicates.
"""

from __future__ import annotations

import json
import os
from typing import Any, Callable

from core.exceptions import (
    DuplicateElementError,
    EntityNotFoundError,
    FieldValidationError,
)
from core.logger import get_logger
from core.response import ErrorCode, Response
from models.attendance_record import AttendanceRecord
from models.session import Session
from models.student import Student
from models.tutor_book import TutorBook
from models.types import RecordType

logger = get_logger(__name__)

STUDENTS_FILE = "students.json"
SESSIONS_FILE = "sessions.json"
ATTENDANCE_FILE = "attendance.json"


class JsonStorage:

    def __init__(self, dir_path: str):
        self._dir_path: str = dir_path

    # === properties ===

    @property
    def dir_path(self) -> str:
        return self._dir_path

    # === persistence ===

    def load(self) -> Response:
        """
        Loads previously serialized data from disk into a new `TutorBook`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a `TutorBook` was built, even if some records were skipped.
                    - False for JSON deserialization issues or an inconsistent batch.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if a file is not valid JSON or not a list.
                    - `ErrorCode.VALIDATION_FAILED` if the records contain duplicates.
                    - `ErrorCode.INTERNAL_ERROR` for I/O or unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "tutor_book" (TutorBook): The loaded `TutorBook`.
                        - "skipped" (list[str]): A description of every record that was skipped.
                    - On failure:
                        - None
        """
        skipped: list[str] = []

        try:
            students = self._build_records(
                self._read_json(STUDENTS_FILE), Student.from_dict, "student", skipped
            )
            student_ids = {s.id for s in students}

            sessions = [
                session
                for session in self._build_records(
                    self._read_json(SESSIONS_FILE), Session.from_dict, "session", skipped
                )
                if self._keep_if(
                    session.student_id in student_ids,
                    f"session {session.id}: student {session.student_id} is missing",
                    skipped,
                )
            ]
            session_ids = {s.id for s in sessions}

            attendance_records = [
                record
                for record in self._build_records(
                    self._read_json(ATTENDANCE_FILE),
                    AttendanceRecord.from_dict,
                    "attendance record",
                    skipped,
                )
                if self._keep_if(
                    record.student_id in student_ids
                    and record.session_id in session_ids,
                    f"attendance record ({record.student_id}, {record.session_id}): linked record is missing",
                    skipped,
                )
            ]

            tutor_book = TutorBook()
            tutor_book.reset_data(students, sessions, attendance_records)
            tutor_book.mark_saved()

        except json.JSONDecodeError as e:
            return Response.fail(
                detail=f"Failed to parse JSON data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except (DuplicateElementError, EntityNotFoundError) as e:
            return Response.fail(
                detail=f"Stored records are inconsistent: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid input: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info(
                "Loaded %d student(s), %d session(s), %d attendance record(s) from %s.",
                len(students),
                len(sessions),
                len(attendance_records),
                self._dir_path,
            )

            return Response.succeed(
                data={
                    "tutor_book": tutor_book,
                    "skipped": skipped,
                },
            )

    def save(self, tutor_book: TutorBook) -> Response:
        """
        Serializes and saves a `TutorBook` to disk in JSON format.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every file was written.
                    - False for serialization or I/O issues.
                - detail (str | None):
                    - On success, "Tutor book successfully saved to disk."
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record is not JSON serializable.
                    - `ErrorCode.INTERNAL_ERROR` if OSError raised.

        Notes:
            - The directory is created if it does not exist.
            - On success, the TutorBook is marked as having no unsaved changes.
        """
        try:
            os.makedirs(self._dir_path, exist_ok=True)

            self._write_json(STUDENTS_FILE, [s.to_dict() for s in tutor_book.students])
            self._write_json(SESSIONS_FILE, [s.to_dict() for s in tutor_book.sessions])
            self._write_json(
                ATTENDANCE_FILE, [r.to_dict() for r in tutor_book.attendance_records]
            )

        except TypeError as e:
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            tutor_book.mark_saved()
            logger.info("Saved tutor book to %s.", self._dir_path)

            return Response.succeed(detail="Tutor book successfully saved to disk.")

    # === helper methods ===

    def _read_json(self, filename: str) -> list[Any]:
        path = os.path.join(self._dir_path, filename)

        if not os.path.exists(path):
            return []

        with open(path, "r") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Expected {filename} to contain a list.")

        return data

    def _write_json(self, filename: str, data: list) -> None:
        with open(os.path.join(self._dir_path, filename), "w") as f:
            json.dump(data, f, indent=2, sort_keys=True)

    @staticmethod
    def _build_records(
        data: list[Any],
        from_dict_fn: Callable[[dict[str, Any]], RecordType],
        record_name: str,
        skipped: list[str],
    ) -> list[RecordType]:
        """
        Deserializes each record independently, skipping the ones that fail validation.
        """
        records = []

        for record_dict in data:
            if not isinstance(record_dict, dict):
                skipped.append(f"{record_name}: {record_dict!r} is not an object")
                continue

            try:
                records.append(from_dict_fn(record_dict))

            except FieldValidationError as e:
                message = f"{record_name}: {e.constraint}"
                logger.warning("Skipping invalid %s", message)
                skipped.append(message)

        return records

    @staticmethod
    def _keep_if(condition: bool, reason: str, skipped: list[str]) -> bool:
        if not condition:
            logger.warning("Skipping %s", reason)
            skipped.append(reason)

        return condition
