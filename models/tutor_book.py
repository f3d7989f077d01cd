# models/tutor_book.py

"""
The TutorBook model is the central data object of the program and represents the "source of truth" for all records.

Students, Sessions, and AttendanceRecords are each stored in a `UniqueList` owned exclusively by the TutorBook.
Every list exposes read-only tuples to callers; mutation goes only through the methods below.

The TutorBook keeps cross-record references consistent:
    - a Session belongs to an existing Student,
    - an AttendanceRecord links an existing Student to an existing Session.
Dependent records are checked when added and removed together with their parent (cascading deletes).

Provides functions for adding, replacing, removing, and resolving records, a bulk-load entry point (`reset_data`),
and a session-scoped `has_unsaved_changes` marker that is set whenever any list changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from core.exceptions import (
    DuplicateElementError,
    ElementNotFoundError,
    EntityNotFoundError,
)
from core.logger import get_logger
from models import identity as identities
from models.attendance_record import AttendanceRecord
from models.identity import Identity
from models.session import Session
from models.student import Student
from models.unique_list import ListPolicy, UniqueList

logger = get_logger(__name__)

STUDENT_POLICY: ListPolicy[Student] = ListPolicy(
    is_equivalent=Student.is_same_student,
    compare=Student.compare,
)
SESSION_POLICY: ListPolicy[Session] = ListPolicy(
    is_equivalent=Session.is_same_session,
    compare=Session.compare,
)
ATTENDANCE_POLICY: ListPolicy[AttendanceRecord] = ListPolicy(
    is_equivalent=AttendanceRecord.is_same_record,
    compare=AttendanceRecord.compare,
)


@dataclass(frozen=True)
class RemovedEntities:
    """
    Everything a cascading delete took out of the TutorBook, kept so the delete can be undone.

    Attributes:
        student (Student | None): The removed student, if a student was deleted.
        sessions (tuple[Session, ...]): Sessions removed with it.
        attendance_records (tuple[AttendanceRecord, ...]): Attendance records removed with it.
    """

    student: Student | None = None
    sessions: tuple[Session, ...] = ()
    attendance_records: tuple[AttendanceRecord, ...] = ()


class TutorBook:

    def __init__(self):
        self._students: UniqueList[Student] = UniqueList(STUDENT_POLICY)
        self._sessions: UniqueList[Session] = UniqueList(SESSION_POLICY)
        self._attendance_records: UniqueList[AttendanceRecord] = UniqueList(
            ATTENDANCE_POLICY
        )
        self._next_student_id: int = 1
        self._next_session_id: int = 1
        self._unsaved_changes: bool = False

        for unique_list in self._lists():
            unique_list.add_listener(self._mark_dirty)

    # === properties ===

    # --- core data structures ---

    @property
    def students(self) -> tuple[Student, ...]:
        return self._students.as_tuple()

    @property
    def sessions(self) -> tuple[Session, ...]:
        return self._sessions.as_tuple()

    @property
    def attendance_records(self) -> tuple[AttendanceRecord, ...]:
        return self._attendance_records.as_tuple()

    # --- status markers ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def mark_saved(self) -> None:
        self._unsaved_changes = False

    def add_listener(self, listener: Callable[[UniqueList], None]) -> None:
        """
        Registers a callback invoked after any list in the TutorBook changes.
        """
        for unique_list in self._lists():
            unique_list.add_listener(listener)

    # === bulk import ===

    def reset_data(
        self,
        students: Iterable[Student],
        sessions: Iterable[Session] = (),
        attendance_records: Iterable[AttendanceRecord] = (),
    ) -> None:
        """
        Replaces all records in the TutorBook with the given ones.

        Args:
            students (Iterable[Student]): The full list of students. Students without an ID are assigned one.
            sessions (Iterable[Session]): The full list of sessions.
            attendance_records (Iterable[AttendanceRecord]): The full list of attendance records.

        Raises:
            DuplicateElementError: If any list holds equivalent records, or two records share an ID.
            EntityNotFoundError: If a session or attendance record references a missing record.

        Notes:
            - The whole batch is validated before anything is replaced, so a failure leaves the TutorBook unchanged.
        """
        students = list(students)
        sessions = list(sessions)
        attendance_records = list(attendance_records)

        next_student_id = max(
            (s.id for s in students if s.id is not None), default=0
        ) + 1
        numbered_students = []
        for student in students:
            if student.id is None:
                student = student.with_id(next_student_id)
                next_student_id += 1
            numbered_students.append(student)

        next_session_id = max(
            (s.id for s in sessions if s.id is not None), default=0
        ) + 1
        numbered_sessions = []
        for session in sessions:
            if session.id is None:
                session = session.with_id(next_session_id)
                next_session_id += 1
            numbered_sessions.append(session)

        self._replace_all(numbered_students, numbered_sessions, attendance_records)

    def restore(self, removed: RemovedEntities) -> None:
        """
        Puts back records previously taken out by `remove_student()` or `remove_session()`.

        Raises:
            DuplicateElementError: If a restored record clashes with one added since the removal.
            EntityNotFoundError: If a restored record references a record that no longer exists.

        Notes:
            - All records are restored together or not at all.
        """
        students = list(self._students)
        if removed.student is not None:
            students.append(removed.student)

        self._replace_all(
            students,
            [*self._sessions, *removed.sessions],
            [*self._attendance_records, *removed.attendance_records],
        )

    # === data accessors ===

    # --- students ---

    def has_student(self, student: Student) -> bool:
        return self._students.contains(student)

    def find_student(self, student: Student) -> Student | None:
        return self._students.find(student)

    def get_student_by_id(self, student_id: int) -> Student | None:
        return next((s for s in self._students if s.id == student_id), None)

    def resolve_student(self, identity: Identity) -> Student:
        """
        Finds the single `Student` matching an ID or name.

        Raises:
            EntityNotFoundError: If no student matches.
            AmbiguousIdentityError: If the name matches several students.
        """
        return identities.resolve(
            identity,
            self._students,
            id_of=lambda s: s.id,
            name_of=lambda s: s.name,
            record_name="student",
        )

    # --- sessions ---

    def has_session(self, session: Session) -> bool:
        return self._sessions.contains(session)

    def get_session_by_id(self, session_id: int) -> Session | None:
        return next((s for s in self._sessions if s.id == session_id), None)

    def get_sessions_for_student(self, student_id: int) -> tuple[Session, ...]:
        return tuple(s for s in self._sessions if s.student_id == student_id)

    # --- attendance records ---

    def has_attendance_record(self, record: AttendanceRecord) -> bool:
        return self._attendance_records.contains(record)

    def find_attendance_record(
        self, student_id: int, session_id: int
    ) -> AttendanceRecord | None:
        return next(
            (
                r
                for r in self._attendance_records
                if r.student_id == student_id and r.session_id == session_id
            ),
            None,
        )

    def get_attendance_for_session(
        self, session_id: int
    ) -> tuple[AttendanceRecord, ...]:
        return tuple(r for r in self._attendance_records if r.session_id == session_id)

    def get_attendance_for_student(
        self, student_id: int
    ) -> tuple[AttendanceRecord, ...]:
        return tuple(r for r in self._attendance_records if r.student_id == student_id)

    # === data manipulators ===

    def _mark_dirty(self, _changed: UniqueList | None = None) -> None:
        self._unsaved_changes = True

    # --- student manipulation ---

    def add_student(self, student: Student) -> Student:
        """
        Adds a `Student` to the TutorBook, assigning the next free ID if it has none.

        Returns:
            Student: The stored student, carrying its assigned ID.

        Raises:
            DuplicateElementError: If an equivalent student, or a student with the same ID, already exists.
        """
        if student.id is None:
            student = student.with_id(self._next_student_id)

        elif self.get_student_by_id(student.id) is not None:
            raise DuplicateElementError(
                f"A student with ID {student.id} already exists."
            )

        self._students.add(student)
        self._next_student_id = max(self._next_student_id, student.id + 1)

        return student

    def set_student(self, target: Student, edited: Student) -> None:
        """
        Replaces `target` with `edited`.

        Raises:
            ElementNotFoundError: If `target` is not in the TutorBook.
            DuplicateElementError: If `edited` is equivalent to another stored student.
            ValueError: If `edited` does not carry the ID of `target`.
        """
        if edited.id != target.id:
            raise ValueError("A student's ID cannot be changed.")

        self._students.set(target, edited)

    def remove_student(self, student: Student) -> RemovedEntities:
        """
        Removes a `Student` along with every linked `Session` and `AttendanceRecord`.

        Returns:
            RemovedEntities: The student, sessions, and attendance records that were removed.

        Raises:
            ElementNotFoundError: If `student` is not in the TutorBook.

        Notes:
            - The full set of linked records is computed before anything is removed.
            - Linked records are removed first (attendance, then sessions, then the student) so no listener
              ever observes a dangling reference.
        """
        if self.get_student_by_id(student.id) != student:
            raise ElementNotFoundError()

        sessions = self.get_sessions_for_student(student.id)
        session_ids = {s.id for s in sessions}
        records = tuple(
            r
            for r in self._attendance_records
            if r.student_id == student.id or r.session_id in session_ids
        )

        self._drop(self._attendance_records, records)
        self._drop(self._sessions, sessions)
        self._students.remove(student)

        logger.debug(
            "Removed student %s with %d session(s) and %d attendance record(s).",
            student.id,
            len(sessions),
            len(records),
        )

        return RemovedEntities(student, sessions, records)

    # --- session manipulation ---

    def add_session(self, session: Session) -> Session:
        """
        Adds a `Session` to the TutorBook, assigning the next free ID if it has none.

        Returns:
            Session: The stored session, carrying its assigned ID.

        Raises:
            EntityNotFoundError: If the session's student is not in the TutorBook.
            DuplicateElementError: If an equivalent session, or a session with the same ID, already exists.
        """
        self._require_student(session.student_id)

        if session.id is None:
            session = session.with_id(self._next_session_id)

        elif self.get_session_by_id(session.id) is not None:
            raise DuplicateElementError(
                f"A session with ID {session.id} already exists."
            )

        self._sessions.add(session)
        self._next_session_id = max(self._next_session_id, session.id + 1)

        return session

    def set_session(self, target: Session, edited: Session) -> None:
        """
        Replaces `target` with `edited`.

        Raises:
            ElementNotFoundError: If `target` is not in the TutorBook.
            DuplicateElementError: If `edited` is equivalent to another stored session.
            ValueError: If `edited` does not carry the ID and student of `target`.
        """
        if edited.id != target.id or edited.student_id != target.student_id:
            raise ValueError("A session's ID and student cannot be changed.")

        self._sessions.set(target, edited)

    def remove_session(self, session: Session) -> RemovedEntities:
        """
        Removes a `Session` along with every `AttendanceRecord` for it.

        Raises:
            ElementNotFoundError: If `session` is not in the TutorBook.
        """
        if self.get_session_by_id(session.id) != session:
            raise ElementNotFoundError()

        records = self.get_attendance_for_session(session.id)

        self._drop(self._attendance_records, records)
        self._sessions.remove(session)

        logger.debug(
            "Removed session %s with %d attendance record(s).",
            session.id,
            len(records),
        )

        return RemovedEntities(sessions=(session,), attendance_records=records)

    # --- attendance manipulation ---

    def add_attendance_record(self, record: AttendanceRecord) -> None:
        """
        Adds an `AttendanceRecord` to the TutorBook.

        Raises:
            EntityNotFoundError: If the linked student or session is not in the TutorBook.
            DuplicateElementError: If a record for the same student and session already exists.
        """
        self._require_student(record.student_id)
        self._require_session(record.session_id)

        self._attendance_records.add(record)

    def set_attendance_record(
        self, target: AttendanceRecord, edited: AttendanceRecord
    ) -> None:
        """
        Replaces `target` with `edited`.

        Raises:
            ElementNotFoundError: If `target` is not in the TutorBook.
            DuplicateElementError: If `edited` is equivalent to another stored record.
            EntityNotFoundError: If `edited` links a missing student or session.
        """
        self._require_student(edited.student_id)
        self._require_session(edited.session_id)

        self._attendance_records.set(target, edited)

    def remove_attendance_record(self, record: AttendanceRecord) -> None:
        """
        Raises:
            ElementNotFoundError: If `record` is not in the TutorBook.
        """
        self._attendance_records.remove(record)

    # === data validators ===

    def _require_student(self, student_id: int) -> None:
        if self.get_student_by_id(student_id) is None:
            raise EntityNotFoundError(f"No student found with ID {student_id}.")

    def _require_session(self, session_id: int) -> None:
        if self.get_session_by_id(session_id) is None:
            raise EntityNotFoundError(f"No session found with ID {session_id}.")

    # === helper methods ===

    def _lists(self) -> tuple[UniqueList, ...]:
        return (self._students, self._sessions, self._attendance_records)

    @staticmethod
    def _drop(unique_list: UniqueList, to_drop: tuple) -> None:
        if not to_drop:
            return

        # set_all on a subset of a unique list cannot raise
        unique_list.set_all(item for item in unique_list if item not in to_drop)

    @staticmethod
    def _keep_only(unique_list: UniqueList, to_keep: tuple) -> None:
        if len(to_keep) == len(unique_list):
            return

        unique_list.set_all(to_keep)

    def _replace_all(
        self,
        students: list[Student],
        sessions: list[Session],
        attendance_records: list[AttendanceRecord],
    ) -> None:
        """
        Validates a complete snapshot against a scratch TutorBook, then swaps it in.
        """
        for records, record_name in (
            (students, "student"),
            (sessions, "session"),
        ):
            ids = [r.id for r in records]
            if len(ids) != len(set(ids)):
                raise DuplicateElementError(f"Two {record_name}s share the same ID.")

        staged_students: UniqueList[Student] = UniqueList(STUDENT_POLICY)
        staged_sessions: UniqueList[Session] = UniqueList(SESSION_POLICY)
        staged_records: UniqueList[AttendanceRecord] = UniqueList(ATTENDANCE_POLICY)

        staged_students.set_all(students)
        staged_sessions.set_all(sessions)
        staged_records.set_all(attendance_records)

        student_ids = {s.id for s in students}
        session_ids = {s.id for s in sessions}

        for session in sessions:
            if session.student_id not in student_ids:
                raise EntityNotFoundError(
                    f"Session {session.id} references missing student {session.student_id}."
                )

        for record in attendance_records:
            if record.student_id not in student_ids:
                raise EntityNotFoundError(
                    f"Attendance record references missing student {record.student_id}."
                )
            if record.session_id not in session_ids:
                raise EntityNotFoundError(
                    f"Attendance record references missing session {record.session_id}."
                )

        # drop outgoing dependents children first, then fill in parents first
        kept_student_ids = {s.id for s in self._students if s in students}
        kept_sessions = tuple(
            s
            for s in self._sessions
            if s in sessions and s.student_id in kept_student_ids
        )
        kept_session_ids = {s.id for s in kept_sessions}
        kept_records = tuple(
            r
            for r in self._attendance_records
            if r in attendance_records
            and r.student_id in kept_student_ids
            and r.session_id in kept_session_ids
        )

        self._keep_only(self._attendance_records, kept_records)
        self._keep_only(self._sessions, kept_sessions)

        self._students.set_all(staged_students)
        self._sessions.set_all(staged_sessions)
        self._attendance_records.set_all(staged_records)

        self._next_student_id = max(
            self._next_student_id, max(student_ids, default=0) + 1
        )
        self._next_session_id = max(
            self._next_session_id, max(session_ids, default=0) + 1
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TutorBook):
            return NotImplemented

        return (
            self._students == other._students
            and self._sessions == other._sessions
            and self._attendance_records == other._attendance_records
        )

    def __repr__(self) -> str:
        return f"TutorBook(students={len(self._students)}, sessions={len(self._sessions)}, attendance_records={len(self._attendance_records)})"
