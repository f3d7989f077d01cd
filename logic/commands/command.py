# logic/commands/command.py

"""
Base types shared by every command.

A `Command` is a stateless, immutable description of one edit to the `TutorBook`. Executing it either
raises a `TutorlyError` before changing anything, or applies the whole edit and returns a `CommandResult`.

The `CommandResult` is the only channel by which a command reports its outcome: a feedback message for
the user, an optional `Tab` hint telling the UI what to focus, and an optional reverse command that
undoes the edit when executed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from models.session import Session
from models.student import Student
from models.tutor_book import TutorBook


class Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# marks a descriptor field the user did not supply, as opposed to one set to an empty value
UNSET = Unset.UNSET


class TabKind(str, Enum):
    STUDENT = "Student"
    SESSION = "Session"
    ATTENDANCE = "Attendance"


@dataclass(frozen=True)
class Tab:
    """
    A UI navigation hint: which list to show and, optionally, which record to focus.
    """

    kind: TabKind
    target_id: int | None = None

    @classmethod
    def student(cls, student: Student | None = None) -> Tab:
        return cls(TabKind.STUDENT, student.id if student else None)

    @classmethod
    def session(cls, session: Session | None = None) -> Tab:
        return cls(TabKind.SESSION, session.id if session else None)

    @classmethod
    def attendance(cls, session: Session) -> Tab:
        return cls(TabKind.ATTENDANCE, session.id)


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    tab: Tab | None = None
    reverse_command: Command | None = None


class Command(ABC):

    @abstractmethod
    def execute(self, tutor_book: TutorBook) -> CommandResult:
        """
        Applies the command to `tutor_book`.

        Raises:
            TutorlyError: If a precondition fails. The TutorBook is left unchanged.
            InvariantViolationError: If the TutorBook rejects a change the command already validated.
        """
