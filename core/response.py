# core/response.py

"""
The structured result returned wherever a failure must reach the user as data rather than an exception.

`LogicManager` wraps every command outcome in a `Response`, and `JsonStorage` does the same for disk
access. Callers branch on `success` and read either `detail` and `data`, or `error` and `detail`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    # === Lookup Failures ===
    NOT_FOUND = "NOT_FOUND"

    # a name matches more than one student
    AMBIGUOUS_IDENTITY = "AMBIGUOUS_IDENTITY"

    # === Constraint Violations ===
    DUPLICATE_ENTITY = "DUPLICATE_ENTITY"

    # === Validation Failures ===
    # stored data is malformed or not the expected shape
    INVALID_INPUT = "INVALID_INPUT"

    # a name, phone, date, etc. breaks its format constraint
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # records are individually valid, but inconsistent together
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # an edit command carried no fields
    NO_FIELDS_EDITED = "NO_FIELDS_EDITED"

    # === History ===
    NOTHING_TO_UNDO = "NOTHING_TO_UNDO"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # the tutor book rejected a change a command had already validated
    LOGIC_ERROR = "LOGIC_ERROR"


@dataclass(frozen=True)
class Response:
    """
    Standard Response object for command execution, undo, and storage.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Human-readable feedback or error description.
        error (ErrorCode | str | None): Machine-readable error identifier, None on success.
        status_code (int | None): HTTP-style status: 200 on success, 404 for failed lookups, 400 otherwise.
        data (dict): Payload, varies by operation. Always a dict, empty when there is nothing to return.
        trace (str | None): Exception traceback, set only for internal faults.
    """

    success: bool
    detail: str | None = None
    error: ErrorCode | str | None = None
    status_code: int | None = None
    data: dict = field(default_factory=dict)
    trace: str | None = None

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
    ) -> Response:
        return cls(True, detail, None, status_code, data or {})

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = 400,
        trace: str | None = None,
    ) -> Response:
        return cls(False, detail, error, status_code, {}, trace)

    # === properties ===

    @property
    def error_name(self) -> str:
        """
        The error code as printed to the user: an enum member's name, or the raw string.
        """
        if isinstance(self.error, Enum):
            return self.error.name

        return self.error or ""

    # === dunder methods ===

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"

        return f"Error: {self.error_name}: {self.detail or ''}"
