# core/exceptions.py

"""
Exception hierarchy shared by the models and the command layer.

Every error raised by `UniqueList`, `TutorBook`, the entity constructors, and the commands
derives from `TutorlyError`, so the `LogicManager` can convert all of them into a failed
`Response` at a single boundary.
"""


class TutorlyError(Exception):
    """Base exception for every recoverable, user-facing failure."""


# === container errors ===


class DuplicateElementError(TutorlyError):
    """Raised when an operation would store two equivalent elements in a `UniqueList`."""

    def __init__(self, message: str = "Operation would result in duplicate elements."):
        super().__init__(message)


class ElementNotFoundError(TutorlyError):
    """Raised when a `UniqueList` cannot find the exact element to replace or remove."""

    def __init__(self, message: str = "Element not found."):
        super().__init__(message)


# === lookup errors ===


class EntityNotFoundError(TutorlyError):
    """Raised when an identity does not resolve to any stored entity."""


class AmbiguousIdentityError(TutorlyError):
    """Raised when a name resolves to more than one stored entity."""


# === command errors ===


class CommandError(TutorlyError):
    """Raised when a command is rejected for a reason with no more specific error type."""


class NoFieldsEditedError(CommandError):
    def __init__(self, message: str = "At least one field to edit must be provided."):
        super().__init__(message)


class DuplicateEntityError(CommandError):
    """Raised when an edit or add would make an entity equivalent to another stored one."""


# === validation errors ===


class FieldValidationError(TutorlyError, ValueError):
    """
    Raised when a scalar field fails its format constraint.

    Attributes:
        field (str): The name of the offending field (e.g. "name", "phone").
        constraint (str): The human-readable constraint that was violated.
    """

    def __init__(self, field: str, constraint: str):
        self.field = field
        self.constraint = constraint
        super().__init__(constraint)


# === internal errors ===


class InvariantViolationError(RuntimeError):
    """Raised when the TutorBook rejects a change a command had already validated."""
