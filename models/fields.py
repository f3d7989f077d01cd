# models/fields.py

"""
Validators for the scalar fields shared by the entity models.

Each validator checks a raw value against its format constraint and returns it unchanged, or raises
`FieldValidationError` carrying the field name and the constraint message. Values are never silently
normalized: an invalid value is rejected when the entity is constructed.

Optional fields (phone, email, address, memo, feedback) accept the empty string to mean "not set".
"""

import datetime
import re
from typing import Any, Iterable

from core.exceptions import FieldValidationError

# === constraint messages ===

ID_CONSTRAINTS = "IDs should be positive integers."
NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, should not be blank, "
    "and should not end with a space."
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long."
)
EMAIL_CONSTRAINTS = "Emails must be a valid address with one @ and a domain."
ADDRESS_CONSTRAINTS = "Addresses can take any values, but should not start with whitespace."
TAG_CONSTRAINTS = "Tag names should be alphanumeric."
MEMO_CONSTRAINTS = "Memos can take any values, but should not start with whitespace."
SUBJECT_CONSTRAINTS = "Subjects can take any values, and it should not be blank."
FEEDBACK_CONSTRAINTS = "Feedback can take any values, but should not start with whitespace."
DATE_CONSTRAINTS = "Dates should be valid calendar dates in the format YYYY-MM-DD."
PRESENCE_CONSTRAINTS = "Attendance must be recorded as true or false."

# === patterns ===

_NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*(?<! )")
_PHONE_PATTERN = re.compile(r"\d{3,}")
_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
_TAG_PATTERN = re.compile(r"[^\W_]+")
_FREE_TEXT_PATTERN = re.compile(r"\S.*", re.DOTALL)


# === helper methods ===


def _require_str(field: str, value: Any, constraint: str) -> str:
    if not isinstance(value, str):
        raise FieldValidationError(field, constraint)
    return value


def _require_match(
    field: str, value: Any, pattern: re.Pattern, constraint: str, optional: bool = False
) -> str:
    value = _require_str(field, value, constraint)

    if optional and value == "":
        return value

    if not pattern.fullmatch(value):
        raise FieldValidationError(field, constraint)

    return value


# === validators ===


def validate_id(value: Any, field: str = "id") -> int:
    # bool is an int subclass, but True is not an ID
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise FieldValidationError(field, ID_CONSTRAINTS)
    return value


def validate_name(value: Any) -> str:
    return _require_match("name", value, _NAME_PATTERN, NAME_CONSTRAINTS)


def validate_phone(value: Any) -> str:
    return _require_match(
        "phone", value, _PHONE_PATTERN, PHONE_CONSTRAINTS, optional=True
    )


def validate_email(value: Any) -> str:
    return _require_match(
        "email", value, _EMAIL_PATTERN, EMAIL_CONSTRAINTS, optional=True
    )


def validate_address(value: Any) -> str:
    return _require_match(
        "address", value, _FREE_TEXT_PATTERN, ADDRESS_CONSTRAINTS, optional=True
    )


def validate_memo(value: Any) -> str:
    return _require_match(
        "memo", value, _FREE_TEXT_PATTERN, MEMO_CONSTRAINTS, optional=True
    )


def validate_feedback(value: Any) -> str:
    return _require_match(
        "feedback", value, _FREE_TEXT_PATTERN, FEEDBACK_CONSTRAINTS, optional=True
    )


def validate_subject(value: Any) -> str:
    return _require_match("subject", value, _FREE_TEXT_PATTERN, SUBJECT_CONSTRAINTS)


def validate_tag(value: Any) -> str:
    return _require_match("tag", value, _TAG_PATTERN, TAG_CONSTRAINTS)


def validate_tags(values: Iterable[Any]) -> frozenset[str]:
    if isinstance(values, str):
        raise FieldValidationError("tag", TAG_CONSTRAINTS)

    try:
        return frozenset(validate_tag(value) for value in values)
    except TypeError:
        raise FieldValidationError("tag", TAG_CONSTRAINTS) from None


def validate_is_present(value: Any) -> bool:
    if not isinstance(value, bool):
        raise FieldValidationError("is_present", PRESENCE_CONSTRAINTS)
    return value


def validate_date(value: Any) -> datetime.date:
    """
    Accepts a `datetime.date` or an ISO `YYYY-MM-DD` string.

    Raises:
        FieldValidationError: If the value is neither, or the string is not a real calendar date.
    """
    # datetime is a date subclass, but carries a time we do not store
    if isinstance(value, datetime.datetime):
        raise FieldValidationError("date", DATE_CONSTRAINTS)

    if isinstance(value, datetime.date):
        return value

    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value)
        except ValueError:
            raise FieldValidationError("date", DATE_CONSTRAINTS) from None

    raise FieldValidationError("date", DATE_CONSTRAINTS)
