# models/identity.py

"""
Identity values used to look up a record either by its numeric ID or by its display name.

`Identity` is a tagged union of `ById` and `ByName`. Raw user text is turned into an `Identity` by
`parse_identity()`, and resolved against a snapshot of records by `resolve()`.

Resolution rules:
    - `ById`: a record with that ID wins. If none exists, the decimal text of the ID is tried as a name.
    - `ByName`: names are compared ignoring case and surrounding whitespace.
    - Exactly one match resolves. No match raises `EntityNotFoundError`, several raise `AmbiguousIdentityError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar, Union

from core.exceptions import AmbiguousIdentityError, EntityNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class ById:
    id: int

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class ByName:
    name: str

    def __str__(self) -> str:
        return self.name


Identity = Union[ById, ByName]


def parse_identity(text: str) -> Identity:
    """
    Converts raw user input into an `Identity`.

    Args:
        text (str): A positive integer ID or a name.

    Returns:
        `ById` if the stripped text is all digits and positive, otherwise `ByName`.
    """
    text = text.strip()

    if text.isdigit() and int(text) > 0:
        return ById(int(text))

    return ByName(text)


def _match_name(records: list[T], name: str, name_of: Callable[[T], str]) -> list[T]:
    target = name.strip().casefold()
    return [record for record in records if name_of(record).strip().casefold() == target]


def resolve(
    identity: Identity,
    records: Iterable[T],
    id_of: Callable[[T], int | None],
    name_of: Callable[[T], str],
    record_name: str = "record",
) -> T:
    """
    Resolves an `Identity` against a collection of records.

    Args:
        identity (Identity): The ID or name to look up.
        records (Iterable[T]): A snapshot of the records to search.
        id_of (Callable[[T], int | None]): Extracts a record's ID.
        name_of (Callable[[T], str]): Extracts a record's display name.
        record_name (str): A human-readable name used in error messages (e.g. "student").

    Returns:
        The single matching record.

    Raises:
        EntityNotFoundError: If nothing matches.
        AmbiguousIdentityError: If a name lookup matches more than one record.
    """
    records = list(records)

    if isinstance(identity, ById):
        for record in records:
            if id_of(record) == identity.id:
                return record
        matches = _match_name(records, str(identity.id), name_of)

    elif isinstance(identity, ByName):
        matches = _match_name(records, identity.name, name_of)

    else:
        raise TypeError(f"Unrecognized identity type: {type(identity)}")

    if not matches:
        raise EntityNotFoundError(f"No {record_name} found matching '{identity}'.")

    if len(matches) > 1:
        raise AmbiguousIdentityError(
            f"{len(matches)} {record_name}s are named '{identity}'. Use an ID instead."
        )

    return matches[0]
