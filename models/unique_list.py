# models/unique_list.py

"""
A list that enforces uniqueness between its elements and keeps them in a defined order.

Uniqueness is decided by the `is_equivalent` predicate of the list's `ListPolicy`, so adding and
replacing elements rejects anything equivalent to an element already stored. Removal and the
`target` of `set()` are matched with `==` instead, so that the exact element is affected and an
equivalent-but-different element is never touched.

The `compare` function of the policy defines the iteration order. The list is re-sorted after
every `add()`, `set()`, and `set_all()`, so it is always sorted in the defined order. The default
policy compares with `==` and keeps insertion order.

Every mutation builds the new contents before swapping them in, so a failed operation leaves the
list exactly as it was. Listeners are notified synchronously after each successful mutation.

Notes:
    - `set_all()` checks uniqueness with a pairwise scan, which is O(n^2). Fine for class rosters,
      worth revisiting if the list is ever used for thousands of records.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from core.exceptions import DuplicateElementError, ElementNotFoundError

T = TypeVar("T")


def _equals(element1, element2) -> bool:
    return element1 == element2


def _keep_order(element1, element2) -> int:
    return 0


@dataclass(frozen=True)
class ListPolicy(Generic[T]):
    """
    Equivalence and ordering rules for a `UniqueList`.

    Attributes:
        is_equivalent (Callable[[T, T], bool]): True if two elements are the same logical entity.
        compare (Callable[[T, T], int]): Negative, zero, or positive as the first element sorts before, with, or after the second.
    """

    is_equivalent: Callable[[T, T], bool] = _equals
    compare: Callable[[T, T], int] = _keep_order


class UniqueList(Generic[T]):

    def __init__(self, policy: ListPolicy[T] | None = None):
        self._policy: ListPolicy[T] = policy or ListPolicy()
        self._sort_key = functools.cmp_to_key(self._policy.compare)
        self._items: list[T] = []
        self._listeners: list[Callable[[UniqueList[T]], None]] = []

    # === data accessors ===

    def contains(self, to_check: T) -> bool:
        """
        Returns True if the list holds an element equivalent to `to_check`.
        """
        return any(self._policy.is_equivalent(item, to_check) for item in self._items)

    def find(self, to_find: T) -> T | None:
        """
        Returns the first stored element equivalent to `to_find`, in sort order, or None.
        """
        return next(
            (item for item in self._items if self._policy.is_equivalent(item, to_find)),
            None,
        )

    def as_tuple(self) -> tuple[T, ...]:
        """
        Returns a read-only snapshot of the current contents, in sort order.
        """
        return tuple(self._items)

    def size(self) -> int:
        return len(self._items)

    # === data manipulators ===

    def add(self, to_add: T) -> None:
        """
        Adds an element and re-sorts the list.

        Raises:
            DuplicateElementError: If an equivalent element is already stored.
        """
        if self.contains(to_add):
            raise DuplicateElementError()

        self._replace_contents([*self._items, to_add])

    def set(self, target: T, edited: T) -> None:
        """
        Replaces `target` with `edited` and re-sorts the list.

        Args:
            target (T): The stored element to replace, matched with `==`.
            edited (T): The replacement element.

        Raises:
            ElementNotFoundError: If no stored element equals `target`.
            DuplicateElementError: If `edited` is equivalent to a stored element other than `target`.
        """
        index = self._index_of(target)

        if index == -1:
            raise ElementNotFoundError()

        if any(
            i != index and self._policy.is_equivalent(item, edited)
            for i, item in enumerate(self._items)
        ):
            raise DuplicateElementError()

        candidate = list(self._items)
        candidate[index] = edited
        self._replace_contents(candidate)

    def remove(self, to_remove: T) -> None:
        """
        Removes the element equal to `to_remove`.

        Raises:
            ElementNotFoundError: If no stored element equals `to_remove`.

        Notes:
            - Matching uses `==`, never the equivalence predicate.
            - Removal cannot break the ordering, so no re-sort happens.
        """
        index = self._index_of(to_remove)

        if index == -1:
            raise ElementNotFoundError()

        del self._items[index]
        self._notify()

    def set_all(self, replacement: Iterable[T]) -> None:
        """
        Replaces the whole contents of the list.

        Raises:
            DuplicateElementError: If `replacement` holds two equivalent elements. The list is left unchanged.
        """
        replacement = list(replacement)

        if not self._elements_are_unique(replacement):
            raise DuplicateElementError()

        self._replace_contents(replacement)

    def clear(self) -> None:
        self._items = []
        self._notify()

    # --- listeners ---

    def add_listener(self, listener: Callable[[UniqueList[T]], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[UniqueList[T]], None]) -> None:
        self._listeners.remove(listener)

    # === helper methods ===

    def _index_of(self, target: T) -> int:
        for i, item in enumerate(self._items):
            if item == target:
                return i

        return -1

    def _elements_are_unique(self, elements: list[T]) -> bool:
        for i in range(len(elements) - 1):
            for j in range(i + 1, len(elements)):
                if self._policy.is_equivalent(elements[i], elements[j]):
                    return False

        return True

    def _replace_contents(self, candidate: list[T]) -> None:
        # sorted() runs before the swap so a failing comparator leaves the list untouched
        self._items = sorted(candidate, key=self._sort_key)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # === dunder methods ===

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented

        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"
