"""Collection data structure."""

import numbers
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from pprint import pprint
from typing import Any, ClassVar, TypeVar

from kindred.data_structures.kinds import Kind, admit, kind_of
from kindred.exceptions import InvalidCountError
from kindred.logger import KINDRED_LOGGER

Element = TypeVar("Element")


class Collection[Element](ABC):
    """Homogeneous collection locked to the kind of its first element."""

    name: ClassVar[str] = "collection"

    _elements: Any
    _kind: Kind | None

    def __init__(self, elements: Iterable[Element] | None = None):
        """Initialize the collection, admitting any initial elements as one batch."""
        self._kind = None
        if elements is not None:
            self.add(*elements)

    @property
    def kind(self) -> Kind | None:
        """The kind every element must have, or None if the collection is unlocked."""
        return self._kind

    @property
    def size(self) -> int:
        """The number of elements in the collection."""
        return len(self._elements)

    @property
    def is_empty(self) -> bool:
        """Whether the collection is empty."""
        return self.size == 0

    @abstractmethod
    def add(self, *values: Element) -> None:
        """Add one or more elements to the collection."""

    def remove_all(self) -> None:
        """Remove every element but keep the locked kind."""
        self._elements.clear()

    def clear(self) -> None:
        """Remove every element and unlock the kind."""
        self._elements.clear()
        if self._kind is not None:
            KINDRED_LOGGER.debug("Unlocked %s from kind %s", self.name, self._kind)
        self._kind = None

    def to_list(self) -> list[Element]:
        """Return the elements as a new list."""
        return list(self._elements)

    def display(self) -> None:
        """Print the elements to the console."""
        pprint(self.to_list())

    def _admit(self, values: tuple[Any, ...]) -> None:
        """Check a batch of values and lock the kind; raises before anything is stored."""
        kind = admit(self._kind, values, self.name)
        if kind != self._kind:
            KINDRED_LOGGER.debug("Locked %s to kind %s", self.name, kind)
            self._kind = kind

    def _matches_kind(self, value: object) -> bool:
        """Whether `value` has the locked kind, so it could be held by the collection."""
        return self._kind is not None and kind_of(value) == self._kind

    def _check_count(self, count: int, operation: str) -> None:
        """Check that a bulk count is an integer within the bounds of the collection."""
        if isinstance(count, bool) or not isinstance(count, numbers.Integral):
            raise InvalidCountError(f"invalid operation as {operation} count must be an int, got {type(count)}")
        if count < 0:
            raise InvalidCountError(f"invalid operation as {operation} count ({count}) is negative")
        if count > self.size:
            raise InvalidCountError(
                f"invalid operation as {operation} count ({count}) is greater than the {self.name} size ({self.size})"
            )

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Element]:
        return iter(self.to_list())

    def __contains__(self, value: object) -> bool:
        return self._matches_kind(value) and value in self._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind}, elements={self.to_list()})"
