"""Stack data structure."""

from collections.abc import Iterable

from kindred.data_structures.collection import Collection, Element
from kindred.exceptions import EmptyCollectionError


class Stack(Collection[Element]):
    """Last-in-first-out stack of elements sharing one kind."""

    name = "stack"

    _elements: list[Element]

    def __init__(self, elements: Iterable[Element] | None = None):
        """Initialize stack, pushing any initial elements in order."""
        self._elements = []
        super().__init__(elements)

    def push(self, *values: Element) -> None:
        """Push elements onto the stack in argument order.

        Either every value is pushed or, if any value fails the kind check,
        none of them is.
        """
        self._admit(values)
        self._elements.extend(values)

    def pop(self) -> Element:
        """Remove and return the top element."""
        if self.is_empty:
            raise EmptyCollectionError("invalid operation as stack is empty")
        return self._elements.pop()

    def pop_n(self, count: int) -> list[Element]:
        """Remove the top `count` elements, returned oldest to newest."""
        self._check_count(count, "pop")
        elements = self._elements[self.size - count :]
        del self._elements[self.size - count :]
        return elements

    def top(self) -> Element:
        """Look at the top element without removing it."""
        if self.is_empty:
            raise EmptyCollectionError("invalid operation as stack is empty")
        return self._elements[-1]

    def top_n(self, count: int) -> list[Element]:
        """Look at the top `count` elements, oldest to newest, without removing them."""
        self._check_count(count, "top")
        return self._elements[self.size - count :]

    def top_and_pop(self) -> Element:
        """Remove and return the top element."""
        element = self.top()
        self._elements.pop()
        return element

    def top_n_and_pop_n(self, count: int) -> list[Element]:
        """Remove and return the top `count` elements, oldest to newest."""
        elements = self.top_n(count)
        self.pop_n(count)
        return elements

    def search(self, value: Element) -> int:
        """Find the 1-based distance of `value` from the top, or -1 if absent."""
        if not self._matches_kind(value):
            return -1
        for distance, element in enumerate(reversed(self._elements), start=1):
            if element == value:
                return distance
        return -1

    add = push
    remove = pop
