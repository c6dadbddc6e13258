"""Queue data structure."""

from collections import deque
from collections.abc import Iterable
from itertools import islice

from kindred.data_structures.collection import Collection, Element
from kindred.exceptions import EmptyCollectionError


class Queue(Collection[Element]):
    """First-in-first-out queue of elements sharing one kind."""

    name = "queue"

    _elements: deque[Element]

    def __init__(self, elements: Iterable[Element] | None = None):
        """Initialize queue, enqueuing any initial elements in order."""
        self._elements = deque()
        super().__init__(elements)

    def push(self, *values: Element) -> None:
        """Add elements to the back of the queue in argument order.

        Either every value is enqueued or, if any value fails the kind check,
        none of them is.
        """
        self._admit(values)
        self._elements.extend(values)

    def pop(self) -> Element:
        """Remove and return the front element."""
        if self.is_empty:
            raise EmptyCollectionError("invalid operation as queue is empty")
        return self._elements.popleft()

    def pop_n(self, count: int) -> list[Element]:
        """Remove the front `count` elements, returned in queue order."""
        self._check_count(count, "pop")
        return [self._elements.popleft() for _ in range(count)]

    def front(self) -> Element:
        """Look at the front element without removing it."""
        if self.is_empty:
            raise EmptyCollectionError("invalid operation as queue is empty")
        return self._elements[0]

    def front_n(self, count: int) -> list[Element]:
        """Look at the front `count` elements, in queue order, without removing them."""
        self._check_count(count, "front")
        return list(islice(self._elements, count))

    def front_and_pop(self) -> Element:
        """Remove and return the front element."""
        element = self.front()
        self._elements.popleft()
        return element

    def front_n_and_pop_n(self, count: int) -> list[Element]:
        """Remove and return the front `count` elements, in queue order."""
        elements = self.front_n(count)
        self.pop_n(count)
        return elements

    def search(self, value: Element) -> int:
        """Find the 1-based distance of `value` from the front, or -1 if absent."""
        if not self._matches_kind(value):
            return -1
        for distance, element in enumerate(self._elements, start=1):
            if element == value:
                return distance
        return -1

    add = push
    remove = pop
