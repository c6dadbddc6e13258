"""Set data structure."""

from collections import Counter
from collections.abc import Iterable

import numpy as np

from kindred.data_structures.collection import Collection, Element
from kindred.data_structures.kinds import check_compatible
from kindred.logger import KINDRED_LOGGER


class Set(Collection[Element]):
    """Unordered set of distinct elements sharing one kind.

    Operations that combine sets (union, intersection, difference, subset tests)
    require every locked operand to hold the same kind and raise
    `MismatchedKindError` otherwise. Unlocked operands are compatible with any kind.
    """

    name = "set"

    _elements: dict[Element, None]

    def __init__(self, elements: Iterable[Element] | None = None):
        """Initialize set, adding any initial elements."""
        self._elements = {}
        super().__init__(elements)

    def add(self, *values: Element) -> None:
        """Add elements to the set.

        Re-adding a member is a no-op. Either every value is added or, if any
        value fails the kind check, none of them is.
        """
        self._admit(values)
        self._elements.update(dict.fromkeys(values))

    def remove(self, *values: Element) -> None:
        """Remove elements from the set, ignoring values that are not members."""
        for value in values:
            if self.has(value):
                del self._elements[value]

    def has(self, value: object) -> bool:
        """Whether `value` is a member of the set.

        Values of another kind are never members, even when they compare equal
        to a member (``True == 1``).
        """
        return self._matches_kind(value) and value in self._elements

    def copy(self) -> "Set[Element]":
        """Return an independent set with the same kind and members."""
        duplicate: Set[Element] = Set()
        duplicate._kind = self._kind
        duplicate._elements = dict(self._elements)
        return duplicate

    def union(self, *others: "Set[Element]") -> "Set[Element]":
        """Return a new set with the members of this set and every other set."""
        kind = check_compatible(self._kind, *(other.kind for other in others))
        result = self.copy()
        result._kind = kind
        for other in others:
            result._elements.update(other._elements)
        return result

    def intersection(self, *others: "Set[Element]") -> "Set[Element]":
        """Return a new set with the members common to this set and every other set."""
        kind = check_compatible(self._kind, *(other.kind for other in others))
        total_set_count = len(others) + 1
        frequencies: Counter[Element] = Counter()
        for member_set in (self, *others):
            frequencies.update(member_set._elements.keys())

        result: Set[Element] = Set()
        result._kind = kind
        result._elements = dict.fromkeys(
            element for element, frequency in frequencies.items() if frequency == total_set_count
        )
        return result

    def difference(self, *others: "Set[Element]") -> "Set[Element]":
        """Return a new set with the members of this set that are in none of the other sets."""
        others_union: Set[Element] = Set().union(*others)
        check_compatible(self._kind, others_union.kind)
        result = self.copy()
        result.remove(*others_union._elements)
        return result

    def make_disjoint(self, other: "Set[Element]") -> None:
        """Remove the members common to this set and `other` from both sets."""
        check_compatible(self._kind, other.kind)
        common = [element for element in other._elements if element in self._elements]
        self.remove(*common)
        other.remove(*common)
        KINDRED_LOGGER.debug("Removed %d common elements to make sets disjoint", len(common))

    def make_subset(self, count: int, seed: int | None = None) -> "Set[Element]":
        """Return a new set of `count` members drawn uniformly at random without replacement.

        Args:
            count: Number of members in the subset, between 0 and the size of the set.
            seed: Seed for the random draw. When None, fresh entropy is drawn from the OS.

        Returns:
            A new set with the same kind as this set.
        """
        self._check_count(count, "subset")
        members = self.to_list()
        rng = np.random.default_rng(seed)
        indices = rng.permutation(len(members))[:count]

        subset: Set[Element] = Set()
        subset._kind = self._kind
        subset._elements = dict.fromkeys(members[index] for index in indices)
        return subset

    def is_disjoint(self, other: "Set[Element]") -> bool:
        """Whether this set and `other` have no members in common."""
        return self.intersection(other).is_empty

    def is_subset(self, other: "Set[Element]") -> bool:
        """Whether every member of this set is a member of `other`."""
        check_compatible(self._kind, other.kind)
        return all(element in other._elements for element in self._elements)

    def is_superset(self, other: "Set[Element]") -> bool:
        """Whether every member of `other` is a member of this set."""
        check_compatible(self._kind, other.kind)
        return all(element in self._elements for element in other._elements)

    def __contains__(self, value: object) -> bool:
        return self.has(value)

    def __or__(self, other: "Set[Element]") -> "Set[Element]":
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "Set[Element]") -> "Set[Element]":
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: "Set[Element]") -> "Set[Element]":
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __le__(self, other: "Set[Element]") -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_subset(other)

    def __ge__(self, other: "Set[Element]") -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_superset(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        kinds_compatible = self._kind is None or other.kind is None or self._kind == other.kind
        return kinds_compatible and self._elements.keys() == other._elements.keys()
