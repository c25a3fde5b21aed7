from __future__ import annotations

__all__ = ["BasicSet"]

import random
from typing import Collection, Iterator, TypeVar

from ._exceptions import NotAnElementError
from .element import Element

E = TypeVar("E", bound=Element)


def random_order(length: int) -> list[int]:
    """A fresh random permutation of range(length)."""
    return random.sample(range(length), length)


def find(elements: list[Element], e: object) -> int:
    """Position of the first member of elements equal to e, or -1."""
    if isinstance(e, Element):
        for i, existing in enumerate(elements):
            if e.equal(existing):
                return i
    return -1


def check_element(e: object) -> None:
    if not isinstance(e, Element):
        raise NotAnElementError(e)


class BasicSet(Element, Collection[E]):
    """A set of elements compared by their own equal method.

    The members are held in a list and every lookup is a linear scan. The list
    never holds two equal members. Its order has no meaning and may change under
    any mutation, and both `str` and iteration visit the members in a new random
    order each time.

    A set is itself an element, so sets of sets work as expected.
    """

    __slots__ = ("_elements",)

    def __init__(self, *elements: E):
        self._elements: list[E] = []
        for e in elements:
            self.add_element(e)

    @classmethod
    def _from_unique(cls, elements: list):
        # Caller guarantees that elements holds no duplicates and is not shared
        new = cls()
        new._elements = elements
        return new

    def has_element(self, e: object) -> bool:
        return find(self._elements, e) >= 0

    def add_element(self, e: E) -> None:
        check_element(e)
        if not self.has_element(e):
            # Always allocate a new list so that copies never see the addition
            self._elements = [*self._elements, e]

    def remove_element(self, e: E) -> None:
        """Remove the member equal to e; do nothing if there is none."""
        i = find(self._elements, e)
        if i >= 0:
            elements = self._elements
            elements[i] = elements[-1]
            elements.pop()

    def equal(self, other: object) -> bool:
        match other:
            case BasicSet():
                if len(self._elements) != len(other._elements):
                    return False
                # With equal sizes and no duplicates, one direction is enough
                return all(other.has_element(e) for e in self._elements)
            case _:
                return False

    def power_set(self):
        """The set of all subsets of this set, including the empty set and itself."""
        cls = type(self)
        subsets = [cls()]
        for e in self._elements:
            subsets = subsets + [cls._from_unique([*subset._elements, e]) for subset in subsets]
        return cls._from_unique(subsets)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, x: object) -> bool:
        return self.has_element(x)

    def __iter__(self) -> Iterator[E]:
        # Reads the live list, so mutations during iteration may show up
        for i in random_order(len(self._elements)):
            elements = self._elements
            if i < len(elements):
                yield elements[i]

    def __str__(self) -> str:
        elements = self._elements
        return "{" + " ".join(str(elements[i]) for i in random_order(len(elements))) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(e) for e in self._elements)})"
