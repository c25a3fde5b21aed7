from __future__ import annotations

__all__ = ["Element", "OrderedPair"]

from abc import abstractmethod
from dataclasses import dataclass


class Element:
    """Anything that can be a member of a set.

    Membership is decided by `equal` rather than by hashing, so an element type
    can define whatever notion of sameness it needs. For sets to behave, `equal`
    must be reflexive, symmetric, and transitive; this is a precondition that the
    sets never check. Use the validators in `equivset.laws` to test an
    implementation.
    """

    __slots__ = ()

    @abstractmethod
    def equal(self, other: object) -> bool:
        """Return True if other is to be treated as the same element.

        Must return False, not raise, when other is of an unrecognized type.
        """
        raise NotImplementedError()

    def __eq__(self, other: object):
        if isinstance(other, Element):
            return self.equal(other)
        else:
            return NotImplemented

    __hash__ = None


@dataclass(frozen=True, slots=True, eq=False)
class OrderedPair(Element):
    first: Element
    second: Element

    def equal(self, other: object) -> bool:
        # Components are compared by identity, not by their own equivalence
        match other:
            case OrderedPair(first, second):
                return self.first is first and self.second is second
            case _:
                return False

    def __str__(self):
        return f"({self.first}, {self.second})"
