from __future__ import annotations

__all__ = ["ExtendedSet"]

import random
from typing import Callable, Iterator

from returns.maybe import Maybe, Nothing, Some

from ._exceptions import NotASetError
from .basic_set import BasicSet, E, check_element, find, random_order
from .element import Element, OrderedPair


def require_set(value: object) -> BasicSet:
    if not isinstance(value, BasicSet):
        raise NotASetError(value)
    return value


class ExtendedSet(BasicSet[E]):
    """A set with the full algebra on top of the basic set operations.

    Methods returning a set always return a new one. They never modify their
    operands, though the result shares member objects with them. Methods that
    modify the receiver in place are named like the built-in `set` methods
    (`union_update`, `difference_update`). Set operands may be any `BasicSet`.

    Several operations come in two variants built by different algorithms:
    building up by inclusion (`difference`, `intersect`, `flatten`) and copying
    then removing (`difference2`, `intersect2`) or accumulating through a
    closure (`flatten2`). The variants always produce equal sets.
    """

    __slots__ = ()

    def add(self, e: E) -> bool:
        """Add a single element.

        Returns:
            True if e was added, False if an equal element was already present.
        """
        check_element(e)
        if self.has_element(e):
            return False
        self._elements = [*self._elements, e]
        return True

    def add_all(self, *es: E) -> bool:
        """Add many elements; True if any of them was added."""
        elements = list(self._elements)
        added = False
        for e in es:
            check_element(e)
            if find(elements, e) < 0:
                elements.append(e)
                added = True
        if added:
            self._elements = elements
        return added

    def cardinality(self) -> int:
        return len(self._elements)

    def copy(self) -> ExtendedSet[E]:
        """Shallow copy: a new list holding the same member objects."""
        return self._from_unique(list(self._elements))

    def contains(self, *es: E) -> bool:
        return all(self.has_element(e) for e in es)

    def clear(self) -> None:
        self._elements = []

    def is_empty(self) -> bool:
        return len(self._elements) == 0

    # Difference

    def difference(self, t: BasicSet) -> ExtendedSet[E]:
        """Members of this set that are not in t.

        Built up from the empty set by including each member absent from t.
        """
        require_set(t)
        return self._from_unique([e for e in self._elements if not t.has_element(e)])

    def difference2(self, c: BasicSet) -> ExtendedSet[E]:
        """Same result as `difference`, by copying this set and removing members of c."""
        require_set(c)
        d = self.copy()
        for e in c._elements:
            d.remove(e)
        return d

    def difference_all(self, *ts: BasicSet) -> ExtendedSet[E]:
        """Members of this set that are in none of ts."""
        for t in ts:
            require_set(t)
        return self._from_unique(
            [e for e in self._elements if not any(t.has_element(e) for t in ts)]
        )

    def difference_update(self, c: BasicSet) -> None:
        """Remove from this set every member of c."""
        require_set(c)
        for e in list(c._elements):
            self.remove(e)

    def symmetric_difference(self, t: BasicSet) -> ExtendedSet[E]:
        """Members of exactly one of this set and t."""
        require_set(t)
        d = self.copy()
        for e in t._elements:
            if self.has_element(e):
                d.remove(e)
            else:
                d._elements.append(e)
        return d

    # Intersection

    def intersect(self, t: BasicSet) -> ExtendedSet[E]:
        """Members of this set also in t, built up by inclusion."""
        require_set(t)
        return self._from_unique([e for e in self._elements if t.has_element(e)])

    def intersect2(self, t: BasicSet) -> ExtendedSet[E]:
        """Same result as `intersect`, by copying this set and removing members not in t."""
        require_set(t)
        i = self.copy()
        for e in self._elements:
            if not t.has_element(e):
                i.remove(e)
        return i

    def intersect_all(self, *ts: BasicSet) -> ExtendedSet[E]:
        """Members of this set present in every one of ts."""
        for t in ts:
            require_set(t)
        return self._from_unique(
            [e for e in self._elements if all(t.has_element(e) for t in ts)]
        )

    # Union

    def union(self, t: BasicSet) -> ExtendedSet[E]:
        u = self.copy()
        u.union_update(t)
        return u

    def union_update(self, t: BasicSet) -> None:
        """Add every member of t to this set."""
        require_set(t)
        self.add_all(*t._elements)

    def union_all(self, *ts: BasicSet) -> ExtendedSet[E]:
        u = self.copy()
        for t in ts:
            u.union_update(t)
        return u

    # Predicates

    def is_subset(self, t: BasicSet) -> bool:
        require_set(t)
        return all(t.has_element(e) for e in self._elements)

    def is_superset(self, t: BasicSet) -> bool:
        require_set(t)
        return all(self.has_element(e) for e in t._elements)

    # Constructions

    def cartesian_product(self, t: BasicSet) -> ExtendedSet[OrderedPair]:
        """The set of ordered pairs (a, b) for every a in this set and b in t.

        The pairs hold the member objects of the operands themselves.
        """
        require_set(t)
        return type(self)._from_unique(
            [OrderedPair(a, b) for a in self._elements for b in t._elements]
        )

    def flatten(self) -> ExtendedSet[Element]:
        """Replace nested sets, at any depth, with their members.

        Each nested set is flattened into a new set, which is then merged in.
        """
        flat = type(self)()
        for e in self._elements:
            match e:
                case BasicSet():
                    flat.union_update(type(self)._from_unique(list(e._elements)).flatten())
                case _:
                    flat.add(e)
        return flat

    def flatten2(self) -> ExtendedSet[Element]:
        """Same result as `flatten`, collecting every non-set member into one accumulator."""
        flat = type(self)()

        def collect(s: BasicSet):
            for e in s._elements:
                match e:
                    case BasicSet():
                        collect(e)
                    case _:
                        flat.add(e)

        collect(self)
        return flat

    def filter(self, f: Callable[[E], bool]) -> ExtendedSet[E]:
        return self._from_unique([e for e in self._elements if f(e)])

    def map(self, f: Callable[[E], Element]) -> ExtendedSet[Element]:
        """The set of distinct f(e) for every member e.

        The result may be smaller than this set when f maps members to equal values.
        """
        m = type(self)()
        for e in self._elements:
            m.add(f(e))
        return m

    # Removal

    def pop(self) -> Maybe[E]:
        """Remove and return a member chosen uniformly at random, or Nothing if empty."""
        elements = self._elements
        if len(elements) == 0:
            return Nothing
        i = random.randrange(len(elements))
        self._elements = elements[:i] + elements[i + 1 :]
        return Some(elements[i])

    def remove(self, e: E) -> bool:
        """Remove the member equal to e; True if there was one."""
        i = find(self._elements, e)
        if i < 0:
            return False
        elements = self._elements
        elements[i] = elements[-1]
        elements.pop()
        return True

    def remove_if(self, f: Callable[[E], bool]) -> bool:
        """Remove every member for which f is true; True if any was removed."""
        elements = self._elements
        removed = False
        i = 0
        while i < len(elements):
            if f(elements[i]):
                elements[i] = elements[-1]
                elements.pop()
                removed = True
            else:
                i += 1
        return removed

    # Iteration

    def iter(self) -> Iterator[E]:
        """Members in random order, read from the live set as iteration proceeds."""
        return iter(self)

    def iter_buffered(self) -> Iterator[E]:
        """Members in random order, snapshotted before the first one is produced."""
        elements = self._elements
        return iter([elements[i] for i in random_order(len(elements))])

    def iter_func(self) -> Callable[[], Maybe[E]]:
        """A cursor returning Some(member) per call in random order, then Nothing forever.

        Like `iter`, the set is not copied, so concurrent changes may be visible.
        """
        order = random_order(len(self._elements))
        position = 0

        def next_element() -> Maybe[E]:
            nonlocal position
            elements = self._elements
            while position < len(order):
                i = order[position]
                position += 1
                if i < len(elements):
                    return Some(elements[i])
            return Nothing

        return next_element

    def do(self, f: Callable[[E], object]) -> None:
        """Call f on each member in random order."""
        elements = self._elements
        for i in random_order(len(elements)):
            f(elements[i])

    def do_while(self, f: Callable[[E], bool]) -> bool:
        """Call f on each member in random order until it returns False.

        Returns:
            True if f returned True for every member, otherwise False.
        """
        elements = self._elements
        for i in random_order(len(elements)):
            if not f(elements[i]):
                return False
        return True

    # Operators

    def __or__(self, other: object):
        if isinstance(other, BasicSet):
            return self.union(other)
        else:
            return NotImplemented

    def __and__(self, other: object):
        if isinstance(other, BasicSet):
            return self.intersect(other)
        else:
            return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, BasicSet):
            return self.difference(other)
        else:
            return NotImplemented

    def __xor__(self, other: object):
        if isinstance(other, BasicSet):
            return self.symmetric_difference(other)
        else:
            return NotImplemented

    def __le__(self, other: object):
        if isinstance(other, BasicSet):
            return self.is_subset(other)
        else:
            return NotImplemented

    def __ge__(self, other: object):
        if isinstance(other, BasicSet):
            return self.is_superset(other)
        else:
            return NotImplemented

    def __ior__(self, other: object):
        if isinstance(other, BasicSet):
            self.union_update(other)
            return self
        else:
            return NotImplemented

    def __isub__(self, other: object):
        if isinstance(other, BasicSet):
            self.difference_update(other)
            return self
        else:
            return NotImplemented
