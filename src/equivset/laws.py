"""Validators for the laws an element's equal method must obey.

None of these are used by the sets themselves. They exist so that an element
implementation can be checked, ideally by property-based testing over arbitrary
values.
"""

from __future__ import annotations

__all__ = ["Law", "reflexive", "symmetric", "transitive", "check_equivalence"]

import logging
from enum import Enum
from itertools import product
from typing import Iterable

from returns.result import Failure, Result, Success

from ._exceptions import EquivalenceLawError
from .element import Element

logger = logging.getLogger(__name__)


class Law(Enum):
    reflexive = 1
    symmetric = 2
    transitive = 3

    def __repr__(self) -> str:
        return f"Law.{self.name}"


def reflexive(e: Element) -> bool:
    """Every element must be equal to itself.

    A False result means the element's implementation of equal is invalid.
    """
    return e.equal(e)


def symmetric(a: Element, b: Element) -> bool:
    """Whether a considers b equal exactly when b considers a equal."""
    return a.equal(b) == b.equal(a)


def transitive(a: Element, b: Element, c: Element) -> bool:
    """If a equals b and b equals c, then a must equal c.

    Vacuously True when either premise does not hold.
    """
    if a.equal(b) and b.equal(c):
        return a.equal(c)
    return True


def check_equivalence(elements: Iterable[Element]) -> Result[None, EquivalenceLawError]:
    """Check all three laws over every combination of the given elements.

    Args:
        elements: Representative values of one or more element types.

    Returns:
        `Success(None)` if no law is violated, otherwise a `Failure` holding an
        `EquivalenceLawError` for the first violation found. Laws are checked in
        the order reflexive, symmetric, transitive.
    """
    pool = list(elements)

    for e in pool:
        if not reflexive(e):
            return _violation(Law.reflexive, (e,))

    for a, b in product(pool, repeat=2):
        if not symmetric(a, b):
            return _violation(Law.symmetric, (a, b))

    for a, b, c in product(pool, repeat=3):
        if not transitive(a, b, c):
            return _violation(Law.transitive, (a, b, c))

    return Success(None)


def _violation(law: Law, witnesses: tuple[Element, ...]) -> Failure[EquivalenceLawError]:
    error = EquivalenceLawError(law, witnesses)
    logger.debug("equivalence check failed: %s", error)
    return Failure(error)
