from __future__ import annotations

__all__ = ["Integer", "Float", "Text"]

import math
from dataclasses import dataclass

from .element import Element


@dataclass(frozen=True, slots=True, eq=False)
class Integer(Element):
    value: int

    def equal(self, other: object) -> bool:
        match other:
            case Integer(value):
                return self.value == value
            case _:
                return False

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, slots=True, eq=False)
class Float(Element):
    """A float whose equality is an equivalence relation.

    Native float equality is not reflexive for NaN. Here all NaNs are equal to
    each other, and 0.0 and -0.0 are distinct.
    """

    value: float

    def equal(self, other: object) -> bool:
        match other:
            case Float(value):
                if math.isnan(self.value) and math.isnan(value):
                    return True
                elif self.value != value:
                    return False
                else:
                    return math.copysign(1.0, self.value) == math.copysign(1.0, value)
            case _:
                return False

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, slots=True, eq=False)
class Text(Element):
    """A string compared without regard to case."""

    value: str

    def equal(self, other: object) -> bool:
        match other:
            case Text(value):
                return self.value.casefold() == value.casefold()
            case _:
                return False

    def __str__(self):
        return self.value
