from __future__ import annotations

__all__ = ["NotAnElementError", "NotASetError", "EquivalenceLawError"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .element import Element
    from .laws import Law


@dataclass(frozen=True, slots=True)
class NotAnElementError(Exception):
    value: Any

    def __str__(self):
        return (
            f"Expected every member of a set to be an instance of equivset.Element, "
            f"but found {self.value!r} of type {type(self.value).__name__}"
        )


@dataclass(frozen=True, slots=True)
class NotASetError(Exception):
    value: Any

    def __str__(self):
        return (
            f"Expected a set as the operand of a set operation, "
            f"but found {self.value!r} of type {type(self.value).__name__}"
        )


@dataclass(frozen=True, slots=True)
class EquivalenceLawError(Exception):
    law: Law
    elements: tuple[Element, ...]

    def __str__(self):
        return (
            f"Expected the equal method to be {self.law.name}, but it was violated by "
            f"{', '.join(repr(element) for element in self.elements)}"
        )
