"""Workshop elements and their kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ElementType(IntEnum):
    """The kinds of element, in their sorting order."""

    ACTUATOR = 0
    DEVICE = 1
    PROCESSOR = 2
    SENSOR = 3
    WIRE = 4

    @classmethod
    def from_name(cls, name: str) -> "ElementType":
        """Return the kind called exactly ``name``; raise ValueError otherwise."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"unknown element type: {name!r}") from None


@dataclass(frozen=True)
class Element:
    """One element of the workshop."""

    kind: ElementType
    name: str
    id: int

    def describe(self) -> str:
        """Return the element's display line, without a line break."""
        return f'{self.kind.name} n°{self.id} - "{self.name}"'