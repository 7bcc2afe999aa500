"""The workshop: a list of elements with add, delete, sort and display."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from organized.element import Element, ElementType
from organized.ordering import SortOrderError, parse_order, sort_elements
from organized.strutils import getnbr, is_numeric


class WorkshopError(Exception):
    """Raised when a workshop command is given bad arguments."""


class Workshop:
    """Holds the elements, newest first, and reports changes to ``out``."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._elements: list[Element] = []
        self._next_id = 0

    def add(self, args: Sequence[str]) -> None:
        """Add elements from ``TYPE NAME`` pairs; each goes to the front."""
        args = list(args)
        if len(args) < 2 or len(args) % 2:
            raise WorkshopError("add expects TYPE NAME pairs")
        pairs = list(zip(args[::2], args[1::2]))
        try:
            kinds = [ElementType.from_name(kind) for kind, _ in pairs]
        except ValueError as error:
            raise WorkshopError(str(error)) from None
        for kind, (_, name) in zip(kinds, pairs):
            element = Element(kind, name, self._next_id)
            self._next_id += 1
            self._elements.insert(0, element)
            self._out.write(f"{element.describe()} added.\n")

    def delete(self, args: Sequence[str]) -> None:
        """Remove every element whose id is listed in ``args``."""
        args = list(args)
        if not all(is_numeric(arg) for arg in args):
            raise WorkshopError("delete expects numeric ids")
        for arg in args:
            target = getnbr(arg)
            kept = []
            for element in self._elements:
                if element.id == target:
                    self._out.write(f"{element.describe()} deleted.\n")
                else:
                    kept.append(element)
            self._elements = kept

    def sort(self, args: Sequence[str]) -> None:
        """Sort the elements by the keys described in ``args``."""
        try:
            order = parse_order(args)
        except SortOrderError as error:
            raise WorkshopError(str(error)) from None
        self._elements = sort_elements(self._elements, order)

    def display(self, args: Sequence[str] = ()) -> None:
        """Write one line per element, in the current order; ``args`` is ignored."""
        for element in self._elements:
            self._out.write(f"{element.describe()}\n")

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return len(self._elements)