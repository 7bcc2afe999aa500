"""Sort keys for workshop elements and the sort they drive."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from functools import cmp_to_key

from organized.element import Element

_MAX_KEYS = 3
_REVERSE_FLAG = "-r"


class SortOrderError(ValueError):
    """Raised when a list of sort arguments cannot be understood."""


class SortKey(Enum):
    """One sorting criterion: an element field, ascending or reversed."""

    TYPE = ("kind", False)
    TYPE_R = ("kind", True)
    NAME = ("name", False)
    NAME_R = ("name", True)
    ID = ("id", False)
    ID_R = ("id", True)

    @property
    def field(self) -> str:
        """Name of the element attribute the key compares."""
        return self.value[0]

    @property
    def reverse(self) -> bool:
        """Whether the key sorts in descending order."""
        return self.value[1]


_KEYS_BY_WORD = {
    "TYPE": (SortKey.TYPE, SortKey.TYPE_R),
    "NAME": (SortKey.NAME, SortKey.NAME_R),
    "ID": (SortKey.ID, SortKey.ID_R),
}


def parse_order(args: Iterable[str]) -> tuple[SortKey, ...]:
    """Turn words such as ``TYPE``, ``NAME -r`` or ``ID`` into sort keys.

    A ``-r`` reverses the key just before it. Raises SortOrderError when a
    word is not recognised or when no key is given.
    """
    words = list(args)
    keys: list[SortKey] = []
    position = 0
    while position < len(words):
        word = words[position]
        if word not in _KEYS_BY_WORD:
            raise SortOrderError(f"unknown sort argument: {word!r}")
        ascending, descending = _KEYS_BY_WORD[word]
        reverse = position + 1 < len(words) and words[position + 1] == _REVERSE_FLAG
        keys.append(descending if reverse else ascending)
        position += 2 if reverse else 1
    if not keys:
        raise SortOrderError("no sort key given")
    return tuple(keys)


def compare(first: Element, second: Element, order: Sequence[SortKey]) -> int:
    """Compare two elements by the first three keys of ``order``.

    Returns a negative number, zero or a positive number.
    """
    for key in list(order)[:_MAX_KEYS]:
        left = getattr(first, key.field)
        right = getattr(second, key.field)
        result = (left > right) - (left < right)
        if result:
            return -result if key.reverse else result
    return 0


def sort_elements(elements: Iterable[Element], order: Sequence[SortKey]) -> list[Element]:
    """Return the elements sorted by ``order`` using a selection sort.

    The sort is not stable: it swaps the first smallest remaining element
    into place, exactly as the workshop has always done.
    """
    items = list(elements)
    key = cmp_to_key(lambda a, b: compare(a, b, order))
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=lambda k: key(items[k]))
        items[start], items[smallest] = items[smallest], items[start]
    return items