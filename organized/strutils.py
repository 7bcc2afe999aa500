"""Small string and integer helpers used across the package."""

from __future__ import annotations

import math
import re

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_WORD_RE = re.compile(r"[A-Za-z0-9]+")
_DIGITS = "0123456789"


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (value - _INT_MIN) % (1 << _INT_BITS) + _INT_MIN


def _is_alnum(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9")


def getnbr(text: str) -> int:
    """Read the first number found in ``text``.

    The number is negative when the character just before its first digit is
    a minus sign. A value that does not fit in a signed 32-bit integer gives 0.
    """
    start = next((i for i, char in enumerate(text) if char in _DIGITS), None)
    if start is None:
        return 0
    negative = start > 0 and text[start - 1] == "-"
    sign = -1 if negative else 1
    result = 0
    for char in text[start:]:
        if char not in _DIGITS:
            break
        digit = int(char)
        if result == 0:
            result = sign * digit
            continue
        result = _wrap_int(_wrap_int(result * 10) + sign * digit)
        if (result <= 0) if not negative else (result >= 0):
            return 0
    return result


def strcmp(first: str, second: str) -> int:
    """Compare two strings, returning -1, 0 or 1."""
    return (first > second) - (first < second)


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` holds only decimal digits (an empty string does)."""
    return all(char in _DIGITS for char in text)


def is_prime(number: int) -> bool:
    """Tell whether ``number`` is prime."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def find_prime_sup(number: int) -> int:
    """Return the smallest prime greater than or equal to ``number``."""
    while not is_prime(number):
        number += 1
    return number


def compute_power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``; a negative exponent gives 0."""
    if exponent < 0:
        return 0
    return base**exponent


def compute_square_root(number: int) -> int:
    """Return the exact integer square root of ``number``, or 0 if there is none."""
    if number < 1:
        return 0
    root = math.isqrt(number)
    return root if root * root == number else 0


def str_to_word_array(text: str) -> list[str]:
    """Split ``text`` into its runs of ASCII letters and digits."""
    return _WORD_RE.findall(text)


def capitalize(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest.

    A word is a run of ASCII letters and digits.
    """
    chars = list(text)
    for index, char in enumerate(chars):
        after_alnum = index > 0 and _is_alnum(chars[index - 1])
        if "a" <= char <= "z" and not after_alnum:
            chars[index] = char.upper()
        elif "A" <= char <= "Z" and after_alnum:
            chars[index] = char.lower()
    return "".join(chars)