"""Base-36 numbers and the maximal sum after turning k digits into Z."""

from __future__ import annotations

from collections.abc import Iterable
from functools import total_ordering

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_BASE = len(_DIGITS)


@total_ordering
class Base36:
    """A non-negative integer written with the digits 0-9 and A-Z."""

    __slots__ = ("_value",)

    def __init__(self, text: str | int = "0") -> None:
        if isinstance(text, int):
            if text < 0:
                raise ValueError("base-36 numbers are non-negative")
            self._value = text
            return
        if not text or any(c not in _DIGITS for c in text):
            raise ValueError(f"invalid base-36 number {text!r}")
        self._value = int(text, _BASE)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base36):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: Base36) -> bool:
        if not isinstance(other, Base36):
            return NotImplemented
        return self._value < other._value

    def __add__(self, other: Base36) -> Base36:
        if not isinstance(other, Base36):
            return NotImplemented
        return Base36(self._value + other._value)

    def __str__(self) -> str:
        value = self._value
        if value == 0:
            return "0"
        chars = []
        while value:
            value, digit = divmod(value, _BASE)
            chars.append(_DIGITS[digit])
        return "".join(reversed(chars))

    def __repr__(self) -> str:
        return f"Base36({str(self)!r})"


def max_base36_sum(numbers: Iterable[str], k: int) -> str:
    """Return the largest sum of the numbers after every occurrence of k chosen
    digits has been replaced by Z."""
    if not 0 <= k <= _BASE:
        raise ValueError(f"k must be between 0 and {_BASE}")

    texts = list(numbers)
    total = sum((Base36(text) for text in texts), Base36())

    gains = [0] * _BASE
    for text in texts:
        for place, char in enumerate(reversed(text.lstrip("0"))):
            digit = _DIGITS.index(char)
            gains[digit] += (_BASE - 1 - digit) * _BASE**place

    bonus = sum(sorted(gains, reverse=True)[:k])
    return str(total + Base36(bonus))