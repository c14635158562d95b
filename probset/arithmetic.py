"""Integer arithmetic and counting problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import reduce

_FIB_LIMIT = 40


def _fib_table(zero: int, one: int) -> tuple[int, ...]:
    table = [zero, one]
    while len(table) <= _FIB_LIMIT:
        table.append(table[-2] + table[-1])
    return tuple(table)


_ZERO_CALLS = _fib_table(1, 0)
_ONE_CALLS = _fib_table(0, 1)

_FIXED_LAST_DIGITS = {0: 10, 1: 1, 5: 5, 6: 6}
_LAST_DIGIT_CYCLES = {
    2: (2, 4, 8, 6),
    3: (3, 9, 7, 1),
    4: (4, 6, 4, 6),
    7: (7, 9, 3, 1),
    8: (8, 4, 2, 6),
    9: (9, 1, 9, 1),
}

_DICE_CORNERS = (
    (0, 1, 2), (0, 1, 3), (1, 5, 2), (1, 5, 3),
    (5, 4, 2), (5, 4, 3), (4, 0, 2), (4, 0, 3),
)
_DICE_EDGES = (
    (0, 1), (1, 5), (5, 4), (4, 0), (0, 2), (2, 5),
    (5, 3), (3, 0), (1, 2), (2, 4), (4, 3), (3, 1),
)


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def fibonacci_calls(n: int) -> tuple[int, int]:
    """Return how often fib(0) and fib(1) are reached by the naive recursion for fib(n)."""
    if not 0 <= n <= _FIB_LIMIT:
        raise ValueError(f"n must be between 0 and {_FIB_LIMIT}")
    return _ZERO_CALLS[n], _ONE_CALLS[n]


def divide(a: int, b: int) -> float:
    """Return a / b as a float."""
    return a / b


def last_digit_of_power(a: int, b: int) -> int:
    """Return the last digit of a**b, with 10 standing for a last digit of zero."""
    if a < 0 or b < 1:
        raise ValueError("a must be non-negative and b positive")
    digit = a % 10
    if digit in _FIXED_LAST_DIGITS:
        return _FIXED_LAST_DIGITS[digit]
    return _LAST_DIGIT_CYCLES[digit][(b - 1) % 4]


def binomial(n: int, r: int) -> int:
    """Return the number of ways to choose r items out of n."""
    if n < 0 or not 0 <= r <= n:
        raise ValueError("require 0 <= r <= n")
    return math.comb(n, r)


def _count_digit(n: int, digit: int) -> int:
    total = 0
    place = 1
    while n // place:
        higher = n // place // 10
        current = n // place % 10
        total += higher * place
        if current > digit:
            total += place
        elif current == digit:
            total += n % place + 1
        if digit == 0:
            total -= place
        place *= 10
    return total


def digit_frequencies(n: int) -> list[int]:
    """Return how often each digit 0-9 is written when listing 1..n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return [_count_digit(n, digit) for digit in range(10)]


def consecutive_sum(n: int, length: int) -> list[int] | None:
    """Return the shortest run of at least `length` (and at most 100) non-negative
    consecutive integers summing to n, or None if there is none."""
    if length < 1:
        raise ValueError("length must be positive")
    doubled = 2 * n
    for count in range(length, 101):
        if doubled % count:
            continue
        start = doubled // count - count + 1
        if start % 2 or start < 0:
            continue
        start //= 2
        return list(range(start, start + count))
    return None


def min_product_sum(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the smallest sum of pairwise products over all reorderings."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(x * y for x, y in zip(sorted(a), sorted(b, reverse=True)))


def gcd_times_lcm(values: Iterable[int]) -> int:
    """Return gcd(values) * lcm(values)."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return reduce(math.gcd, items) * reduce(math.lcm, items)


def dice_visible_min(n: int, dice: Sequence[int]) -> int:
    """Return the smallest visible face sum of an n x n x n cube built from one die type."""
    faces = tuple(dice)
    if len(faces) != 6:
        raise ValueError("a die has exactly six faces")
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return sum(faces) - max(faces)

    corner_min = min(sum(faces[i] for i in corner) for corner in _DICE_CORNERS)
    edge_min = min(faces[i] + faces[j] for i, j in _DICE_EDGES)
    face_min = min(faces)

    corners = 4
    edges = 8 * n - 12
    singles = (5 * n - 6) * (n - 2)
    return corners * corner_min + edges * edge_min + singles * face_min