"""Digit puzzles: square-free counts, digital counters and digit rearrangements."""

from __future__ import annotations

import math
from collections import deque

_SEGMENT_WEIGHT = (4, 0, 3, 3, 2, 3, 4, 1, 5, 3)
_MAX_DIGIT_WEIGHT = max(_SEGMENT_WEIGHT)


def _primes_up_to(limit: int) -> list[int]:
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p::p] = bytes(len(range(p * p, limit + 1, p)))
    return [p for p, flag in enumerate(sieve) if flag]


def count_square_free(low: int, high: int) -> int:
    """Return how many integers in low..high are divisible by no square greater than 1."""
    if low < 1 or high < low:
        raise ValueError("require 1 <= low <= high")

    size = high - low + 1
    marked = bytearray(size)
    for prime in _primes_up_to(math.isqrt(high)):
        square = prime * prime
        first = -(-low // square) * square
        if first > high:
            continue
        start = first - low
        marked[start::square] = b"\x01" * ((size - 1 - start) // square + 1)
    return size - marked.count(1)


def _smallest_with_weight(length: int, weight: int) -> int | None:
    """Smallest `length`-digit string (leading zeros allowed) of the given weight."""
    if weight < 0 or weight > _MAX_DIGIT_WEIGHT * length:
        return None
    if length == 1:
        return next((d for d in range(10) if _SEGMENT_WEIGHT[d] == weight), None)
    for digit in range(10):
        rest = _smallest_with_weight(length - 1, weight - _SEGMENT_WEIGHT[digit])
        if rest is not None:
            return digit * 10 ** (length - 1) + rest
    return None


def _smallest_above(digits: str, weight: int) -> int | None:
    """Smallest string of len(digits) digits, greater than `digits`, of the given weight."""
    length = len(digits)
    if weight < 0 or weight > _MAX_DIGIT_WEIGHT * length:
        return None

    head = int(digits[0])
    if length == 1:
        return next((d for d in range(head + 1, 10) if _SEGMENT_WEIGHT[d] == weight), None)

    place = 10 ** (length - 1)
    rest = _smallest_above(digits[1:], weight - _SEGMENT_WEIGHT[head])
    if rest is not None:
        return head * place + rest
    for digit in range(head + 1, 10):
        rest = _smallest_with_weight(length - 1, weight - _SEGMENT_WEIGHT[digit])
        if rest is not None:
            return digit * place + rest
    return None


def next_same_weight(number: str | int) -> int:
    """Return how many ticks a fixed-width digital counter showing `number` needs
    until it next shows a value lit by the same number of segments."""
    text = str(number)
    if not text or not text.isdigit() or not text.isascii():
        raise ValueError("number must be a non-empty string of decimal digits")

    length = len(text)
    weight = sum(_SEGMENT_WEIGHT[int(c)] for c in text)
    following = _smallest_above(text, weight)
    if following is None:
        wrapped = _smallest_with_weight(length, weight)
        assert wrapped is not None
        following = wrapped + 10**length
    return following - int(text)


def nth_decreasing(n: int) -> int | None:
    """Return the n-th (from 0) number whose digits strictly decrease, or None."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 9:
        return n

    length = 2
    n -= 10
    while length <= 9:
        block = math.comb(10, length)
        if block > n:
            break
        n -= block
        length += 1

    if length == 10 and n > 0:
        return None

    chosen = []
    last = 10
    for position in range(length, 0, -1):
        for digit in range(position - 1, last):
            block = math.comb(digit, position - 1)
            if block > n:
                chosen.append(digit)
                last = digit
                break
            n -= block
    return int("".join(map(str, chosen)))


def _swapped(text: str, i: int, j: int) -> str:
    chars = list(text)
    chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)


def max_after_swaps(n: int, k: int) -> int | None:
    """Return the largest number reachable from n by exactly k digit swaps that
    never create a leading zero, or None if no swap is possible."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")

    text = str(n)
    if len(text) == 1 or (len(text) == 2 and text[1] == "0"):
        return None

    best: int | None = None
    pool: deque[tuple[str, int, int]] = deque([(text, 0, 0)])
    while pool:
        state, position, swaps = pool.popleft()

        if position == len(text) or swaps == k:
            remaining = k - swaps
            distinct_neighbours = all(a != b for a, b in zip(state, state[1:]))
            if remaining % 2 == 1 and distinct_neighbours:
                state = _swapped(state, len(state) - 2, len(state) - 1)
            value = int(state)
            best = value if best is None else max(best, value)
            continue

        peak = max(state[position:])
        if peak <= state[position]:
            pool.append((state, position + 1, swaps))
            continue

        for index in range(position, len(state)):
            if state[index] == peak:
                pool.append((_swapped(state, position, index), position + 1, swaps + 1))

    return best


def _construct(target: list[int], k: int) -> int | None:
    size = len(target)
    failed: set[tuple[int, int, bool]] = set()
    digits: list[int] = []

    def extend(mask: int, tight: bool) -> bool:
        position = len(digits)
        if position == size:
            return mask.bit_count() == k and digits >= target

        key = (position, mask, tight)
        if key in failed:
            return False

        exhausted = mask.bit_count() == k
        for digit in range(target[position] if tight else 0, 10):
            if exhausted and not mask >> digit & 1:
                continue
            digits.append(digit)
            if extend(mask | 1 << digit, tight and digit == target[position]):
                return True
            digits.pop()

        failed.add(key)
        return False

    if extend(0, True):
        return int("".join(map(str, digits)))
    return None


def next_with_distinct_digits(n: int, k: int) -> int:
    """Return the smallest number not less than n written with exactly k distinct digits."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if not 1 <= k <= 10:
        raise ValueError("k must be between 1 and 10")

    target = [int(c) for c in str(n)]
    if len(target) < k:
        target = [1] + [0] * (k - 1)

    result = _construct(target, k)
    if result is None:
        result = _construct([1] + [0] * len(target), k)
        assert result is not None
    return result