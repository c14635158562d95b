"""Dynamic programming problems: build orders, squad placement, bracket strings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache


def build_time(times: Sequence[int], rules: Iterable[tuple[int, int]], target: int) -> int:
    """Return the least time needed to finish building `target`.

    Buildings are numbered from 1; times[i] is the time of building i + 1 and
    each rule (before, after) says `before` must be finished before `after`
    can start.
    """
    count = len(times)
    if not 1 <= target <= count:
        raise ValueError(f"target {target} out of range")

    prerequisites: list[list[int]] = [[] for _ in range(count + 1)]
    for before, after in rules:
        if not (1 <= before <= count and 1 <= after <= count):
            raise ValueError(f"rule ({before}, {after}) refers to an unknown building")
        prerequisites[after].append(before)

    finished: dict[int, int] = {}
    expanding: set[int] = set()
    stack = [target]

    while stack:
        node = stack[-1]
        if node in finished:
            stack.pop()
            continue
        pending = [p for p in prerequisites[node] if p not in finished]
        if not pending:
            finished[node] = times[node - 1] + max(
                (finished[p] for p in prerequisites[node]), default=0
            )
            expanding.discard(node)
            stack.pop()
            continue
        expanding.add(node)
        for p in pending:
            if p in expanding:
                raise ValueError("the build rules contain a cycle")
            stack.append(p)

    return finished[target]


def _assign(inner: list[int], outer: list[int], units: int, start: int, current: int, end: int) -> int:
    """Fewest squads covering sectors start..end-1, given which area of `start`
    is already covered (0: none, 1: inner, 2: outer)."""
    table = [[0, 0, 0] for _ in range(end + 2)]

    for pos in range(end - 1, start - 1, -1):
        last = pos == end - 1
        for cur in range(3):
            best = math.inf
            cover0 = cur == 0 and inner[pos] + outer[pos] <= units
            cover1 = cur != 1 and not last and inner[pos] + inner[pos + 1] <= units
            cover2 = cur != 2 and not last and outer[pos] + outer[pos + 1] <= units

            if cover0:
                best = min(best, table[pos + 1][0] + 1)
            if cover1 and cover2:
                best = min(best, table[pos + 2][0] + 2)
            else:
                if cover1:
                    best = min(best, table[pos + 1][1] + 1 + (cur == 0))
                if cover2:
                    best = min(best, table[pos + 1][2] + 1 + (cur == 0))

            alone = (cur != 1 and inner[pos] != 0) + (cur != 2 and outer[pos] != 0)
            table[pos][cur] = min(best, table[pos + 1][0] + alone)

    return table[start][current] if start <= end + 1 else 0


def min_squads(units: int, inner: Sequence[int], outer: Sequence[int]) -> int:
    """Return the fewest squads of `units` soldiers covering a ring of sectors.

    Each sector has an inner and an outer area; a squad covers one area or two
    adjacent areas (same sector, or neighbouring sectors on the same circle)
    whose enemies together number at most `units`.
    """
    sectors = len(inner)
    if sectors != len(outer):
        raise ValueError("inner and outer must have the same length")
    if sectors == 0:
        raise ValueError("at least one sector is required")

    if sectors == 1:
        return 1 if inner[0] + outer[0] <= units else 2

    a1, a2 = list(inner), list(outer)
    best = _assign(a1, a2, units, 0, 0, sectors)

    wrap_inner = a1[0] + a1[-1] <= units
    wrap_outer = a2[0] + a2[-1] <= units

    if wrap_inner and wrap_outer:
        best = min(best, _assign(a1, a2, units, 1, 0, sectors - 1) + 2)
    if wrap_inner:
        trimmed = a1[:-1] + [0]
        best = min(best, _assign(trimmed, a2, units, 0, 1, sectors) + 1)
    if wrap_outer:
        trimmed = a2[:-1] + [0]
        best = min(best, _assign(a1, trimmed, units, 0, 2, sectors) + 1)

    return best


@lru_cache(maxsize=None)
def _invalid(depth: int, open_count: int | None) -> int:
    """Count completions of `depth` brackets that leave the string unbalanced.

    `open_count` is the number of unclosed brackets so far, or None once the
    prefix already closed more than it opened.
    """
    if open_count is None or open_count > depth or (depth - open_count) % 2:
        return 1 << depth
    if depth == 0:
        return 0
    closed = open_count - 1 if open_count > 0 else None
    return _invalid(depth - 1, open_count + 1) + _invalid(depth - 1, closed)


def parenthesis_string(n: int, k: int) -> str | None:
    """Return the k-th (from 0) unbalanced bracket string of length n in
    lexicographic order with '(' before ')', or None if there are not that many."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if n == 0:
        return "" if k == 0 else None
    if k >= _invalid(n, 0):
        return None

    state: int | None = 0
    chars = []
    for remaining in range(n - 1, -1, -1):
        opened = None if state is None else state + 1
        count = _invalid(remaining, opened)
        if k < count:
            chars.append("(")
            state = opened
        else:
            k -= count
            chars.append(")")
            state = None if state is None or state == 0 else state - 1
    return "".join(chars)