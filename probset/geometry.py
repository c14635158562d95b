"""Plane geometry problems: circles, spirals and lines of sight."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from fractions import Fraction


def turret_positions(x1: int, y1: int, r1: int, x2: int, y2: int, r2: int) -> int:
    """Return the number of intersection points of two circles, or -1 if infinite."""
    distance_sq = (x1 - x2) ** 2 + (y1 - y2) ** 2
    outer = (r1 + r2) ** 2
    inner = (r1 - r2) ** 2

    if (x1, y1, r1) == (x2, y2, r2):
        return -1
    if outer == distance_sq or inner == distance_sq:
        return 1
    if outer < distance_sq or inner > distance_sq:
        return 0
    return 2


def boundary_crossings(
    start: tuple[int, int],
    end: tuple[int, int],
    circles: Iterable[tuple[int, int, int]],
) -> int:
    """Return how many circle boundaries separate start from end."""
    sx, sy = start
    ex, ey = end

    def inside(px: int, py: int, cx: int, cy: int, r: int) -> bool:
        return (px - cx) ** 2 + (py - cy) ** 2 < r * r

    return sum(
        1 for cx, cy, r in circles if inside(sx, sy, cx, cy, r) != inside(ex, ey, cx, cy, r)
    )


def travel_steps(x: int, y: int) -> int:
    """Return the fewest jumps from x to y when each jump differs from the previous
    by at most one and both the first and last jumps have length 1."""
    distance = y - x
    if distance < 0:
        raise ValueError("y must not be smaller than x")

    value = 4 * distance + 1
    root = math.isqrt(value)
    steps = (root - 1) // 2

    if root * root == value:
        return 2 * steps
    if distance - steps * (steps + 1) > steps + 1:
        return 2 * steps + 2
    return 2 * steps + 1


def spiral_value(x: int, y: int) -> int:
    """Return the number written at column x, row y of the counter-clockwise spiral."""
    t = max(abs(x), abs(y))

    if abs(x) == abs(y):
        if x == 0 and y == 0:
            return 1
        if x > 0 and y > 0:
            return (2 * t + 1) ** 2
        if x > 0 > y:
            return 4 * t * t - (2 * t - 1)
        if x < 0 < y:
            return (2 * t + 1) ** 2 - 2 * t
        return 4 * t * t + 1

    if x == -t:
        return 4 * t * t + t + 1 + y
    if y == -t:
        return 4 * t * t - t + 1 - x
    if y == t:
        return (2 * t + 1) ** 2 - t + x
    return (2 * t - 1) ** 2 + t - y


def spiral_grid(r1: int, c1: int, r2: int, c2: int) -> str:
    """Render rows r1..r2 and columns c1..c2 of the spiral, right-aligned."""
    if r2 < r1 or c2 < c1:
        raise ValueError("empty range")

    rows = [[spiral_value(x, y) for x in range(c1, c2 + 1)] for y in range(r1, r2 + 1)]
    width = max(len(str(value)) for row in rows for value in row)
    return "".join(" ".join(f"{value:>{width}}" for value in row) + "\n" for row in rows)


def most_visible_buildings(heights: Sequence[int]) -> int:
    """Return the largest number of buildings visible from any single building roof."""
    heights = list(heights)
    best = 0

    for index, height in enumerate(heights):
        seen = 0

        limit: Fraction | None = None
        for distance, other in enumerate(reversed(heights[:index]), 1):
            slope = Fraction(height - other, distance)
            if limit is None or slope < limit:
                limit = slope
                seen += 1

        limit = None
        for distance, other in enumerate(heights[index + 1:], 1):
            slope = Fraction(other - height, distance)
            if limit is None or slope > limit:
                limit = slope
                seen += 1

        best = max(best, seen)

    return best