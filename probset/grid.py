"""Grid problems: connected patches, square numbers, diamonds and fractals."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _check_rectangular(rows: list[str], alphabet: str) -> tuple[int, int]:
    if not rows:
        raise ValueError("grid must have at least one row")
    width = len(rows[0])
    if width == 0 or any(len(row) != width for row in rows):
        raise ValueError("grid rows must be non-empty and of the same length")
    if any(set(row) - set(alphabet) for row in rows):
        raise ValueError(f"grid may only contain the characters {alphabet!r}")
    return len(rows), width


def count_worm_groups(width: int, height: int, cabbages: Iterable[tuple[int, int]]) -> int:
    """Return the number of 4-connected groups of cabbages in a width x height field."""
    remaining: set[tuple[int, int]] = set()
    for x, y in cabbages:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage ({x}, {y}) lies outside the field")
        remaining.add((x, y))

    groups = 0
    while remaining:
        groups += 1
        stack = [remaining.pop()]
        while stack:
            x, y = stack.pop()
            for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                if neighbour in remaining:
                    remaining.remove(neighbour)
                    stack.append(neighbour)
    return groups


def _is_square(value: int) -> bool:
    root = math.isqrt(value)
    return root * root == value


def max_square_number(grid: Sequence[str]) -> int:
    """Return the largest perfect square read along an arithmetic progression of
    cells in the digit grid, or -1 if there is none."""
    rows = list(grid)
    height, width = _check_rectangular(rows, "0123456789")
    best = -1

    for sy in range(height):
        for sx in range(width):
            for dy in range(-sy, height - sy):
                for dx in range(-sx, width - sx):
                    if dx == 0 and dy == 0:
                        value = int(rows[sy][sx])
                        if _is_square(value):
                            best = max(best, value)
                        continue

                    value = 0
                    x, y = sx, sy
                    while 0 <= x < width and 0 <= y < height:
                        value = value * 10 + int(rows[y][x])
                        if _is_square(value):
                            best = max(best, value)
                        x += dx
                        y += dy
    return best


def largest_diamond(grid: Sequence[str]) -> int:
    """Return the size of the largest diamond outline of '1' cells in the grid."""
    rows = list(grid)
    height, width = _check_rectangular(rows, "01")

    down_left = [[0] * width for _ in range(height)]
    down_right = [[0] * width for _ in range(height)]
    for y in range(height - 1, -1, -1):
        for x in range(width):
            if rows[y][x] != "1":
                continue
            below = y + 1 < height
            down_left[y][x] = 1 + (down_left[y + 1][x - 1] if below and x > 0 else 0)
            down_right[y][x] = 1 + (down_right[y + 1][x + 1] if below and x + 1 < width else 0)

    best = 0
    for y in range(height):
        for x in range(width):
            for size in range(min(down_left[y][x], down_right[y][x]), best, -1):
                delta = size - 1
                if down_right[y + delta][x - delta] < size:
                    continue
                if down_left[y + delta][x + delta] < size:
                    continue
                best = size
                break
    return best


def fractal_plane(s: int, n: int, k: int, r1: int, r2: int, c1: int, c2: int) -> list[str]:
    """Return rows r1..r2, columns c1..c2 of the fractal after s steps.

    Each step splits every white square into n x n parts and paints the central
    k x k of them black. Black cells are '1', white cells '0'.
    """
    if s < 0 or n < 1 or not 0 <= k <= n:
        raise ValueError("require s >= 0, n >= 1 and 0 <= k <= n")
    size = n**s
    if not (0 <= r1 <= r2 < size and 0 <= c1 <= c2 < size):
        raise ValueError("requested area lies outside the plane")

    margin = (n - k) // 2
    levels = s if n > 1 else 0

    def black(row: int, column: int) -> bool:
        for _ in range(levels):
            if margin <= row % n < n - margin and margin <= column % n < n - margin:
                return True
            row //= n
            column //= n
        return False

    return [
        "".join("1" if black(row, column) else "0" for column in range(c1, c2 + 1))
        for row in range(r1, r2 + 1)
    ]