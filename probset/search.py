"""Exhaustive search problems: vector matching, art trading and puzzle pieces."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations

_BOARD_SIZE = 5
_MAX_PUZZLE_MOVES = 12


def min_vector_sum(points: Sequence[tuple[int, int]]) -> float:
    """Return the smallest length of the sum of vectors made by pairing up the points.

    Half of the points are taken with a plus sign and the rest with a minus sign.
    """
    coords = [tuple(p) for p in points]
    total_x = sum(x for x, _ in coords)
    total_y = sum(y for _, y in coords)

    best = min(
        (2 * sum(x for x, _ in chosen) - total_x) ** 2
        + (2 * sum(y for _, y in chosen) - total_y) ** 2
        for chosen in combinations(coords, len(coords) // 2)
    )
    return math.sqrt(best)


def max_art_owners(prices: Sequence[str]) -> int:
    """Return the most people that can own the artwork, the artist included.

    prices[i][j] is the digit price at which person i sells to person j; each
    sale must be at no lower price than the previous one and nobody may buy twice.
    """
    rows = list(prices)
    n = len(rows)
    if n == 0:
        raise ValueError("at least one person is required")
    if any(len(row) != n or not row.isdigit() for row in rows):
        raise ValueError("prices must be a square grid of digits")
    table = [[int(c) for c in row] for row in rows]
    memo: dict[tuple[int, int, int], int] = {}

    def search(owned: int, owner: int, price: int) -> int:
        key = (owned, owner, price)
        if key in memo:
            return memo[key]
        owners = bin(owned).count("1")
        best = 0
        for buyer in range(1, n):
            if owned >> buyer & 1:
                continue
            offer = table[owner][buyer]
            if offer < price:
                continue
            value = search(owned | 1 << buyer, buyer, offer)
            best = max(best, value)
            if value + owners == n:
                break
        memo[key] = best + 1
        return best + 1

    return search(1, 0, 0)


def min_puzzle_moves(board: Sequence[str]) -> int | None:
    """Return the fewest single-cell moves that join all '*' pieces of a 5x5 board
    into one 4-connected group, or None if it takes more than twelve."""
    rows = list(board)
    if len(rows) != _BOARD_SIZE or any(len(row) != _BOARD_SIZE for row in rows):
        raise ValueError("board must be 5x5")
    if any(set(row) - {"*", "."} for row in rows):
        raise ValueError("board may only contain '*' and '.'")

    pieces = [[x, y] for y, row in enumerate(rows) for x, c in enumerate(row) if c == "*"]
    if not pieces:
        raise ValueError("board has no pieces")
    occupied = {(x, y) for x, y in pieces}
    last = _BOARD_SIZE - 1

    def connected() -> bool:
        start = tuple(pieces[0])
        seen = {start}
        stack = [start]
        while stack:
            x, y = stack.pop()
            for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                if neighbour in occupied and neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return len(seen) == len(pieces)

    def simulate(remaining: int, index: int) -> bool:
        if index == len(pieces):
            return remaining == 0 and connected()
        if remaining > 3 + 3 * (len(pieces) - index):
            return False

        x, y = pieces[index]
        for dx in range(max(-x, -remaining), min(last - x, remaining) + 1):
            spare = remaining - abs(dx)
            for dy in range(max(-y, -spare), min(last - y, spare) + 1):
                moved = (dx, dy) != (0, 0)
                target = (x + dx, y + dy)
                if moved:
                    if target in occupied:
                        continue
                    occupied.remove((x, y))
                    occupied.add(target)
                    pieces[index] = list(target)
                if simulate(remaining - abs(dx) - abs(dy), index + 1):
                    return True
                if moved:
                    occupied.remove(target)
                    occupied.add((x, y))
                    pieces[index] = [x, y]
        return False

    for total in range(_MAX_PUZZLE_MOVES + 1):
        if simulate(total, 0):
            return total
    return None