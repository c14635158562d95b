"""Bipartite matching problems: exam seating and prime pairing."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

_SEAT_NEIGHBOURS = ((-1, 1), (-1, 0), (-1, -1), (1, 1), (1, 0), (1, -1))


class BipartiteGraph:
    """A bipartite graph with edges directed from the left part to the right part."""

    def __init__(self, size_left: int, size_right: int) -> None:
        if size_left < 0 or size_right < 0:
            raise ValueError("sizes must be non-negative")
        self.size_left = size_left
        self.size_right = size_right
        self._adjacent: list[list[int]] = [[] for _ in range(size_left)]

    def add_edge(self, left: int, right: int) -> None:
        """Connect a left node to a right node."""
        if not 0 <= left < self.size_left:
            raise IndexError(f"left node {left} out of range")
        if not 0 <= right < self.size_right:
            raise IndexError(f"right node {right} out of range")
        self._adjacent[left].append(right)


class HopcroftKarpMatching:
    """Maximum cardinality matching on a bipartite graph (Hopcroft-Karp)."""

    def __init__(self, graph: BipartiteGraph) -> None:
        self._graph = graph
        self._level: list[float] = [0] * graph.size_left
        self._match_left: list[int | None] = [None] * graph.size_left
        self._match_right: list[int | None] = [None] * graph.size_right

    def match(self) -> int:
        """Grow the matching to maximum size and return the number of matched pairs."""
        while True:
            self._update_level()
            augmented = sum(
                1
                for node in range(self._graph.size_left)
                if self._match_left[node] is None and self._augment(node)
            )
            if not augmented:
                break
        return sum(1 for partner in self._match_left if partner is not None)

    def _update_level(self) -> None:
        queue: deque[int] = deque()
        for node, partner in enumerate(self._match_left):
            if partner is None:
                self._level[node] = 0
                queue.append(node)
            else:
                self._level[node] = math.inf

        while queue:
            node = queue.popleft()
            for nxt in self._graph._adjacent[node]:
                partner = self._match_right[nxt]
                if partner is not None and self._level[partner] == math.inf:
                    self._level[partner] = self._level[node] + 1
                    queue.append(partner)

    def _augment(self, node: int) -> bool:
        for nxt in self._graph._adjacent[node]:
            partner = self._match_right[nxt]
            if partner is None or (
                self._level[partner] == self._level[node] + 1 and self._augment(partner)
            ):
                self._match_left[node] = nxt
                self._match_right[nxt] = node
                return True
        return False


def max_students(grid: Sequence[str]) -> int:
    """Return the most students that can sit so no one can copy from a neighbour.

    Seats are '.', broken seats are 'x'. A student can see the seats to the left,
    right, upper-left and upper-right.
    """
    rows = list(grid)
    if not rows:
        return 0
    height, width = len(rows), len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have the same length")

    graph = BipartiteGraph(height * width, height * width)
    seats = sum(row.count(".") for row in rows)

    for x in range(0, width, 2):
        for y in range(height):
            if rows[y][x] == "x":
                continue
            for dx, dy in _SEAT_NEIGHBOURS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and rows[ny][nx] != "x":
                    graph.add_edge(width * y + x, width * ny + nx)

    return seats - HopcroftKarpMatching(graph).match()


def is_prime(n: int) -> bool:
    """Return whether n is prime."""
    if n <= 3:
        return n >= 2
    if n % 2 == 0:
        return False
    return all(n % t for t in range(3, math.isqrt(n) + 1, 2))


def prime_pairs(numbers: Iterable[int]) -> list[int]:
    """Return, sorted, every number the first one can be paired with so that all
    numbers split into pairs with prime sums; an empty list if there is none."""
    values = list(numbers)
    if not values:
        raise ValueError("at least one number is required")

    first = values[0]
    same = [v for v in values if v % 2 == first % 2]
    other = [v for v in values if v % 2 != first % 2]
    if len(same) != len(other):
        return []

    size = len(same)
    adjacent = [[j for j in range(size) if is_prime(a + b)] for a, b in ((a, 0) for a in same) for b in [0]]
    adjacent = [[j, ] for j in []] or [
        [j for j, b in enumerate(other) if is_prime(a + b)] for a in same
    ]

    partners = []
    for chosen in adjacent[0]:
        match: list[int | None] = [None] * size
        match[chosen] = 0

        def try_match(node: int, visited: set[int]) -> bool:
            if node in visited:
                return False
            visited.add(node)
            for right in adjacent[node]:
                owner = match[right]
                if owner is None or try_match(owner, visited):
                    match[right] = node
                    return True
            return False

        matched = 1 + sum(1 for node in range(1, size) if try_match(node, {0}))
        if matched == size:
            partners.append(other[chosen])

    return sorted(partners)