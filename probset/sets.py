"""Disjoint sets and set propagation problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import reduce


class DisjointSet:
    """Union-find over the elements 0..size-1."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of x's set."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding x and y."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1


def cocktail_masses(n: int, ratios: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Return the smallest positive masses of n ingredients meeting every ratio.

    Each ratio (a, b, p, q) says ingredient a and ingredient b are mixed p:q.
    """
    if n < 1:
        raise ValueError("n must be positive")
    masses = [1] * n
    groups = DisjointSet(n)

    for a, b, p, q in ratios:
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError("ingredient out of range")
        if p <= 0 or q <= 0:
            raise ValueError("ratio parts must be positive")

        common = math.lcm(masses[a], masses[b])
        scale_a = common // masses[a]
        scale_b = common // masses[b]
        divisor = math.gcd(p, q)
        p //= divisor
        q //= divisor

        root_a, root_b = groups.find(a), groups.find(b)
        for i in range(n):
            root = groups.find(i)
            if root == root_a:
                masses[i] *= scale_a * p
            elif root == root_b:
                masses[i] *= scale_b * q

        groups.union(a, b)

    divisor = reduce(math.gcd, masses)
    return [m // divisor for m in masses]


def liar_parties(n: int, truth: Iterable[int], parties: Sequence[Iterable[int]]) -> int:
    """Return how many parties a story can be exaggerated at without being caught.

    People are numbered 1..n; `truth` lists those who know the truth and each
    party lists its guests.
    """
    guests = [set(party) for party in parties]
    knowers = set(truth)
    for person in knowers.union(*guests):
        if not 1 <= person <= n:
            raise ValueError(f"person {person} out of range")

    honest = [False] * len(guests)
    changed = True
    while changed:
        changed = False
        for index, party in enumerate(guests):
            if not honest[index] and party & knowers:
                honest[index] = True
                knowers |= party
                changed = True

    return honest.count(False)