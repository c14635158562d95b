"""Subsequence counting over DNA and balanced team splitting."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Mapping, Sequence
from itertools import product

_MOD = 1_000_000_007
_NUCLEOTIDES = "ACGT"
_CODON_LENGTH = 3


def _check_strand(strand: str) -> None:
    unknown = set(strand) - set(_NUCLEOTIDES)
    if unknown:
        raise ValueError(f"unknown nucleotides: {''.join(sorted(unknown))}")


def count_protein_sequences(
    dna: str, table: Mapping[str, str] | Iterable[tuple[str, str]]
) -> int:
    """Return, modulo 1_000_000_007, how many distinct non-empty amino acid
    sequences can be read from a subsequence of `dna`.

    `table` maps codons to amino acid names; when a codon is listed twice the
    first entry wins.
    """
    _check_strand(dna)
    entries = table.items() if isinstance(table, Mapping) else table

    groups: dict[str, list[str]] = {}
    known_codons: set[str] = set()
    for codon, amino_acid in entries:
        if len(codon) != _CODON_LENGTH:
            raise ValueError(f"codon {codon!r} must have three nucleotides")
        _check_strand(codon)
        codons = groups.setdefault(amino_acid, [])
        if codon in known_codons:
            continue
        known_codons.add(codon)
        codons.append(codon)

    size = len(dna)
    last: dict[str, int | None] = {c: None for c in _NUCLEOTIDES}
    next_index: list[dict[str, int | None]] = [dict(last) for _ in range(size + 1)]
    for i in range(size - 1, -1, -1):
        last[dna[i]] = i
        next_index[i] = dict(last)

    def end_of(codon: str, start: int) -> int | None:
        position = start
        for nucleotide in codon:
            found = next_index[position][nucleotide]
            if found is None:
                return None
            position = found + 1
        return position

    totals = [0] * (size + 1)
    for start in range(size - 1, -1, -1):
        count = 0
        for codons in groups.values():
            ends = [end for end in (end_of(c, start) for c in codons) if end is not None]
            if ends:
                count = (count + totals[min(ends)] + 1) % _MOD
        totals[start] = count
    return totals[0]


def split_teams(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Split 2n people into teams 1 and 2 of n each, minimising
    |sum of a over team 1 - sum of b over team 2|.

    Returns each person's team; among equally good splits the
    lexicographically smallest one is chosen.
    """
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    if len(a) % 2:
        raise ValueError("the number of people must be even")

    half = len(a) // 2
    combined = [x + y for x, y in zip(a, b)]
    target = sum(b)

    # product() yields labelings in lexicographic order, so setdefault keeps
    # the smallest labeling for every sum.
    buckets: list[dict[int, tuple[int, ...]]] = [{} for _ in range(half + 1)]
    for labels in product((1, 2), repeat=half):
        total = sum(v for v, label in zip(combined[:half], labels) if label == 1)
        buckets[labels.count(1)].setdefault(total, labels)
    ordered = [sorted(bucket) for bucket in buckets]

    best: tuple[int, tuple[int, ...]] | None = None
    for labels in product((1, 2), repeat=half):
        total = sum(v for v, label in zip(combined[half:], labels) if label == 1)
        index = half - labels.count(1)
        bucket, keys = buckets[index], ordered[index]
        position = bisect_left(keys, target - total)
        for pick in (position, position - 1):
            if not 0 <= pick < len(keys):
                continue
            left_sum = keys[pick]
            candidate = (abs(total + left_sum - target), bucket[left_sum] + labels)
            if best is None or candidate < best:
                best = candidate

    assert best is not None
    return list(best[1])