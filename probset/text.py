"""String and small-board problems."""

from __future__ import annotations

import re
from collections import Counter, deque
from collections.abc import Iterable, Sequence

_SIGNAL = re.compile(r"(?:100+1+|01)*")


def is_signal_pattern(signal: str) -> bool:
    """Return whether the signal is a sequence of '100+1+' and '01' pieces."""
    if set(signal) - {"0", "1"}:
        raise ValueError("signal must consist of 0 and 1 only")
    return _SIGNAL.fullmatch(signal) is not None


def sort_permutation(values: Sequence[int]) -> list[int]:
    """Return P such that P[i] is where values[i] lands in a stable sort."""
    order = sorted(range(len(values)), key=values.__getitem__)
    result = [0] * len(values)
    for rank, index in enumerate(order):
        result[index] = rank
    return result


def min_repaint(board: Sequence[str]) -> int:
    """Return the fewest cells to repaint to cut an 8x8 chessboard out of the board."""
    rows = list(board)
    if len(rows) < 8 or any(len(row) != len(rows[0]) for row in rows) or len(rows[0]) < 8:
        raise ValueError("board must be rectangular and at least 8x8")

    height, width = len(rows), len(rows[0])
    best = 32
    for top in range(height - 7):
        for left in range(width - 7):
            mismatches = sum(
                (rows[top + i][left + j] == "B") != ((i + j) % 2 == 0)
                for i in range(8)
                for j in range(8)
            )
            best = min(best, mismatches, 64 - mismatches)
    return best


def rotating_queue_ops(n: int, targets: Iterable[int]) -> int:
    """Return the rotations needed to pop the targets in order from a circular queue 1..n."""
    queue = deque(range(1, n + 1))
    operations = 0
    for target in targets:
        distance = queue.index(target)
        operations += min(distance, len(queue) - distance)
        queue.rotate(-distance)
        queue.popleft()
    return operations


def common_pattern(names: Sequence[str]) -> str:
    """Return the names with every position that differs replaced by '?'."""
    if not names:
        raise ValueError("at least one name is required")
    if any(len(name) != len(names[0]) for name in names):
        raise ValueError("names must have the same length")
    return "".join(
        column[0] if len(set(column)) == 1 else "?" for column in zip(*names)
    )


def max_lit_rows(rows: Iterable[str], k: int) -> int:
    """Return the most rows that can be fully lit by exactly k column toggles."""
    best = 0
    for row, count in Counter(rows).items():
        off = row.count("0")
        if off <= k and (k - off) % 2 == 0:
            best = max(best, count)
    return best