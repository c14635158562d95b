"""Lexicographically first 0/1 match table with given row and column sums."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _initial_table(rows: Sequence[int], columns: Sequence[int]) -> list[list[int]] | None:
    remaining = list(columns)
    width = len(remaining)
    table = []
    for demand in rows:
        if demand > width:
            return None
        chosen = sorted(range(width), key=lambda c: -remaining[c])[:demand]
        if any(remaining[c] <= 0 for c in chosen):
            return None
        row = [0] * width
        for c in chosen:
            row[c] = 1
            remaining[c] -= 1
        table.append(row)
    if any(remaining):
        return None
    return table


def _reroute(table: list[list[int]], source: int, target: int) -> None:
    """Try to move the 1 at (source, target) to cells after it in row-major order."""
    height, width = len(table), len(table[0])
    cell = (source, target)
    column_parent: dict[int, int] = {}
    row_parent: dict[int, int] = {source: -1}
    queue: deque[tuple[bool, int]] = deque([(True, source)])

    while queue and target not in column_parent:
        is_row, node = queue.popleft()
        if is_row:
            for c in range(width):
                if c not in column_parent and table[node][c] == 0 and (node, c) > cell:
                    column_parent[c] = node
                    queue.append((False, c))
        else:
            for r in range(height):
                if r not in row_parent and table[r][node] == 1:
                    row_parent[r] = node
                    queue.append((True, r))

    if target not in column_parent:
        return

    table[source][target] = 0
    column = target
    while True:
        row = column_parent[column]
        table[row][column] = 1
        if row == source:
            break
        column = row_parent[row]
        table[row][column] = 0


def match_table(jimin: Sequence[int], hansu: Sequence[int]) -> list[str] | None:
    """Return the lexicographically first table of games between two teams.

    Cell (i, j) is '1' when player i of the first team plays player j of the
    second. Row i holds jimin[i] games and column j holds hansu[j] games.
    Returns None when no such table exists.
    """
    rows, columns = list(jimin), list(hansu)
    if any(v < 0 for v in rows + columns):
        raise ValueError("game counts must be non-negative")
    if sum(rows) != sum(columns):
        return None
    if not rows or not columns:
        return ["" for _ in rows]

    table = _initial_table(rows, columns)
    if table is None:
        return None

    for i in range(len(rows)):
        for j in range(len(columns)):
            if table[i][j] == 1:
                _reroute(table, i, j)

    return ["".join(map(str, row)) for row in table]