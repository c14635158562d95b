import random

import pytest

from probset.text import (
    common_pattern,
    is_signal_pattern,
    max_lit_rows,
    min_repaint,
    rotating_queue_ops,
    sort_permutation,
)


def _signal_piece(rng):
    if rng.random() < 0.5:
        return "01"
    return "1" + "0" * rng.randint(2, 4) + "1" * rng.randint(1, 4)


@pytest.mark.parametrize("seed", range(25))
def test_signal_generated_patterns_match(seed):
    rng = random.Random(seed)
    signal = "".join(_signal_piece(rng) for _ in range(rng.randint(1, 6)))
    assert is_signal_pattern(signal) is True


def test_signal_empty_matches():
    assert is_signal_pattern("") is True


@pytest.mark.parametrize("seed", range(10))
def test_signal_invalid_shapes(seed):
    rng = random.Random(seed)
    body = "".join(_signal_piece(rng) for _ in range(3))
    assert is_signal_pattern("00" + body) is False
    assert is_signal_pattern(body + "0") is False


def test_signal_rejects_other_characters():
    with pytest.raises(ValueError):
        is_signal_pattern("01a")


@pytest.mark.parametrize("values", [[2, 3, 1], [2, 1, 3, 1, 2], [5] * 4, []])
def test_sort_permutation_properties(values):
    perm = sort_permutation(values)
    assert sorted(perm) == list(range(len(values)))
    placed = [None] * len(values)
    for value, position in zip(values, perm):
        placed[position] = value
    assert placed == sorted(values)
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if values[i] == values[j]:
                assert perm[i] < perm[j]


def _chess(height, width, shift=0):
    return ["".join("B" if (i + j + shift) % 2 == 0 else "W" for j in range(width)) for i in range(height)]


@pytest.mark.parametrize("shift", [0, 1])
def test_min_repaint_perfect_board(shift):
    assert min_repaint(_chess(10, 13, shift)) == 0


def test_min_repaint_single_flip():
    board = _chess(8, 8)
    board[3] = board[3][:4] + ("W" if board[3][4] == "B" else "B") + board[3][5:]
    assert min_repaint(board) == 1


def test_min_repaint_plain_board():
    assert min_repaint(["W" * 8] * 8) == 32


def test_min_repaint_too_small():
    with pytest.raises(ValueError):
        min_repaint(["BW" * 3] * 8)


def test_rotating_queue_front_targets_are_free():
    assert rotating_queue_ops(10, [1, 2, 3]) == 0


@pytest.mark.parametrize("seed", range(10))
def test_rotating_queue_bounded(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 50)
    targets = rng.sample(range(1, n + 1), rng.randint(1, n))
    bound = sum((n - popped) // 2 for popped in range(len(targets)))
    assert 0 <= rotating_queue_ops(n, targets) <= bound


def test_rotating_queue_unknown_target():
    with pytest.raises(ValueError):
        rotating_queue_ops(5, [6])


def test_common_pattern_differences():
    assert common_pattern(["config.sys", "config.inf", "configures"]) == "config????"


def test_common_pattern_identical_and_single():
    assert common_pattern(["abc.txt", "abc.txt"]) == "abc.txt"
    assert common_pattern(["only"]) == "only"


def test_common_pattern_errors():
    with pytest.raises(ValueError):
        common_pattern([])
    with pytest.raises(ValueError):
        common_pattern(["ab", "abc"])


def test_max_lit_rows_all_on():
    rows = ["111", "111", "111", "111"]
    assert max_lit_rows(rows, 0) == len(rows)
    assert max_lit_rows(rows, 2) == len(rows)
    assert max_lit_rows(rows, 1) == 0


def test_max_lit_rows_needs_enough_toggles():
    rows = ["000", "000", "101"]
    assert max_lit_rows(rows, 2) == 0
    assert max_lit_rows(rows, 3) == rows.count("000")