import pytest

from probset.matching import (
    BipartiteGraph,
    HopcroftKarpMatching,
    is_prime,
    max_students,
    prime_pairs,
)


def _complete(left, right):
    graph = BipartiteGraph(left, right)
    for i in range(left):
        for j in range(right):
            graph.add_edge(i, j)
    return graph


@pytest.mark.parametrize("left,right", [(3, 4), (5, 2), (1, 1), (4, 4)])
def test_complete_graph_matches_smaller_side(left, right):
    assert HopcroftKarpMatching(_complete(left, right)).match() == min(left, right)


def test_augmenting_path_is_found():
    graph = BipartiteGraph(2, 2)
    graph.add_edge(0, 0)
    graph.add_edge(0, 1)
    graph.add_edge(1, 0)
    assert HopcroftKarpMatching(graph).match() == graph.size_left


def test_match_bounded_by_edges_to_single_right_node():
    graph = BipartiteGraph(4, 3)
    for i in range(4):
        graph.add_edge(i, 2)
    result = HopcroftKarpMatching(graph).match()
    assert result <= 1
    assert result >= 1


def test_repeated_match_is_stable():
    matching = HopcroftKarpMatching(_complete(3, 3))
    first = matching.match()
    assert matching.match() == first


def test_add_edge_out_of_range():
    graph = BipartiteGraph(2, 2)
    with pytest.raises(IndexError):
        graph.add_edge(2, 0)
    with pytest.raises(IndexError):
        graph.add_edge(0, -1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BipartiteGraph(-1, 2)


@pytest.mark.parametrize(
    "grid,expected",
    [
        (["...", "..."], 4),
        (["x.x", "xxx"], 1),
    ],
)
def test_max_students_examples(grid, expected):
    assert max_students(grid) == expected


def test_max_students_without_conflicts_uses_every_seat():
    grid = [".x.x.", ".x.x.", "xxxx."]
    assert max_students(grid) == sum(row.count(".") for row in grid)


def test_max_students_all_broken():
    grid = ["xxx", "xxx"]
    assert max_students(grid) == sum(row.count(".") for row in grid)


@pytest.mark.parametrize("grid", [["...."], ["..", ".."], ["x..x", "....", ".x.."]])
def test_max_students_bounds(grid):
    seats = sum(row.count(".") for row in grid)
    result = max_students(grid)
    assert (seats + 1) // 2 <= result <= seats


def test_max_students_ragged_grid():
    with pytest.raises(ValueError):
        max_students(["...", ".."])


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97, 7919])
def test_is_prime_true(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-3, 0, 1, 4, 9, 15, 91, 7917])
def test_is_prime_false(n):
    assert is_prime(n) is False


def test_prime_pairs_example():
    assert prime_pairs([1, 4, 7, 10, 11, 12]) == [4, 10]


def test_prime_pairs_partners_form_primes():
    numbers = [1, 4, 7, 10, 11, 12]
    result = prime_pairs(numbers)
    assert result == sorted(result)
    assert all(is_prime(numbers[0] + p) for p in result)
    assert all(p in numbers[1:] for p in result)


def test_prime_pairs_unbalanced_parity():
    assert prime_pairs([1, 3, 4, 5]) == []


def test_prime_pairs_empty_rejected():
    with pytest.raises(ValueError):
        prime_pairs([])