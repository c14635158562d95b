"""Command line front end: read a problem's input and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from probset.arithmetic import (
    add,
    binomial,
    consecutive_sum,
    dice_visible_min,
    digit_frequencies,
    divide,
    fibonacci_calls,
    gcd_times_lcm,
    last_digit_of_power,
    min_product_sum,
    subtract,
)
from probset.base36 import max_base36_sum
from probset.digits import (
    count_square_free,
    max_after_swaps,
    next_same_weight,
    next_with_distinct_digits,
    nth_decreasing,
)
from probset.dynamic import build_time, min_squads, parenthesis_string
from probset.flow import match_table
from probset.geometry import (
    boundary_crossings,
    most_visible_buildings,
    spiral_grid,
    travel_steps,
    turret_positions,
)
from probset.grid import count_worm_groups, fractal_plane, largest_diamond, max_square_number
from probset.matching import max_students, prime_pairs
from probset.search import max_art_owners, min_puzzle_moves, min_vector_sum
from probset.sequences import count_protein_sequences, split_teams
from probset.sets import cocktail_masses, liar_parties
from probset.text import (
    common_pattern,
    is_signal_pattern,
    max_lit_rows,
    min_repaint,
    rotating_queue_ops,
    sort_permutation,
)


class _Tokens:
    """Whitespace separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]


_Solver = Callable[[_Tokens], str]
_SOLVERS: dict[int, _Solver] = {}


def _problem(number: int) -> Callable[[_Solver], _Solver]:
    def register(func: _Solver) -> _Solver:
        _SOLVERS[number] = func
        return func

    return register


def _per_case(tokens: _Tokens, solve_one: Callable[[_Tokens], object]) -> str:
    count = tokens.integer()
    return "".join(f"{solve_one(tokens)}\n" for _ in range(count))


@_problem(1000)
def _sum(tokens: _Tokens) -> str:
    return str(add(tokens.integer(), tokens.integer()))


@_problem(1001)
def _difference(tokens: _Tokens) -> str:
    return str(subtract(tokens.integer(), tokens.integer()))


@_problem(1002)
def _turrets(tokens: _Tokens) -> str:
    return _per_case(tokens, lambda t: turret_positions(*t.integers(6)))


@_problem(1003)
def _fibonacci(tokens: _Tokens) -> str:
    return _per_case(tokens, lambda t: " ".join(map(str, fibonacci_calls(t.integer()))))


@_problem(1004)
def _little_prince(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> int:
        sx, sy, ex, ey = t.integers(4)
        circles = [tuple(t.integers(3)) for _ in range(t.integer())]
        return boundary_crossings((sx, sy), (ex, ey), circles)

    return _per_case(tokens, one)


@_problem(1005)
def _build_order(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> int:
        buildings, rule_count = t.integers(2)
        times = t.integers(buildings)
        rules = [tuple(t.integers(2)) for _ in range(rule_count)]
        return build_time(times, rules, t.integer())

    return _per_case(tokens, one)


@_problem(1006)
def _squads(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> int:
        sectors, units = t.integers(2)
        inner = t.integers(sectors)
        outer = t.integers(sectors)
        return min_squads(units, inner, outer)

    return _per_case(tokens, one)


@_problem(1007)
def _vectors(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> str:
        points = [tuple(t.integers(2)) for _ in range(t.integer())]
        return f"{min_vector_sum(points):.10f}"

    return _per_case(tokens, one)


@_problem(1008)
def _quotient(tokens: _Tokens) -> str:
    return f"{divide(tokens.integer(), tokens.integer()):.15g}\n"


@_problem(1009)
def _last_digit(tokens: _Tokens) -> str:
    return _per_case(tokens, lambda t: last_digit_of_power(*t.integers(2)))


@_problem(1010)
def _bridges(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> int:
        west, east = t.integers(2)
        return binomial(east, west)

    return _per_case(tokens, one)


@_problem(1011)
def _travel(tokens: _Tokens) -> str:
    return _per_case(tokens, lambda t: travel_steps(*t.integers(2)))


@_problem(1012)
def _worms(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> int:
        width, height, count = t.integers(3)
        cabbages = [tuple(t.integers(2)) for _ in range(count)]
        return count_worm_groups(width, height, cabbages)

    return _per_case(tokens, one)


@_problem(1013)
def _signals(tokens: _Tokens) -> str:
    return _per_case(tokens, lambda t: "YES" if is_signal_pattern(t.word()) else "NO")


@_problem(1014)
def _exam(tokens: _Tokens) -> str:
    def one(t: _Tokens) -> int:
        height, _width = t.integers(2)
        return max_students(t.words(height))

    return _per_case(tokens, one)


@_problem(1015)
def _permutation(tokens: _Tokens) -> str:
    values = tokens.integers(tokens.integer())
    return "".join(f"{p} " for p in sort_permutation(values))


@_problem(1016)
def _square_free(tokens: _Tokens) -> str:
    return f"{count_square_free(tokens.integer(), tokens.integer())}\n"


@_problem(1017)
def _prime_pairs(tokens: _Tokens) -> str:
    partners = prime_pairs(tokens.integers(tokens.integer()))
    return " ".join(map(str, partners)) + "\n" if partners else "-1\n"


@_problem(1018)
def _chessboard(tokens: _Tokens) -> str:
    height, _width = tokens.integers(2)
    return f"{min_repaint(tokens.words(height))}\n"


@_problem(1019)
def _page_digits(tokens: _Tokens) -> str:
    return " ".join(map(str, digit_frequencies(tokens.integer()))) + "\n"


@_problem(1020)
def _digital_counter(tokens: _Tokens) -> str:
    return f"{next_same_weight(tokens.word())}\n"


@_problem(1021)
def _rotating_queue(tokens: _Tokens) -> str:
    size, count = tokens.integers(2)
    return f"{rotating_queue_ops(size, tokens.integers(count))}\n"


@_problem(1022)
def _spiral(tokens: _Tokens) -> str:
    return spiral_grid(*tokens.integers(4))


@_problem(1023)
def _brackets(tokens: _Tokens) -> str:
    result = parenthesis_string(tokens.integer(), tokens.integer())
    return "-1\n" if result is None else result + "\n"


@_problem(1024)
def _consecutive(tokens: _Tokens) -> str:
    run = consecutive_sum(tokens.integer(), tokens.integer())
    return "-1\n" if run is None else " ".join(map(str, run)) + "\n"


@_problem(1025)
def _squares(tokens: _Tokens) -> str:
    rows, _columns = tokens.integers(2)
    return f"{max_square_number(tokens.words(rows))}\n"


@_problem(1026)
def _treasure(tokens: _Tokens) -> str:
    count = tokens.integer()
    a = tokens.integers(count)
    b = tokens.integers(count)
    return f"{min_product_sum(a, b)}\n"


@_problem(1027)
def _skyline(tokens: _Tokens) -> str:
    return f"{most_visible_buildings(tokens.integers(tokens.integer()))}\n"


@_problem(1028)
def _diamond(tokens: _Tokens) -> str:
    rows, _columns = tokens.integers(2)
    return f"{largest_diamond(tokens.words(rows))}\n"


@_problem(1029)
def _art(tokens: _Tokens) -> str:
    return f"{max_art_owners(tokens.words(tokens.integer()))}\n"


@_problem(1030)
def _fractal(tokens: _Tokens) -> str:
    return "".join(f"{row}\n" for row in fractal_plane(*tokens.integers(7)))


@_problem(1031)
def _match_table(tokens: _Tokens) -> str:
    first, second = tokens.integers(2)
    table = match_table(tokens.integers(first), tokens.integers(second))
    return "-1\n" if table is None else "".join(f"{row}\n" for row in table)


@_problem(1032)
def _prompt(tokens: _Tokens) -> str:
    return common_pattern(tokens.words(tokens.integer())) + "\n"


@_problem(1033)
def _cocktail(tokens: _Tokens) -> str:
    count = tokens.integer()
    ratios = [tuple(tokens.integers(4)) for _ in range(count - 1)]
    return "".join(f"{m} " for m in cocktail_masses(count, ratios))


@_problem(1034)
def _lamps(tokens: _Tokens) -> str:
    rows, _columns = tokens.integers(2)
    lines = tokens.words(rows)
    return str(max_lit_rows(lines, tokens.integer()))


@_problem(1035)
def _puzzle(tokens: _Tokens) -> str:
    moves = min_puzzle_moves(tokens.words(5))
    return "" if moves is None else str(moves)


@_problem(1036)
def _base36(tokens: _Tokens) -> str:
    numbers = tokens.words(tokens.integer())
    return max_base36_sum(numbers, tokens.integer()) + "\n"


@_problem(1037)
def _divisors(tokens: _Tokens) -> str:
    return str(gcd_times_lcm(tokens.integers(tokens.integer())))


@_problem(1038)
def _decreasing(tokens: _Tokens) -> str:
    result = nth_decreasing(tokens.integer())
    return "-1" if result is None else str(result)


@_problem(1039)
def _swaps(tokens: _Tokens) -> str:
    result = max_after_swaps(tokens.integer(), tokens.integer())
    return "-1" if result is None else str(result)


@_problem(1040)
def _distinct_digits(tokens: _Tokens) -> str:
    return str(next_with_distinct_digits(tokens.integer(), tokens.integer()))


@_problem(1041)
def _dice(tokens: _Tokens) -> str:
    size = tokens.integer()
    return str(dice_visible_min(size, tokens.integers(6)))


@_problem(1042)
def _protein(tokens: _Tokens) -> str:
    dna = tokens.word()
    table = [tuple(tokens.words(2)) for _ in range(tokens.integer())]
    return str(count_protein_sequences(dna, table))


@_problem(1043)
def _liar(tokens: _Tokens) -> str:
    people, party_count = tokens.integers(2)
    truth = tokens.integers(tokens.integer())
    parties = [tokens.integers(tokens.integer()) for _ in range(party_count)]
    return str(liar_parties(people, truth, parties))


@_problem(1044)
def _teams(tokens: _Tokens) -> str:
    count = tokens.integer()
    a = tokens.integers(count)
    b = tokens.integers(count)
    return " ".join(map(str, split_teams(a, b))) + "\n"


def solve(problem: int | str, text: str) -> str:
    """Return the output of `problem` for the input `text`."""
    try:
        number = int(problem)
    except ValueError:
        raise ValueError(f"unknown problem {problem!r}") from None
    solver = _SOLVERS.get(number)
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return solver(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one problem, reading its input from a file or standard input."""
    parser = argparse.ArgumentParser(prog="probset", description="Solve a numbered problem.")
    parser.add_argument("problem", type=int, help="problem number")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for standard input")
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solve(args.problem, text)
    except (OSError, ValueError) as error:
        print(f"probset: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0