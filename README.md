# probset

Solutions to a numbered set of algorithmic problems (1000 to 1044). Each solution
is a plain Python function, and one command-line tool can run any of them on a
problem's input.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## The command

`probset` takes a problem number and, optionally, the path of an input file.
Without a file, or with `-`, it reads the input from standard input. It prints
the answer in the problem's output format.

```
echo "1 2" | probset 1000
probset 1022 input.txt
```

An unknown problem number, malformed input or an unreadable file makes the
command print `probset: <message>` to standard error and exit with status 1.

## Library use

The solutions can also be called as functions, grouped by topic:

| Module               | Covers                                                            |
|----------------------|-------------------------------------------------------------------|
| `probset.arithmetic` | sums, powers, binomials, digit counts, gcd and lcm, dice          |
| `probset.geometry`   | circle intersections, boundary crossings, spirals, visible roofs  |
| `probset.text`       | signal patterns, sort permutations, board repaints, queues, masks |
| `probset.matching`   | `BipartiteGraph`, `HopcroftKarpMatching`, exam seating, prime pairs |
| `probset.flow`       | lexicographically first match table under row and column totals   |
| `probset.sets`       | `DisjointSet`, cocktail ratios, parties with liars                |
| `probset.dynamic`    | build orders, squad placement, bracket strings                    |
| `probset.grid`       | connected patches, square numbers, diamonds, fractal planes       |
| `probset.search`     | vector matching, art trading, puzzle moves                        |
| `probset.digits`     | square-free counts, digital counters, digit rearrangements        |
| `probset.base36`     | `Base36` numbers and the greatest sum after digit replacements    |
| `probset.sequences`  | protein sequences from DNA, splitting teams evenly                |
| `probset.cli`        | `solve(problem, text)` and the `main` entry point                 |

```python
from probset.arithmetic import binomial, gcd_times_lcm
from probset.matching import prime_pairs

binomial(5, 2)          # 10
gcd_times_lcm([4, 6])   # 24
prime_pairs([1, 4, 7, 10, 11, 12])
```

Functions raise `ValueError` (or `IndexError` for out-of-range nodes and
elements) on input they cannot work with. Where a problem may have no answer,
the function returns `None` or an empty list rather than a sentinel number;
the command turns that back into the problem's own output, such as `-1`.

`probset.cli.solve(problem, text)` returns the formatted output for a problem
number and its input text, without going through standard input.

## Running the tests

```
pytest
```