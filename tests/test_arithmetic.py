import itertools
from collections import Counter

import pytest

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


@pytest.mark.parametrize("a,b", [(1, 2), (-5, 9), (0, 0), (123456, -654321)])
def test_add_and_subtract_round_trip(a, b):
    assert subtract(add(a, b), b) == a
    assert add(a, b) == add(b, a)


def test_fibonacci_base_cases():
    assert fibonacci_calls(0) == (1, 0)
    assert fibonacci_calls(1) == (0, 1)


@pytest.mark.parametrize("n", range(2, 41))
def test_fibonacci_recurrence(n):
    z2, o2 = fibonacci_calls(n - 2)
    z1, o1 = fibonacci_calls(n - 1)
    assert fibonacci_calls(n) == (z2 + z1, o2 + o1)


@pytest.mark.parametrize("n", [-1, 41])
def test_fibonacci_out_of_range(n):
    with pytest.raises(ValueError):
        fibonacci_calls(n)


def test_divide():
    assert divide(7, 2) * 2 == pytest.approx(7)
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


@pytest.mark.parametrize("a", range(0, 25))
@pytest.mark.parametrize("b", range(1, 12))
def test_last_digit_matches_pow(a, b):
    expected = pow(a, b, 10) or 10
    assert last_digit_of_power(a, b) == expected


def test_last_digit_rejects_zero_exponent():
    with pytest.raises(ValueError):
        last_digit_of_power(3, 0)


@pytest.mark.parametrize("n", range(1, 31))
def test_binomial_pascal_and_row_sum(n):
    assert binomial(n, 0) == 1
    assert binomial(n, n) == 1
    for k in range(1, n):
        assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)
        assert binomial(n, k) == binomial(n, n - k)
    assert sum(binomial(n, k) for k in range(n + 1)) == 2**n


def test_binomial_invalid():
    with pytest.raises(ValueError):
        binomial(3, 4)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 99, 100, 1234, 10000])
def test_digit_frequencies_match_listing(n):
    counts = Counter("".join(str(i) for i in range(1, n + 1)))
    assert digit_frequencies(n) == [counts[str(d)] for d in range(10)]


@pytest.mark.parametrize("n,length", [(18, 2), (100, 3), (45, 2), (1000000000, 2), (7, 2)])
def test_consecutive_sum_properties(n, length):
    run = consecutive_sum(n, length)
    assert run is not None
    assert sum(run) == n
    assert length <= len(run) <= 100
    assert run[0] >= 0
    assert all(b - a == 1 for a, b in zip(run, run[1:]))
    for shorter in range(length, len(run)):
        rest = n - shorter * (shorter - 1) // 2
        assert rest < 0 or rest % shorter != 0


def test_consecutive_sum_none():
    assert consecutive_sum(1, 3) is None


def test_consecutive_sum_rejects_zero_length():
    with pytest.raises(ValueError):
        consecutive_sum(5, 0)


@pytest.mark.parametrize(
    "a,b",
    [([1, 1, 1, 6, 0], [2, 7, 8, 3, 1]), ([5, 15, 100, 31], [39, 0, 0, 3]), ([3], [4])],
)
def test_min_product_sum_is_minimal(a, b):
    best = min(sum(x * y for x, y in zip(a, perm)) for perm in itertools.permutations(b))
    assert min_product_sum(a, b) == best


def test_min_product_sum_length_mismatch():
    with pytest.raises(ValueError):
        min_product_sum([1, 2], [3])


@pytest.mark.parametrize("number", [24, 36, 97 * 97, 60])
def test_gcd_times_lcm_recovers_number(number):
    divisors = [d for d in range(2, number) if number % d == 0]
    assert gcd_times_lcm(divisors) == number


def test_gcd_times_lcm_empty():
    with pytest.raises(ValueError):
        gcd_times_lcm([])


@pytest.mark.parametrize("n", [1, 2, 3, 10, 1000])
@pytest.mark.parametrize("value", [1, 7])
def test_dice_uniform_faces(n, value):
    assert dice_visible_min(n, [value] * 6) == 5 * n * n * value


def test_dice_single_cube_hides_largest_face():
    dice = [1, 2, 3, 4, 5, 6]
    assert dice_visible_min(1, dice) == sum(dice) - max(dice)


def test_dice_cost_grows_with_n():
    dice = [3, 1, 4, 1, 5, 9]
    values = [dice_visible_min(n, dice) for n in range(1, 8)]
    assert values == sorted(values)


def test_dice_wrong_face_count():
    with pytest.raises(ValueError):
        dice_visible_min(2, [1, 2, 3])