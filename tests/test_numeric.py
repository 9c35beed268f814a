from math import prod

import pytest

from algokit.numeric import (
    INT_MAX,
    INT_MIN,
    coin_change,
    coin_change_ways,
    divide,
    factorize,
    is_prime,
    min_eating_speed,
    smallest_balanced_index,
)


@pytest.mark.parametrize(
    "n, expected",
    [(10, False), (15, False), (60, False), (97, True), (100, False), (2, True), (1, False), (0, False), (-7, False)],
)
def test_is_prime(n, expected):
    assert is_prime(n) is expected


@pytest.mark.parametrize("n", range(2, 300))
def test_factorize_invariants(n):
    factors = factorize(n)
    assert prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(f) for f in factors)


def test_factorize_prime_and_one():
    assert factorize(97) == [97]
    assert factorize(1) == []


def test_coin_change_source_example():
    assert coin_change([1, 2, 5], 11) == 3


def test_coin_change_single_coin_amounts():
    coins = [1, 2, 5]
    for coin in coins:
        assert coin_change(coins, coin) == 1
    assert coin_change(coins, 0) == 0


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_bounded_by_unit_coins():
    coins = [1, 3, 4]
    for amount in range(30):
        assert coin_change(coins, amount) <= amount


def test_coin_change_rejects_bad_coins():
    with pytest.raises(ValueError):
        coin_change([], 5)
    with pytest.raises(ValueError):
        coin_change([0, 1], 5)


def test_coin_change_ways_source_example():
    assert coin_change_ways(5, [1, 2, 5]) == 4


def test_coin_change_ways_single_coin():
    for amount in range(20):
        assert coin_change_ways(amount, [3]) == (1 if amount % 3 == 0 else 0)


def test_coin_change_ways_zero_amount():
    assert coin_change_ways(0, [2, 7]) == 1


def test_coin_change_ways_agrees_with_feasibility():
    coins = [4, 6]
    for amount in range(40):
        assert (coin_change_ways(amount, coins) > 0) == (coin_change(coins, amount) != -1)


@pytest.mark.parametrize(
    "dividend, divisor",
    [(22, 3), (-22, 3), (22, -3), (-22, -3), (7, 7), (0, 5), (1, 2), (100, 1), (INT_MAX, 2)],
)
def test_divide_truncates_toward_zero(dividend, divisor):
    q = divide(dividend, divisor)
    remainder = dividend - q * divisor
    assert abs(remainder) < abs(divisor)
    assert remainder == 0 or (remainder > 0) == (dividend > 0)


def test_divide_clamps_overflow():
    assert divide(INT_MIN, -1) == INT_MAX
    assert divide(INT_MIN, 1) == INT_MIN


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)


@pytest.mark.parametrize(
    "piles, h",
    [([11, 3, 7, 6], 8), ([3, 6, 7, 11], 10), ([30, 11, 23, 4, 20], 6), ([1], 5)],
)
def test_min_eating_speed_is_minimal(piles, h):
    speed = min_eating_speed(piles, h)
    assert 1 <= speed <= max(piles)
    assert sum(-(-p // speed) for p in piles) <= h
    if speed > 1:
        assert sum(-(-p // (speed - 1)) for p in piles) > h


def test_min_eating_speed_tight_hours():
    piles = [11, 3, 7, 6]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_empty():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)


def test_smallest_balanced_index_source_example():
    assert smallest_balanced_index([2, 1, 2]) == 1


def test_smallest_balanced_index_none():
    assert smallest_balanced_index([1]) == -1