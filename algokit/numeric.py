"""Number routines: primes, coin change, division, search and balance."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def is_prime(n: int) -> bool:
    """Return True if n is prime."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def factorize(n: int) -> list[int]:
    """Return the prime factors of n in non-decreasing order."""
    factors: list[int] = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def _check_coins(coins: Sequence[int]) -> None:
    if not coins:
        raise ValueError("at least one coin is required")
    if any(c <= 0 for c in coins):
        raise ValueError("coin values must be positive")


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins that make up amount, or -1 if it cannot be made."""
    _check_coins(coins)
    unreachable = float("inf")
    best = [unreachable] * (amount + 1)
    best[0] = 0
    for coin in coins:
        for a in range(coin, amount + 1):
            if best[a - coin] + 1 < best[a]:
                best[a] = best[a - coin] + 1
    return -1 if best[amount] == unreachable else int(best[amount])


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Return the number of coin combinations that make up amount."""
    _check_coins(coins)
    ways = [0] * (amount + 1)
    ways[0] = 1
    for coin in coins:
        for a in range(coin, amount + 1):
            ways[a] += ways[a - coin]
    return ways[amount]


def divide(dividend: int, divisor: int) -> int:
    """Divide without '/' or '*', truncating toward zero and clamping to 32 bits."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining >= step << (shift + 1):
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    result = -quotient if negative else quotient
    return max(INT_MIN, min(INT_MAX, result))


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest eating speed that finishes all piles within h hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def smallest_balanced_index(nums: Sequence[int]) -> int:
    """Return the first index whose left sum equals the product to its right, or -1."""
    n = len(nums)
    suffix_products = [1] * n
    for i in range(n - 2, -1, -1):
        suffix_products[i] = suffix_products[i + 1] * nums[i + 1]
    prefix_sums = accumulate(nums, initial=0)
    for i, (left, right) in enumerate(zip(prefix_sums, suffix_products)):
        if left == right:
            return i
    return -1