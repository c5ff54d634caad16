"""Solutions to a second batch of rating 900 problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, count
from math import gcd


def longest_divisor_interval(n: int) -> int:
    """Length of the longest run 1..r in which every number divides n."""
    if n == 0:
        raise ValueError("n must be non-zero")
    return next(x for x in count(1) if n % x != 0) - 1


def nearly_full_subsequences(values: Iterable[int]) -> int:
    """Number of subsequences whose sum is one less than the total."""
    items = list(values)
    zeros = items.count(0)
    ones = items.count(1)
    return (1 << zeros) * ones


def max_rotation_gain(values: Sequence[int]) -> int:
    """Largest last-minus-first difference after rotating one subsegment once."""
    if not values:
        raise ValueError("values must not be empty")
    n = len(values)
    first, last = values[0], values[-1]
    candidates = [values[i - 1] - values[i] for i in range(n)]
    candidates.extend(value - first for value in values[1:])
    candidates.extend(last - value for value in values[:-1])
    return max(candidates)


def can_make_progression(a: int, b: int, c: int) -> bool:
    """Whether multiplying one of a, b, c by a positive integer gives a progression."""
    if b - a == c - b:
        return True
    if (a + c) % (2 * b) == 0:
        return True
    if 2 * b - a > 0 and (2 * b - a) % c == 0:
        return True
    return 2 * b - c > 0 and (2 * b - c) % a == 0


def min_halving_operations(values: Sequence[int]) -> int | None:
    """Fewest halvings that make the array strictly increasing; None if impossible."""
    items = list(values)
    operations = 0
    for i in range(len(items) - 2, -1, -1):
        nxt = items[i + 1]
        while items[i] >= nxt and items[i] > 0:
            items[i] //= 2
            operations += 1
        if items[i] == nxt:
            return None
    return operations


def zero_out_operations(n: int) -> list[tuple[int, int]]:
    """Segment XOR operations (1-based, inclusive) that zero an array of length n."""
    if n < 1:
        raise ValueError("n must be positive")
    if n % 2 == 1:
        return [(1, n - 1), (1, n - 1), (n - 1, n), (n - 1, n)]
    return [(1, n), (1, n)]


def odd_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[bool]:
    """For each (l, r, k) query, whether setting positions l..r to k makes the sum odd."""
    prefix = list(accumulate(values, initial=0))
    total = prefix[-1]
    n = len(values)
    answers: list[bool] = []
    for left, right, k in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"query range {left}..{right} is outside 1..{n}")
        new_sum = prefix[left - 1] + (total - prefix[right]) + (right - left + 1) * k
        answers.append(new_sum % 2 != 0)
    return answers


def max_swap_distance(values: Iterable[int]) -> int:
    """Largest k such that swapping elements k apart can sort the permutation."""
    return reduce(
        gcd, (abs(value - position) for position, value in enumerate(values, 1)), 0
    )


def sum_attainable(n: int, k: int, x: int) -> bool:
    """Whether k distinct integers from 1..n can add up to x."""
    smallest = k * (k + 1) // 2
    largest = k * (2 * n - k + 1) // 2
    return smallest <= x <= largest