"""Solutions to a first batch of rating 1100 problems."""

from __future__ import annotations

from collections.abc import Sequence
from bisect import bisect_right

MOD = 10**9 + 7


def berries_needed(n: int) -> int:
    """Kilograms of berries needed to make n kilograms of jam."""
    return n * 2


def count_orders(a: Sequence[int], b: Sequence[int]) -> int:
    """Number of reorderings of a with a_i > b_i for every i, modulo 10^9 + 7."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    ascending = sorted(a)
    result = 1
    for placed, limit in enumerate(sorted(b, reverse=True)):
        larger = len(ascending) - bisect_right(ascending, limit)
        result = result * max(larger - placed, 0) % MOD
    return result


def max_truck_difference(weights: Sequence[int]) -> int:
    """Largest gap between the heaviest and lightest truck over all valid loads.

    Every truck size k from 1 to n - 1 that divides n is considered.
    """
    n = len(weights)
    best = 0
    for size in range(1, n):
        if n % size:
            continue
        loads = [sum(weights[start:start + size]) for start in range(0, n, size)]
        best = max(best, max(loads) - min(loads))
    return best


def collecting_game(values: Sequence[int]) -> list[int]:
    """For each element, how many others can be removed when starting from it."""
    ordered = sorted((value, index) for index, value in enumerate(values))
    answers = [0] * len(ordered)
    reach = -1
    total = 0
    for pos, (value, index) in enumerate(ordered):
        if reach < pos:
            total += value
            reach = pos
            while reach + 1 < len(ordered) and total >= ordered[reach + 1][0]:
                reach += 1
                total += ordered[reach][0]
        answers[index] = reach
    return answers


def count_erased_strings(s: str) -> int:
    """Number of distinct strings reachable by erasing the first or second letter."""
    seen: set[str] = set()
    total = 0
    n = len(s)
    for position, char in enumerate(s):
        if char not in seen:
            seen.add(char)
            total += n - position
    return total


def count_large_array_segments(values: Sequence[int], k: int, x: int) -> int:
    """Start positions in values repeated k times whose suffix sum is at least x."""
    total = sum(values)
    if k * total < x:
        return 0
    if total <= 0:
        raise ValueError("values must have a positive sum")
    count = 0
    prefix = 0
    for value in values:
        remaining = k * total - x - prefix
        prefix += value
        if remaining < 0:
            continue
        count += min(k, remaining // total + 1)
    return count