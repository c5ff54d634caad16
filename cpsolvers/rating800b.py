"""Solutions to a second batch of entry-level (rating 800) problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, pairwise
from math import gcd, prod

_GRID_SIZE = 10


def balanced_twos_index(values: Sequence[int]) -> int | None:
    """Smallest k with as many twos among the first k values as among the rest.

    Returns 1 when no value is two, and None when no such k exists.
    """
    total = sum(1 for value in values if value == 2)
    if total == 0:
        return 1
    prefix_counts = accumulate((1 if value == 2 else 0 for value in values), initial=0)
    for k, left in enumerate(prefix_counts):
        if k >= len(values):
            break
        if left == total - left:
            return k
    return None


def min_tank_volume(stations: Sequence[int], x: int) -> int:
    """Smallest tank that allows the round trip from 0 to x and back."""
    positions = [0, *stations]
    longest = max((right - left for left, right in pairwise(positions)), default=0)
    last = positions[-1]
    return max(0, longest, 2 * (x - last))


def equal_product_split(values: Sequence[int]) -> int | None:
    """Smallest k in 1..n-1 where the product of the first k values equals the rest."""
    suffixes = list(accumulate(reversed(values), lambda acc, value: acc * value))
    suffixes.reverse()
    prefix = 1
    for k, value in enumerate(values[:-1], start=1):
        prefix *= value
        if prefix == suffixes[k]:
            return k
    return None


def pad_to_nondecreasing(values: Iterable[int]) -> list[int]:
    """Insert a one before every value that is smaller than its predecessor."""
    result: list[int] = []
    for value in values:
        if result and result[-1] > value:
            result.append(1)
        result.append(value)
    return result


def has_small_gcd_pair(values: Sequence[int]) -> bool:
    """Whether some pair of values has a greatest common divisor of at most two."""
    return any(gcd(left, right) <= 2 for left, right in combinations(values, 2))


def subsegment_possible(values: Sequence[int], k: int) -> bool:
    """Whether k can be made the most frequent element of some subsegment."""
    if not values:
        raise ValueError("values must not be empty")
    return k in values


def _ring_score(row: int, column: int) -> int:
    last = _GRID_SIZE - 1
    return min(row, column, last - row, last - column) + 1


def target_score(rows: Iterable[str]) -> int:
    """Total points of the arrows marked 'X' on a 10 by 10 target."""
    grid = [row.strip() for row in rows]
    if len(grid) != _GRID_SIZE or any(len(row) != _GRID_SIZE for row in grid):
        raise ValueError("target must be 10 rows of 10 cells")
    return sum(
        _ring_score(i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == "X"
    )


def twin_permutation(values: Sequence[int]) -> list[int]:
    """Permutation b with a_i + b_i equal to n + 1 for every i."""
    n = len(values)
    return [n + 1 - value for value in values]


def unit_array_operations(values: Sequence[int]) -> int:
    """Minimum sign flips so the sum is non-negative and the product is one."""
    total = sum(values)
    negatives = sum(1 for value in values if value == -1)
    flips = (-total + 1) // 2 if total < 0 else 0
    if (negatives - flips) & 1:
        flips += 1
    return flips


def split_non_divisible(values: Sequence[int]) -> tuple[list[int], list[int]] | None:
    """Split into two non-empty groups where no value of one divides one of the other.

    The first group holds every copy of the minimum. Returns None when all
    values are equal.
    """
    if not values:
        raise ValueError("values must not be empty")
    ordered = sorted(values)
    smallest = ordered[0]
    if ordered[-1] == smallest:
        return None
    cut = next(i for i, value in enumerate(ordered) if value != smallest)
    return ordered[:cut], ordered[cut:]


def walking_moves(a: int, b: int, c: int, d: int) -> int | None:
    """Moves from (a, b) to (c, d) using up-right and left steps; None if unreachable."""
    if b <= d and c <= a + d - b:
        return (d - b) + (a + d - b - c)
    return None