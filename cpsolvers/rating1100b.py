"""Solutions to a second batch of rating 1100 problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, pairwise

_AQUARIUM_CEILING = 10**10
_CARDBOARD_CEILING = 10**9


def maximum_sum(values: Sequence[int], k: int) -> int:
    """Largest remaining sum after k operations.

    Each operation removes either the two smallest values or the largest one.
    """
    n = len(values)
    if k < 0 or 2 * k > n:
        raise ValueError("k must satisfy 0 <= 2k <= len(values)")
    prefix = list(accumulate(sorted(values), initial=0))
    best = 0
    for pairs_removed in range(k + 1):
        kept = prefix[n - (k - pairs_removed)] - prefix[2 * pairs_removed]
        best = max(best, kept)
    return best


def widest_sorted_subarray(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Widest 1-based range (l, r) whose sorting turns a into b."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    n = len(a)
    differing = [i for i, (x, y) in enumerate(zip(a, b)) if x != y]
    if not differing:
        raise ValueError("a and b must differ somewhere")
    left, right = differing[0], differing[-1]
    while left > 0 and a[left - 1] <= b[left]:
        left -= 1
    while right < n - 1 and a[right + 1] >= b[right]:
        right += 1
    return left + 1, right + 1


def max_quest_experience(first: Sequence[int], repeat: Sequence[int], k: int) -> int:
    """Most experience from k quest completions.

    Quest i pays first[i] the first time and repeat[i] afterwards, and may only
    be started once every earlier quest has been completed.
    """
    if len(first) != len(repeat):
        raise ValueError("first and repeat must have the same length")
    best = 0
    gained = 0
    best_repeat = 0
    for done, (once, again) in enumerate(zip(first[:k], repeat[:k]), start=1):
        gained += once
        best_repeat = max(best_repeat, again)
        best = max(best, gained + best_repeat * (k - done))
    return best


def max_alternating_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty subarray whose neighbours alternate in parity."""
    if not values:
        raise ValueError("values must not be empty")
    first = values[0]
    best = first
    lowest_prefix = min(0, first)
    running = first
    for previous, value in pairwise(values):
        if previous % 2 == value % 2:
            lowest_prefix = 0
            running = 0
        running += value
        best = max(best, running - lowest_prefix)
        lowest_prefix = min(lowest_prefix, running)
    return best


def _water_needed(heights: Sequence[int], level: int) -> int:
    return sum(level - height for height in heights if height < level)


def max_aquarium_height(heights: Sequence[int], x: int) -> int:
    """Highest water level reachable with at most x units of water."""
    low, high = 0, _AQUARIUM_CEILING
    while low < high - 1:
        mid = (low + high) // 2
        if _water_needed(heights, mid) > x:
            high = mid
        else:
            low = mid
    return low


def cardboard_width(sizes: Sequence[int], c: int) -> int | None:
    """Border width w with sum((s + 2w)^2) equal to c; None when there is none."""
    low, high = 1, _CARDBOARD_CEILING
    while low <= high:
        mid = low + (high - low) // 2
        area = 0
        for size in sizes:
            area += (size + 2 * mid) ** 2
            if area > c:
                break
        if area == c:
            return mid
        if area > c:
            high = mid - 1
        else:
            low = mid + 1
    return None


def stable_descending_order(values: Sequence[int]) -> list[int]:
    """Indices ordered by descending value, equal values keeping their order."""
    return sorted(range(len(values)), key=values.__getitem__, reverse=True)