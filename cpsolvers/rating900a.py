"""Solutions to a first batch of rating 900 problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise

_ENDINGS = ("00", "25", "50", "75")
_DIAGONALS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def balance_ab(s: str) -> str:
    """Make the counts of "ab" and "ba" equal by changing the first character."""
    if not s:
        raise ValueError("string must not be empty")
    return s[-1] + s[1:]


def clone_operations(values: Sequence[int]) -> int:
    """Minimum clone and swap operations to make one copy hold only equal values."""
    n = len(values)
    freq = max(Counter(values).values(), default=0)
    operations = 0
    while freq < n:
        moved = min(n - freq, freq)
        operations += 1 + moved
        freq += moved
    return operations


def min_removals_balanced(values: Sequence[int], k: int) -> int:
    """Fewest removals so that, once sorted, neighbouring values differ by at most k."""
    if not values:
        raise ValueError("values must not be empty")
    if len(values) == 1:
        return 0
    ordered = sorted(values)
    longest = current = 1
    for left, right in pairwise(ordered):
        if right - left <= k:
            current += 1
        else:
            longest = max(longest, current)
            current = 1
    longest = max(longest, current)
    return len(ordered) - longest


def can_form_palindrome_after_removal(s: str, k: int) -> bool:
    """Whether removing k characters lets the rest be rearranged into a palindrome."""
    odd_count = sum(1 for count in Counter(s).values() if count % 2 != 0)
    return odd_count <= k + 1


def comparison_string_cost(s: str) -> int:
    """Minimum number of distinct values an array compatible with s needs."""
    if not s:
        raise ValueError("string must not be empty")
    longest = current = 1
    for previous, char in pairwise(s):
        current = current + 1 if char == previous else 1
        longest = max(longest, current)
    return longest + 1


def deletive_editing_possible(s: str, t: str) -> bool:
    """Whether t can be obtained from s by deleting first occurrences of letters."""
    remaining = Counter(t)
    kept: list[str] = []
    for char in reversed(s):
        if remaining[char]:
            kept.append(char)
            remaining[char] -= 1
    return "".join(reversed(kept)) == t


def _deletions_for_ending(s: str, ending: str) -> int | None:
    deletions = 0
    pos = len(s) - 1
    for target in reversed(ending):
        while pos >= 0 and s[pos] != target:
            pos -= 1
            deletions += 1
        if pos < 0:
            return None
        pos -= 1
    # The deletions counted past the last matched digit are not needed.
    return deletions


def min_deletions_divisible_by_25(s: str) -> int | None:
    """Fewest digit deletions that leave a number divisible by 25; None if impossible."""
    candidates = [
        cost
        for cost in (_deletions_for_ending(s, ending) for ending in _ENDINGS)
        if cost is not None
    ]
    return min(candidates, default=None)


def _knight_targets(a: int, b: int, x: int, y: int) -> set[tuple[int, int]]:
    targets: set[tuple[int, int]] = set()
    for dx, dy in _DIAGONALS:
        targets.add((x + dx * a, y + dy * b))
        targets.add((x + dx * b, y + dy * a))
    return targets


def fork_positions(
    a: int, b: int, king: tuple[int, int], queen: tuple[int, int]
) -> set[tuple[int, int]]:
    """Cells from which an (a, b) knight attacks both the king and the queen."""
    return _knight_targets(a, b, *king) & _knight_targets(a, b, *queen)


def jellyfish_timer(a: int, b: int, tools: Iterable[int]) -> int:
    """Longest time before the bomb, with timer limit a and starting value b."""
    return b + sum(min(a - 1, tool) for tool in tools)