"""Command line runner that answers problems in their judge input format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cpsolvers.rating1100a import berries_needed
from cpsolvers.rating1100b import (
    cardboard_width,
    max_alternating_sum,
    max_aquarium_height,
    max_quest_experience,
    maximum_sum,
    widest_sorted_subarray,
)

Tokens = Iterator[str]


def _ints(tokens: Tokens, count: int) -> list[int]:
    try:
        return [int(next(tokens)) for _ in range(count)]
    except StopIteration:
        raise ValueError("input ended early") from None


def _cloudberry_jam(tokens: Tokens) -> list[str]:
    (n,) = _ints(tokens, 1)
    return [str(berries_needed(n))]


def _maximum_sum(tokens: Tokens) -> list[str]:
    n, k = _ints(tokens, 2)
    return [str(maximum_sum(_ints(tokens, n), k))]


def _sort_the_subarray(tokens: Tokens) -> list[str]:
    (n,) = _ints(tokens, 1)
    a = _ints(tokens, n)
    b = _ints(tokens, n)
    left, right = widest_sorted_subarray(a, b)
    return [f"{left} {right}"]


def _quests(tokens: Tokens) -> list[str]:
    n, k = _ints(tokens, 2)
    first = _ints(tokens, n)
    repeat = _ints(tokens, n)
    return [str(max_quest_experience(first, repeat, k))]


def _yarik_and_array(tokens: Tokens) -> list[str]:
    (n,) = _ints(tokens, 1)
    return [str(max_alternating_sum(_ints(tokens, n)))]


def _building_an_aquarium(tokens: Tokens) -> list[str]:
    n, x = _ints(tokens, 2)
    return [str(max_aquarium_height(_ints(tokens, n), x))]


def _cardboard_for_pictures(tokens: Tokens) -> list[str]:
    n, c = _ints(tokens, 2)
    width = cardboard_width(_ints(tokens, n), c)
    return [] if width is None else [str(width)]


PROBLEMS: dict[str, Callable[[Tokens], list[str]]] = {
    "cloudberry-jam": _cloudberry_jam,
    "maximum-sum": _maximum_sum,
    "sort-the-subarray": _sort_the_subarray,
    "quests": _quests,
    "yarik-and-array": _yarik_and_array,
    "building-an-aquarium": _building_an_aquarium,
    "cardboard-for-pictures": _cardboard_for_pictures,
}


def run(problem: str, text: str) -> str:
    """Answer every test case in text for the named problem."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    tokens = iter(text.split())
    (cases,) = _ints(tokens, 1)
    lines: list[str] = []
    for _ in range(cases):
        lines.extend(handler(tokens))
    return "".join(f"{line}\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="cpsolvers")
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())