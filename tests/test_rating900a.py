import pytest

from cpsolvers.rating900a import (
    balance_ab,
    can_form_palindrome_after_removal,
    clone_operations,
    comparison_string_cost,
    deletive_editing_possible,
    fork_positions,
    jellyfish_timer,
    min_deletions_divisible_by_25,
    min_removals_balanced,
)


@pytest.mark.parametrize("s", ["b", "aabbbabaa", "abbb", "abbaab", "ba"])
def test_balance_ab_counts_equal(s):
    result = balance_ab(s)
    assert len(result) == len(s)
    assert result[1:] == s[1:]
    pairs = [result[i : i + 2] for i in range(len(result) - 1)]
    assert pairs.count("ab") == pairs.count("ba")


def test_balance_ab_empty():
    with pytest.raises(ValueError):
        balance_ab("")


def test_clone_operations_all_equal():
    assert clone_operations([7, 7, 7]) == 0


@pytest.mark.parametrize("values", [[0, 1, 3, 3, 7, 0], [1, 2, 3, 4], [5, 5, 1]])
def test_clone_operations_lower_bound(values):
    freq = max(values.count(v) for v in values)
    result = clone_operations(values)
    assert result >= len(values) - freq
    assert result >= 1


def test_min_removals_single():
    assert min_removals_balanced([42], 0) == 0


def test_min_removals_large_k_and_distinct():
    values = [1, 10, 100, 1000]
    assert min_removals_balanced(values, 10**6) == 0
    assert min_removals_balanced(values, 0) == len(values) - 1


def test_min_removals_bounds():
    result = min_removals_balanced([5, 1, 2, 20, 21, 22, 23], 1)
    assert 0 <= result <= 6


def test_min_removals_empty():
    with pytest.raises(ValueError):
        min_removals_balanced([], 3)


def test_palindrome_removing_everything():
    assert can_form_palindrome_after_removal("abcdef", 6)


def test_palindrome_threshold_in_k():
    # Seven distinct letters: seven odd counts, so k must reach 6.
    s = "abcdefg"
    results = [can_form_palindrome_after_removal(s, k) for k in range(len(s) + 1)]
    assert results == [False] * 6 + [True] * 2


def test_palindrome_single_letter_string():
    assert can_form_palindrome_after_removal("aaaaa", 0)


def test_comparison_cost_single_run():
    s = "<<<<"
    assert comparison_string_cost(s) == len(s) + 1


@pytest.mark.parametrize("s", ["<>", "<<>>><", ">", "<><><>"])
def test_comparison_cost_bounds(s):
    result = comparison_string_cost(s)
    assert 2 <= result <= len(s) + 1


def test_comparison_cost_empty():
    with pytest.raises(ValueError):
        comparison_string_cost("")


def test_deletive_editing_suffix_works():
    s = "DEINSTITUTIONALIZATION"
    for m in range(len(s) + 1):
        assert deletive_editing_possible(s, s[len(s) - m :])


def test_deletive_editing_missing_letter():
    assert not deletive_editing_possible("ABC", "Z")


def test_divisible_already():
    assert min_deletions_divisible_by_25("100") == 0
    assert min_deletions_divisible_by_25("3125") == 0


def test_divisible_impossible():
    assert min_deletions_divisible_by_25("5") is None


@pytest.mark.parametrize("s", ["71345", "3259", "50555", "2050047"])
def test_divisible_bound(s):
    result = min_deletions_divisible_by_25(s)
    assert result is not None
    assert 0 <= result <= len(s) - 2


def test_fork_symmetric():
    king, queen = (0, 0), (3, 3)
    assert fork_positions(2, 1, king, queen) == fork_positions(2, 1, queen, king)


def test_fork_same_cell_covers_all_moves():
    assert len(fork_positions(2, 1, (0, 0), (0, 0))) == 8
    assert len(fork_positions(1, 1, (5, 5), (5, 5))) == 4


def test_fork_far_apart():
    assert fork_positions(1, 2, (0, 0), (100, 100)) == set()


def test_jellyfish_no_tools():
    assert jellyfish_timer(5, 3, []) == 3


def test_jellyfish_bound():
    tools = [1, 10, 100]
    result = jellyfish_timer(5, 3, tools)
    assert 3 < result <= 3 + len(tools) * (5 - 1)