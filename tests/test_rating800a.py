import pytest

from cpsolvers.rating800a import (
    beautiful_arrangement,
    can_paint_good,
    can_sort_with_reversals,
    can_split_equal_parity,
    coin_sum_possible,
    count_extremely_round,
    count_same_parity_neighbours,
    forbidden_sum,
    integer_game_winner,
    jagged_swaps_sortable,
    min_desort_operations,
    min_water_actions,
)


def test_equal_parity_all_even():
    assert can_split_equal_parity([2, 4, 6])


def test_equal_parity_single_odd():
    assert not can_split_equal_parity([1, 2])


@pytest.mark.parametrize("values", [[], [1], [2, 3], [5, 7, 8]])
def test_equal_parity_adding_odd_flips(values):
    assert can_split_equal_parity(values) is not can_split_equal_parity(values + [9])
    assert can_split_equal_parity(values) is can_split_equal_parity(values + [4])


def test_beautiful_arrangement_order():
    assert beautiful_arrangement([1, 2, 3, 4, 5]) == [5, 1, 2, 3, 4]


@pytest.mark.parametrize("values", [[3, 1, 2], [1, 1, 2], [7, 3, 3, 10, 1]])
def test_beautiful_arrangement_invariant(values):
    result = beautiful_arrangement(values)
    assert sorted(result) == sorted(values)
    assert all(result[i] != sum(result[:i]) for i in range(1, len(result)))


def test_beautiful_arrangement_all_equal():
    assert beautiful_arrangement([4, 4, 4]) is None


def test_beautiful_arrangement_empty():
    with pytest.raises(ValueError):
        beautiful_arrangement([])


def test_coin_sum():
    assert coin_sum_possible(4, 3)
    assert not coin_sum_possible(5, 3)
    assert not coin_sum_possible(-2, 1)


def test_water_long_run_needs_two():
    assert min_water_actions("#...#") == 2
    assert min_water_actions("........") == 2


@pytest.mark.parametrize("cells", ["#.#", "..#..", "#", ".#.#.."])
def test_water_short_runs_count_dots(cells):
    assert min_water_actions(cells) == cells.count(".")


def test_desort_unsorted_is_zero():
    assert min_desort_operations([3, 1, 2]) == 0


def test_desort_shift_invariant():
    base = [1, 8, 10, 20]
    shifted = [value + 100 for value in base]
    assert min_desort_operations(base) == min_desort_operations(shifted)


def test_desort_wider_gap_needs_no_fewer_operations():
    assert min_desort_operations([1, 2]) <= min_desort_operations([1, 9])


def test_paint_good():
    assert can_paint_good([1, 2, 1, 2])
    assert can_paint_good([7])
    assert not can_paint_good([1, 1, 1, 2])
    assert not can_paint_good([1, 2, 3])


def test_paint_empty():
    with pytest.raises(ValueError):
        can_paint_good([])


@pytest.mark.parametrize("n", range(1, 10))
def test_extremely_round_single_digits(n):
    assert count_extremely_round(n) == n


def test_extremely_round_matches_brute_force():
    running = 0
    for n in range(1, 600):
        if sum(1 for digit in str(n) if digit != "0") == 1:
            running += 1
        assert count_extremely_round(n) == running


def test_extremely_round_rejects_zero():
    with pytest.raises(ValueError):
        count_extremely_round(0)


@pytest.mark.parametrize(
    "n, k, x",
    [(10, 3, 2), (5, 3, 1), (6, 2, 1), (7, 4, 1), (4, 5, 3)],
)
def test_forbidden_sum_valid(n, k, x):
    result = forbidden_sum(n, k, x)
    assert sum(result) == n
    assert x not in result
    assert all(1 <= value <= k for value in result)


def test_forbidden_sum_ones_when_allowed():
    assert forbidden_sum(4, 5, 3) == [1, 1, 1, 1]


@pytest.mark.parametrize("n, k", [(5, 1), (4, 1), (5, 2)])
def test_forbidden_sum_impossible(n, k):
    assert forbidden_sum(n, k, 1) is None


def test_integer_game():
    assert integer_game_winner(3) == "Second"
    assert integer_game_winner(4) == "First"
    assert integer_game_winner(5) == "First"


def test_same_parity_alternating_is_zero():
    assert count_same_parity_neighbours([1, 2, 3, 4, 5]) == 0


@pytest.mark.parametrize("values", [[2, 4, 6, 8], [1, 3, 5], [10]])
def test_same_parity_uniform(values):
    assert count_same_parity_neighbours(values) == len(values) - 1


def test_sort_with_reversals():
    assert can_sort_with_reversals([1, 2, 3], 2)
    assert not can_sort_with_reversals([3, 1, 2], 5)
    assert not can_sort_with_reversals([1, 2, 3], 1)


def test_jagged_swaps():
    assert jagged_swaps_sortable([1, 3, 2])
    assert not jagged_swaps_sortable([2, 1, 3])


def test_jagged_swaps_empty():
    with pytest.raises(ValueError):
        jagged_swaps_sortable([])