import pytest

from algorithms.bubble_sort import bubble_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.selection_sort import selection_sort

SORTS = [bubble_sort, selection_sort, insertion_sort]

ARRAYS = [
    [],
    [7],
    [2, 1],
    [5, 1, 4, 2, 8],
    [3, 3, 1, 3, 2],
    [1, 2, 3, 4, 5, 6],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [4.5, -1, 0, 4.5, 2.25],
]


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("data", ARRAYS)
def test_completed_sort_is_sorted_permutation(sort, data):
    values = list(data)
    snaps = list(sort(values))

    assert values == sorted(data)
    assert snaps[-1].is_final
    assert list(snaps[-1].state) == sorted(data)
    assert len(snaps[-1].marked) == len(data)
    assert sorted(snaps[-1].marked) == list(range(len(data)))


@pytest.mark.parametrize("sort", SORTS)
def test_sequence_numbers_are_gap_free_and_size_is_preserved(sort):
    data = [6, 2, 9, 1, 5, 3]
    snaps = list(sort(list(data)))

    assert [s.seq for s in snaps] == list(range(len(snaps)))
    assert all(len(s.state) == len(data) for s in snaps)
    assert all(sorted(s.state) == sorted(data) for s in snaps)


@pytest.mark.parametrize("sort", SORTS)
def test_snapshots_are_frozen_copies(sort):
    values = [3, 1, 2]
    first = next(iter(sort(values)))
    assert isinstance(first.state, tuple)
    values[0] = 99
    assert 99 not in first.state


def test_bubble_sort_compares_adjacent_pairs_in_shrinking_passes():
    snaps = list(bubble_sort([4, 3, 2, 1]))
    compared = [s.active for s in snaps if s.action == "compare_swap"]

    assert compared == [(0, 1), (1, 2), (2, 3), (0, 1), (1, 2), (0, 1)]
    assert [s.active for s in snaps if s.action == "mark"] == [(3,), (2,), (1,)]
    assert snaps[-1].metrics["comparisons"] == 6
    assert snaps[-1].metrics["swaps"] == 6


def test_bubble_sort_never_swaps_equal_neighbours():
    snaps = list(bubble_sort([2, 2, 2]))
    assert not any(s.outcome for s in snaps if s.action == "compare_swap")
    assert snaps[-1].metrics["swaps"] == 0


def test_selection_sort_swaps_at_most_once_per_pass():
    snaps = list(selection_sort([3, 1, 2]))
    swaps = [s.active for s in snaps if s.action == "swap"]

    assert swaps == [(0, 1), (1, 2)]
    assert [s.active for s in snaps if s.action == "mark"] == [(0,), (1,), (2,)]


def test_selection_sort_on_sorted_input_never_swaps():
    snaps = list(selection_sort([1, 2, 3, 4]))
    assert not [s for s in snaps if s.action == "swap"]
    assert snaps[-1].metrics["comparisons"] == 6


def test_insertion_sort_shifts_only_strictly_greater_keys():
    snaps = list(insertion_sort([1, 3, 3, 2]))
    shifts = [s.active for s in snaps if s.action == "overwrite" and len(s.active) == 2]

    # key 3 at index 2 stops at the equal 3; key 2 shifts both 3s
    assert shifts == [(2, 3), (1, 2)]
    assert snaps[-1].state == (1, 2, 3, 3)


def test_insertion_sort_on_sorted_input_does_one_comparison_per_key():
    snaps = list(insertion_sort([1, 2, 3, 4, 5]))
    assert snaps[-1].metrics["comparisons"] == 4
    assert not [s for s in snaps if s.action == "overwrite" and len(s.active) == 2]


def test_drivers_are_restartable():
    data = [5, 3, 1, 4]
    first = list(insertion_sort(list(data)))
    second = list(insertion_sort(list(data)))
    assert first == second
