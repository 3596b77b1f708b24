import math

import pytest

from algorithms import NOT_FOUND
from algorithms.binary_search import binary_search
from algorithms.linear_search import linear_search


@pytest.mark.parametrize("n", range(1, 33))
def test_binary_search_finds_every_key_within_log_bound(n):
    values = list(range(0, 2 * n, 2))
    bound = math.ceil(math.log2(n + 1))

    for idx, target in enumerate(values):
        snaps = list(binary_search(list(values), target))
        assert len(snaps) <= bound
        assert snaps[-1].is_final
        assert snaps[-1].result == idx
        assert snaps[-1].marked == (idx,)


@pytest.mark.parametrize("search", [linear_search, binary_search])
@pytest.mark.parametrize("target", [-5, 3, 11, 100])
def test_missing_target_reports_not_found_exactly_once(search, target):
    values = [0, 2, 4, 6, 8, 10]
    snaps = list(search(values, target))

    assert sum(1 for s in snaps if s.is_final) == 1
    assert snaps[-1].is_final
    assert snaps[-1].result == NOT_FOUND
    assert snaps[-1].action == "done"


@pytest.mark.parametrize("search", [linear_search, binary_search])
def test_search_on_empty_array_is_not_found(search):
    snaps = list(search([], 4))
    assert len(snaps) == 1
    assert snaps[0].result == NOT_FOUND


@pytest.mark.parametrize("search", [linear_search, binary_search])
def test_search_without_target_does_nothing(search):
    assert list(search([1, 2, 3], None)) == []


def test_linear_search_probes_left_to_right_and_stops_on_match():
    snaps = list(linear_search([7, 3, 9, 3], 3))
    assert [s.active for s in snaps] == [(0,), (1,)]
    assert snaps[-1].result == 1
    assert snaps[-1].metrics["comparisons"] == 2


def test_linear_search_works_on_unsorted_input():
    snaps = list(linear_search([9, 1, 8, 2], 2))
    assert snaps[-1].result == 3


def test_binary_search_reports_the_window():
    snaps = list(binary_search([1, 3, 5, 7, 9, 11, 13], 13))
    assert [s.overlay["window"] for s in snaps] == [(0, 6), (4, 6), (6, 6)]
    assert [s.active for s in snaps] == [(3,), (5,), (6,)]


def test_binary_search_with_duplicates_returns_a_matching_index():
    values = [1, 2, 2, 2, 2, 3]
    snaps = list(binary_search(values, 2))
    assert values[snaps[-1].result] == 2


def test_search_never_mutates_the_array():
    values = [5, 1, 4]
    snaps = list(linear_search(values, 4))
    assert values == [5, 1, 4]
    assert all(s.state == (5, 1, 4) for s in snaps)
