import pytest

from algorithms import NOT_FOUND
from engine import Recorder, compare


def record(algo, data, target=None):
    rec = Recorder()
    rec.start(algo, data, target)
    rec.run_to_completion()
    return rec


def test_metrics_for_bubble_sort():
    rec = record("bubble_sort", [3, 2, 1])
    m = rec.get_metrics()

    assert m.algo_label == "Bubble Sort"
    assert m.comparisons == 3
    assert m.swaps == 3
    assert m.writes == 6
    assert m.total_steps == len(rec.steps)
    assert m.result is None


def test_metrics_carry_search_result():
    rec = record("binary_search", [1, 3, 5, 7], target=4)
    assert rec.metrics.result == NOT_FOUND


def test_recorder_works_on_its_own_copy():
    data = [2, 1]
    record("insertion_sort", data)
    assert data == [2, 1]


def test_compare_on_sorted_input():
    data = [1, 2, 3, 4, 5]
    bubble = record("bubble_sort", data)
    insertion = record("insertion_sort", data)
    result = compare(bubble, insertion)

    assert result.left.comparisons == 10
    assert result.right.comparisons == 4
    assert result.winner_comparisons == "Insertion Sort"
    assert result.winner_writes == "Bubble Sort"
    assert result.winner_steps == "Insertion Sort"


def test_compare_reports_ties():
    a = record("linear_search", [1, 2, 3], target=1)
    b = record("binary_search", [1, 2, 3], target=2)
    assert compare(a, b).winner_comparisons == "tie"


def test_export_is_serialisable():
    rec = record("bfs", {"nodes": [0, 1], "edges": [[0, 1]]}, target=0)
    out = rec.export()

    assert out["algo_key"] == "bfs"
    assert out["metrics"]["result"] == [0, 1]
    assert out["steps"][0]["seq"] == 0


def test_run_before_start_is_an_error():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()
