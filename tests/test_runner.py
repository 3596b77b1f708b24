import time

import pytest

from algorithms import NOT_FOUND, REGISTRY, get_algorithm, is_blocked
from engine import InvalidTransition, RecordingSink, RunState, active_run, start
from settings import settings
from structures import BinarySearchTree, Graph, Queue, Stack, WorkingSetError


def run(algorithm, data=None, target=None, **kwargs):
    return start(algorithm, data, delay_ms=0, target=target, background=False, **kwargs)


def test_registry_covers_every_family():
    families = {info.family for info in REGISTRY.values()}
    assert families == {"sort", "search", "tree", "graph", "linear"}
    assert get_algorithm("nope") is None


def test_sort_copies_the_callers_list():
    data = [3, 1, 2]
    handle = run("bubble_sort", data)

    assert data == [3, 1, 2]
    assert handle.state is RunState.COMPLETED
    assert handle.working_set == [1, 2, 3]
    assert handle.wait().final.state == (1, 2, 3)


@pytest.mark.parametrize("algorithm", ["bubble_sort", "selection_sort", "insertion_sort"])
def test_sorts_by_name(algorithm):
    handle = run(algorithm, [9, 2, 7, 2, 5])
    assert handle.working_set == [2, 2, 5, 7, 9]


def test_query_reports_latest_snapshot():
    handle = run("linear_search", [4, 8, 15], target=15)
    status = handle.query()

    assert status.state is RunState.COMPLETED
    assert status.steps == 3
    assert status.latest.result == 2
    assert status.to_dict()["state"] == "completed"


def test_search_not_found_through_facade():
    handle = run("binary_search", [1, 2, 3], target=10)
    assert handle.wait().value == NOT_FOUND


def test_unknown_algorithm_is_rejected():
    with pytest.raises(ValueError):
        run("quantum_sort", [1])


def test_binary_search_requires_sorted_input():
    with pytest.raises(WorkingSetError):
        run("binary_search", [3, 1, 2], target=1)


@pytest.mark.parametrize("bad", [[1, "x"], "123", [True, 2]])
def test_non_numeric_arrays_are_rejected(bad):
    with pytest.raises(WorkingSetError):
        run("bubble_sort", bad)


def test_non_numeric_target_is_rejected():
    with pytest.raises(WorkingSetError):
        run("linear_search", [1, 2], target="2")


def test_missing_start_node_is_rejected():
    with pytest.raises(WorkingSetError):
        run("bfs", {"nodes": [0, 1], "edges": [[0, 1]]}, target=5)


def test_missing_target_is_blocked_and_completes_empty():
    sink = RecordingSink()
    handle = run("linear_search", [1, 2, 3], observers=[sink])

    assert handle.blocked
    assert handle.state is RunState.COMPLETED
    assert sink.snapshots == []
    assert sink.terminal_state is RunState.COMPLETED


def test_pop_on_empty_stack_is_blocked():
    handle = run("stack_pop", Stack())
    assert handle.blocked
    assert handle.query().steps == 0


def test_is_blocked_checks_emptiness_for_removals():
    info = get_algorithm("queue_dequeue")
    assert is_blocked(info, Queue())
    assert not is_blocked(info, Queue([1]))


def test_tree_inserts_accumulate_on_the_same_structure():
    tree = BinarySearchTree()
    for key in (5, 3, 8, 1, 4):
        run("bst_insert", tree, target=key)

    handle = run("bst_inorder", tree)
    assert handle.wait().value == (1, 3, 4, 5, 8)


def test_tree_from_raw_keys():
    handle = run("bst_search", [5, 3, 8], target=8)
    assert isinstance(handle.working_set, BinarySearchTree)
    assert handle.wait().value == (5, 8)


def test_graph_from_dict():
    handle = run("dfs", {"nodes": [0, 1, 2], "edges": [[0, 1], [1, 2]]}, target=0)
    assert isinstance(handle.working_set, Graph)
    assert handle.wait().value == (0, 1, 2)


def test_container_kind_mismatch_is_rejected():
    with pytest.raises(WorkingSetError):
        run("stack_push", Queue(), target=1)


def test_queue_operations_through_facade():
    queue = Queue([1])
    run("queue_enqueue", queue, target=2)
    handle = run("queue_dequeue", queue)
    assert handle.wait().value == 1
    assert queue.to_list() == [2]


def test_observers_see_every_snapshot():
    sink = RecordingSink()
    handle = run("insertion_sort", [3, 2, 1], observers=[sink])
    assert sink.snapshots == handle.snapshots_since(0)


def test_background_run_through_facade():
    handle = start("selection_sort", [3, 1, 2], delay_ms=0)
    result = handle.wait(5)
    assert result.state is RunState.COMPLETED
    assert handle.working_set == [1, 2, 3]


def test_handle_controls_delegate_to_the_controller():
    handle = run("bubble_sort", [2, 1])
    with pytest.raises(InvalidTransition) as info:
        handle.pause()
    assert "pause" in str(info.value)
    handle.set_delay(30)
    assert handle.query().delay_ms == 30


# ---------------------------------------------------------------------------
# Default delays
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algorithm, data, expected", [
    ("bfs", {"nodes": [0], "edges": []}, 400),
    ("binary_search", [1, 2, 3], 200),
    ("linear_search", [1, 2, 3], 200),
    ("bubble_sort", [], 50),
])
def test_each_family_has_its_own_default_delay(algorithm, data, expected, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_DELAY_MS", None)
    # no target / empty input: completes at once but keeps its delay
    handle = start(algorithm, data, background=False)
    assert handle.query().delay_ms == expected


def test_configured_default_delay_overrides_presets(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_DELAY_MS", 5)
    handle = start("bfs", {"nodes": [0], "edges": []}, background=False)
    assert handle.query().delay_ms == 5


def test_explicit_delay_wins(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_DELAY_MS", 5)
    assert run("bubble_sort", [1]).query().delay_ms == 0


# ---------------------------------------------------------------------------
# One active run per structure
# ---------------------------------------------------------------------------
def test_second_run_on_a_busy_structure_is_rejected():
    tree = BinarySearchTree.from_keys([5, 3, 8])
    slow = start("bst_inorder", tree, delay_ms=10_000)

    assert active_run(tree) is slow
    with pytest.raises(InvalidTransition):
        start("bst_insert", tree, delay_ms=0, target=2, background=False)
    assert tree.inorder_keys() == [3, 5, 8]

    slow.cancel()
    slow.wait(5)
    assert active_run(tree) is None

    run("bst_insert", tree, target=2)
    assert tree.inorder_keys() == [2, 3, 5, 8]


def test_paused_run_keeps_its_structure():
    stack = Stack([1, 2, 3])
    slow = start("stack_push", stack, delay_ms=10_000, target=4)
    deadline = time.monotonic() + 5
    while slow.query().steps == 0 and time.monotonic() < deadline:
        time.sleep(0.01)
    slow.pause()

    assert slow.state is RunState.PAUSED
    with pytest.raises(InvalidTransition):
        start("stack_pop", stack, delay_ms=0, background=False)

    slow.cancel()
    slow.wait(5)
    assert run("stack_pop", stack).wait().value == 4


def test_arrays_are_copied_so_runs_never_share_them():
    data = [3, 1, 2]
    first = start("bubble_sort", data, delay_ms=10_000)
    second = run("insertion_sort", data)

    assert second.state is RunState.COMPLETED
    first.cancel()
