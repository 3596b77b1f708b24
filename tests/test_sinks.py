import dataclasses

import pytest

from algorithms.bubble_sort import bubble_sort
from algorithms.step import Snapshot
from engine import CallbackSink, ChannelSink, RecordingSink, RunState, TeeSink


def snaps(n):
    return [Snapshot(seq=i) for i in range(n)]


def test_recording_sink_tracks_latest_and_close():
    sink = RecordingSink()
    assert sink.latest is None and not sink.closed
    for s in snaps(3):
        sink.push(s)
    sink.close(RunState.COMPLETED)

    assert sink.latest.seq == 2
    assert sink.closed
    assert sink.terminal_state is RunState.COMPLETED


def test_callback_sink_forwards():
    seen, closed = [], []
    sink = CallbackSink(seen.append, closed.append)
    for s in snaps(2):
        sink.push(s)
    sink.close(RunState.CANCELLED)

    assert [s.seq for s in seen] == [0, 1]
    assert closed == [RunState.CANCELLED]


def test_channel_sink_get_returns_none_after_close():
    sink = ChannelSink()
    sink.push(Snapshot(seq=0))
    sink.close(RunState.COMPLETED)

    assert sink.get(timeout=1).seq == 0
    assert sink.get(timeout=1) is None
    assert sink.terminal_state is RunState.COMPLETED


def test_tee_sink_fans_out():
    a, b = RecordingSink(), RecordingSink()
    tee = TeeSink(a, None, b)
    for s in snaps(2):
        tee.push(s)
    tee.close(RunState.COMPLETED)

    assert a.snapshots == b.snapshots
    assert a.closed and b.closed


def test_snapshot_to_dict_is_json_friendly():
    s = Snapshot(seq=1, state=(1, 2), active=(0,), result=(3, 4), overlay={"window": (0, 1)})
    d = s.to_dict()
    assert d["state"] == [1, 2]
    assert d["result"] == [3, 4]
    assert d["overlay"] == {"window": [0, 1]}


def test_snapshots_are_read_only():
    snap = list(bubble_sort([2, 1]))[0]

    with pytest.raises(TypeError):
        snap.metrics["comparisons"] = 999
    with pytest.raises(TypeError):
        snap.overlay["window"] = (0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.seq = 7
    assert snap.metrics["comparisons"] == 1


def test_snapshot_keeps_its_own_copy_of_mappings():
    overlay = {"key": 1}
    snap = Snapshot(overlay=overlay)
    overlay["key"] = 2
    assert snap.overlay["key"] == 1

