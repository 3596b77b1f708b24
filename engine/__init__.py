"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, RunState, start, Recorder, compare
"""

from engine.exceptions   import InvalidTransition, DriverInvariantError, WorkingSetError
from engine.cancellation import CancellationToken
from engine.sink         import SnapshotSink, RecordingSink, CallbackSink, ChannelSink, TeeSink
from engine.controller   import PlaybackController, RunState, AlgorithmResult, DELAY_PRESETS
from engine.runner       import start, RunHandle, RunStatus, active_run
from engine.recorder     import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "InvalidTransition",
    "DriverInvariantError",
    "WorkingSetError",
    "CancellationToken",
    "SnapshotSink",
    "RecordingSink",
    "CallbackSink",
    "ChannelSink",
    "TeeSink",
    "PlaybackController",
    "RunState",
    "AlgorithmResult",
    "DELAY_PRESETS",
    "start",
    "RunHandle",
    "RunStatus",
    "active_run",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
