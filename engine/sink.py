"""
sink.py — Snapshot Sinks
========================
Ordered delivery channels between the controller (single writer) and an
observer (single reader).  The controller calls `push()` once per
snapshot, in sequence order, then `close(state)` exactly once with the
terminal RunState.

    RecordingSink – keeps every snapshot plus the latest one
    CallbackSink  – forwards to a function (tests, loggers, UI hooks)
    ChannelSink   – thread-safe queue for a reader on another thread
    TeeSink       – fan-out to several sinks
"""

import queue
from typing import Callable, Iterator, List, Optional

from algorithms.step import Snapshot


class SnapshotSink:
    """Base sink: accepts snapshots and a terminal marker, does nothing with them."""

    def push(self, snapshot: Snapshot) -> None:
        pass

    def close(self, state) -> None:
        pass


class RecordingSink(SnapshotSink):

    def __init__(self):
        self.snapshots: List[Snapshot]  = []
        self.terminal_state             = None

    def push(self, snapshot: Snapshot) -> None:
        self.snapshots.append(snapshot)

    def close(self, state) -> None:
        self.terminal_state = state

    @property
    def latest(self) -> Optional[Snapshot]:
        return self.snapshots[-1] if self.snapshots else None

    @property
    def closed(self) -> bool:
        return self.terminal_state is not None


class CallbackSink(SnapshotSink):

    def __init__(
        self,
        on_snapshot: Callable[[Snapshot], None],
        on_close: Optional[Callable[[object], None]] = None,
    ):
        self.on_snapshot = on_snapshot
        self.on_close    = on_close

    def push(self, snapshot: Snapshot) -> None:
        self.on_snapshot(snapshot)

    def close(self, state) -> None:
        if self.on_close:
            self.on_close(state)


class ChannelSink(SnapshotSink):
    """
    Iterating a ChannelSink yields snapshots until the terminal marker
    arrives; `terminal_state` is set once iteration stops.
    """

    _END = object()

    def __init__(self):
        self._queue: "queue.Queue" = queue.Queue()
        self.terminal_state         = None

    def push(self, snapshot: Snapshot) -> None:
        self._queue.put(snapshot)

    def close(self, state) -> None:
        self._queue.put((self._END, state))

    def get(self, timeout: Optional[float] = None) -> Optional[Snapshot]:
        """Next snapshot, or None once the channel is closed."""
        item = self._queue.get(timeout=timeout)
        if isinstance(item, tuple) and item and item[0] is self._END:
            self.terminal_state = item[1]
            return None
        return item

    def __iter__(self) -> Iterator[Snapshot]:
        while self.terminal_state is None:
            item = self.get()
            if item is None:
                return
            yield item


class TeeSink(SnapshotSink):

    def __init__(self, *sinks: SnapshotSink):
        self.sinks = [s for s in sinks if s is not None]

    def push(self, snapshot: Snapshot) -> None:
        for s in self.sinks:
            s.push(snapshot)

    def close(self, state) -> None:
        for s in self.sinks:
            s.close(state)
