"""
controller.py — Playback Controller
===================================
Owns one run: the driver generator, the working set it mutates, the
run state, the delay between steps and the cancellation token.

State machine:
    IDLE       →  start()            →  RUNNING
    RUNNING    →  pause()            →  PAUSED
    PAUSED     →  resume()           →  RUNNING
    RUNNING    →  (driver exhausted) →  COMPLETED
    RUNNING    →  cancel()           →  CANCELLED
    PAUSED     →  cancel()           →  CANCELLED
    COMPLETED / CANCELLED  →  start()  →  RUNNING   (fresh driver & working set)

Pump loop:
    pull one step from the driver (the primitive runs, one snapshot comes back)
    push the snapshot to the sink
    suspend for delay_ms          ← the ONLY place pause / cancel are honoured
    repeat until the driver is exhausted or the token is cancelled

Threading:
  Inline runs (background=False) pump on the caller's thread and return
  when the run ends or is paused; resume() re-enters the pump.  Background
  runs pump on a daemon thread that blocks while paused.  Either way one
  RLock wraps "apply one step and emit its snapshot" together with every
  state transition, so a cancel() from any thread lands between steps and
  no snapshot is ever pushed after it.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Iterable, List, Optional, Tuple

from algorithms.step import Snapshot
from engine.cancellation import CancellationToken
from engine.exceptions import DriverInvariantError, InvalidTransition
from engine.sink import SnapshotSink

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    PAUSED    = "paused"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.CANCELLED, RunState.COMPLETED)


# ---------------------------------------------------------------------------
# Delay presets (milliseconds between steps)
# ---------------------------------------------------------------------------
DELAY_PRESETS = {
    "slow":   400,    # graph traversal
    "medium": 200,    # searching
    "fast":   50,     # sorting
    "turbo":  10,
}


# ---------------------------------------------------------------------------
# Result of a finished run
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgorithmResult:
    state:        RunState
    working_set:  Any
    snapshots:    Tuple[Snapshot, ...]

    @property
    def step_count(self) -> int:
        return len(self.snapshots)

    @property
    def final(self) -> Optional[Snapshot]:
        return self.snapshots[-1] if self.snapshots else None

    @property
    def value(self) -> Any:
        """The driver's reported result, if it reached its terminal snapshot."""
        last = self.final
        return last.result if last is not None and last.is_final else None


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        sink      : Where snapshots (and the terminal marker) are delivered.
        snapshots : Every snapshot of the current run, in order.
        error     : Exception that aborted a background run, if any.
    """

    def __init__(self, sink: Optional[SnapshotSink] = None, delay_ms: float = DELAY_PRESETS["fast"]):
        self.sink:        SnapshotSink              = sink or SnapshotSink()
        self.snapshots:   List[Snapshot]            = []
        self.error:       Optional[BaseException]   = None

        self._lock        = threading.RLock()
        self._state       = RunState.IDLE
        self._delay_ms    = _check_delay(delay_ms)
        self._driver      = None
        self._working_set = None
        self._token:      Optional[CancellationToken] = None
        self._expected_size: Optional[int]          = None
        self._background  = False
        self._pump_owner: Optional[CancellationToken] = None
        self._thread:     Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(
        self,
        driver: Iterable[Snapshot],
        working_set: Any,
        delay_ms: Optional[float] = None,
        background: bool = False,
        preserves_size: bool = False,
    ) -> None:
        """
        Begin a fresh run.  Any finished previous run is discarded.

        Args:
            driver         : Generator of Snapshots, not yet started.
            working_set    : The structure the driver mutates (kept for the result).
            delay_ms       : Optional new delay between steps.
            background     : Pump on a daemon thread instead of the caller's.
            preserves_size : Fail fast if the working set's length ever changes.
        """
        with self._lock:
            if self._state in (RunState.RUNNING, RunState.PAUSED):
                raise InvalidTransition("start", self._state)
            if delay_ms is not None:
                self._delay_ms = _check_delay(delay_ms)

            self._driver        = iter(driver)
            self._working_set   = working_set
            self._expected_size = len(working_set) if preserves_size else None
            self._token         = CancellationToken()
            self._background    = background
            self.snapshots      = []
            self.error          = None
            self._state         = RunState.RUNNING
            token               = self._token

        logger.info("Run started (delay=%sms, background=%s)", self._delay_ms, background)

        if background:
            self._thread = threading.Thread(
                target=self._pump, args=(token,), name="playback", daemon=True,
            )
            self._thread.start()
        else:
            self._pump(token)

    def pause(self) -> None:
        with self._lock:
            if self._state is not RunState.RUNNING:
                raise InvalidTransition("pause", self._state)
            self._state = RunState.PAUSED
            self._token.hold()
        logger.info("Run paused after %d step(s)", len(self.snapshots))

    def resume(self) -> None:
        with self._lock:
            if self._state is not RunState.PAUSED:
                raise InvalidTransition("resume", self._state)
            self._state = RunState.RUNNING
            self._token.release()
            token = self._token
            reenter = not self._background and self._pump_owner is not token
        logger.info("Run resumed at step %d", len(self.snapshots))
        if reenter:
            self._pump(token)

    def cancel(self) -> None:
        with self._lock:
            if self._state not in (RunState.RUNNING, RunState.PAUSED):
                raise InvalidTransition("cancel", self._state)
            self._token.cancel()
            self._finish(RunState.CANCELLED)

    def set_delay(self, delay_ms: float) -> None:
        """Applies from the next suspension on; a delay already in progress is not shortened."""
        value = _check_delay(delay_ms)
        with self._lock:
            self._delay_ms = value
        logger.debug("Delay set to %sms", value)

    def step(self) -> Optional[Snapshot]:
        """While PAUSED, pull exactly one step.  Returns None if the driver is exhausted."""
        with self._lock:
            if self._state is not RunState.PAUSED:
                raise InvalidTransition("step", self._state)
            before = len(self.snapshots)
            self._advance()
            return self.snapshots[-1] if len(self.snapshots) > before else None

    def join(self, timeout: Optional[float] = None) -> Optional[AlgorithmResult]:
        """Wait for a background run to stop pumping, then return the result (None if not terminal)."""
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        return self.result

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        with self._lock:
            return self._state

    @property
    def delay_ms(self) -> float:
        with self._lock:
            return self._delay_ms

    @property
    def latest(self) -> Optional[Snapshot]:
        with self._lock:
            return self.snapshots[-1] if self.snapshots else None

    @property
    def steps_emitted(self) -> int:
        with self._lock:
            return len(self.snapshots)

    def snapshots_since(self, idx: int) -> List[Snapshot]:
        with self._lock:
            return list(self.snapshots[max(idx, 0):])

    @property
    def result(self) -> Optional[AlgorithmResult]:
        with self._lock:
            if not self._state.is_terminal:
                return None
            return AlgorithmResult(self._state, self._working_set, tuple(self.snapshots))

    @property
    def is_finished(self) -> bool:
        return self.state.is_terminal

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _pump(self, token: CancellationToken) -> None:
        self._pump_owner = token
        try:
            while self._await_running(token):
                with self._lock:
                    if self._state is not RunState.RUNNING:
                        continue
                    if not self._advance():
                        return
                if token.sleep(self.delay_ms / 1000.0):
                    return
        finally:
            if self._pump_owner is token:
                self._pump_owner = None

    def _advance(self) -> bool:
        """Pull one step and emit it.  Caller holds the lock.  False once the run has ended."""
        try:
            snap = next(self._driver)
        except StopIteration:
            self._finish(RunState.COMPLETED)
            return False
        except Exception as exc:
            self._abort(exc)
            return False

        try:
            self._check(snap)
        except DriverInvariantError as exc:
            self._abort(exc)
            return False

        self.snapshots.append(snap)
        logger.debug("step %d: %s %s", snap.seq, snap.action, snap.active)
        self.sink.push(snap)
        return True

    def _await_running(self, token: CancellationToken) -> bool:
        """Honour pause between steps.  False means stop pumping."""
        while True:
            with self._lock:
                if token.cancelled or token is not self._token:
                    return False
                if self._state is RunState.RUNNING:
                    return True
                if self._state is not RunState.PAUSED or not self._background:
                    return False        # inline: hand control back; resume() re-enters
            token.wait_released()

    def _check(self, snap: Snapshot) -> None:
        if not isinstance(snap, Snapshot):
            raise DriverInvariantError(f"Driver yielded {type(snap).__name__}, expected Snapshot")
        if snap.seq != len(self.snapshots):
            raise DriverInvariantError(
                f"Snapshot sequence broken: expected {len(self.snapshots)}, got {snap.seq}"
            )
        if self._expected_size is not None and len(snap.state) != self._expected_size:
            raise DriverInvariantError(
                f"Working set size changed from {self._expected_size} to {len(snap.state)}"
            )

    def _abort(self, exc: BaseException) -> None:
        self.error = exc
        self._token.cancel()
        logger.error("Run aborted at step %d: %s", len(self.snapshots), exc)
        self._finish(RunState.CANCELLED)
        if not self._background:
            raise exc

    def _finish(self, state: RunState) -> None:
        self._state = state
        close = getattr(self._driver, "close", None)
        if close is not None:
            close()
        self.sink.close(state)
        logger.info("Run %s after %d step(s)", state.value, len(self.snapshots))


def _check_delay(delay_ms: Any) -> float:
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, Real) or delay_ms < 0:
        raise ValueError(f"delay_ms must be a non-negative number, got {delay_ms!r}")
    return delay_ms
