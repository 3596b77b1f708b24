"""
runner.py — Run Facade
======================
What callers (the web layer, scripts, tests) use to start an algorithm by
name against raw or generated data:

    handle = start("bubble_sort", [5, 1, 4], delay_ms=50)
    handle.pause(); handle.resume(); handle.set_delay(10)
    status = handle.query()            # RunStatus(state, latest, steps, …)
    result = handle.wait()             # AlgorithmResult once terminal

Initial data handling:
  - Raw lists are validated and copied, so the caller's list is never
    mutated by a sort.
  - Structure instances (BinarySearchTree, Graph, Stack, Queue) are used
    as-is: inserts and pushes accumulate across runs on the same object.
    The caller must not touch the structure while the run is active.

Ownership:
  A working set has at most one active run.  Starting a second run on a
  structure whose current run is RUNNING or PAUSED raises
  InvalidTransition; the claim is dropped when the run reaches a
  terminal state.
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from algorithms import AlgoInfo, get_algorithm, is_blocked
from algorithms.step import Snapshot
from engine.controller import DELAY_PRESETS, AlgorithmResult, PlaybackController, RunState
from engine.exceptions import InvalidTransition
from engine.sink import SnapshotSink, TeeSink
from settings import settings
from structures import (
    BinarySearchTree, Graph, Queue, Stack, WorkingSetError,
    as_key_array, is_key, is_sorted,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Working-set preparation
# ---------------------------------------------------------------------------
_CONTAINERS = {"stack": Stack, "queue": Queue}


def resolve(algorithm_id: str) -> AlgoInfo:
    info = get_algorithm(algorithm_id)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algorithm_id}")
    return info


def prepare_working_set(info: AlgoInfo, data: Any) -> Any:
    """Coerce `data` into the structure `info` operates on."""
    kind = info.structure

    if kind == "array":
        return as_key_array([] if data is None else data)

    if kind == "tree":
        if isinstance(data, BinarySearchTree):
            return data
        return BinarySearchTree.from_keys(as_key_array(data or []))

    if kind == "graph":
        if isinstance(data, Graph):
            return data
        if data is None:
            return Graph()
        if isinstance(data, dict):
            return Graph.from_dict(data)
        raise WorkingSetError(f"Graph data must be a Graph or a dict, got {type(data).__name__}")

    cls = _CONTAINERS[kind]
    if isinstance(data, cls):
        return data
    if isinstance(data, (Stack, Queue)):
        raise WorkingSetError(f"{info.label} needs a {kind}, got a {data.kind}")
    return cls(data or [])


def check_preconditions(info: AlgoInfo, working_set: Any, target: Any) -> None:
    """Fail fast on data that breaks the algorithm's contract."""
    if target is not None and not is_key(target):
        raise WorkingSetError(f"Target must be numeric, got {target!r}")
    if info.requires_sorted and not is_sorted(working_set):
        raise WorkingSetError(f"{info.label} requires the array to be sorted ascending")
    if info.structure == "graph" and target is not None and not working_set.has_node(target):
        raise WorkingSetError(f"Start node {target!r} is not in the graph")


def prepare(info: AlgoInfo, data: Any, target: Any = None) -> Any:
    working_set = prepare_working_set(info, data)
    check_preconditions(info, working_set, target)
    return working_set


def default_delay(info: AlgoInfo) -> float:
    """The configured override, else the algorithm's own preset."""
    if settings.DEFAULT_DELAY_MS is not None:
        return settings.DEFAULT_DELAY_MS
    return DELAY_PRESETS[info.speed]


# ---------------------------------------------------------------------------
# Ownership: one active run per working set
# ---------------------------------------------------------------------------
_OWNERS: Dict[int, "RunHandle"] = {}
_OWNERS_LOCK = threading.Lock()


def _claim(handle: "RunHandle") -> None:
    ws = handle.working_set
    with _OWNERS_LOCK:
        owner = _OWNERS.get(id(ws))
        if owner is None or owner.working_set is not ws:
            _OWNERS[id(ws)] = handle
            return
    # owner.state takes the controller lock; never under _OWNERS_LOCK
    raise InvalidTransition("start", owner.state)


def _release(handle: "RunHandle") -> None:
    with _OWNERS_LOCK:
        if _OWNERS.get(id(handle.working_set)) is handle:
            del _OWNERS[id(handle.working_set)]


def active_run(working_set: Any) -> Optional["RunHandle"]:
    """The handle currently running (or paused) on `working_set`, if any."""
    with _OWNERS_LOCK:
        owner = _OWNERS.get(id(working_set))
    return owner if owner is not None and owner.working_set is working_set else None


class _ReleaseOnClose(SnapshotSink):

    def __init__(self, handle: "RunHandle"):
        self.handle = handle

    def close(self, state) -> None:
        _release(self.handle)


# ---------------------------------------------------------------------------
# Status & handle
# ---------------------------------------------------------------------------
@dataclass
class RunStatus:
    run_id:    str
    algorithm: str
    state:     RunState
    latest:    Optional[Snapshot]
    steps:     int
    delay_ms:  float
    blocked:   bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id":    self.run_id,
            "algorithm": self.algorithm,
            "state":     self.state.value,
            "latest":    self.latest.to_dict() if self.latest else None,
            "steps":     self.steps,
            "delay_ms":  self.delay_ms,
            "blocked":   self.blocked,
        }


class RunHandle:
    """
    Attributes:
        id          : Short unique run id.
        info        : AlgoInfo of the running algorithm.
        controller  : The PlaybackController driving the run.
        working_set : The structure being mutated.
        target      : Search key / inserted value / start node (or None).
        blocked     : True when the request was a no-op (see algorithms.is_blocked).
    """

    def __init__(
        self,
        info: AlgoInfo,
        controller: PlaybackController,
        working_set: Any,
        target: Any = None,
        blocked: bool = False,
        run_id: Optional[str] = None,
    ):
        self.id          = run_id or uuid.uuid4().hex[:8]
        self.info        = info
        self.controller  = controller
        self.working_set = working_set
        self.target      = target
        self.blocked     = blocked

    # -- controls --
    def pause(self) -> None:
        self.controller.pause()

    def resume(self) -> None:
        self.controller.resume()

    def cancel(self) -> None:
        self.controller.cancel()

    def set_delay(self, delay_ms: float) -> None:
        self.controller.set_delay(delay_ms)

    def step(self) -> Optional[Snapshot]:
        return self.controller.step()

    # -- queries --
    @property
    def state(self) -> RunState:
        return self.controller.state

    def query(self) -> RunStatus:
        c = self.controller
        return RunStatus(
            run_id=self.id,
            algorithm=self.info.key,
            state=c.state,
            latest=c.latest,
            steps=c.steps_emitted,
            delay_ms=c.delay_ms,
            blocked=self.blocked,
        )

    def snapshots_since(self, idx: int):
        return self.controller.snapshots_since(idx)

    def wait(self, timeout: Optional[float] = None) -> Optional[AlgorithmResult]:
        """Block until the run stops pumping; re-raises whatever aborted it."""
        result = self.controller.join(timeout)
        if self.controller.error is not None:
            raise self.controller.error
        return result

    def __repr__(self) -> str:
        return f"RunHandle(id={self.id}, algorithm={self.info.key}, state={self.state.value})"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def start(
    algorithm_id: str,
    initial_data: Any = None,
    delay_ms: Optional[float] = None,
    target: Any = None,
    observers: Iterable[SnapshotSink] = (),
    background: bool = True,
    run_id: Optional[str] = None,
) -> RunHandle:
    """
    Start `algorithm_id` on `initial_data`.

    Raises:
        ValueError        : unknown algorithm id or bad delay.
        WorkingSetError   : data or target that breaks the algorithm's contract.
        InvalidTransition : another run is still active on the same structure.
    """
    info = resolve(algorithm_id)
    working_set = prepare(info, initial_data, target)

    blocked = is_blocked(info, working_set, target)
    if blocked:
        logger.warning("%s request is blocked (target=%r, size=%d): nothing to do",
                       info.key, target, len(working_set))

    controller = PlaybackController(delay_ms=default_delay(info) if delay_ms is None else delay_ms)
    handle = RunHandle(info, controller, working_set, target, blocked, run_id)
    controller.sink = TeeSink(*observers, _ReleaseOnClose(handle))
    _claim(handle)
    logger.info("Starting run %s: %s on %r", handle.id, info.key, working_set)

    controller.start(
        info.fn(working_set, target),
        working_set,
        background=background,
        preserves_size=info.preserves_size,
    )
    return handle
