"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Snapshots) with no delay, then
computes the counters the analytics card and comparison mode need.

Usage:
    rec = Recorder()
    rec.start(algo_key="insertion_sort", data=[5, 2, 4, 1])
    rec.run_to_completion()          # exhausts the driver
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    Hold two Recorders (one per algorithm), run both to completion on the
    SAME data, then call compare(rec1, rec2) → ComparisonResult.
    Each Recorder works on its own copy, so the runs never interfere.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo
from algorithms.step import Snapshot, plain
from engine.controller import PlaybackController
from engine.runner import prepare, resolve


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    comparisons:   int   = 0
    swaps:         int   = 0
    writes:        int   = 0
    visits:        int   = 0
    total_steps:   int   = 0          # number of Snapshots emitted
    wall_time_ms:  float = 0.0        # wall-clock time to run to completion
    result:        Any   = None       # terminal result (index, path, order …)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""
    winner_writes:      str = ""
    winner_steps:       str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps      : Full list of Snapshots from the run.
        metrics    : Computed RunMetrics (available after run_to_completion).
        controller : The underlying PlaybackController.
    """

    def __init__(self):
        self.steps:      List[Snapshot]               = []
        self.metrics:    Optional[RunMetrics]         = None
        self.controller: Optional[PlaybackController] = None

        self._algo_info:   Optional[AlgoInfo] = None
        self._target:      Any                = None
        self._working_set: Any                = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, data: Any, target: Any = None) -> None:
        """Validate the input and prepare a private working set for this run."""
        info = resolve(algo_key)
        self._algo_info   = info
        self._target      = target
        self._working_set = prepare(info, data, target)
        self.steps        = []
        self.metrics      = None
        self.controller   = PlaybackController(delay_ms=0)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the driver, record every step, compute metrics."""
        if self.controller is None:
            raise RuntimeError("Call start() first.")

        info = self._algo_info
        started = time.monotonic()
        self.controller.start(
            info.fn(self._working_set, self._target),
            self._working_set,
            delay_ms=0,
            preserves_size=info.preserves_size,
        )
        wall_ms = (time.monotonic() - started) * 1000

        self.steps = list(self.controller.snapshots)
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        metrics = asdict(self.metrics) if self.metrics else {}
        if metrics:
            metrics["result"] = plain(metrics["result"])
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "target":   self._target,
            "metrics":  metrics,
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None
        counters = last.metrics if last else {}

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            comparisons=counters.get("comparisons", 0),
            swaps=counters.get("swaps", 0),
            writes=counters.get("writes", 0),
            visits=counters.get("visits", 0),
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            result=last.result if last and last.is_final else None,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult (fewer is better)."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_writes=winner(l.writes, r.writes),
        winner_steps=winner(l.total_steps, r.total_steps),
    )
