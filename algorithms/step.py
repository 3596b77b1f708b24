"""
step.py — Snapshot & Step Tracer Base
=====================================
Every driver is a generator that yields Snapshot objects.
A Snapshot is a frozen-in-time picture of one step boundary:

    • The full working set at that instant (frozen, never a live reference)
    • Which indices / node ids are active right now
    • Which ones are marked (sorted, found, on the search path, visited)
    • The pending frontier for traversals
    • The primitive's own outcome and, on terminal steps, the algorithm result
    • Running counters (comparisons, swaps, writes, visits)

Design decisions:
  - Snapshot is a plain frozen dataclass.  The tracer that produced it is
    the only writer; the controller, sinks and renderers are pure readers.
  - `seq` is assigned by the tracer, starting at 0 and increasing by one
    per emission, so a run's snapshot sequence never has gaps.
  - `overlay` is a free-form dict for algorithm-specific extras
    (binary-search window, insertion key, …).
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


NOT_FOUND = -1

METRIC_KEYS = ("comparisons", "swaps", "writes", "visits")


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        seq         : 0-based, gap-free position of this snapshot in the run.
        action      : Primitive that produced it ("compare", "swap", "visit", …).
        state       : Frozen working set after the primitive ran.
        active      : Indices / node ids the primitive touched.
        marked      : Sorted markers, found index, search path or visit order.
        frontier    : Pending nodes for traversals (queue / stack contents).
        outcome     : The primitive's own outcome (comparison sign, swapped?, popped value …).
        result      : Algorithm result, set on terminal snapshots only.
        explanation : Human-readable description of the step.
        overlay     : Free-form algorithm-specific extras.
        metrics     : Running counters at this step.
        is_final    : True on the snapshot that ends the algorithm.
    """

    seq:          int                  = 0
    action:       str                  = ""
    state:        Any                  = ()
    active:       Tuple[Any, ...]      = ()
    marked:       Tuple[Any, ...]      = ()
    frontier:     Tuple[Any, ...]      = ()
    outcome:      Any                  = None
    result:       Any                  = None
    explanation:  str                  = ""
    overlay:      Mapping[str, Any]    = field(default_factory=dict)
    metrics:      Mapping[str, int]    = field(default_factory=dict)
    is_final:     bool                 = False

    def __post_init__(self):
        # read-only views over private copies
        object.__setattr__(self, "overlay", MappingProxyType(dict(self.overlay)))
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seq":         self.seq,
            "action":      self.action,
            "state":       plain(self.state),
            "active":      list(self.active),
            "marked":      list(self.marked),
            "frontier":    list(self.frontier),
            "outcome":     plain(self.outcome),
            "result":      plain(self.result),
            "explanation": self.explanation,
            "overlay":     {k: plain(v) for k, v in self.overlay.items()},
            "metrics":     dict(self.metrics),
            "is_final":    self.is_final,
        }


def plain(value: Any) -> Any:
    """Nested tuples → lists, for JSON."""
    if isinstance(value, (tuple, list)):
        return [plain(v) for v in value]
    return value


def sign(a: Any, b: Any) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


# ---------------------------------------------------------------------------
# Tracer base — owns the sequence counter, running metrics and markers
# ---------------------------------------------------------------------------
class StepTracer:
    """
    Scratch-pad that drivers use to run primitives and emit Snapshots.

    Usage inside a driver generator:
        tr = ArrayTracer(values)
        yield tr.compare(0, 1)
        yield tr.mark(len(values) - 1)

    Subclasses add one method per primitive; each performs exactly one
    mutation or comparison and returns exactly one Snapshot.
    """

    def __init__(self, working_set: Any):
        self.working_set = working_set
        self.metrics:  Dict[str, int] = {k: 0 for k in METRIC_KEYS}
        self.marked:   List[Any]      = []
        self.frontier: List[Any]      = []
        self._seq:     int            = 0

    @property
    def emitted(self) -> int:
        return self._seq

    def freeze(self) -> Any:
        return self.working_set.freeze()

    def add_marks(self, items: Iterable[Any]) -> None:
        for item in items:
            if item not in self.marked:
                self.marked.append(item)

    def emit(
        self,
        action: str,
        active: Iterable[Any] = (),
        outcome: Any = None,
        result: Any = None,
        explanation: str = "",
        overlay: Optional[Dict[str, Any]] = None,
        is_final: bool = False,
    ) -> Snapshot:
        snap = Snapshot(
            seq=self._seq,
            action=action,
            state=self.freeze(),
            active=tuple(active),
            marked=tuple(self.marked),
            frontier=tuple(self.frontier),
            outcome=outcome,
            result=result,
            explanation=explanation,
            overlay=overlay or {},
            metrics=self.metrics,
            is_final=is_final,
        )
        self._seq += 1
        return snap

    def finish(self, result: Any = None, explanation: str = "", outcome: Any = None, **overlay) -> Snapshot:
        """Terminal snapshot that reports the algorithm's result."""
        return self.emit("done", outcome=outcome, result=result,
                         explanation=explanation, overlay=overlay, is_final=True)
