"""
linear_search.py — Linear Search
================================
Probes indices 0..n-1 in order.  The first matching probe is the
terminal snapshot; if nothing matches, one extra terminal snapshot
reports NOT_FOUND.  Works on unsorted input.
"""

from typing import Any, Generator, List

from algorithms.primitives import ArrayTracer
from algorithms.step import NOT_FOUND, Snapshot


def linear_search(values: List[Any], target: Any = None) -> Generator[Snapshot, None, None]:
    if target is None:
        return

    tr = ArrayTracer(values)
    for i in range(len(values)):
        snap = tr.probe(i, target)
        yield snap
        if snap.is_final:
            return

    yield tr.finish(result=NOT_FOUND, explanation=f"{target} is not in the array.")
