"""
binary_search.py — Binary Search
================================
Requires ascending input.  Each probe looks at mid = (left + right) // 2,
tests for equality first, then narrows to the lower half when the target
is smaller than a[mid] and to the upper half otherwise.

A present target is found within ceil(log2(n + 1)) probes; the matching
probe is the terminal snapshot.  When the window empties, one terminal
snapshot reports NOT_FOUND.
"""

from typing import Any, Generator, List

from algorithms.primitives import ArrayTracer
from algorithms.step import NOT_FOUND, Snapshot


def binary_search(values: List[Any], target: Any = None) -> Generator[Snapshot, None, None]:
    if target is None:
        return

    tr = ArrayTracer(values)
    left, right = 0, len(values) - 1

    while left <= right:
        mid = (left + right) // 2
        snap = tr.probe(mid, target, window=(left, right))
        yield snap
        if snap.is_final:
            return
        if target < values[mid]:
            right = mid - 1
        else:
            left = mid + 1

    yield tr.finish(result=NOT_FOUND, explanation=f"Window is empty: {target} is not in the array.",
                    window=(left, right))
