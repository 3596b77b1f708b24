"""
selection_sort.py — Selection Sort
==================================
Each pass scans the unsorted suffix keeping a running minimum index,
then performs at most one swap to move that minimum into place.
Not stable: the long-range swap can reorder equal keys.
"""

from typing import Any, Generator, List

from algorithms.primitives import ArrayTracer
from algorithms.step import Snapshot


def selection_sort(values: List[Any], target: Any = None) -> Generator[Snapshot, None, None]:
    tr = ArrayTracer(values)
    n = len(values)

    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            snap = tr.compare(j, min_idx)
            yield snap
            if snap.outcome < 0:
                min_idx = j
        if min_idx != i:
            yield tr.swap(i, min_idx)
        yield tr.mark(i)

    yield tr.mark_all()
