"""
bubble_sort.py — Bubble Sort
============================
Adjacent compare-and-swap in descending passes.  Pass i bubbles the
largest remaining key to index n-i-1, which is then marked sorted, so
the unsorted prefix shrinks by one per pass.  Stable: equal neighbours
are never swapped.
"""

from typing import Any, Generator, List

from algorithms.primitives import ArrayTracer
from algorithms.step import Snapshot


def bubble_sort(values: List[Any], target: Any = None) -> Generator[Snapshot, None, None]:
    """
    Yields one Snapshot per adjacent comparison (swapping when out of
    order), one per end-of-pass marker, and a final all-sorted marker.
    """
    tr = ArrayTracer(values)
    n = len(values)

    for i in range(n - 1):
        for j in range(n - i - 1):
            yield tr.compare_swap(j, j + 1)
        yield tr.mark(n - i - 1)

    yield tr.mark_all()
