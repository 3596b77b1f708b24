"""
insertion_sort.py — Insertion Sort
==================================
Takes a[i] as the key, shifts every element strictly greater than the
key one slot to the right, then writes the key into the gap.  Stable:
the shift stops at the first element <= key.
"""

from typing import Any, Generator, List

from algorithms.primitives import ArrayTracer
from algorithms.step import Snapshot


def insertion_sort(values: List[Any], target: Any = None) -> Generator[Snapshot, None, None]:
    """
    Yields a comparison Snapshot for every key test (including the one
    that stops the shift), an overwrite per shift, an overwrite for the
    key placement and a marker per outer iteration.
    """
    tr = ArrayTracer(values)
    a = values
    n = len(a)

    for i in range(1, n):
        key = a[i]
        j = i - 1
        while j >= 0:
            snap = tr.compare_key(j, key)
            yield snap
            if snap.outcome <= 0:
                break
            yield tr.overwrite(j + 1, a[j], source=j)
            j -= 1
        yield tr.overwrite(j + 1, key)
        yield tr.mark(i)

    yield tr.mark_all()
