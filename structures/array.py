"""
array.py — Array Working Set Helpers
=====================================
Arrays are plain Python lists of numeric keys.  The sort and search
drivers mutate them in place, so callers hand over a private copy made
by `as_key_array`.
"""

from numbers import Real
from typing import Any, Iterable, List, Sequence

from structures.exceptions import WorkingSetError


def is_key(value: Any) -> bool:
    """True for orderable numeric keys (bools are rejected)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def as_key_array(data: Iterable[Any]) -> List[Any]:
    """Validate and copy `data` into a fresh working list."""
    if data is None or isinstance(data, (str, bytes, dict)):
        raise WorkingSetError(f"Expected a sequence of numeric keys, got {type(data).__name__}")
    values = list(data)
    for i, v in enumerate(values):
        if not is_key(v):
            raise WorkingSetError(f"Element {i} ({v!r}) is not a numeric key")
    return values


def is_sorted(values: Sequence[Any]) -> bool:
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))
