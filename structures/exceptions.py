"""
Structure Exceptions

Raised when initial data or an edit cannot form a valid working set.
"""


class WorkingSetError(ValueError):
    """Malformed working set: non-numeric keys, unknown graph node, unsorted input to a sorted-only algorithm."""
    pass
