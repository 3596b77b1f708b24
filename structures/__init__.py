"""
structures/
-----------
Working sets the algorithms operate on.  Public API:

    from structures import BinarySearchTree, Graph, Stack, Queue
    from structures import as_key_array, is_sorted
    from structures.generators import random_array, GENERATORS
"""

from structures.exceptions import WorkingSetError
from structures.array  import as_key_array, is_sorted, is_key
from structures.tree   import BinarySearchTree
from structures.graph  import Graph
from structures.linear import LinearContainer, Stack, Queue

__all__ = [
    "WorkingSetError",
    "as_key_array", "is_sorted", "is_key",
    "BinarySearchTree",
    "Graph",
    "LinearContainer", "Stack", "Queue",
]
