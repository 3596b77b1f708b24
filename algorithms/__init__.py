"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble_sort": AlgoInfo(key, label, fn, family, structure, …),
        …
    }

Every driver has the same signature:

    fn(working_set, target=None) -> Generator[Snapshot, None, None]

`target` is the search key, the key to insert / push / enqueue, or the
start node of a graph traversal; drivers that need none ignore it.
Adding an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from algorithms.bubble_sort    import bubble_sort
from algorithms.selection_sort import selection_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.linear_search  import linear_search
from algorithms.binary_search  import binary_search
from algorithms.bst            import bst_insert, bst_search, bst_inorder
from algorithms.bfs            import bfs
from algorithms.dfs            import dfs
from algorithms.graph_edit     import graph_add_node, graph_link_last_two
from algorithms.containers     import stack_push, stack_pop, queue_enqueue, queue_dequeue
from algorithms.step           import Snapshot, NOT_FOUND


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                  # registry key, e.g. "bubble_sort"
    label:            str                  # human label, e.g. "Bubble Sort"
    fn:               Callable             # the generator function
    family:           str                  # "sort", "search", "tree", "graph", "linear"
    structure:        str                  # "array", "tree", "graph", "stack", "queue"
    needs_target:     bool = False         # search key / value to insert / start node
    requires_sorted:  bool = False         # binary search precondition
    preserves_size:   bool = False         # sort family: permutation only
    speed:            str  = "fast"        # default delay preset (engine.DELAY_PRESETS key)
    complexity_time:  str  = ""
    complexity_space: str  = ""
    description:      str  = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=bubble_sort,
        family="sort", structure="array", preserves_size=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent out-of-order pairs; the largest key bubbles to the end each pass.",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", fn=selection_sort,
        family="sort", structure="array", preserves_size=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it into place. At most one swap per pass.",
    ),

    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", fn=insertion_sort,
        family="sort", structure="array", preserves_size=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Shifts larger keys right and drops each key into the gap.",
    ),

    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", fn=linear_search,
        family="search", structure="array", needs_target=True, preserves_size=True,
        speed="medium",
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every index from left to right.",
    ),

    "binary_search": AlgoInfo(
        key="binary_search", label="Binary Search", fn=binary_search,
        family="search", structure="array", needs_target=True,
        requires_sorted=True, preserves_size=True,
        speed="medium",
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves a sorted window around the middle element.",
    ),

    "bst_insert": AlgoInfo(
        key="bst_insert", label="BST Insert", fn=bst_insert,
        family="tree", structure="tree", needs_target=True,
        complexity_time="O(h)", complexity_space="O(1)",
        description="Walks left on smaller keys, right otherwise, and attaches a new leaf.",
    ),

    "bst_search": AlgoInfo(
        key="bst_search", label="BST Search", fn=bst_search,
        family="tree", structure="tree", needs_target=True,
        complexity_time="O(h)", complexity_space="O(1)",
        description="Follows BST ordering from the root and reports the visited path.",
    ),

    "bst_inorder": AlgoInfo(
        key="bst_inorder", label="In-order Traversal", fn=bst_inorder,
        family="tree", structure="tree",
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left subtree, node, right subtree: keys come out ascending.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs,
        family="graph", structure="graph", needs_target=True, speed="slow",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from the start node with a FIFO queue.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=dfs,
        family="graph", structure="graph", needs_target=True, speed="slow",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives as deep as possible before backtracking.",
    ),

    "graph_add_node": AlgoInfo(
        key="graph_add_node", label="Add Node", fn=graph_add_node,
        family="graph", structure="graph",
        complexity_time="O(1)", complexity_space="O(1)",
        description="Adds a node whose id is the current node count.",
    ),

    "graph_link_last_two": AlgoInfo(
        key="graph_link_last_two", label="Add Edge", fn=graph_link_last_two,
        family="graph", structure="graph",
        complexity_time="O(1)", complexity_space="O(1)",
        description="Connects the two most recently added nodes.",
    ),

    "stack_push": AlgoInfo(
        key="stack_push", label="Push", fn=stack_push,
        family="linear", structure="stack", needs_target=True,
        complexity_time="O(1)", complexity_space="O(1)",
        description="Adds a value on top of the stack.",
    ),

    "stack_pop": AlgoInfo(
        key="stack_pop", label="Pop", fn=stack_pop,
        family="linear", structure="stack",
        complexity_time="O(1)", complexity_space="O(1)",
        description="Removes the top of the stack.",
    ),

    "queue_enqueue": AlgoInfo(
        key="queue_enqueue", label="Enqueue", fn=queue_enqueue,
        family="linear", structure="queue", needs_target=True,
        complexity_time="O(1)", complexity_space="O(1)",
        description="Adds a value at the back of the queue.",
    ),

    "queue_dequeue": AlgoInfo(
        key="queue_dequeue", label="Dequeue", fn=queue_dequeue,
        family="linear", structure="queue",
        complexity_time="O(1)", complexity_space="O(1)",
        description="Removes the value at the front of the queue.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_family(family: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family == family]


def is_blocked(info: AlgoInfo, working_set: Any, target: Any = None) -> bool:
    """
    True when the request has a visible precondition violation
    (missing target, pop / dequeue on an empty container, linking
    fewer than two nodes).  Such a run completes without a single
    step; UIs should disable the control.
    """
    if info.needs_target and target is None:
        return True
    if info.key in ("stack_pop", "queue_dequeue"):
        return len(working_set) == 0
    if info.key == "graph_link_last_two":
        return len(working_set) < 2
    return False


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Snapshot",
    "NOT_FOUND",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_family",
    "is_blocked",
]
