"""
dfs.py — Depth-First Traversal
==============================
Generator-based DFS that reproduces recursive DFS order without Python
recursion.

Each stack frame is (node, position in that node's neighbour list), the
same information a recursive call keeps on the call stack.  A node is
visited the instant it is first reached; the frame on top then resumes
scanning its neighbours where it left off.  When a frame runs out of
neighbours it is popped, which is the "return" of the recursive version.
"""

from typing import Any, Generator, List, Set, Tuple

from algorithms.primitives import GraphTracer
from algorithms.step import Snapshot
from structures.exceptions import WorkingSetError
from structures.graph import Graph


def dfs(graph: Graph, target: Any = None) -> Generator[Snapshot, None, None]:
    """`target` is the start node.  The frontier is the current recursion path."""
    if target is None:
        return
    if not graph.has_node(target):
        raise WorkingSetError(f"Start node {target!r} is not in the graph")

    tr = GraphTracer(graph)
    visited: Set[int] = {target}
    order: List[int] = [target]
    frames: List[Tuple[int, int]] = [(target, 0)]
    yield tr.visit(target, frontier=[target])

    while frames:
        node, pos = frames[-1]
        nbrs = graph.neighbours(node)
        while pos < len(nbrs) and nbrs[pos] in visited:
            pos += 1
        if pos == len(nbrs):
            frames.pop()
            continue

        nxt = nbrs[pos]
        frames[-1] = (node, pos + 1)
        frames.append((nxt, 0))
        visited.add(nxt)
        order.append(nxt)
        yield tr.visit(nxt, frontier=[n for n, _ in frames])

    yield tr.finish(result=tuple(order), explanation=f"DFS from {target} visited {len(order)} node(s).")
