"""
bfs.py — Breadth-First Traversal
================================
Generator-based BFS over an undirected Graph.

    queue ← [start]
    while queue is not empty:
        node ← queue.dequeue()
        if node already visited: continue
        visit(node)
        enqueue every neighbour not yet visited   (edge-insertion order)

Nodes are marked visited when dequeued, so a node can sit in the queue
more than once; the second copy is skipped without a snapshot.  One
Snapshot per visit, then a terminal snapshot carrying the visit order.
"""

from collections import deque
from typing import Any, Generator, List, Set

from algorithms.primitives import GraphTracer
from algorithms.step import Snapshot
from structures.exceptions import WorkingSetError
from structures.graph import Graph


def bfs(graph: Graph, target: Any = None) -> Generator[Snapshot, None, None]:
    """`target` is the start node."""
    if target is None:
        return
    if not graph.has_node(target):
        raise WorkingSetError(f"Start node {target!r} is not in the graph")

    tr = GraphTracer(graph)
    queue = deque([target])
    visited: Set[int] = set()
    order: List[int] = []

    while queue:
        node = queue.popleft()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        yield tr.visit(node, frontier=queue)

        for nbr in graph.neighbours(node):
            if nbr not in visited:
                queue.append(nbr)

    yield tr.finish(result=tuple(order), explanation=f"BFS from {target} visited {len(order)} node(s).")
