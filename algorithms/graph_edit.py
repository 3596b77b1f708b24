"""
graph_edit.py — Graph Editing
=============================
Single-step drivers that grow a graph the way the editor does: one node
at a time, each new node optionally linked to the one added before it.
Chaining these runs on the same Graph builds it up step by step, like
tree inserts or stack pushes.
"""

from typing import Any, Generator

from algorithms.primitives import GraphTracer
from algorithms.step import Snapshot
from structures.graph import Graph


def graph_add_node(graph: Graph, target: Any = None) -> Generator[Snapshot, None, None]:
    """New node id = current node count."""
    yield GraphTracer(graph).add_node()


def graph_link_last_two(graph: Graph, target: Any = None) -> Generator[Snapshot, None, None]:
    if len(graph) < 2:
        return
    yield GraphTracer(graph).link_last_two()
