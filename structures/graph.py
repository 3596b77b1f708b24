"""
graph.py — Undirected Graph Container
=====================================
Single source of truth for the graph traversal drivers.

Responsibilities:
  1. Node & edge creation                   (add_node / add_edge / link_last_two)
  2. Adjacency queries                      (neighbours)
  3. Serialisation round-trip               (to_dict / from_dict / freeze)

Design decisions:
  - Node ids are integers handed out in creation order (id = node count),
    matching how nodes are added one at a time from the editor.
  - Edges are stored as (a, b) tuples in insertion order.  The adjacency
    dict  `_adj[node_id] → [neighbour_id, …]`  is maintained incrementally,
    so a node's neighbours come back in the order their edges were added.
    BFS and DFS depend on this for deterministic visit order.
  - Every edge is undirected: either endpoint reaches the other.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from structures.exceptions import WorkingSetError


class Graph:
    """
    Attributes:
        nodes : Node ids in creation order.
        edges : (a, b) tuples in insertion order.
        _adj  : {node_id: [neighbour_id, …]}
    """

    def __init__(self):
        self.nodes: List[int]             = []
        self.edges: List[Tuple[int, int]] = []
        self._adj:  Dict[int, List[int]]  = {}

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, node_id: Optional[int] = None) -> int:
        """Add a node.  Without an explicit id the next free integer is used."""
        if node_id is None:
            node_id = len(self.nodes)
            while node_id in self._adj:
                node_id += 1
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            raise WorkingSetError(f"Node ids must be integers, got {node_id!r}")
        if node_id in self._adj:
            raise WorkingSetError(f"Node {node_id} already exists")
        self.nodes.append(node_id)
        self._adj[node_id] = []
        return node_id

    def has_node(self, node_id: int) -> bool:
        return node_id in self._adj

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, a: int, b: int) -> Tuple[int, int]:
        for n in (a, b):
            if n not in self._adj:
                raise WorkingSetError(f"Edge ({a}, {b}) references unknown node {n!r}")
        self.edges.append((a, b))
        self._adj[a].append(b)
        if a != b:
            self._adj[b].append(a)
        return (a, b)

    def link_last_two(self) -> Tuple[int, int]:
        """Connect the two most recently added nodes."""
        if len(self.nodes) < 2:
            raise WorkingSetError("Need at least two nodes to add an edge")
        return self.add_edge(self.nodes[-2], self.nodes[-1])

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[int]:
        """Neighbours in edge-insertion order (a node may appear twice for parallel edges)."""
        return list(self._adj.get(node_id, []))

    def __len__(self) -> int:
        return len(self.nodes)

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def freeze(self) -> Tuple[Tuple[int, ...], Tuple[Tuple[int, int], ...]]:
        return (tuple(self.nodes), tuple(self.edges))

    def to_dict(self) -> dict:
        return {
            "nodes": list(self.nodes),
            "edges": [list(e) for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        return cls.from_edges(data.get("nodes", []), data.get("edges", []))

    @classmethod
    def from_edges(cls, nodes: Iterable[int], edges: Iterable[Sequence[int]]) -> "Graph":
        g = cls()
        for n in nodes:
            g.add_node(n)
        for e in edges:
            if len(e) != 2:
                raise WorkingSetError(f"Edges must be pairs, got {e!r}")
            g.add_edge(e[0], e[1])
        return g

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
