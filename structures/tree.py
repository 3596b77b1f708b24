"""
tree.py — Arena-Addressed Binary Search Tree
=============================================
Nodes live in three parallel lists indexed by node id:

    keys[i]   – the node's key
    left[i]   – id of the left child  (or None)
    right[i]  – id of the right child (or None)

Design decisions:
  - Ids are arena indices, never object references.  Traversal drivers
    keep plain integer frames on an explicit stack, so a run can be
    suspended between any two visits without relying on Python recursion.
  - Nodes are never deleted, so the first node ever attached (id 0) is
    always the root of a non-empty tree.
  - Ordering follows the textbook rule: key < node.key goes left,
    everything else (including duplicates) goes right.
"""

from typing import Any, Iterable, List, Optional, Tuple

from structures.array import is_key
from structures.exceptions import WorkingSetError


LEFT  = "left"
RIGHT = "right"


class BinarySearchTree:
    """
    Attributes:
        keys  : Node keys by id.
        left  : Left-child id by node id.
        right : Right-child id by node id.
    """

    def __init__(self):
        self.keys:  List[Any]           = []
        self.left:  List[Optional[int]] = []
        self.right: List[Optional[int]] = []

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[int]:
        return 0 if self.keys else None

    def __len__(self) -> int:
        return len(self.keys)

    def child(self, node: int, side: str) -> Optional[int]:
        return self.left[node] if side == LEFT else self.right[node]

    def side_for(self, node: int, key: Any) -> str:
        """Which subtree of `node` a key belongs in."""
        return LEFT if key < self.keys[node] else RIGHT

    def attach(self, parent: Optional[int], side: str, key: Any) -> int:
        """Create a leaf holding `key` under `parent` and return its id."""
        if not is_key(key):
            raise WorkingSetError(f"Tree keys must be numeric, got {key!r}")
        if parent is None:
            if self.keys:
                raise WorkingSetError("Tree already has a root")
        elif self.child(parent, side) is not None:
            raise WorkingSetError(f"Node {parent} already has a {side} child")

        node_id = len(self.keys)
        self.keys.append(key)
        self.left.append(None)
        self.right.append(None)
        if parent is not None:
            if side == LEFT:
                self.left[parent] = node_id
            else:
                self.right[parent] = node_id
        return node_id

    def insert(self, key: Any) -> int:
        """Non-animated insert, used to build trees from raw key lists."""
        parent, side = None, RIGHT
        node = self.root
        while node is not None:
            parent, side = node, self.side_for(node, key)
            node = self.child(node, side)
        return self.attach(parent, side, key)

    def insert_all(self, keys: Iterable[Any]) -> "BinarySearchTree":
        for k in keys:
            self.insert(k)
        return self

    def inorder_keys(self) -> List[Any]:
        out: List[Any] = []
        stack: List[int] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = self.left[node]
            node = stack.pop()
            out.append(self.keys[node])
            node = self.right[node]
        return out

    def depth(self) -> int:
        if self.root is None:
            return 0
        best = 0
        stack: List[Tuple[int, int]] = [(0, 1)]
        while stack:
            node, d = stack.pop()
            best = max(best, d)
            for c in (self.left[node], self.right[node]):
                if c is not None:
                    stack.append((c, d + 1))
        return best

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def freeze(self) -> Tuple[Tuple[Any, Optional[int], Optional[int]], ...]:
        return tuple(zip(self.keys, self.left, self.right))

    def to_dict(self) -> dict:
        return {
            "root":  self.root,
            "nodes": [
                {"id": i, "key": k, "left": l, "right": r}
                for i, (k, l, r) in enumerate(self.freeze())
            ],
        }

    @classmethod
    def from_keys(cls, keys: Iterable[Any]) -> "BinarySearchTree":
        return cls().insert_all(keys)

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={len(self)}, depth={self.depth()})"
