"""
bst.py — Binary Search Tree Operations
======================================
Three generators over an arena-addressed BinarySearchTree:

    bst_insert   – walk down by BST ordering, attach a leaf at the empty slot
    bst_search   – walk down by BST ordering, report the visited key path
    bst_inorder  – left, visit, right; yields keys in ascending order

Nothing here recurses.  The in-order traversal keeps its pending nodes
on an explicit stack of node ids, so every visit is a plain suspension
point for the controller.
"""

from typing import Any, Generator, List

from algorithms.primitives import TreeTracer
from algorithms.step import Snapshot
from structures.tree import BinarySearchTree, RIGHT


def bst_insert(tree: BinarySearchTree, target: Any = None) -> Generator[Snapshot, None, None]:
    """Insert `target`: one visit per node on the way down, then one attach."""
    if target is None:
        return

    tr = TreeTracer(tree)
    node = tree.root
    if node is None:
        yield tr.attach(None, RIGHT, target)
        return

    while True:
        side = tree.side_for(node, target)
        yield tr.visit(node, compare_to=target,
                       explanation=f"{target} vs {tree.keys[node]}: go {side}.")
        child = tree.child(node, side)
        if child is None:
            yield tr.attach(node, side, target)
            return
        node = child


def bst_search(tree: BinarySearchTree, target: Any = None) -> Generator[Snapshot, None, None]:
    """
    Visit nodes from the root until the key matches or the walk falls off
    the tree.  The terminal snapshot's result is the tuple of visited keys;
    its outcome is True when the last key is the target.
    """
    if target is None:
        return

    tr = TreeTracer(tree)
    path: List[Any] = []
    found = False
    node = tree.root

    while node is not None:
        snap = tr.visit(node, compare_to=target)
        yield snap
        path.append(tree.keys[node])
        if snap.outcome == 0:
            found = True
            break
        node = tree.left[node] if snap.outcome < 0 else tree.right[node]

    text = (f"Found {target} after {len(path)} visit(s)." if found
            else f"{target} is not in the tree.")
    yield tr.finish(result=tuple(path), outcome=found, explanation=text)


def bst_inorder(tree: BinarySearchTree, target: Any = None) -> Generator[Snapshot, None, None]:
    """In-order traversal with an explicit stack; the frontier shows pending ancestors."""
    tr = TreeTracer(tree)
    order: List[Any] = []
    stack: List[int] = []
    node = tree.root

    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = tree.left[node]
        node = stack.pop()
        tr.frontier = list(stack)
        yield tr.visit(node)
        order.append(tree.keys[node])
        node = tree.right[node]

    tr.frontier = []
    yield tr.finish(result=tuple(order), explanation="In-order traversal complete.")
