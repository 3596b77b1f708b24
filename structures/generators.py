"""
generators.py — Initial Data Providers
======================================
Factories for the data each visualizer starts from.  Arrays are random
integers in [low, high]; every other structure starts empty and grows
through explicit operations.

`GENERATORS` maps the names the API accepts to the factory functions.
"""

import random
from typing import Callable, Dict, List, Optional

from structures.graph import Graph
from structures.linear import Queue, Stack
from structures.tree import BinarySearchTree


def random_array(
    size: int = 30,
    low: int = 1,
    high: int = 100,
    seed: Optional[int] = None,
) -> List[int]:
    """Unsorted random integers; the sorting visualizer's starting data."""
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def sorted_random_array(
    size: int = 20,
    low: int = 1,
    high: int = 100,
    seed: Optional[int] = None,
) -> List[int]:
    """Ascending random integers; binary search needs its input pre-sorted."""
    return sorted(random_array(size, low, high, seed))


def empty_tree() -> BinarySearchTree:
    return BinarySearchTree()


def empty_graph() -> Graph:
    return Graph()


def empty_stack() -> Stack:
    return Stack()


def empty_queue() -> Queue:
    return Queue()


GENERATORS: Dict[str, Callable] = {
    "random_array":        random_array,
    "sorted_random_array": sorted_random_array,
    "empty_tree":          empty_tree,
    "empty_graph":         empty_graph,
    "empty_stack":         empty_stack,
    "empty_queue":         empty_queue,
}
