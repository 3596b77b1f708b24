"""
primitives.py — Step Primitives per Working-Set Kind
=====================================================
One tracer per working-set shape:

    ArrayTracer   – compare, compare_key, compare_swap, swap, overwrite, mark, probe
    TreeTracer    – visit, attach
    GraphTracer   – visit (with frontier), add_node, link_last_two
    LinearTracer  – push, pop, enqueue, dequeue

Primitives are synchronous: one mutation or comparison, one Snapshot,
no delay and no cancellation check.  Counters are bumped before the
snapshot is built so each snapshot already includes its own work.
"""

from typing import Any, Iterable, List, Optional

from algorithms.step import Snapshot, StepTracer, sign
from structures.graph import Graph
from structures.linear import Queue, Stack
from structures.tree import BinarySearchTree


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
class ArrayTracer(StepTracer):

    def __init__(self, values: List[Any]):
        super().__init__(values)

    def freeze(self) -> tuple:
        return tuple(self.working_set)

    def compare(self, i: int, j: int) -> Snapshot:
        a = self.working_set
        self.metrics["comparisons"] += 1
        return self.emit(
            "compare", active=(i, j), outcome=sign(a[i], a[j]),
            explanation=f"Compare a[{i}]={a[i]} with a[{j}]={a[j]}.",
        )

    def compare_key(self, i: int, key: Any) -> Snapshot:
        """Compare a slot against a value held outside the array."""
        a = self.working_set
        self.metrics["comparisons"] += 1
        return self.emit(
            "compare", active=(i, i + 1), outcome=sign(a[i], key),
            explanation=f"Compare a[{i}]={a[i]} with key {key}.",
            overlay={"key": key},
        )

    def compare_swap(self, i: int, j: int) -> Snapshot:
        """Swap a[i] and a[j] only if they are out of order."""
        a = self.working_set
        self.metrics["comparisons"] += 1
        swapped = a[i] > a[j]
        if swapped:
            a[i], a[j] = a[j], a[i]
            self.metrics["swaps"] += 1
            self.metrics["writes"] += 2
            text = f"a[{i}] > a[{j}]: swap them."
        else:
            text = f"a[{i}] <= a[{j}]: already in order."
        return self.emit("compare_swap", active=(i, j), outcome=swapped, explanation=text)

    def swap(self, i: int, j: int) -> Snapshot:
        a = self.working_set
        a[i], a[j] = a[j], a[i]
        self.metrics["swaps"] += 1
        self.metrics["writes"] += 2
        return self.emit("swap", active=(i, j), explanation=f"Swap a[{i}] and a[{j}].")

    def overwrite(self, i: int, value: Any, source: Optional[int] = None) -> Snapshot:
        a = self.working_set
        a[i] = value
        self.metrics["writes"] += 1
        active = (source, i) if source is not None else (i,)
        origin = f"a[{source}]" if source is not None else "key"
        return self.emit("overwrite", active=active, outcome=value,
                         explanation=f"Write {origin}={value} into a[{i}].")

    def mark(self, *indices: int) -> Snapshot:
        """Mark indices as in their final sorted position."""
        self.add_marks(indices)
        return self.emit("mark", active=indices,
                         explanation=f"Index {', '.join(map(str, indices))} is in final position.")

    def mark_all(self) -> Snapshot:
        self.add_marks(range(len(self.working_set)))
        return self.emit("done", explanation="Array is sorted.", is_final=True)

    def probe(self, i: int, target: Any, **overlay) -> Snapshot:
        """Search probe: compare a[i] with the target; a match ends the search."""
        a = self.working_set
        self.metrics["comparisons"] += 1
        outcome = sign(a[i], target)
        if outcome == 0:
            self.add_marks([i])
            return self.emit("probe", active=(i,), outcome=0, result=i,
                             explanation=f"a[{i}]={a[i]} equals target {target}: found.",
                             overlay=overlay, is_final=True)
        return self.emit("probe", active=(i,), outcome=outcome,
                         explanation=f"a[{i}]={a[i]} != target {target}.",
                         overlay=overlay)


# ---------------------------------------------------------------------------
# Binary search trees
# ---------------------------------------------------------------------------
class TreeTracer(StepTracer):

    def __init__(self, tree: BinarySearchTree):
        super().__init__(tree)

    def visit(self, node: int, compare_to: Any = None, explanation: str = "") -> Snapshot:
        """Visit a node; with `compare_to` the visit also compares that key with the node's."""
        tree = self.working_set
        self.metrics["visits"] += 1
        self.add_marks([node])
        outcome = None
        if compare_to is not None:
            self.metrics["comparisons"] += 1
            outcome = sign(compare_to, tree.keys[node])
        return self.emit("visit", active=(node,), outcome=outcome,
                         explanation=explanation or f"Visit node {tree.keys[node]}.")

    def attach(self, parent: Optional[int], side: str, key: Any) -> Snapshot:
        node = self.working_set.attach(parent, side, key)
        self.metrics["writes"] += 1
        self.add_marks([node])
        where = "as root" if parent is None else f"as {side} child of {self.working_set.keys[parent]}"
        return self.emit("attach", active=(node,), outcome=node, result=node,
                         explanation=f"Insert {key} {where}.", is_final=True)


# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------
class GraphTracer(StepTracer):

    def __init__(self, graph: Graph):
        super().__init__(graph)

    def visit(self, node: int, frontier: Iterable[Any] = ()) -> Snapshot:
        self.metrics["visits"] += 1
        self.add_marks([node])
        self.frontier = list(frontier)
        return self.emit("visit", active=(node,),
                         explanation=f"Visit node {node} (visit #{len(self.marked)}).")

    def add_node(self) -> Snapshot:
        node = self.working_set.add_node()
        self.metrics["writes"] += 1
        return self.emit("add_node", active=(node,), outcome=node, result=node,
                         explanation=f"Add node {node}.", is_final=True)

    def link_last_two(self) -> Snapshot:
        a, b = self.working_set.link_last_two()
        self.metrics["writes"] += 1
        return self.emit("add_edge", active=(a, b), outcome=(a, b), result=(a, b),
                         explanation=f"Connect node {a} and node {b}.", is_final=True)

    def finish(self, result: Any = None, explanation: str = "", outcome: Any = None, **overlay) -> Snapshot:
        self.frontier = []
        return super().finish(result, explanation, outcome, **overlay)


# ---------------------------------------------------------------------------
# Stacks & queues
# ---------------------------------------------------------------------------
class LinearTracer(StepTracer):

    def push(self, value: Any) -> Snapshot:
        stack: Stack = self.working_set
        idx = stack.push(value)
        self.metrics["writes"] += 1
        return self.emit("push", active=(idx,), outcome=value, result=value,
                         explanation=f"Push {value} onto the stack.", is_final=True)

    def pop(self) -> Snapshot:
        stack: Stack = self.working_set
        value = stack.pop()
        self.metrics["writes"] += 1
        return self.emit("pop", outcome=value, result=value,
                         explanation=f"Pop {value} from the top of the stack.", is_final=True)

    def enqueue(self, value: Any) -> Snapshot:
        queue: Queue = self.working_set
        idx = queue.enqueue(value)
        self.metrics["writes"] += 1
        return self.emit("enqueue", active=(idx,), outcome=value, result=value,
                         explanation=f"Enqueue {value} at the back.", is_final=True)

    def dequeue(self) -> Snapshot:
        queue: Queue = self.working_set
        value = queue.dequeue()
        self.metrics["writes"] += 1
        return self.emit("dequeue", outcome=value, result=value,
                         explanation=f"Dequeue {value} from the front.", is_final=True)
