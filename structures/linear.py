"""
linear.py — Stack & Queue Containers
====================================
O(1) linear containers.  Both expose the same read side (`freeze`,
`__len__`, `to_list`) so a snapshot can capture either one the same way.
"""

from collections import deque
from typing import Any, Iterable, List, Tuple

from structures.array import as_key_array


class LinearContainer:
    """Common read-side for Stack and Queue."""

    kind: str = ""

    def __init__(self, items: Iterable[Any] = ()):
        self._items = deque(as_key_array(items))

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def freeze(self) -> Tuple[Any, ...]:
        return tuple(self._items)

    def to_list(self) -> List[Any]:
        return list(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)})"


class Stack(LinearContainer):
    """Top of the stack is the last element."""

    kind = "stack"

    def push(self, value: Any) -> int:
        self._items.append(value)
        return len(self._items) - 1

    def pop(self) -> Any:
        return self._items.pop()


class Queue(LinearContainer):
    """Front of the queue is the first element."""

    kind = "queue"

    def enqueue(self, value: Any) -> int:
        self._items.append(value)
        return len(self._items) - 1

    def dequeue(self) -> Any:
        return self._items.popleft()
