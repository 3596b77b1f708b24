"""
containers.py — Stack & Queue Operations
========================================
O(1) single-step drivers.  Each still yields exactly one Snapshot so a
push looks the same to observers as any other step.  Popping or
dequeuing an empty container yields nothing: the caller is expected to
have disabled that control.
"""

from typing import Any, Generator

from algorithms.primitives import LinearTracer
from algorithms.step import Snapshot
from structures.linear import Queue, Stack


def stack_push(stack: Stack, target: Any = None) -> Generator[Snapshot, None, None]:
    if target is None:
        return
    yield LinearTracer(stack).push(target)


def stack_pop(stack: Stack, target: Any = None) -> Generator[Snapshot, None, None]:
    if stack.is_empty():
        return
    yield LinearTracer(stack).pop()


def queue_enqueue(queue: Queue, target: Any = None) -> Generator[Snapshot, None, None]:
    if target is None:
        return
    yield LinearTracer(queue).enqueue(target)


def queue_dequeue(queue: Queue, target: Any = None) -> Generator[Snapshot, None, None]:
    if queue.is_empty():
        return
    yield LinearTracer(queue).dequeue()
