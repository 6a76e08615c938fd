"""Heap-based sorting: a binary min-heap priority queue and in-place heap sort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


class PriorityQueue:
    """Binary min-heap: ``extract_priority`` always returns the smallest value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._heap: list[Any] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the queue."""
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def extract_priority(self) -> Any:
        """Remove and return the smallest value; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("extract from an empty priority queue")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._heap

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not heap[parent] > heap[i]:
                break
            heap[parent], heap[i] = heap[i], heap[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and heap[left] < heap[smallest]:
                smallest = left
            if right < size and heap[right] < heap[smallest]:
                smallest = right
            if smallest == i:
                return
            heap[i], heap[smallest] = heap[smallest], heap[i]
            i = smallest


def queue_heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by passing them through a PriorityQueue."""
    queue = PriorityQueue(values)
    values[:] = [queue.extract_priority() for _ in range(len(queue))]


def _heapify(values: MutableSequence[Any], size: int, root: int) -> None:
    """Restore the max-heap property for the subtree rooted at ``root``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with an in-array max-heap."""
    n = len(values)
    for root in range(n // 2 - 1, -1, -1):
        _heapify(values, n, root)
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _heapify(values, end, 0)