from __future__ import annotations

from typing import Generic, List, Optional, Tuple, TypeVar


T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary min-heap of (item, priority) pairs stored in a flat list.

    The same item may be pushed several times with different priorities;
    there is no decrease-key, callers discard stale entries themselves.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[T, int]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    @property
    def count(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def push(self, item: T, priority: int) -> None:
        self._heap.append((item, priority))
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> Optional[Tuple[T, int]]:
        if not self._heap:
            return None
        return self._heap[0]

    def try_pop(self) -> Optional[Tuple[T, int]]:
        """Remove and return the minimum-priority entry, or None when empty."""
        if not self._heap:
            return None

        root = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return root

    def pop(self) -> Tuple[T, int]:
        entry = self.try_pop()
        if entry is None:
            raise IndexError("pop from an empty priority queue")
        return entry

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent][1] <= heap[index][1]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and heap[left][1] < heap[smallest][1]:
                smallest = left
            if right < size and heap[right][1] < heap[smallest][1]:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest
