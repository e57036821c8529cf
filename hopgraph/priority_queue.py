"""Indexed binary min-heap used by the single-source search."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .exceptions import (
    AlgorithmError,
    DuplicateElementError,
    EmptyQueueError,
    NegativePriorityError,
    UnknownElementError,
)

Entry = Tuple[int, int]


class IndexedPriorityQueue:
    """Min-priority queue over unique integer elements.

    Entries live in a zero-based heap list of ``[priority, element]`` slots;
    ``_location`` maps every element to its current slot. Every swap updates
    both structures, so an element's priority can be read in O(1) and changed
    in O(log n).

    Priorities must be non-negative integers.
    """

    def __init__(self) -> None:
        self._heap: List[List[int]] = []
        self._location: Dict[int, int] = {}

    # ---- public API ---------------------------------------------------

    def push(self, priority: int, element: int) -> None:
        """Insert ``element`` with ``priority``.

        Raises:
            DuplicateElementError: If ``element`` is already queued.
            NegativePriorityError: If ``priority`` is negative.
        """
        if element in self._location:
            raise DuplicateElementError(f"element {element!r} is already in the queue")
        if priority < 0:
            raise NegativePriorityError(f"priority must be non-negative, got {priority!r}")
        self._heap.append([priority, element])
        self._location[element] = len(self._heap) - 1
        self._percolate_up(len(self._heap) - 1)

    def pop(self) -> Entry:
        """Remove and return the ``(priority, element)`` pair at the root.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("pop from an empty priority queue")
        priority, element = self._heap[0]
        del self._location[element]

        last = self._heap.pop()
        if self._heap:
            # move the last leaf into the root slot and sink it
            self._heap[0] = last
            self._location[last[1]] = 0
            self._push_down(0)
        return priority, element

    def top_priority(self) -> int:
        """Return the smallest priority in the queue.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("top_priority of an empty priority queue")
        return self._heap[0][0]

    def top_element(self) -> int:
        """Return the element holding the smallest priority.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("top_element of an empty priority queue")
        return self._heap[0][1]

    def change_priority(self, new_priority: int, element: int) -> None:
        """Set the priority of a queued ``element`` and restore heap order.

        Works for both increases and decreases: the entry first tries to
        percolate up and, if it stays where it is, is pushed down.

        Raises:
            UnknownElementError: If ``element`` is not queued.
            NegativePriorityError: If ``new_priority`` is negative.
        """
        if element not in self._location:
            raise UnknownElementError(f"element {element!r} is not in the queue")
        if new_priority < 0:
            raise NegativePriorityError(f"priority must be non-negative, got {new_priority!r}")
        index = self._location[element]
        self._heap[index][0] = new_priority
        if self._percolate_up(index) == index:
            self._push_down(index)

    def get_priority(self, element: int) -> int:
        """Return the priority of ``element``.

        Raises:
            UnknownElementError: If ``element`` is not queued.
        """
        try:
            index = self._location[element]
        except KeyError:
            raise UnknownElementError(f"element {element!r} is not in the queue") from None
        return self._heap[index][0]

    def is_empty(self) -> bool:
        return not self._heap

    def is_present(self, element: int) -> bool:
        return element in self._location

    def size(self) -> int:
        return len(self._heap)

    def clear(self) -> None:
        self._heap.clear()
        self._location.clear()

    def check_invariants(self) -> None:
        """Verify the heap property and the element-to-slot map.

        Raises:
            AlgorithmError: If either invariant is broken.
        """
        if len(self._location) != len(self._heap):
            raise AlgorithmError(
                f"index map has {len(self._location)} entries for {len(self._heap)} heap slots"
            )
        for i, (priority, element) in enumerate(self._heap):
            if self._location.get(element) != i:
                raise AlgorithmError(f"element {element!r} at slot {i} is mapped to {self._location.get(element)!r}")
            if i > 0 and self._heap[self._parent(i)][0] > priority:
                raise AlgorithmError(f"heap property violated at slot {i}")

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, element: object) -> bool:
        return element in self._location

    def __repr__(self) -> str:
        return f"IndexedPriorityQueue(size={len(self._heap)})"

    # ---- internals ----------------------------------------------------

    @staticmethod
    def _left(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _right(i: int) -> int:
        return 2 * i + 2

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._location[heap[i][1]] = i
        self._location[heap[j][1]] = j

    def _percolate_up(self, start: int) -> int:
        """Move the entry at ``start`` up while it is strictly smaller than its parent.

        Returns:
            The slot where the entry ends up.
        """
        heap = self._heap
        curr = start
        while curr > 0:
            p = self._parent(curr)
            if not heap[curr][0] < heap[p][0]:
                break
            self._swap(curr, p)
            curr = p
        return curr

    def _push_down(self, start: int) -> int:
        """Sink the entry at ``start`` below any smaller child.

        With two children the left one is chosen only when it is strictly
        smaller than the right one; equal children send the entry right. A
        final step handles a node whose only child is on the left.

        Returns:
            The slot where the entry ends up.
        """
        heap = self._heap
        size = len(heap)
        curr = start
        l, r = self._left(curr), self._right(curr)
        while l < size and r < size:
            child = l if heap[l][0] < heap[r][0] else r
            if heap[curr][0] < heap[child][0]:
                break
            self._swap(curr, child)
            curr = child
            l, r = self._left(curr), self._right(curr)

        if l < size and heap[l][0] < heap[curr][0]:
            self._swap(curr, l)
            curr = l
        return curr


__all__ = ["IndexedPriorityQueue"]
