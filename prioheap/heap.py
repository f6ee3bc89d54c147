"""Mutable array-backed binary heap with a pluggable priority policy.

The heap keeps its elements in a flat list with an unused sentinel at
index 0, so that for any live position ``i`` the parent is ``i // 2`` and
the children are ``2 * i`` and ``2 * i + 1``. Live elements occupy
positions ``1`` through ``size()``.

Which element counts as "first" is decided by a predicate supplied at
construction time: ``higher_priority(a, b)`` is True when ``a`` must sit
closer to the root than ``b``. The same class therefore serves as a
min-heap, a max-heap, or a heap over any custom ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Type, override

from prioheap.common import Priority, Sized, higher, keyed, lower

__all__ = ["MaxHeap", "MinHeap", "PriorityHeap"]


@dataclass(frozen=True)
class _Sentinel:
    pass


_SENTINEL = _Sentinel()


class PriorityHeap[T](Sized):
    """A binary heap ordered by a caller-supplied priority predicate.

    Extraction is destructive: every element handed out by
    ``extract_next`` (or ``drain``) is gone from the heap. Equal-priority
    elements come out in no particular order.
    """

    def __init__(self, higher_priority: Priority[T]) -> None:
        self._higher_priority = higher_priority
        self._storage: List[Any] = [_SENTINEL]
        self._count = 0

    @staticmethod
    def new_min(_ty: Optional[Type[T]] = None) -> PriorityHeap[T]:
        """Create an empty heap that yields the smallest element first."""
        return PriorityHeap(lower)

    @staticmethod
    def new_max(_ty: Optional[Type[T]] = None) -> PriorityHeap[T]:
        """Create an empty heap that yields the largest element first."""
        return PriorityHeap(higher)

    @staticmethod
    def by_key[K](key: Callable[[T], K], reverse: bool = False) -> PriorityHeap[T]:
        """Create an empty heap ordered by a key derived from each element.

        Args:
            key: Function extracting the comparison key.
            reverse: If True, the largest key is extracted first.

        Returns:
            An empty heap.
        """
        return PriorityHeap(keyed(key, reverse))

    @staticmethod
    def mk(values: Iterable[T], higher_priority: Priority[T]) -> PriorityHeap[T]:
        """Create a heap from an iterable of elements.

        Time Complexity: O(n log n)

        Args:
            values: Elements to add, in order.
            higher_priority: The priority predicate.

        Returns:
            A heap containing all the given elements.
        """
        heap = PriorityHeap(higher_priority)
        for value in values:
            heap.add(value)
        return heap

    @override
    def size(self) -> int:
        """Return the number of live elements in the heap."""
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def add(self, value: T) -> None:
        """Insert an element and restore heap order by bubbling it up.

        Time Complexity: O(log n)

        Args:
            value: The element to insert.
        """
        self._storage.append(value)
        self._count += 1
        self._bubble_up(self._count)

    def peek(self) -> Optional[T]:
        """Return the element ``extract_next`` would produce, leaving it in place.

        Returns:
            The highest-priority element, or None if the heap is empty.
        """
        if self._count == 0:
            return None
        return self._storage[1]

    def extract_next(self) -> Optional[T]:
        """Remove and return the highest-priority element.

        The last live element is moved into the root slot and the list is
        truncated, then the new root is bubbled down.

        Time Complexity: O(log n)

        Returns:
            The removed element, or None if the heap is empty. An empty heap
            keeps returning None.
        """
        if self._count == 0:
            return None
        return self._take_root()

    def drain(self) -> Iterator[T]:
        """Extract every element in priority order.

        The generator empties the heap as it goes and is not restartable.
        Elements added while it is suspended are picked up in order.

        Yields:
            Elements from highest to lowest priority.
        """
        while self._count > 0:
            yield self._take_root()

    def valid(self) -> bool:
        """Check the storage layout and the heap-order invariant.

        Returns:
            True if no live child outranks its parent.
        """
        if len(self._storage) != self._count + 1:
            return False
        for idx in range(2, self._count + 1):
            if self._outranks(idx, _parent_idx(idx)):
                return False
        return True

    def _take_root(self) -> T:
        # Swap-and-truncate: the last live element takes the root slot
        root = self._storage[1]
        last = self._storage.pop()
        self._count -= 1
        if self._count > 0:
            self._storage[1] = last
            self._bubble_down(1)
        return root

    def _outranks(self, idx: int, other_idx: int) -> bool:
        return self._higher_priority(self._storage[idx], self._storage[other_idx])

    def _swap(self, idx: int, other_idx: int) -> None:
        storage = self._storage
        storage[idx], storage[other_idx] = storage[other_idx], storage[idx]

    def _children_present(self, idx: int) -> bool:
        return _left_child_idx(idx) <= self._count

    def _priority_child_idx(self, idx: int) -> int:
        # Only valid when at least the left child is present
        left = _left_child_idx(idx)
        right = _right_child_idx(idx)
        if right > self._count:
            return left
        return left if self._outranks(left, right) else right

    def _bubble_up(self, idx: int) -> None:
        while idx > 1:
            parent = _parent_idx(idx)
            if self._outranks(idx, parent):
                self._swap(idx, parent)
                idx = parent
            else:
                break

    def _bubble_down(self, idx: int) -> None:
        while self._children_present(idx):
            child = self._priority_child_idx(idx)
            if self._outranks(child, idx):
                self._swap(idx, child)
                idx = child
            else:
                break

    def __repr__(self) -> str:
        return f"PriorityHeap(size={self._count})"


def _parent_idx(idx: int) -> int:
    return idx // 2


def _left_child_idx(idx: int) -> int:
    return idx * 2


def _right_child_idx(idx: int) -> int:
    return idx * 2 + 1


class MinHeap:
    """Factory namespace for smallest-first heaps."""

    @staticmethod
    def new[T](_ty: Optional[Type[T]] = None) -> PriorityHeap[T]:
        return PriorityHeap.new_min()


class MaxHeap:
    """Factory namespace for largest-first heaps."""

    @staticmethod
    def new[T](_ty: Optional[Type[T]] = None) -> PriorityHeap[T]:
        return PriorityHeap.new_max()
