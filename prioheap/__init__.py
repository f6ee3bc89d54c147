from prioheap.common import Impossible, Priority, Sized, flip, higher, keyed, lower
from prioheap.heap import MaxHeap, MinHeap, PriorityHeap

__all__ = [
    "Impossible",
    "MaxHeap",
    "MinHeap",
    "Priority",
    "PriorityHeap",
    "Sized",
    "flip",
    "higher",
    "keyed",
    "lower",
]
