"""Common types and predicate helpers for the prioheap library.

This module provides the small vocabulary shared by the heap and its
command-line front end: the unreachable-state exception, the sized mixin,
and the "higher priority" predicate type with a few ways to build one.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any, Callable

__all__ = [
    "Impossible",
    "Priority",
    "Sized",
    "flip",
    "higher",
    "keyed",
    "lower",
]


class Impossible(Exception):
    """Exception raised when encountering theoretically impossible states.

    Used on exhausted match arms and other internal consistency violations.
    """

    pass


# True when the first argument belongs closer to the root
type Priority[T] = Callable[[T, T], bool]


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def null(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.null()

    def __len__(self) -> int:
        return self.size()


def lower(a: Any, b: Any) -> bool:
    """Min-heap policy: smaller values have higher priority."""
    return bool(a < b)


def higher(a: Any, b: Any) -> bool:
    """Max-heap policy: larger values have higher priority."""
    return bool(a > b)


def keyed[T, K](key: Callable[[T], K], reverse: bool = False) -> Priority[T]:
    """Build a policy that ranks elements by a derived key.

    Args:
        key: Function extracting the comparison key from an element.
        reverse: If True, larger keys rank higher (max-heap by key).

    Returns:
        A predicate comparing ``key(a)`` against ``key(b)``.

    Example:
        >>> by_len = keyed(len)
        >>> by_len("ab", "abc")
        True
    """
    base = higher if reverse else lower

    def pred(a: T, b: T) -> bool:
        return base(key(a), key(b))

    return pred


def flip[T](pred: Priority[T]) -> Priority[T]:
    """Reverse a policy by swapping its arguments.

    ``flip(lower)`` behaves like ``higher``, turning a min-heap policy into
    a max-heap policy and vice versa.
    """

    def flipped(a: T, b: T) -> bool:
        return pred(b, a)

    return flipped
