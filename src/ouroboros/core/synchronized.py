"""Lock-guarded access to a cyclic deque shared between threads."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from ..cyclic_deque import CyclicDeque


class SynchronizedDeque:
    """Cyclic deque plus lock for producer/consumer use.

    The RLock allows a producer thread to push while consumer threads pop or
    take snapshots without corrupting the markers of the underlying deque.
    Unlike the bare deque, pushing into a full or popping from an empty
    deque is reported through the return value instead of being a caller
    error.
    """

    def __init__(self, deque: "CyclicDeque") -> None:
        self._deque = deque
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["CyclicDeque"]:
        """Hold the lock for a compound operation on the wrapped deque."""
        with self._lock:
            yield self._deque

    def push_back(self, value: Any) -> bool:
        """Append ``value``; returns ``False`` when the deque is full."""
        with self._lock:
            if self._deque.full():
                return False
            self._deque.push_back(value)
            return True

    def push_front(self, value: Any) -> bool:
        """Prepend ``value``; returns ``False`` when the deque is full."""
        with self._lock:
            if self._deque.full():
                return False
            self._deque.push_front(value)
            return True

    def pop_back(self) -> Optional[Any]:
        """Remove and return the newest value, or ``None`` if empty."""
        with self._lock:
            if self._deque.empty():
                return None
            value = self._deque.back()
            self._deque.pop_back()
            return value

    def pop_front(self) -> Optional[Any]:
        """Remove and return the oldest value, or ``None`` if empty."""
        with self._lock:
            if self._deque.empty():
                return None
            value = self._deque.front()
            self._deque.pop_front()
            return value

    def extend(self, items: Iterable[Any]) -> None:
        """Append all of ``items``; raises ``ValueError`` if they do not fit."""
        with self._lock:
            self._deque.append_range(items)

    def snapshot(self) -> List[Any]:
        """Return a thread-safe copy of the logical contents for read-only use."""
        with self._lock:
            return self._deque.to_list()

    def latest(self) -> Optional[Any]:
        """Return the newest value, or ``None`` if the deque is empty."""
        with self._lock:
            if self._deque.empty():
                return None
            return self._deque.back()

    def __len__(self) -> int:
        with self._lock:
            return len(self._deque)


__all__ = ["SynchronizedDeque"]
