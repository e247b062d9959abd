"""Fixed-capacity double-ended queue over a contiguous buffer.

:class:`CyclicDeque` is a *view*: it borrows a caller-owned buffer (or a
``[start, stop)`` window of it) and reinterprets it as a ring.
:class:`OwnedCyclicDeque` allocates and keeps its own buffer. Both delegate
all index bookkeeping to :class:`~ouroboros.core.state.CyclicState`.

Neither class is thread-safe; see
:class:`~ouroboros.core.synchronized.SynchronizedDeque`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator as IteratorABC, MutableSequence
from typing import Any, List, Optional

import numpy as np

from .core.iterator import ConstIterator, Iterator, ReverseIterator
from .core.state import CyclicState
from .core.storage import Allocator, BufferRegion, allocator_from_config, list_allocator

logger = logging.getLogger(__name__)


class CyclicDeque:
    """
    Double-ended queue with O(1) push/pop at both ends and fixed capacity.

    Parameters
    ----------
    buffer:
        Mutable sequence supporting item assignment that provides the
        storage. ``None`` gives a deque with capacity 0.
    size:
        Initial occupancy. The first ``size`` slots of the region are taken
        to already hold valid elements.
    start, stop:
        Optional bounds restricting the deque to ``buffer[start:stop]``.

    Pushing into a full deque, popping from an empty one and reading
    ``front()``/``back()`` of an empty deque are caller errors that are only
    caught by ``assert``; check :meth:`full`, :meth:`empty` and
    :meth:`available` first.
    """

    __slots__ = ("_state",)

    def __init__(
        self,
        buffer: Optional[MutableSequence] = None,
        size: int = 0,
        *,
        start: int = 0,
        stop: Optional[int] = None,
    ) -> None:
        if buffer is None:
            buffer = []
        region = BufferRegion.over(buffer, start, stop)
        self._state = CyclicState(region, size)
        logger.debug(
            "Created %s over [%d, %d) with size=%d",
            type(self).__name__,
            region.first,
            region.last,
            size,
        )

    # ---------------------------------------------------------------- access
    @property
    def buffer(self) -> MutableSequence:
        """The physical buffer backing this deque."""
        return self._state.buffer

    def at(self, i: int) -> Any:
        """Return the element at ``i``; raises ``IndexError`` when ``i >= size()``."""
        return self._state.at(i)

    def __getitem__(self, i: int) -> Any:
        """
        Unchecked access; ``i`` must be within ``[0, size())``.

        Negative indices are not supported: they do not count from the back
        and resolve to an unrelated physical slot.
        """
        return self._state.get(i)

    def __setitem__(self, i: int, value: Any) -> None:
        self._state.set(i, value)

    def front(self) -> Any:
        """Return the first element. Undefined when empty."""
        return self._state.front()

    def back(self) -> Any:
        """Return the last element. Undefined when empty."""
        return self._state.back()

    # -------------------------------------------------------------- mutation
    def push_back(self, value: Any) -> None:
        """Add an element to the end. The deque must not be full."""
        self._state.push_back(value)

    def pop_back(self) -> None:
        """Remove the last element. Only moves an index, so it never raises."""
        self._state.pop_back()

    def push_front(self, value: Any) -> None:
        """Add an element to the beginning. The deque must not be full."""
        self._state.push_front(value)

    def pop_front(self) -> None:
        """Remove the first element. Only moves an index, so it never raises."""
        self._state.pop_front()

    def append_range(self, items: Iterable[Any]) -> None:
        """
        Append a copy of ``items`` to the back.

        Raises ``ValueError`` without touching the deque when ``items`` holds
        more than :meth:`available` elements.
        """
        self._state.append_range(items)

    def prepend_range(self, items: Iterable[Any]) -> None:
        """
        Prepend a copy of ``items`` to the front, preserving their order.

        Raises ``ValueError`` without touching the deque when ``items`` holds
        more than :meth:`available` elements.
        """
        self._state.prepend_range(items)

    def clear(self) -> None:
        """Erase all elements."""
        self._state.clear()
        logger.debug("Cleared %s", type(self).__name__)

    def resize(self, n: int) -> None:
        """Change the number of stored elements; ``n`` must not exceed capacity."""
        self._state.resize(n)
        logger.debug("Resized %s to %d", type(self).__name__, n)

    # --------------------------------------------------------------- queries
    def capacity(self) -> int:
        """Maximum number of elements the deque can hold."""
        return self._state.capacity()

    def size(self) -> int:
        return self._state.size()

    def available(self) -> int:
        """Unoccupied capacity, ``capacity() - size()``."""
        return self._state.available()

    def empty(self) -> bool:
        return self._state.empty()

    def full(self) -> bool:
        return self._state.full()

    def __len__(self) -> int:
        return self._state.size()

    # ------------------------------------------------------------- iterators
    def begin(self) -> Iterator:
        return Iterator(self._state, 0)

    def end(self) -> Iterator:
        return Iterator(self._state, self._state.size())

    def cbegin(self) -> ConstIterator:
        return ConstIterator(self._state, 0)

    def cend(self) -> ConstIterator:
        return ConstIterator(self._state, self._state.size())

    def rbegin(self) -> ReverseIterator:
        return ReverseIterator(self.end())

    def rend(self) -> ReverseIterator:
        return ReverseIterator(self.begin())

    def crbegin(self) -> ReverseIterator:
        return ReverseIterator(self.cend())

    def crend(self) -> ReverseIterator:
        return ReverseIterator(self.cbegin())

    def __iter__(self) -> IteratorABC[Any]:
        it, last = self.cbegin(), self.cend()
        while it != last:
            yield it.value
            it.inc()

    def __reversed__(self) -> IteratorABC[Any]:
        it, last = self.crbegin(), self.crend()
        while it != last:
            yield it.value
            it.inc()

    # ------------------------------------------------------------- snapshots
    def to_list(self) -> List[Any]:
        """Return the logical contents, front to back, as a new list."""
        return list(self)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """
        Return the logical contents as a NumPy array.

        The array is a copy; later pushes and pops do not affect it.
        """
        count = self._state.size()
        if dtype is None:
            return np.array(self.to_list())
        return np.fromiter(iter(self), dtype=dtype, count=count)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.size()}, "
            f"capacity={self.capacity()})"
        )


class OwnedCyclicDeque(CyclicDeque):
    """
    :class:`CyclicDeque` that allocates and owns its buffer.

    ``allocator`` is called once with the capacity and must return a
    mutable sequence of exactly that length; it defaults to
    :func:`~ouroboros.core.storage.list_allocator`.
    """

    __slots__ = ()

    def __init__(
        self,
        capacity: int = 0,
        size: int = 0,
        *,
        allocator: Optional[Allocator] = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        allocate = allocator or list_allocator()
        buffer = allocate(int(capacity))
        if len(buffer) != capacity:
            raise ValueError(
                f"allocator returned {len(buffer)} slots, expected {capacity}"
            )
        super().__init__(buffer, size)

    @classmethod
    def from_iterable(
        cls,
        items: Iterable[Any],
        capacity: Optional[int] = None,
        *,
        allocator: Optional[Allocator] = None,
    ) -> "OwnedCyclicDeque":
        """
        Copy ``items`` into a new deque, front to back.

        The items occupy physical slots ``0..len(items)-1``. ``capacity``
        defaults to the number of items and may not be smaller.
        """
        values = list(items)
        if capacity is None:
            capacity = len(values)
        if capacity < len(values):
            raise ValueError(
                f"capacity {capacity} is smaller than the {len(values)} items given"
            )
        deque = cls(capacity, allocator=allocator)
        deque.append_range(values)
        return deque

    @classmethod
    def from_config(cls, config: Any) -> "OwnedCyclicDeque":
        """Build a deque from a :class:`~ouroboros.config.DequeConfig`."""
        config = config.sanitized()
        return cls(
            config.capacity,
            config.initial_size,
            allocator=allocator_from_config(config),
        )


__all__ = ["CyclicDeque", "OwnedCyclicDeque"]
