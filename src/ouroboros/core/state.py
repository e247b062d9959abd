"""Invariant-holding bookkeeping for a cyclic deque.

:class:`CyclicState` tracks a logical window inside a :class:`BufferRegion`
with four fields:

``start``
    physical position of the logical first element.
``finish``
    one past the logical last element. The value is cyclic: when the deque is
    either empty or full, ``start`` equals ``finish`` and only ``count``
    tells the two apart.
``count``
    number of occupied slots.
``capacity``
    ``last - first`` of the region, fixed for the lifetime of the state.

Preconditions of the hot paths (pushing into a full deque, popping from an
empty one, resizing past capacity) are only checked with ``assert``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, List

from .cycle import dec_cycle, inc_cycle, wrap_cycle
from .storage import BufferRegion

logger = logging.getLogger(__name__)


class CyclicState:
    __slots__ = ("region", "buffer", "start", "finish", "count")

    def __init__(self, region: BufferRegion, n: int = 0) -> None:
        if not 0 <= n <= len(region):
            raise ValueError(
                f"initial size {n} does not fit a capacity of {len(region)}"
            )
        self.region = region
        self.buffer = region.buffer
        self.start = region.first
        self.count = n
        self.finish = self.wrap(region.first + n)

    # ------------------------------------------------------------ arithmetic
    def wrap(self, index: int) -> int:
        """Wrap ``index`` from ``[first, first + 2n)`` into ``[first, first + n)``."""
        return wrap_cycle(index, self.region.first, self.region.last)

    def inc(self, index: int) -> int:
        return inc_cycle(index, self.region.first, self.region.last)

    def dec(self, index: int) -> int:
        return dec_cycle(index, self.region.first, self.region.last)

    def inner_to_outer(self, i: int) -> int:
        """Convert logical index ``i`` into a physical buffer position."""
        return self.wrap(self.start + i)

    # ---------------------------------------------------------------- access
    def at(self, i: int) -> Any:
        """Return the element at logical index ``i``, with bounds checking."""
        if i < 0 or i >= self.count:
            raise IndexError(
                f"CyclicDeque.at: i (which is {i}) >= size() (which is {self.count})"
            )
        return self.buffer[self.inner_to_outer(i)]

    def get(self, i: int) -> Any:
        return self.buffer[self.inner_to_outer(i)]

    def set(self, i: int, value: Any) -> None:
        self.buffer[self.inner_to_outer(i)] = value

    def front(self) -> Any:
        return self.buffer[self.start]

    def back(self) -> Any:
        return self.buffer[self.dec(self.finish)]

    # -------------------------------------------------------------- mutation
    def push_back(self, value: Any) -> None:
        assert not self.full(), "push_back on a full CyclicDeque"
        # Markers only move once the write went through.
        self.buffer[self.finish] = value
        self.finish = self.inc(self.finish)
        self.count += 1

    def pop_back(self) -> None:
        assert not self.empty(), "pop_back on an empty CyclicDeque"
        self.finish = self.dec(self.finish)
        self.count -= 1

    def push_front(self, value: Any) -> None:
        assert not self.full(), "push_front on a full CyclicDeque"
        new_start = self.dec(self.start)
        self.buffer[new_start] = value
        self.start = new_start
        self.count += 1

    def pop_front(self) -> None:
        assert not self.empty(), "pop_front on an empty CyclicDeque"
        self.start = self.inc(self.start)
        self.count -= 1

    def _materialize(self, items: Iterable[Any], operation: str) -> List[Any]:
        values = list(items)
        if len(values) > self.available():
            logger.warning(
                "%s of %d items rejected: only %d slots available",
                operation,
                len(values),
                self.available(),
            )
            raise ValueError(
                f"{operation}: range of {len(values)} items exceeds "
                f"available() (which is {self.available()})"
            )
        return values

    def _copy_into(self, position: int, values: List[Any]) -> None:
        # Slot by slot, so any buffer that supports item assignment works
        # (array.array rejects list slices).
        buffer = self.buffer
        for offset, value in enumerate(values):
            buffer[position + offset] = value

    def append_range(self, items: Iterable[Any]) -> None:
        """
        Copy ``items`` behind the current back.

        The copy is split in two runs when the free region wraps past the
        physical end of the region. ``finish`` and ``count`` are only updated after all
        slots were written.
        """
        values = self._materialize(items, "append_range")
        n = len(values)
        if n == 0:
            return
        first, last = self.region.first, self.region.last
        head = last - self.finish
        if n <= head:
            self._copy_into(self.finish, values)
            new_finish = self.wrap(self.finish + n)
        else:
            self._copy_into(self.finish, values[:head])
            new_finish = first + n - head
            self._copy_into(first, values[head:])
        self.finish = new_finish
        self.count += n

    def prepend_range(self, items: Iterable[Any]) -> None:
        """
        Copy ``items`` in front of the current front, keeping their order.

        The copy is split in two runs when the free region wraps past the
        physical start of the region. ``start`` and ``count`` are only updated after
        all slots were written.
        """
        values = self._materialize(items, "prepend_range")
        n = len(values)
        if n == 0:
            return
        first, last = self.region.first, self.region.last
        # When start sits on first this yields last instead of first, so the
        # whole range goes into the tail of the region in a single copy.
        top = self.dec(self.start) + 1
        tail = top - first
        if n <= tail:
            new_start = top - n
            self._copy_into(new_start, values)
        else:
            split = n - tail
            self._copy_into(first, values[split:])
            new_start = last - split
            self._copy_into(new_start, values[:split])
        self.start = new_start
        self.count += n

    def resize(self, n: int) -> None:
        """Change the number of stored elements, growing or shrinking at the back."""
        assert 0 <= n <= self.capacity(), "resize past capacity"
        self.finish = self.inner_to_outer(n)
        self.count = n

    def clear(self) -> None:
        self.start = self.region.first
        self.finish = self.start
        self.count = 0

    # --------------------------------------------------------------- queries
    def capacity(self) -> int:
        return self.region.last - self.region.first

    def size(self) -> int:
        return self.count

    def available(self) -> int:
        return self.capacity() - self.count

    def empty(self) -> bool:
        return self.count == 0

    def full(self) -> bool:
        return self.count == self.capacity()


__all__ = ["CyclicState"]
