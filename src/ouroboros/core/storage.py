"""Backing regions and allocation strategies for cyclic deques."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

logger = logging.getLogger(__name__)

Allocator = Callable[[int], MutableSequence]


@dataclass(frozen=True)
class BufferRegion:
    """
    Contiguous window ``[first, last)`` of a mutable sequence.

    The cyclic state only ever looks at the two boundary positions and at the
    slots in between; who allocated ``buffer`` and who keeps it alive is not
    its concern.
    """

    buffer: MutableSequence
    first: int
    last: int

    @classmethod
    def over(
        cls,
        buffer: MutableSequence,
        start: int = 0,
        stop: Optional[int] = None,
    ) -> "BufferRegion":
        """
        Build a region over ``buffer[start:stop]``.

        Raises ``ValueError`` when the bounds do not describe a window inside
        ``buffer``.
        """
        length = len(buffer)
        if stop is None:
            stop = length
        if not 0 <= start <= stop <= length:
            raise ValueError(
                f"invalid region [{start}, {stop}) for a buffer of length {length}"
            )
        return cls(buffer=buffer, first=int(start), last=int(stop))

    def __len__(self) -> int:
        return self.last - self.first


def list_allocator(fill: Any = None) -> Allocator:
    """Return an allocator producing ``[fill] * capacity`` lists."""

    def _allocate(capacity: int) -> MutableSequence:
        return [fill] * capacity

    return _allocate


def numpy_allocator(dtype: Any = "float64") -> Allocator:
    """
    Return an allocator producing zeroed NumPy arrays of ``dtype``.

    Writes into such a buffer go through NumPy's casting rules, so pushing a
    value the dtype cannot hold raises instead of storing it.
    """
    resolved = np.dtype(dtype)

    def _allocate(capacity: int) -> MutableSequence:
        return np.zeros(capacity, dtype=resolved)

    return _allocate


def allocator_from_config(config: Any) -> Allocator:
    """Pick the allocator described by a :class:`~ouroboros.config.DequeConfig`."""
    dtype = getattr(config, "dtype", None)
    if dtype:
        logger.debug("Using numpy allocator with dtype=%s", dtype)
        return numpy_allocator(dtype)
    return list_allocator(getattr(config, "fill", None))


__all__ = [
    "Allocator",
    "BufferRegion",
    "list_allocator",
    "numpy_allocator",
    "allocator_from_config",
]
