"""Cyclic-indexing engine: index arithmetic, state, iterators and storage.

The facade classes in :mod:`ouroboros.cyclic_deque` are thin wrappers over
what lives here.
"""

from .cycle import dec_cycle, inc_cycle, wrap_cycle
from .iterator import ConstIterator, Iterator, ReverseIterator
from .state import CyclicState
from .storage import BufferRegion, allocator_from_config, list_allocator, numpy_allocator
from .synchronized import SynchronizedDeque

__all__ = [
    "wrap_cycle",
    "inc_cycle",
    "dec_cycle",
    "CyclicState",
    "Iterator",
    "ConstIterator",
    "ReverseIterator",
    "BufferRegion",
    "list_allocator",
    "numpy_allocator",
    "allocator_from_config",
    "SynchronizedDeque",
]
