"""ouroboros: fixed-capacity double-ended queues over contiguous buffers."""

from .config import DequeConfig, config_from_mapping, load_config
from .core import (
    BufferRegion,
    ConstIterator,
    Iterator,
    ReverseIterator,
    SynchronizedDeque,
    list_allocator,
    numpy_allocator,
)
from .cyclic_deque import CyclicDeque, OwnedCyclicDeque

__version__ = "0.1.0"

__all__ = [
    "CyclicDeque",
    "OwnedCyclicDeque",
    "Iterator",
    "ConstIterator",
    "ReverseIterator",
    "BufferRegion",
    "SynchronizedDeque",
    "list_allocator",
    "numpy_allocator",
    "DequeConfig",
    "config_from_mapping",
    "load_config",
]
