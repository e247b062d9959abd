"""Configuration objects and helpers for owned cyclic deques.

A deque is configured by its capacity and initial occupancy, optionally read
from a YAML document such as::

    cyclic_deque:
      capacity: 1024
      initial_size: 0
      dtype: float64
"""

from .runtime import DequeConfig, config_from_mapping, load_config

__all__ = ["DequeConfig", "config_from_mapping", "load_config"]
