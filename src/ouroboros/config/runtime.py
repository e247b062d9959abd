"""Runtime configuration for owned cyclic deques."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DequeConfig:
    """
    Sizing knobs for an :class:`~ouroboros.cyclic_deque.OwnedCyclicDeque`.

    ``dtype`` selects a NumPy-backed buffer; leave it unset for a plain list
    whose slots start out as ``fill``.
    """

    capacity: int = 0
    initial_size: int = 0
    dtype: Optional[str] = None
    fill: Any = None

    def sanitized(self) -> DequeConfig:
        """Return a copy with capacity and initial size clamped to valid limits."""
        capacity = max(0, int(self.capacity))
        initial_size = max(0, min(capacity, int(self.initial_size)))
        dtype = str(self.dtype) if self.dtype else None
        return DequeConfig(
            capacity=capacity,
            initial_size=initial_size,
            dtype=dtype,
            fill=self.fill,
        )


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`DequeConfig`."""
    return {f.name for f in fields(DequeConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """
    Merge the keys of a ``cyclic_deque:`` section into the root mapping.

    Lets a deque be sized from its own section of a larger YAML document,
    while plain top-level ``capacity``/``initial_size`` keys still work.
    """
    if "cyclic_deque" in data and isinstance(data["cyclic_deque"], Mapping):
        merged: MutableMapping[str, Any] = {}
        for key, value in data.items():
            if key == "cyclic_deque":
                merged.update(value)
            else:
                merged[key] = value
        return merged
    return dict(data)


def config_from_mapping(data: Mapping[str, Any] | None) -> DequeConfig:
    """Build :class:`DequeConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return DequeConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    ignored = sorted(normalized.keys() - known)
    if ignored:
        logger.debug("Ignoring unknown deque config keys: %s", ", ".join(ignored))
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return DequeConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> DequeConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`DequeConfig`.
    """
    if path is None:
        return DequeConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.debug("Config file %s not found, using defaults", cfg_path)
        return DequeConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["DequeConfig", "config_from_mapping", "load_config"]
