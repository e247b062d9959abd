"""Index arithmetic over a half-open range of physical positions.

These three helpers are the whole mechanism behind O(1) insertion and removal
at both ends of a :class:`~ouroboros.cyclic_deque.CyclicDeque`: elements never
move, only the two boundary markers do.
"""

from __future__ import annotations


def wrap_cycle(index: int, start: int, finish: int) -> int:
    """
    Fold ``index`` from ``[start, finish + (finish - start))`` back into
    ``[start, finish)``.
    """
    if index >= finish:
        return index - finish + start
    return index


def inc_cycle(index: int, start: int, finish: int) -> int:
    """Increment ``index`` within the cyclic range ``[start, finish)``."""
    index += 1
    if index == finish:
        return start
    return index


def dec_cycle(index: int, start: int, finish: int) -> int:
    """Decrement ``index`` within the cyclic range ``[start, finish)``."""
    if index == start:
        return finish - 1
    return index - 1


__all__ = ["wrap_cycle", "inc_cycle", "dec_cycle"]
