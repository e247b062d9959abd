"""Random-access iterators over a :class:`~ouroboros.core.state.CyclicState`.

An iterator is a logical coordinate, not a cached address: every dereference
goes through :meth:`CyclicState.inner_to_outer` at access time. Pushing to the
front of a deque therefore shifts what an existing iterator points at, in the
same way it shifts what ``deque[i]`` returns.

:class:`Iterator` allows writes, :class:`ConstIterator` does not. The two are
separate types; ``Iterator.as_const()`` converts one way only.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Union

from .state import CyclicState


class _Position:
    """Shared state-plus-index representation of both iterator kinds."""

    __slots__ = ("_state", "_index")

    def __init__(self, state: CyclicState, index: int = 0) -> None:
        self._state = state
        self._index = int(index)

    @property
    def index(self) -> int:
        """Signed logical index relative to the current front."""
        return self._index

    @property
    def value(self) -> Any:
        state = self._state
        return state.buffer[state.inner_to_outer(self._index)]

    def __getitem__(self, n: int) -> Any:
        """
        Element at offset ``n`` from this iterator.

        ``index + n`` must land in ``[0, size())``; positions outside it do
        not map back into the region.
        """
        state = self._state
        return state.buffer[state.inner_to_outer(self._index + n)]

    def _copy(self, index: int):
        return type(self)(self._state, index)

    # ------------------------------------------------------------- movement
    def inc(self):
        """Prefix increment."""
        self._index += 1
        return self

    def dec(self):
        """Prefix decrement."""
        self._index -= 1
        return self

    def post_inc(self):
        """Postfix increment: advance, returning the previous position."""
        previous = self._copy(self._index)
        self._index += 1
        return previous

    def post_dec(self):
        """Postfix decrement: step back, returning the previous position."""
        previous = self._copy(self._index)
        self._index -= 1
        return previous

    def __iadd__(self, n: int):
        self._index += n
        return self

    def __isub__(self, n: int):
        self._index -= n
        return self

    def __add__(self, n: int):
        if not isinstance(n, Integral):
            return NotImplemented
        return self._copy(self._index + n)

    __radd__ = __add__

    def __sub__(self, other: Union[int, "_Position"]):
        if isinstance(other, _Position):
            return self._index - other._index
        if isinstance(other, Integral):
            return self._copy(self._index - other)
        return NotImplemented

    def __rsub__(self, n: int):
        # ``n - it`` steps back by ``n``, same as ``it - n``.
        if not isinstance(n, Integral):
            return NotImplemented
        return self._copy(self._index - n)

    # ----------------------------------------------------------- comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._index == other._index

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._index != other._index

    def __lt__(self, other: "_Position") -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._index < other._index

    def __le__(self, other: "_Position") -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._index <= other._index

    def __gt__(self, other: "_Position") -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._index > other._index

    def __ge__(self, other: "_Position") -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._index >= other._index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index})"


class Iterator(_Position):
    """Mutable random-access iterator."""

    __slots__ = ()

    @_Position.value.setter
    def value(self, item: Any) -> None:
        state = self._state
        state.buffer[state.inner_to_outer(self._index)] = item

    def __setitem__(self, n: int, item: Any) -> None:
        state = self._state
        state.buffer[state.inner_to_outer(self._index + n)] = item

    def as_const(self) -> "ConstIterator":
        """Return a read-only iterator at the same logical position."""
        return ConstIterator(self._state, self._index)


class ConstIterator(_Position):
    """Read-only random-access iterator."""

    __slots__ = ()


class ReverseIterator:
    """
    Walk a forward iterator backwards.

    Like a classic reverse adaptor, a reverse iterator built from ``base``
    refers to the element just before ``base``: ``ReverseIterator(end)`` is
    the last element and ``ReverseIterator(begin)`` is one before the first.
    Writes go through when the base is an :class:`Iterator`; a reverse
    iterator over a :class:`ConstIterator` rejects them with ``TypeError``.
    """

    __slots__ = ("_base",)

    def __init__(self, base: _Position) -> None:
        self._base = base._copy(base.index)

    @property
    def base(self) -> _Position:
        """Copy of the underlying forward iterator."""
        return self._base._copy(self._base.index)

    @property
    def value(self) -> Any:
        return self._base[-1]

    @value.setter
    def value(self, item: Any) -> None:
        # Raises TypeError when the base is a ConstIterator.
        self._base[-1] = item

    def __getitem__(self, n: int) -> Any:
        return self._base[-n - 1]

    def __setitem__(self, n: int, item: Any) -> None:
        self._base[-n - 1] = item

    def inc(self) -> "ReverseIterator":
        self._base.dec()
        return self

    def dec(self) -> "ReverseIterator":
        self._base.inc()
        return self

    def post_inc(self) -> "ReverseIterator":
        previous = ReverseIterator(self._base)
        self._base.dec()
        return previous

    def post_dec(self) -> "ReverseIterator":
        previous = ReverseIterator(self._base)
        self._base.inc()
        return previous

    def __iadd__(self, n: int) -> "ReverseIterator":
        self._base -= n
        return self

    def __isub__(self, n: int) -> "ReverseIterator":
        self._base += n
        return self

    def __add__(self, n: int) -> "ReverseIterator":
        if not isinstance(n, Integral):
            return NotImplemented
        return ReverseIterator(self._base - n)

    __radd__ = __add__

    def __sub__(self, other: Union[int, "ReverseIterator"]):
        if isinstance(other, ReverseIterator):
            return other._base.index - self._base.index
        if isinstance(other, Integral):
            return ReverseIterator(self._base + other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base.index == other._base.index

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base.index != other._base.index

    def __lt__(self, other: "ReverseIterator") -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base.index > other._base.index

    def __le__(self, other: "ReverseIterator") -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base.index >= other._base.index

    def __gt__(self, other: "ReverseIterator") -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base.index < other._base.index

    def __ge__(self, other: "ReverseIterator") -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base.index <= other._base.index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReverseIterator({self._base!r})"


__all__ = ["Iterator", "ConstIterator", "ReverseIterator"]
