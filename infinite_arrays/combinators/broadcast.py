from __future__ import annotations
from typing import Callable, Generic, TypeVar

from infinite_arrays.sequence.infinite_array import InfiniteArray, SupportsGet, version_of
from infinite_arrays.typeutils.index_check import check_index

TIn = TypeVar("TIn")
TOut = TypeVar("TOut")


class Broadcast(InfiniteArray[TOut], Generic[TIn, TOut]):
    """
    Lazily applies a unary function to every element of an inner array.

    Nothing is memoized: each `get` reads the inner element and calls the function again.

    Attributes:
        _inner (SupportsGet[TIn]):
            The array being mapped.
        _fn (Callable[[TIn], TOut]):
            The function applied to each element.
    """

    _inner: SupportsGet[TIn]
    _fn: Callable[[TIn], TOut]

    def __init__(self, inner: SupportsGet[TIn], fn: Callable[[TIn], TOut]):
        self._inner = inner
        self._fn = fn

    @property
    def version(self) -> int:
        return version_of(self._inner)

    def get(self, index: int) -> TOut:
        return self._fn(self._inner.get(check_index(index)))

    def __repr__(self) -> str:
        return f"Broadcast({self._inner!r}, {self._fn!r})"


def broadcast(arr: SupportsGet[TIn], fn: Callable[[TIn], TOut]) -> Broadcast[TIn, TOut]:
    """
    Returns an array whose element at `i` is `fn(arr.get(i))`.

    Args:
        arr (SupportsGet[TIn]):
            The source array.
        fn (Callable[[TIn], TOut]):
            The function to apply, called on every query.

    Returns:
        Broadcast[TIn, TOut]:
            The mapped array. Construction evaluates nothing.

    Example:
        >>> doubled = broadcast(Ones(), lambda x: x * 2.0)
        >>> doubled.get(100)
        2.0
    """
    return Broadcast(arr, fn)
