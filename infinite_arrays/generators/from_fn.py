from __future__ import annotations
from typing import Callable, Generic, TypeVar

from infinite_arrays.sequence.infinite_array import InfiniteArray
from infinite_arrays.typeutils.index_check import check_index

T = TypeVar("T")


class InfiniteArrayFromFn(InfiniteArray[T], Generic[T]):
    """
    An infinite array whose element at index `i` is `fn(i)`.

    The function is called on every query and is expected to be pure; this is not checked.
    Any exception it raises propagates to the caller of `get`.

    Attributes:
        _fn (Callable[[int], T]):
            The function mapping an index to its element.
    """

    _fn: Callable[[int], T]

    def __init__(self, fn: Callable[[int], T]):
        self._fn = fn

    def get(self, index: int) -> T:
        return self._fn(check_index(index))

    def __repr__(self) -> str:
        return f"InfiniteArrayFromFn({self._fn!r})"


FromFn = InfiniteArrayFromFn
