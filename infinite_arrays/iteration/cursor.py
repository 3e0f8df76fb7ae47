from __future__ import annotations
from typing import Generic, Iterator, TypeVar

from infinite_arrays.sequence.infinite_array import SupportsGet

T = TypeVar("T")


class InfiniteCursor(Iterator[T], Generic[T]):
    """
    Forward-only iterator over an infinite array, starting at index 0.

    The cursor never raises `StopIteration`; the consumer decides when to stop pulling, e.g. with
    `itertools.islice` or `zip` against a finite iterable. A cursor cannot be rewound: create a new
    one (or call `iter(arr)` again) to restart from index 0.

    Attributes:
        _source (SupportsGet[T]):
            The array being walked.
        _position (int):
            Index of the element the next call to `__next__` returns.
    """

    _source: SupportsGet[T]
    _position: int

    def __init__(self, source: SupportsGet[T]):
        self._source = source
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def __iter__(self) -> InfiniteCursor[T]:
        return self

    def __next__(self) -> T:
        value = self._source.get(self._position)
        self._position += 1
        return value

    def __repr__(self) -> str:
        return f"InfiniteCursor({self._source!r}, position={self._position})"


def iterate(arr: SupportsGet[T]) -> InfiniteCursor[T]:
    """
    Returns a fresh cursor over `arr`, for arrays that do not subclass `InfiniteArray` and so
    have no `__iter__` of their own.
    """
    return InfiniteCursor(arr)
