from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Mapping
import operator
from typing import TYPE_CHECKING, Any, Callable, Generic, Protocol, TypeVar, overload, runtime_checkable

from infinite_arrays.numeric.numeric_traits import true_divide
from infinite_arrays.typeutils.index_check import INFINITY, check_index

if TYPE_CHECKING:
    from infinite_arrays.iteration.cursor import InfiniteCursor

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SupportsGet(Protocol[T_co]):
    """
    Anything that can answer "what is the element at this index".

    Combinators accept any object implementing this protocol, so user-defined sequences do not
    need to subclass `InfiniteArray` to be composed.
    """
    def get(self, index: int) -> T_co: ...


def version_of(arr: object) -> int:
    """
    Returns the `version` of `arr`, or 0 for indexable objects that do not track one.
    """
    return getattr(arr, "version", 0)


def _slice_range(window: slice) -> range:
    if window.stop is None:
        raise ValueError("cannot materialize an unbounded slice of an infinite array")
    start = 0 if window.start is None else window.start
    step = 1 if window.step is None else window.step
    if start < 0 or window.stop < 0:
        raise ValueError("negative slice bounds are not supported on infinite arrays")
    if step <= 0:
        raise ValueError(f"slice step must be positive, got {step}")
    return range(check_index(start), check_index(window.stop), step)


class InfiniteArray(ABC, Generic[T]):
    """
    Base class for one-dimensional, conceptually infinite, lazily evaluated arrays.

    Subclasses only implement `get`; nothing is ever stored ahead of time. Indexing, finite
    slicing, iteration and the arithmetic operators are all derived from `get` here.

    Operators build new lazy arrays instead of computing anything:
      - `a + b`, `a - b`, `a * b`, `a / b` with another array combine element-wise.
      - The same operators with a scalar apply the scalar to every element, in either order.
      - `-a` negates every element.
      - `/` is true division, as in Python: `OneToInf() / 2` starts 0.5, 1.0, ... Use `div_arrays`
        or `div_scalar` for the element type's own division (floor division for integers).
      - Mappings are not arrays even though they have a `get` method; combining with one raises
        `TypeError`.

    An infinite array has no length: `len()` raises `TypeError` like for any object without
    `__len__`, and the `length` property is always None.
    """

    @abstractmethod
    def get(self, index: int) -> T:
        """
        Returns the element at `index`.

        Args:
            index (int):
                A non-negative position, 0-based.

        Returns:
            T:
                The element at that position.

        Raises:
            TypeError: If the index is not an integer.
            IndexError: If the index is negative or above `INFINITY`.
        """

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return [self.get(i) for i in _slice_range(index)]
        return self.get(index)

    def __iter__(self) -> InfiniteCursor[T]:
        from infinite_arrays.iteration.cursor import InfiniteCursor
        return InfiniteCursor(self)

    def __contains__(self, item: object) -> bool:
        # A linear scan would never terminate when the item is absent.
        raise TypeError("membership test is not supported on infinite arrays")

    @property
    def version(self) -> int:
        """
        Mutation counter of this array and everything it reads from.

        Pure arrays always report 0. Arrays that can change (`CachedArray`), and combinators
        wrapping them, report a number that increases on every change, so stateful consumers
        such as `Cumsum` can tell their saved state is out of date.
        """
        return 0

    @property
    def length(self) -> None:
        """
        Always None: the extent of an infinite array is unbounded.
        """
        return None

    def take(self, n: int) -> list[T]:
        """
        Materializes the first `n` elements.

        Args:
            n (int):
                Number of elements to read, starting at index 0.

        Returns:
            list[T]:
                The elements at indices 0 to n - 1.

        Raises:
            ValueError: If `n` is negative.
        """
        if n < 0:
            raise ValueError(f"cannot take a negative number of elements: {n}")
        return [self.get(i) for i in range(n)]

    def map(self, fn: Callable[[T], U]) -> InfiniteArray[U]:
        """
        Lazily applies `fn` to every element, see `broadcast`.
        """
        from infinite_arrays.combinators.broadcast import broadcast
        return broadcast(self, fn)

    def cumsum(self) -> InfiniteArray[T]:
        """
        Returns the running sum of this array, see `cumsum`.
        """
        from infinite_arrays.combinators.cumsum import cumsum
        return cumsum(self)

    def _combine(
        self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False
    ) -> Any:
        from infinite_arrays.combinators.elementwise import ElementwiseBinaryOp
        from infinite_arrays.combinators.scalar import ScalarOp
        if isinstance(other, Mapping):
            return NotImplemented
        if isinstance(other, SupportsGet):
            if reflected:
                return ElementwiseBinaryOp(other, self, op)
            return ElementwiseBinaryOp(self, other, op)
        return ScalarOp(self, op, other, reflected=reflected)

    def __add__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, operator.add)

    def __radd__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, operator.sub)

    def __rsub__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, true_divide)

    def __rtruediv__(self, other: Any) -> InfiniteArray[Any]:
        return self._combine(other, true_divide, reflected=True)

    def __neg__(self) -> InfiniteArray[Any]:
        return self.map(operator.neg)


__all__ = [
    "INFINITY",
    "InfiniteArray",
    "SupportsGet",
    "version_of",
]
