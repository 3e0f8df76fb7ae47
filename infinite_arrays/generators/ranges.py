"""
Infinite arithmetic ranges.

All three ranges compute their elements in closed form from their parameters, so any index can
be queried in constant time and in any order. None of them checks for overflow: with Python
integers the values simply grow, with fixed-width NumPy integers NumPy's own overflow behaviour
applies (a `RuntimeWarning` with wrap-around, or an `OverflowError` when a Python integer does not
fit the type).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from infinite_arrays.numeric.numeric_traits import DType, convert
from infinite_arrays.sequence.infinite_array import InfiniteArray
from infinite_arrays.typeutils.index_check import check_index

T = TypeVar("T")


@dataclass(frozen=True)
class OneToInf(InfiniteArray[Any]):
    """
    The range 1, 2, 3, ...

    Index 0 holds the value 1: `get(i) == i + 1`.

    Attributes:
        dtype (DType):
            Element type of the produced values. Defaults to `int`.
    """
    dtype: DType = int

    def get(self, index: int) -> Any:
        return convert(self.dtype, check_index(index) + 1)


@dataclass(frozen=True)
class InfUnitRange(InfiniteArray[T], Generic[T]):
    """
    The range start, start + 1, start + 2, ...

    Attributes:
        start (T):
            Value at index 0. Its type decides the element type.
    """
    start: T

    def get(self, index: int) -> T:
        return self.start + check_index(index)  # type: ignore[operator]


@dataclass(frozen=True)
class InfStepRange(InfiniteArray[T], Generic[T]):
    """
    The range start, start + step, start + 2 * step, ...

    A negative step gives a descending range, and a zero step is accepted and gives a constant
    array.

    Attributes:
        start (T):
            Value at index 0.
        step (T):
            Difference between consecutive elements.
    """
    start: T
    step: T

    def get(self, index: int) -> T:
        return self.start + check_index(index) * self.step  # type: ignore[operator]
