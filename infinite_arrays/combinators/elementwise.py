from __future__ import annotations
import operator
from typing import Any, Callable, TypeVar

from infinite_arrays.numeric.numeric_traits import divide
from infinite_arrays.sequence.infinite_array import InfiniteArray, SupportsGet, version_of
from infinite_arrays.typeutils.index_check import check_index

T = TypeVar("T")


class ElementwiseBinaryOp(InfiniteArray[Any]):
    """
    Lazily combines two arrays position by position: `get(i) == op(left.get(i), right.get(i))`.

    Both operands are read at the same index on every query. They only need to be indexable;
    nothing else about them is assumed.

    Attributes:
        _left (SupportsGet[Any]):
            The first operand.
        _right (SupportsGet[Any]):
            The second operand.
        _op (Callable[[Any, Any], Any]):
            The binary operator.
    """

    _left: SupportsGet[Any]
    _right: SupportsGet[Any]
    _op: Callable[[Any, Any], Any]

    def __init__(
        self, left: SupportsGet[Any], right: SupportsGet[Any], op: Callable[[Any, Any], Any]
    ):
        self._left = left
        self._right = right
        self._op = op

    @property
    def version(self) -> int:
        return version_of(self._left) + version_of(self._right)

    def get(self, index: int) -> Any:
        index = check_index(index)
        return self._op(self._left.get(index), self._right.get(index))

    def __repr__(self) -> str:
        return f"ElementwiseBinaryOp({self._left!r}, {self._right!r}, {self._op!r})"


def add_arrays(a: SupportsGet[T], b: SupportsGet[T]) -> ElementwiseBinaryOp:
    """
    Element-wise sum `a + b`.
    """
    return ElementwiseBinaryOp(a, b, operator.add)


def sub_arrays(a: SupportsGet[T], b: SupportsGet[T]) -> ElementwiseBinaryOp:
    """
    Element-wise difference `a - b`.
    """
    return ElementwiseBinaryOp(a, b, operator.sub)


def mul_arrays(a: SupportsGet[T], b: SupportsGet[T]) -> ElementwiseBinaryOp:
    """
    Element-wise product `a * b`.
    """
    return ElementwiseBinaryOp(a, b, operator.mul)


def div_arrays(a: SupportsGet[T], b: SupportsGet[T]) -> ElementwiseBinaryOp:
    """
    Element-wise quotient `a / b`.

    Follows `numeric_traits.divide`: floats (Python or NumPy) divide with IEEE-754 semantics, so
    a zero divisor yields `inf` or `nan`; two integers use floor division and a zero divisor
    raises `ZeroDivisionError` from the `get` call that hits it. Floor division rounds toward
    negative infinity, so `-7` divided by `2` gives `-4` rather than the truncated `-3`. The `/`
    operator on arrays is true division instead and gives `-3.5`.

    Args:
        a (SupportsGet[T]):
            The dividends.
        b (SupportsGet[T]):
            The divisors.

    Returns:
        ElementwiseBinaryOp:
            The lazy quotient array.
    """
    return ElementwiseBinaryOp(a, b, divide)
