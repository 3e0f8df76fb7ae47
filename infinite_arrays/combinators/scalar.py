from __future__ import annotations
import operator
from typing import Any, Callable, TypeVar

from infinite_arrays.numeric.numeric_traits import divide
from infinite_arrays.sequence.infinite_array import InfiniteArray, SupportsGet, version_of
from infinite_arrays.typeutils.index_check import check_index

T = TypeVar("T")


class ScalarOp(InfiniteArray[Any]):
    """
    Lazily combines every element of an array with a scalar fixed at construction.

    `get(i)` is `op(inner.get(i), scalar)`, or `op(scalar, inner.get(i))` when `reflected` is set
    (used for `2 - arr` and `2 / arr`).

    Attributes:
        _inner (SupportsGet[Any]):
            The array operand.
        _op (Callable[[Any, Any], Any]):
            The binary operator.
        _scalar (Any):
            The scalar operand.
        _reflected (bool):
            Whether the scalar is the left operand.
    """

    _inner: SupportsGet[Any]
    _op: Callable[[Any, Any], Any]
    _scalar: Any
    _reflected: bool

    def __init__(
        self,
        inner: SupportsGet[Any],
        op: Callable[[Any, Any], Any],
        scalar: Any,
        reflected: bool = False,
    ):
        self._inner = inner
        self._op = op
        self._scalar = scalar
        self._reflected = reflected

    @property
    def version(self) -> int:
        return version_of(self._inner)

    def get(self, index: int) -> Any:
        value = self._inner.get(check_index(index))
        if self._reflected:
            return self._op(self._scalar, value)
        return self._op(value, self._scalar)

    def __repr__(self) -> str:
        return (
            f"ScalarOp({self._inner!r}, {self._op!r}, {self._scalar!r}, "
            f"reflected={self._reflected})"
        )


def add_scalar(arr: SupportsGet[T], scalar: T) -> ScalarOp:
    """
    Adds `scalar` to every element.

    Example:
        >>> add_scalar(Ones(), 2.0).get(0)
        3.0
    """
    return ScalarOp(arr, operator.add, scalar)


def sub_scalar(arr: SupportsGet[T], scalar: T) -> ScalarOp:
    """
    Subtracts `scalar` from every element.
    """
    return ScalarOp(arr, operator.sub, scalar)


def mul_scalar(arr: SupportsGet[T], scalar: T) -> ScalarOp:
    """
    Multiplies every element by `scalar`.
    """
    return ScalarOp(arr, operator.mul, scalar)


def div_scalar(arr: SupportsGet[T], scalar: T) -> ScalarOp:
    """
    Divides every element by `scalar`, with the same semantics as `div_arrays`.

    A zero integer scalar is accepted here and only fails when an element is read.
    """
    return ScalarOp(arr, divide, scalar)
