"""
Numeric helpers shared by the generators and combinators.

Element types are either plain Python numeric types (`int`, `float`, `complex`, `Fraction`,
`Decimal`, ...) or NumPy scalar types / dtypes (`np.float32`, `np.dtype("int16")`, `"u8"`, ...).
The helpers here hide the difference so that generators can produce identities of the requested
type and combinators can apply one division policy regardless of where the values came from.

Overflow is never checked here: Python integers are unbounded, and NumPy fixed-width integers
behave the way NumPy makes them behave (wrap-around with a `RuntimeWarning`, or `OverflowError`
when a Python integer does not fit the target type).
"""

from __future__ import annotations
import sys
from typing import Any, TypeAlias

import numpy as np

DType: TypeAlias = type | np.dtype[Any] | str

# Operand types for which division follows IEEE-754 semantics through NumPy.
_IEEE_OPERAND_TYPES = (int, float, complex, np.number)


def _format_dtype_name(dtype: DType) -> str:
    if isinstance(dtype, (np.dtype, str)):
        return str(dtype)
    return dtype.__name__


def _numpy_scalar_type(dtype: DType) -> type[np.generic] | None:
    """
    Resolve the NumPy scalar type behind `dtype`, or None for non-NumPy types.
    """
    if isinstance(dtype, np.dtype):
        return dtype.type
    if isinstance(dtype, str):
        return np.dtype(dtype).type
    if issubclass(dtype, np.generic):
        return dtype
    return None


def convert(dtype: DType, value: int) -> Any:
    """
    Convert an integer to the element type described by `dtype`.

    Args:
        dtype (DType):
            A Python type, a NumPy scalar type, a NumPy dtype, or a dtype string.
        value (int):
            The integer to convert.

    Returns:
        Any:
            `value` as an instance of the element type.

    Raises:
        OverflowError:
            If `value` does not fit a fixed-width NumPy integer type.
    """
    scalar_type = _numpy_scalar_type(dtype)
    if scalar_type is not None:
        return scalar_type(value)
    return dtype(value)


def one(dtype: DType) -> Any:
    """
    Returns the multiplicative identity of `dtype`.
    """
    return convert(dtype, 1)


def zero(dtype: DType) -> Any:
    """
    Returns the additive identity of `dtype`.
    """
    return convert(dtype, 0)


def infinity(dtype: DType) -> Any:
    """
    Returns the value standing for "infinity" in `dtype`.

    Floating types have a real infinity. Integer types do not, so their largest representable
    value is used instead: `np.iinfo(dtype).max` for NumPy integers and `sys.maxsize` for `int`.

    Args:
        dtype (DType):
            The element type.

    Returns:
        Any:
            The infinity (or stand-in) of the element type.

    Raises:
        TypeError:
            If the type has neither an infinity nor a maximum.
    """
    scalar_type = _numpy_scalar_type(dtype)
    if scalar_type is not None:
        if issubclass(scalar_type, np.floating):
            return scalar_type(np.inf)
        if issubclass(scalar_type, np.integer):
            return scalar_type(np.iinfo(scalar_type).max)
    elif dtype is float:
        return float("inf")
    elif dtype is int:
        return sys.maxsize

    raise TypeError(f"no infinity defined for {_format_dtype_name(dtype)}")


def is_integral(value: object) -> bool:
    """
    Returns True if `value` is a Python or NumPy integer.
    """
    return isinstance(value, (int, np.integer))


def divide(a: Any, b: Any) -> Any:
    """
    Divide two elements following the native semantics of their type.

    - Two integers use floor division, Python's native integer division, which rounds toward
      negative infinity: `divide(-7, 2) == -4`, not the truncated -3. Dividing by zero raises
      `ZeroDivisionError` for NumPy integers too, which would otherwise only warn and return 0.
    - Other built-in or NumPy numbers use IEEE-754 true division: dividing by zero yields
      `inf`, `-inf` or `nan` instead of raising. Plain Python operands get a plain Python result
      back, NumPy operands keep their NumPy scalar type.
    - Anything else (`Fraction`, `Decimal`, user types) uses its own `/` operator.

    Args:
        a (Any):
            The dividend.
        b (Any):
            The divisor.

    Returns:
        Any:
            The quotient.

    Raises:
        ZeroDivisionError:
            If both operands are integers and `b` is zero, or if a non-IEEE type raises it.
    """
    if is_integral(a) and is_integral(b):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        return a // b
    return _divide_inexact(a, b)


def true_divide(a: Any, b: Any) -> Any:
    """
    Divide two elements the way Python's `/` operator does.

    Same as `divide`, except that two integers give a float quotient: `true_divide(1, 2) == 0.5`.
    An integer zero divisor still raises `ZeroDivisionError`.
    """
    if is_integral(a) and is_integral(b):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        if not (isinstance(a, np.generic) or isinstance(b, np.generic)):
            return a / b
    return _divide_inexact(a, b)


def _divide_inexact(a: Any, b: Any) -> Any:
    if not (isinstance(a, _IEEE_OPERAND_TYPES) and isinstance(b, _IEEE_OPERAND_TYPES)):
        return a / b

    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.true_divide(a, b)

    if isinstance(a, np.generic) or isinstance(b, np.generic):
        return result
    return result.item()
