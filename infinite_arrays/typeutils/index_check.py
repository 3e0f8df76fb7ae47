import sys
from typing import Type, Tuple

import numpy as np

# Largest index any sequence accepts: the host's addressable index range.
INFINITY: int = sys.maxsize

_INDEX_TYPES: Tuple[Type[object], ...] = (int, np.integer)

def _format_type_name(tp: Type[object] | Tuple[Type[object], ...]) -> str:
    """
    Helper to format type names nicely for error messages.
    """
    if isinstance(tp, tuple):
        return ", ".join(t.__name__ for t in tp)
    return tp.__name__

def check_index(index: object) -> int:
    """
    Validate a sequence index and return it as a plain `int`.

    Both Python integers and NumPy integer scalars are accepted, so indices coming out of
    `np.arange` or similar can be used directly. `bool` is rejected even though it subclasses
    `int`, since `seq[True]` is almost certainly a mistake.

    Args:
        index (object):
            The candidate index.

    Returns:
        int:
            The index as a plain Python integer.

    Raises:
        TypeError:
            If the index is not an integer.
        IndexError:
            If the index is negative or larger than `INFINITY`.

    Example:
        >>> check_index(3)
        3

        >>> check_index(np.int64(7))
        7

        >>> check_index(1.5)
        TypeError: index must be int, integer, got float
    """
    if isinstance(index, bool) or not isinstance(index, _INDEX_TYPES):
        raise TypeError(
            f"index must be {_format_type_name(_INDEX_TYPES)}, got {type(index).__name__}"
        )

    value = int(index)

    if value < 0:
        raise IndexError(f"index must be non-negative, got {value}")
    if value > INFINITY:
        raise IndexError(f"index {value} exceeds the addressable range (max {INFINITY})")

    return value
