from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from infinite_arrays.numeric.numeric_traits import DType, one, zero
from infinite_arrays.sequence.infinite_array import InfiniteArray
from infinite_arrays.typeutils.index_check import check_index


@dataclass(frozen=True)
class Ones(InfiniteArray[Any]):
    """
    An infinite array where every element is the multiplicative identity of `dtype`.

    Attributes:
        dtype (DType):
            Element type. Defaults to `float`, so `Ones().get(i) == 1.0`.
    """
    dtype: DType = float

    def get(self, index: int) -> Any:
        check_index(index)
        return one(self.dtype)


@dataclass(frozen=True)
class Zeros(InfiniteArray[Any]):
    """
    An infinite array where every element is the additive identity of `dtype`.

    Attributes:
        dtype (DType):
            Element type. Defaults to `float`, so `Zeros().get(i) == 0.0`.
    """
    dtype: DType = float

    def get(self, index: int) -> Any:
        check_index(index)
        return zero(self.dtype)
