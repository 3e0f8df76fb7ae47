from __future__ import annotations
import logging
from typing import Any, ClassVar, Generic, TypeVar

from infinite_arrays.sequence.infinite_array import InfiniteArray, SupportsGet, version_of
from infinite_arrays.typeutils.index_check import check_index

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Cumsum(InfiniteArray[T], Generic[T]):
    """
    Running sum of an inner array: `get(i)` is the sum of `inner.get(k)` for k in 0..i.

    With caching enabled, the array remembers the furthest index summed so far and the total up to
    it, so increasing queries only add the missing elements instead of summing the whole prefix
    again. A query below the cached point is recomputed from index 0 and leaves the cached point
    where it is. The inner array's `version` is recorded with the running total; if it has changed
    since (for example after `set` on a wrapped `CachedArray`), the total is discarded and summed
    again. Results are identical with and without caching, whatever the query order.

    The cached state makes instances unsafe to share between threads without external locking.

    Attributes:
        default_cache (ClassVar[bool]):
            Caching mode used when the constructor is not given one explicitly.
        _inner (SupportsGet[T]):
            The array being summed.
        _cache (bool):
            Whether the running total is kept between calls.
        _last_index (int | None):
            Furthest index summed so far, None before the first cached query.
        _running_total (T | None):
            Sum of the inner elements up to `_last_index`.
        _inner_version (int):
            `version` of the inner array when the running total was computed.
    """

    default_cache: ClassVar[bool] = True

    _inner: SupportsGet[T]
    _cache: bool
    _last_index: int | None
    _running_total: T | None
    _inner_version: int

    def __init__(self, inner: SupportsGet[T], cache: bool | None = None):
        self._inner = inner
        self._cache = type(self).default_cache if cache is None else cache
        self._last_index = None
        self._running_total = None
        self._inner_version = version_of(inner)

    @property
    def cached_index(self) -> int | None:
        """
        Furthest index whose running total is cached, or None.
        """
        return self._last_index

    def reset(self) -> None:
        """
        Forget the running total. The next query sums from index 0 again.
        """
        logger.debug("Cumsum running state reset (was at index %s)", self._last_index)
        self._last_index = None
        self._running_total = None

    @property
    def version(self) -> int:
        return version_of(self._inner)

    def _accumulate(self, total: Any, start: int, stop: int) -> Any:
        for k in range(start, stop + 1):
            total = total + self._inner.get(k)
        return total

    def _sum_from_start(self, index: int) -> T:
        return self._accumulate(self._inner.get(0), 1, index)

    def get(self, index: int) -> T:
        index = check_index(index)

        if not self._cache:
            return self._sum_from_start(index)

        inner_version = version_of(self._inner)
        if self._last_index is not None and inner_version != self._inner_version:
            logger.debug(
                "Cumsum inner array changed (version %d -> %d), dropping running total at index %d",
                self._inner_version, inner_version, self._last_index
            )
            self._last_index = None
            self._running_total = None

        if self._last_index is None:
            total = self._sum_from_start(index)
        elif index < self._last_index:
            logger.debug(
                "Cumsum recomputing index %d from 0, running total is at index %d",
                index, self._last_index
            )
            return self._sum_from_start(index)
        else:
            total = self._accumulate(self._running_total, self._last_index + 1, index)

        self._last_index = index
        self._running_total = total
        self._inner_version = inner_version
        return total

    def __repr__(self) -> str:
        return f"Cumsum({self._inner!r}, cache={self._cache})"


def cumsum(arr: SupportsGet[T], cache: bool | None = None) -> Cumsum[T]:
    """
    Returns the cumulative sum of `arr`.

    Args:
        arr (SupportsGet[T]):
            The array to sum.
        cache (bool | None):
            Keep the running total between calls. Defaults to `Cumsum.default_cache`.

    Returns:
        Cumsum[T]:
            The lazy running-sum array; `get(0) == arr.get(0)`.

    Example:
        >>> running = cumsum(Ones())
        >>> running.get(9)
        10.0
    """
    return Cumsum(arr, cache=cache)
