from __future__ import annotations
import logging
from typing import Generic, TypeVar

from infinite_arrays.containers.read_only.read_only_mapping import ReadOnlyMapping
from infinite_arrays.sequence.infinite_array import InfiniteArray, SupportsGet, version_of
from infinite_arrays.typeutils.index_check import check_index

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CachedArray(InfiniteArray[T], Generic[T]):
    """
    An infinite array with individually pinned positions.

    Reads return the override stored for an index if there is one, and otherwise delegate to the
    inner array without storing the result: the override table only ever holds values that were
    set explicitly (or materialized, see `materialize`).

    Overrides never expire. There is no per-index removal; `clear_cache` drops all of them at
    once. The table grows with every distinct index that is set, which callers pinning many
    positions have to account for.

    Attributes:
        _inner (SupportsGet[T]):
            The array answering every index without an override.
        _overrides (dict[int, T]):
            Explicitly set values, keyed by index.
        _mutations (int):
            Number of changes made to the override table, see `version`.
    """

    _inner: SupportsGet[T]
    _overrides: dict[int, T]
    _mutations: int

    def __init__(self, inner: SupportsGet[T]):
        self._inner = inner
        self._overrides = {}
        self._mutations = 0

    def get(self, index: int) -> T:
        index = check_index(index)
        if index in self._overrides:
            return self._overrides[index]
        return self._inner.get(index)

    def set(self, index: int, value: T) -> None:
        """
        Pins `index` to `value`, replacing any previous override.

        Args:
            index (int):
                The position to override.
            value (T):
                The value returned for that position from now on.
        """
        index = check_index(index)
        logger.debug("CachedArray override set at index %d", index)
        self._overrides[index] = value
        self._mutations += 1

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def materialize(self, index: int) -> T:
        """
        Pins `index` to its current value and returns it.

        If the index has no override yet, the inner value is read and stored as one. Later changes
        can then be made with `set`, starting from the stored value.

        Args:
            index (int):
                The position to materialize.

        Returns:
            T:
                The override now stored for that index.
        """
        index = check_index(index)
        if index not in self._overrides:
            logger.debug("CachedArray materializing index %d from the inner array", index)
            self._overrides[index] = self._inner.get(index)
            self._mutations += 1
        return self._overrides[index]

    def clear_cache(self) -> None:
        """
        Drops every override; all indices delegate to the inner array again.
        """
        logger.debug("CachedArray clearing %d override(s)", len(self._overrides))
        self._overrides.clear()
        self._mutations += 1

    @property
    def version(self) -> int:
        """
        Increases on every `set`, every `materialize` that stores a value and every `clear_cache`,
        plus any change reported by the inner array.
        """
        return self._mutations + version_of(self._inner)

    @property
    def cache_size(self) -> int:
        """
        Number of overridden indices.
        """
        return len(self._overrides)

    @property
    def overrides(self) -> ReadOnlyMapping[int, T]:
        """
        Live, read-only view of the override table.
        """
        return ReadOnlyMapping(self._overrides)

    def __repr__(self) -> str:
        return f"CachedArray({self._inner!r}, overrides={self._overrides!r})"
