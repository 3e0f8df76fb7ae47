from collections.abc import Mapping
from typing import TypeVar, Generic, Iterator, cast

K = TypeVar("K")
V = TypeVar("V")

class ReadOnlyMapping(Mapping[K, V], Generic[K, V]):
    """
    A read-only, live view over a dict. Prevents mutation while allowing full read access.

    The view is not a copy: changes made to the underlying dict by its owner are visible through
    it. Values themselves are not frozen.

    Attributes:
        _data (dict[K, V]):
            The underlying dict that this ReadOnlyMapping wraps.
    """

    _data: dict[K, V]

    def __init__(self, data: dict[K, V]):
        self._data = data

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"ReadOnlyMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyMapping):
            # Cast is for the type checker only; K and V are not enforced at runtime
            return self._data == cast(ReadOnlyMapping[K, V], other)._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return False
