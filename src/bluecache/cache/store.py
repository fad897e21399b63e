from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union
import logging

from ..abstractions import QueryableMap, K, V, iter_entries

logger = logging.getLogger(__name__)


class Cache(QueryableMap[K, V]):
    """
    Insertion-ordered map with the full query surface.

    Re-setting an existing key updates its value in place without moving it.

    Example:
        >>> cache = Cache([(1, "foo"), (2, "bar"), (3, "baz")])
        >>> cache.first
        (1, 'foo')
        >>> cache.find(lambda value, key, _: value == "bar")
        (2, 'bar')
    """

    def __init__(self, entries: Optional[Union[Mapping, Iterable[Tuple[K, V]]]] = None):
        self._data: Dict[K, V] = {}
        if entries is not None:
            for key, value in iter_entries(entries):
                self._data[key] = value

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def entries(self) -> Iterator[Tuple[K, V]]:
        return iter(self._data.items())

    def clear(self) -> "Cache[K, V]":
        self._data.clear()
        return self
