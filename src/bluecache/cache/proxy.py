from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable, Iterator, Optional, Set, Tuple, override
import logging

from ..abstractions import QueryableMap, K, V
from ..exceptions import InvalidStoreError

logger = logging.getLogger(__name__)


class ProxyCache(QueryableMap[K, V]):
    """
    A read/write view over a shared backing store.

    The view owns only a set of member keys. A key is visible when it is a
    member AND the store currently holds it; iteration always follows the
    store's order, never the order keys were added. The store is held by
    reference and never written to, so several views can share one store and
    see each other's in-place value changes.

    `len()` counts visible members only: a member whose key has since been
    removed from the store is not counted, and reappears if the key comes back.

    Args:
        store: the backing mapping, or another ProxyCache whose store is adopted
            and whose membership is copied (`keys` is then ignored)
        keys: initial member keys
    """

    def __init__(self, store: Mapping, keys: Optional[Iterable[K]] = None):
        if isinstance(store, ProxyCache):
            self._store: Mapping = store._store
            self._members: Set[K] = set(store._members)
            logger.debug(f"Adopted backing store with {len(self._members)} member keys")
        elif isinstance(store, Mapping):
            self._store = store
            self._members = set() if keys is None else set(keys)
        else:
            raise InvalidStoreError(f"ProxyCache store must be a mapping, got {type(store).__name__}")

    @property
    def store(self) -> Mapping:
        """The shared backing store."""
        return self._store

    @property
    def members(self) -> FrozenSet[K]:
        """Snapshot of the member keys, including ones the store no longer holds."""
        return frozenset(self._members)

    def __getitem__(self, key: K) -> V:
        if key in self._members and key in self._store:
            return self._store[key]
        raise KeyError(key)

    @override
    def __setitem__(self, key: K, value: Any = None) -> None:
        """Opt `key` into the view if the store holds it. `value` is ignored."""
        if key in self._store:
            self._members.add(key)

    def __delitem__(self, key: K) -> None:
        self._members.remove(key)

    def __iter__(self) -> Iterator[K]:
        for key in self._store.keys():
            if key in self._members:
                yield key

    def __len__(self) -> int:
        return sum(1 for key in self._members if key in self._store)

    def __contains__(self, key: Any) -> bool:
        return key in self._members and key in self._store

    @override
    def entries(self) -> Iterator[Tuple[K, V]]:
        for key, value in self._store.items():
            if key in self._members:
                yield key, value

    @override
    def clear(self) -> "ProxyCache[K, V]":
        self._members.clear()
        return self

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {len(self)} of {len(self._store)} keys>"
