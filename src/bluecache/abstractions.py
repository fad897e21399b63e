"""
bluecache Abstract Base Classes

This module holds `QueryableMap`, the single implementation of every query and
transform operation shared by the concrete containers in `bluecache.cache`.

Dependencies:
- protocols.py: Protocol definitions (structural types)
- utils/: callback binding
"""

from abc import ABC
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, List, MutableMapping, Optional, Tuple, TypeVar, Union
import logging

from .utils import bind_callback

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

Q = TypeVar("Q", bound="QueryableMap")

Comparator = Callable[[Any, Any, Any, Any], int]


class _Absent:
    """Marker returned by the find family when nothing matches."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def iter_entries(source: Union["QueryableMap", Mapping, Iterable[Tuple[Any, Any]]]) -> Iterator[Tuple[Any, Any]]:
    """Yield (key, value) pairs from a container, a mapping, or an iterable of pairs."""
    if isinstance(source, QueryableMap):
        return source.entries()
    if isinstance(source, Mapping):
        return iter(source.items())
    return iter(source)


def default_sort(value_a: Any, value_b: Any, key_a: Any = None, key_b: Any = None) -> int:
    """
    Ascending order of values, total over mixed types.

    Values compare natively when they can. Pairs that cannot be ordered
    (e.g. `None` against an int) fall back to `(type name, str(value))`.
    """
    try:
        return (value_a > value_b) - (value_a < value_b)
    except TypeError:
        fallback_a = (type(value_a).__name__, str(value_a))
        fallback_b = (type(value_b).__name__, str(value_b))
        return (fallback_a > fallback_b) - (fallback_a < fallback_b)


# ============================================================================
# Top-level Abstract Base Classes
# ============================================================================

class QueryableMap(MutableMapping[K, V], ABC):
    """
    Abstract ordered mapping with the query/transform surface.

    Subclasses supply the mapping primitives (`__getitem__`, `__setitem__`,
    `__delitem__`, `__iter__`, `__len__`) and may override `entries` and `clear`
    for speed. Everything else is written against those primitives only, so it
    runs unmodified over a plain ordered map or over a filtered view.

    Subclass constructors must accept a single instance of their own type and
    produce an independent copy of it; `clone` relies on that.

    Callbacks are called as `fn(value, key, container)`. A `this_arg` is bound
    as receiver only for callbacks that take one extra leading argument.
    """

    # ------------------------------------------------------------------
    # Map-style helpers
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self)

    def has(self, key: K) -> bool:
        return key in self

    def set(self, key: K, value: V = None) -> "QueryableMap[K, V]":
        self[key] = value
        return self

    def delete(self, key: K) -> bool:
        try:
            del self[key]
        except KeyError:
            return False
        return True

    def clear(self) -> "QueryableMap[K, V]":
        for key in list(self):
            del self[key]
        return self

    def entries(self) -> Iterator[Tuple[K, V]]:
        for key in self:
            yield key, self[key]

    def for_each(self, callback: Callable[..., Any], this_arg: Any = None) -> None:
        fn = bind_callback(callback, this_arg)
        for key, value in self.entries():
            fn(value, key, self)

    # ------------------------------------------------------------------
    # Positional accessors
    # ------------------------------------------------------------------

    @property
    def first(self) -> Optional[Tuple[K, V]]:
        return next(self.entries(), None)

    @property
    def first_key(self) -> Optional[K]:
        entry = self.first
        return None if entry is None else entry[0]

    @property
    def first_value(self) -> Optional[V]:
        entry = self.first
        return None if entry is None else entry[1]

    @property
    def last(self) -> Optional[Tuple[K, V]]:
        # forward-only order, walk to the end
        entry = None
        for entry in self.entries():
            pass
        return entry

    @property
    def last_key(self) -> Optional[K]:
        entry = self.last
        return None if entry is None else entry[0]

    @property
    def last_value(self) -> Optional[V]:
        entry = self.last
        return None if entry is None else entry[1]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find(self, predicate: Callable[..., Any], this_arg: Any = None) -> Union[Tuple[K, V], _Absent]:
        """
        Return the first (key, value) pair for which `predicate(value, key, self)` is truthy.

        Returns:
            The matching pair, or `ABSENT` when nothing matches
        """
        fn = bind_callback(predicate, this_arg)
        for key, value in self.entries():
            if fn(value, key, self):
                return key, value
        return ABSENT

    def find_key(self, predicate: Callable[..., Any], this_arg: Any = None) -> Union[K, _Absent]:
        entry = self.find(predicate, this_arg)
        return ABSENT if entry is ABSENT else entry[0]

    def find_value(self, predicate: Callable[..., Any], this_arg: Any = None) -> Union[V, _Absent]:
        entry = self.find(predicate, this_arg)
        return ABSENT if entry is ABSENT else entry[1]

    # ------------------------------------------------------------------
    # Comparison and copying
    # ------------------------------------------------------------------

    def equals(self, other: Mapping) -> bool:
        """
        Order-sensitive structural equality.

        True when `other` holds the same (key, value) pairs in the same order.
        Values are compared with `==`.
        """
        if self is other:
            return True
        if not isinstance(other, Mapping) or len(self) != len(other):
            return False
        for (key, value), (other_key, other_value) in zip(self.entries(), iter_entries(other)):
            if key != other_key or value != other_value:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryableMap):
            return self.equals(other)
        return super().__eq__(other)

    __hash__ = None

    def clone(self: Q) -> Q:
        return type(self)(self)

    def __copy__(self: Q) -> Q:
        return self.clone()

    def _spawn(self: Q) -> Q:
        """An empty container of the receiver's kind."""
        return self.clone().clear()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def sweep(self, predicate: Callable[..., Any], this_arg: Any = None) -> int:
        """
        Remove, in place, every entry for which `predicate(value, key, self)` is truthy.

        Entries are walked from a snapshot, so removals never cause an entry to be
        skipped or visited twice.

        Returns:
            Number of entries removed
        """
        fn = bind_callback(predicate, this_arg)
        removed = 0
        for key, value in list(self.entries()):
            if fn(value, key, self) and self.delete(key):
                removed += 1
        logger.debug(f"Swept {removed} entries from {type(self).__name__}")
        return removed

    def sort(self: Q, comparator: Optional[Comparator] = None) -> Q:
        """
        Reorder the receiver in place and return it.

        Args:
            comparator: `(value_a, value_b, key_a, key_b) -> int`; defaults to
                `default_sort`, ascending by value
        """
        entries = list(self.entries())
        compare = comparator or default_sort
        entries.sort(key=cmp_to_key(lambda a, b: compare(a[1], b[1], a[0], b[0])))
        self.clear()
        for key, value in entries:
            self.set(key, value)
        logger.debug(f"Sorted {len(entries)} entries of {type(self).__name__}")
        return self

    def sorted(self: Q, comparator: Optional[Comparator] = None) -> Q:
        return self.clone().sort(comparator)

    # ------------------------------------------------------------------
    # Non-mutating transforms
    # ------------------------------------------------------------------

    def filter(self: Q, predicate: Callable[..., Any], this_arg: Any = None) -> Q:
        fn = bind_callback(predicate, this_arg)
        result = self._spawn()
        for key, value in self.entries():
            if fn(value, key, self):
                result.set(key, value)
        return result

    def map(self, transform: Callable[..., T], this_arg: Any = None) -> List[T]:
        fn = bind_callback(transform, this_arg)
        return [fn(value, key, self) for key, value in self.entries()]

    def some(self, predicate: Callable[..., Any], this_arg: Any = None) -> bool:
        fn = bind_callback(predicate, this_arg)
        return any(fn(value, key, self) for key, value in self.entries())

    def every(self, predicate: Callable[..., Any], this_arg: Any = None) -> bool:
        fn = bind_callback(predicate, this_arg)
        return all(fn(value, key, self) for key, value in self.entries())

    def reduce(self, reducer: Callable[..., T], initial_value: T, this_arg: Any = None) -> T:
        fn = bind_callback(reducer, this_arg, arity=4)
        accumulator = initial_value
        for key, value in self.entries():
            accumulator = fn(accumulator, value, key, self)
        return accumulator

    def concat(self: Q, *others: Union["QueryableMap", Mapping, Iterable[Tuple[Any, Any]]]) -> Q:
        """
        Return a new container holding the receiver's entries followed by each of `others`.

        Entries are inserted key by key: a repeated key keeps its first position
        and takes the last value seen.
        """
        result = self.clone()
        for other in others:
            for key, value in iter_entries(other):
                result.set(key, value)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.entries())!r})"
