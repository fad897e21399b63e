"""
bluecache Protocol Definitions

Protocols are the foundation layer with zero dependencies on other bluecache modules.
"""

from typing import Protocol, Any, Iterator, Tuple, runtime_checkable


# ============================================================================
# Container Protocols
# ============================================================================

@runtime_checkable
class OrderedMapProtocol(Protocol):
    """
    Protocol for key-unique, insertion-ordered mappings.

    Both Cache and ProxyCache satisfy it; the query operations in
    `abstractions.QueryableMap` are written against nothing more than this.
    """

    @property
    def size(self) -> int:
        """Number of visible entries."""
        ...

    def get(self, key: Any, default: Any = None) -> Any:
        ...

    def set(self, key: Any, value: Any = None) -> "OrderedMapProtocol":
        """
        Store or expose `key`.

        Returns:
            The receiver, for chaining
        """
        ...

    def has(self, key: Any) -> bool:
        ...

    def delete(self, key: Any) -> bool:
        """
        Remove `key`.

        Returns:
            Whether the key had been present
        """
        ...

    def clear(self) -> Any:
        ...

    def entries(self) -> Iterator[Tuple[Any, Any]]:
        """Yield (key, value) pairs in iteration order."""
        ...

    def keys(self) -> Any:
        ...

    def values(self) -> Any:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...

    def __len__(self) -> int:
        ...
