"""
bluecache

Ordered, queryable, cloneable maps and lightweight filtered views onto a shared
backing store.

Main modules:
- cache: the Cache and ProxyCache containers
- abstractions: QueryableMap, the shared query/transform implementation
- protocols: structural type of an ordered map
- config: YAML configuration for logging
- utils: logging setup and callback binding

Quick start example:
```python
from bluecache import Cache, ProxyCache

store = Cache([("first", "foo"), ("second", "bar"), ("third", "baz")])
proxy = ProxyCache(store, ["second", "first"])
list(proxy.keys())  # ['first', 'second']
```
"""

from .protocols import OrderedMapProtocol
from .abstractions import QueryableMap, ABSENT, default_sort
from .cache import Cache, ProxyCache
from .config import Config, ConfigModel
from .utils import setup_logger
from .exceptions import (
    BlueCacheError,
    ContainerError,
    InvalidStoreError,
    ConfigurationError,
    ConfigValidationError,
)

__version__ = "0.9.0"

__all__ = [
    # Version
    '__version__',
    # Protocols
    'OrderedMapProtocol',
    # Abstractions
    'QueryableMap',
    'ABSENT',
    'default_sort',
    # Containers
    'Cache',
    'ProxyCache',
    # Config
    'Config',
    'ConfigModel',
    'setup_logger',
    # Exceptions
    'BlueCacheError',
    'ContainerError',
    'InvalidStoreError',
    'ConfigurationError',
    'ConfigValidationError',
]
