"""
bluecache Containers

- Cache: insertion-ordered map with the query/transform surface
- ProxyCache: membership-filtered view over a shared backing store
"""

from .store import Cache
from .proxy import ProxyCache

__all__ = [
    'Cache',
    'ProxyCache',
]
