"""
bluecache Utils Module

- logger: Logging setup and configuration
- callbacks: Receiver binding for query callbacks

Usage:
    from bluecache.utils import setup_logger, bind_callback
"""

from .logger import setup_logger, parse_module_levels
from .callbacks import bind_callback

__all__ = [
    'setup_logger',
    'parse_module_levels',
    'bind_callback',
]
