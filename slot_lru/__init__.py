"""slot-lru - fixed-capacity key-value store with LRU eviction."""

__version__ = "0.1.0"

from .application.ports.cache import Cache, LruCache
from .core import LruStore
from .domain import CacheConfig, Entry
from .exceptions import (
    SlotLruError,
    InvalidCapacityError,
    NotFoundError,
    ConfigurationError,
)
from .utils.env import load_config, setup_logging

__all__ = [
    '__version__',
    'LruStore',
    'CacheConfig',
    'Entry',
    'Cache',
    'LruCache',
    'load_config',
    'setup_logging',
    # Exceptions
    'SlotLruError',
    'InvalidCapacityError',
    'NotFoundError',
    'ConfigurationError',
]
