"""Ports - interfaces for code that consumes the store."""

from .cache import Cache, LruCache

__all__ = [
    'Cache',
    'LruCache',
]
