"""Application layer - cache port and adapters."""

from .ports.cache import Cache, LruCache

__all__ = ['Cache', 'LruCache']
