"""Value objects."""

from .config import CacheConfig

__all__ = ['CacheConfig']
