"""Domain layer - cache records and configuration."""

from .entities.entry import Entry
from .value_objects.config import CacheConfig

__all__ = [
    # Entities
    'Entry',
    # Value Objects
    'CacheConfig',
]
