"""Cache port - interface for caching."""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable

from pydantic import ValidationError

from ...core.store import LruStore
from ...domain.value_objects.config import CacheConfig
from ...exceptions import InvalidCapacityError


@runtime_checkable
class Cache(Protocol):
    """Port for caching operations."""
    
    def get(self, key: Hashable) -> object | None:
        """Get value from cache."""
        ...
    
    def set(self, key: Hashable, value: object) -> None:
        """Set value in cache."""
        ...
    
    def delete(self, key: Hashable) -> None:
        """Delete key from cache."""
        ...
    
    def clear(self) -> None:
        """Clear all cached values."""
        ...
    
    def has(self, key: Hashable) -> bool:
        """Check if key exists in cache."""
        ...


class LruCache:
    """Cache port backed by an LruStore.
    
    ``get`` and ``set`` count as uses of the key; ``has`` does not.
    Deleting a missing key is a no-op.
    """
    
    def __init__(self, max_size: int | None = None, config: CacheConfig | None = None):
        """Create the adapter.
        
        Raises:
            InvalidCapacityError: If max_size is not a positive integer
        """
        if config is None:
            if max_size is None:
                config = CacheConfig()
            else:
                try:
                    config = CacheConfig(capacity=max_size)
                except ValidationError as e:
                    raise InvalidCapacityError(
                        f"Invalid max_size {max_size!r}: {e}",
                        capacity=max_size,
                    ) from e
        self.store: LruStore[Hashable, object] = LruStore.from_config(config)
    
    def get(self, key: Hashable) -> object | None:
        return self.store.read(key)
    
    def set(self, key: Hashable, value: object) -> None:
        self.store.write(key, value)
    
    def delete(self, key: Hashable) -> None:
        if self.store.contains(key):
            self.store.delete(key)
    
    def clear(self) -> None:
        self.store.clear()
    
    def has(self, key: Hashable) -> bool:
        return self.store.contains(key)
    
    def __len__(self) -> int:
        return len(self.store)
