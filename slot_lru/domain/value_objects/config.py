"""Configuration value objects with validation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ...config import DEFAULT_CAPACITY


class CacheConfig(BaseModel):
    """Store configuration with validation."""
    
    model_config = {"frozen": True}
    
    # Maximum number of live entries
    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1, strict=True)


__all__ = [
    'CacheConfig',
]
