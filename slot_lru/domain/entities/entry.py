"""Cache entry entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(slots=True)
class Entry:
    """One live cache record stored in an arena slot.
    
    Neighbours are referenced by slot number, never by object.
    ``previous`` points towards the least recently used end and is
    None for the head; ``next`` points towards the most recently used
    end and is None for the tail.
    """
    key: Hashable
    value: Any
    previous: int | None = None
    next: int | None = None
    
    @property
    def is_detached(self) -> bool:
        """Check if entry has no neighbours."""
        return self.previous is None and self.next is None
