"""Core storage functionality."""

from .arena import FreeSlotPool, SlotArena
from .store import LruStore

__all__ = [
    'FreeSlotPool',
    'SlotArena',
    'LruStore',
]
