"""Slot arena and free-slot pool backing the LRU store."""

from __future__ import annotations

from typing import Iterator

from ..domain.entities.entry import Entry


class SlotArena:
    """Fixed-capacity array of optional entries addressed by slot number.

    Slots are allocated by appending until the arena has grown to its
    capacity. Slot numbers never change while an entry occupies them.
    Accessing a slot that must be occupied but is not raises
    AssertionError, since that can only follow from a broken link.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._slots: list[Entry | None] = []

    @property
    def grown(self) -> int:
        """Number of slots allocated so far."""
        return len(self._slots)

    @property
    def is_full_size(self) -> bool:
        """Check if the arena can no longer grow."""
        return len(self._slots) >= self.capacity

    def append(self, entry: Entry) -> int:
        """Store entry in a newly grown slot and return its number."""
        if self.is_full_size:
            raise AssertionError(
                f"BUG: arena grown past capacity {self.capacity}"
            )
        self._slots.append(entry)
        return len(self._slots) - 1

    def get(self, slot: int, what: str = "node") -> Entry:
        """Return the entry in an occupied slot."""
        entry = self.peek(slot)
        if entry is None:
            raise AssertionError(f"BUG: {what} at slot {slot} not found")
        return entry

    def peek(self, slot: int) -> Entry | None:
        """Return the entry in slot, or None if vacant or never grown."""
        if 0 <= slot < len(self._slots):
            return self._slots[slot]
        return None

    def put(self, slot: int, entry: Entry) -> None:
        """Overwrite slot with entry."""
        if not 0 <= slot < len(self._slots):
            raise AssertionError(f"BUG: slot {slot} outside grown arena")
        self._slots[slot] = entry

    def vacate(self, slot: int) -> Entry:
        """Empty an occupied slot and return the entry it held."""
        entry = self.get(slot)
        self._slots[slot] = None
        return entry

    def reset(self) -> None:
        """Make every slot up to capacity vacant."""
        self._slots = [None] * self.capacity

    def occupied(self) -> Iterator[int]:
        """Iterate over occupied slot numbers in ascending order."""
        for slot, entry in enumerate(self._slots):
            if entry is not None:
                yield slot

    def __len__(self) -> int:
        return sum(1 for _ in self.occupied())


class FreeSlotPool:
    """Stack of vacant slot numbers, reused before the arena grows."""

    def __init__(self):
        self._stack: list[int] = []

    def push(self, slot: int) -> None:
        self._stack.append(slot)

    def pop(self) -> int | None:
        """Pop the most recently freed slot, or None if the pool is empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def reset(self, capacity: int) -> None:
        """Fill the pool with every slot in [0, capacity).

        Slots are stacked in descending order so that slot 0 is
        handed out first, matching a freshly grown arena.
        """
        self._stack = list(range(capacity - 1, -1, -1))

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def __contains__(self, slot: object) -> bool:
        return slot in self._stack

    def __iter__(self) -> Iterator[int]:
        return iter(self._stack)
