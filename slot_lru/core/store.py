"""Fixed-capacity key-value store with least-recently-used eviction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Hashable, Iterator, TypeVar, overload

from ..domain.entities.entry import Entry
from ..exceptions import InvalidCapacityError, NotFoundError
from .arena import FreeSlotPool, SlotArena

if TYPE_CHECKING:
    from ..domain.value_objects.config import CacheConfig

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')
D = TypeVar('D')


def _expect(slot: int | None, what: str) -> int:
    """Unwrap a slot number that the store's invariants guarantee."""
    if slot is None:
        raise AssertionError(f"BUG: {what} not set")
    return slot


class LruStore(Generic[K, V]):
    """Capacity-bounded store evicting the least recently used entry.

    Entries live in a slot arena and are chained into a doubly linked
    recency list by slot number: ``head`` is the least recently used
    entry and ``tail`` the most recently used one. A key index maps
    each live key to its slot, and slots released by ``delete`` are
    kept in a free pool and reused before the arena grows.

    Writing and reading a key both count as using it. All operations
    are O(1) except the read-only ``keys``/``items`` walks and
    ``verify``. The store is not thread-safe.

    Example:
        >>> store = LruStore(2)
        >>> store.write(1, "one")
        >>> store.write(2, "two")
        >>> store.read(1)
        'one'
        >>> store.write(3, "three")  # evicts 2
        >>> store.keys()
        [1, 3]
    """

    def __init__(self, capacity: int):
        """Create an empty store.

        Args:
            capacity: Maximum number of live entries, at least 1

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(
                f"Capacity must be an integer, got {type(capacity).__name__}",
                capacity=capacity,
            )
        if capacity < 1:
            raise InvalidCapacityError(
                f"Capacity must be greater than 0, got {capacity}",
                capacity=capacity,
            )

        self._capacity = capacity
        self._arena = SlotArena(capacity)
        self._index: dict[K, int] = {}
        self._free = FreeSlotPool()
        self._head: int | None = None
        self._tail: int | None = None
        self._length = 0

        logger.debug("Created LRU store (capacity=%d)", capacity)

    @classmethod
    def from_config(cls, config: CacheConfig) -> LruStore[K, V]:
        """Create a store from validated configuration."""
        return cls(config.capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def _move_to_tail(self, slot: int) -> None:
        """Relink slot as the most recently used entry."""
        if self._tail == slot:
            return

        entry = self._arena.get(slot)

        # Not the tail, so there is always a successor
        nxt = _expect(entry.next, "next link of non-tail node")
        next_entry = self._arena.get(nxt, "next node")

        # Detach
        if entry.previous is not None:
            self._arena.get(entry.previous, "previous node").next = nxt
            next_entry.previous = entry.previous
        else:
            next_entry.previous = None
            self._head = nxt

        # Re-attach after the old tail
        old_tail = _expect(self._tail, "tail")
        entry.previous = old_tail
        entry.next = None
        self._arena.get(old_tail, "tail node").next = slot
        self._tail = slot

    def write(self, key: K, value: V) -> None:
        """Insert or update key, making it the most recently used entry.

        When the key is new and the store is full, the least recently
        used entry is evicted and its slot reused for the new entry.
        """
        slot = self._index.get(key)

        if slot is not None:
            self._arena.get(slot, "node from index").value = value
            self._move_to_tail(slot)
        elif self._length == self._capacity:
            self._evict_and_insert(key, value)
        else:
            self._insert(key, value)

    def _evict_and_insert(self, key: K, value: V) -> None:
        """Overwrite the head slot with a new entry linked as the tail."""
        head = _expect(self._head, "head")
        evicted = self._arena.get(head, "head node")
        new_head = evicted.next

        del self._index[evicted.key]

        if new_head is None:
            # Single entry: the reused slot stays both head and tail
            self._arena.put(head, Entry(key, value))
        else:
            old_tail = _expect(self._tail, "tail")
            self._arena.get(new_head, "new head node").previous = None
            self._head = new_head

            self._arena.put(head, Entry(key, value, previous=old_tail))
            self._arena.get(old_tail, "tail node").next = head
            self._tail = head

        self._index[key] = head
        logger.debug("Evicted key %r from slot %d", evicted.key, head)

    def _insert(self, key: K, value: V) -> None:
        """Place a new entry in a free or newly grown slot as the tail."""
        old_tail = self._tail
        entry = Entry(key, value, previous=old_tail)

        slot = self._free.pop()
        if slot is None:
            slot = self._arena.append(entry)
        else:
            if self._arena.peek(slot) is not None:
                raise AssertionError(f"BUG: free slot {slot} is occupied")
            self._arena.put(slot, entry)

        if old_tail is None:
            self._head = slot
        else:
            self._arena.get(old_tail, "tail node").next = slot
        self._tail = slot

        self._index[key] = slot
        self._length += 1

    @overload
    def read(self, key: K) -> V | None: ...

    @overload
    def read(self, key: K, default: D) -> V | D: ...

    def read(self, key, default=None):
        """Return the value for key and mark it most recently used.

        A miss returns ``default`` and leaves the store untouched.
        """
        slot = self._index.get(key)
        if slot is None:
            return default

        self._move_to_tail(slot)
        return self._arena.get(slot).value

    def delete(self, key: K) -> None:
        """Remove key and release its slot for reuse.

        Raises:
            NotFoundError: If key is not present
        """
        slot = self._index.get(key)
        if slot is None:
            logger.debug("Delete of missing key %r", key)
            raise NotFoundError(f"Key not found: {key!r}", key=key)

        entry = self._arena.vacate(slot)
        previous, nxt = entry.previous, entry.next

        if previous is not None:
            self._arena.get(previous, "previous node").next = nxt
        if nxt is not None:
            self._arena.get(nxt, "next node").previous = previous

        if self._head == slot:
            self._head = nxt
        if self._tail == slot:
            self._tail = previous

        del self._index[key]
        self._free.push(slot)
        self._length -= 1

    def clear(self) -> None:
        """Remove every entry."""
        self._arena.reset()
        self._index.clear()
        self._free.reset(self._capacity)
        self._head = None
        self._tail = None
        self._length = 0
        logger.debug("Cleared LRU store (capacity=%d)", self._capacity)

    def len(self) -> int:
        """Number of live entries."""
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def contains(self, key: K) -> bool:
        """Check membership without changing recency."""
        return key in self._index

    def _walk(self) -> Iterator[Entry]:
        slot = self._head
        while slot is not None:
            entry = self._arena.get(slot)
            yield entry
            slot = entry.next

    def keys(self) -> list[K]:
        """Live keys from least to most recently used."""
        return [entry.key for entry in self._walk()]

    def items(self) -> list[tuple[K, V]]:
        """Live (key, value) pairs from least to most recently used."""
        return [(entry.key, entry.value) for entry in self._walk()]

    def verify(self) -> None:
        """Check every structural invariant of the store.

        Raises:
            AssertionError: Describing the first broken invariant found
        """
        occupied = list(self._arena.occupied())

        if not self._length == len(self._index) == len(occupied):
            raise AssertionError(
                f"BUG: length {self._length}, index size {len(self._index)} "
                f"and occupied slots {len(occupied)} disagree"
            )
        if self._length > self._capacity:
            raise AssertionError(
                f"BUG: length {self._length} exceeds capacity {self._capacity}"
            )

        for slot in occupied:
            key = self._arena.get(slot).key
            if self._index.get(key) != slot:
                raise AssertionError(
                    f"BUG: slot {slot} holds {key!r} but index maps it to "
                    f"{self._index.get(key)}"
                )

        if (self._head is None) != (self._length == 0) or \
                (self._tail is None) != (self._length == 0):
            raise AssertionError(
                f"BUG: head={self._head} tail={self._tail} with length {self._length}"
            )

        visited: set[int] = set()
        previous: int | None = None
        slot = self._head
        while slot is not None:
            if slot in visited:
                raise AssertionError(f"BUG: recency list revisits slot {slot}")
            visited.add(slot)
            entry = self._arena.get(slot, "linked node")
            if entry.previous != previous:
                raise AssertionError(
                    f"BUG: slot {slot} links back to {entry.previous}, "
                    f"expected {previous}"
                )
            previous, slot = slot, entry.next

        if previous != self._tail:
            raise AssertionError(
                f"BUG: recency list ends at {previous}, tail is {self._tail}"
            )
        if visited != set(occupied):
            raise AssertionError(
                f"BUG: recency list covers {sorted(visited)}, "
                f"occupied slots are {occupied}"
            )
        if self._length == 1 and not self._arena.get(self._head).is_detached:
            raise AssertionError("BUG: sole entry has neighbours")

        for slot in self._free:
            if slot in visited:
                raise AssertionError(f"BUG: slot {slot} is both free and linked")

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return (
            f"LruStore(capacity={self._capacity}, len={self._length}, "
            f"keys={self.keys()!r})"
        )
