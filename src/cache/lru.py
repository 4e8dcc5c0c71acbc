"""Thread-safe, capacity-bounded in-process LRU cache."""

import threading
from typing import Generic, Hashable, TypeVar

from cachetools import LRUCache as _BoundedLRU

from src.utils.logger import get_logger

logger = get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _CountingLRU(_BoundedLRU):
    """cachetools LRU that counts the entries it evicts."""

    def __init__(self, maxsize: int):
        super().__init__(maxsize=maxsize)
        self.evictions = 0
        self._clearing = False

    def popitem(self):
        key, value = super().popitem()
        if not self._clearing:
            self.evictions += 1
            logger.debug("Evicted cache entry", key=key)
        return key, value

    def clear(self) -> None:
        # MutableMapping.clear drains through popitem
        self._clearing = True
        try:
            super().clear()
        finally:
            self._clearing = False


class LRUCache(Generic[K, V]):
    """
    Least-recently-used cache over ``cachetools.LRUCache``.

    cachetools containers are not thread-safe, so every operation holds a
    single lock. Adds hit, miss and eviction counters for introspection.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._entries: _CountingLRU = _CountingLRU(maxsize=capacity)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def capacity(self) -> int:
        return int(self._entries.maxsize)

    def get(self, key: K) -> V | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict:
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._entries.evictions,
            }
