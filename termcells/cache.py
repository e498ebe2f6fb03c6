from __future__ import annotations

"""
Bounded least-recently-used map shared between threads.

Used for the string -> cell length cache. A lock guards every lookup and
insert; values are computed outside of it by the caller.
"""

import threading
from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

from .config import debug
from .errors import CellsError


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Thread-safe LRU cache with a fixed capacity."""

    def __init__(self, capacity: int = 4096):
        if int(capacity) < 1:
            raise CellsError('E004', 'cache.LRUCache', f'capacity={capacity!r}')
        self.capacity = int(capacity)
        self._data: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                self.misses += 1
                return None
            self._data.move_to_end(key)
            self.hits += 1
            return value

    def put(self, key: K, value: V) -> None:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
                self._data[key] = value
                return
            self._data[key] = value
            if len(self._data) > self.capacity:
                evicted, _ = self._data.popitem(last=False)
                debug(f"[cache] evicted {evicted!r}")

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"<LRUCache {len(self)}/{self.capacity}>"


__all__ = ["LRUCache"]
