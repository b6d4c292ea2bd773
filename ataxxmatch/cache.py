"""A small thread-safe cache that hands out each stored value once."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Cache(Generic[K, V]):
    """Keeps at most ``capacity`` entries, dropping the oldest first."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._lock = threading.Lock()
        self._store: list[tuple[K, V]] = []

    def get(self, key: K) -> V | None:
        """Remove and return the oldest value stored under ``key``, or None."""
        with self._lock:
            for position, (stored_key, value) in enumerate(self._store):
                if stored_key == key:
                    del self._store[position]
                    return value
        return None

    def push(self, key: K, value: V) -> None:
        """Store a value, evicting the oldest entries to stay within capacity."""
        if value is None:
            raise ValueError("Cannot cache a missing value")
        if self._capacity == 0:
            return
        with self._lock:
            while len(self._store) >= self._capacity:
                del self._store[0]
            self._store.append((key, value))

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._store.clear()