from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from synthwire.lock_mode import LockMode

K = TypeVar("K")
V = TypeVar("V")


class SynthesisCache(Generic[K, V]):
    """Append-only get-or-create cache.

    Each key maps to exactly one canonical value for the cache lifetime.
    Entries are never evicted. A factory that raises leaves the cache unchanged.
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self, *, lock_mode: LockMode = LockMode.THREAD) -> None:
        self._entries: dict[K, V] = {}
        self._lock = threading.Lock() if lock_mode is LockMode.THREAD else None

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        """Return the value cached for key, creating it with factory on first use.

        With ``LockMode.THREAD`` the factory runs at most once per key even when
        several threads race for the same key.

        Args:
            key: Cache key.
            factory: Zero-argument callable creating the value for a missing key.

        """
        entries = self._entries
        if key in entries:
            return entries[key]
        if self._lock is None:
            value = factory()
            entries[key] = value
            return value
        with self._lock:
            if key in entries:
                return entries[key]
            value = factory()
            entries[key] = value
            return value

    def get(self, key: K) -> V | None:
        """Return the cached value for key or ``None`` when it was never created.

        Args:
            key: Cache key.

        """
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
