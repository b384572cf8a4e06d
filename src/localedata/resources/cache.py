"""Thread-safe memoization cache for loaded resources.

Maps a resolved resource path to the value produced the first time that
path was loaded. Entries are never evicted or replaced, so every lookup of
a path returns the very same object for the lifetime of the cache.

Architecture:
    - Plain dict storage, unbounded
    - Registry lock guarding the entry table and the per-path lock table
    - Per-path lock serializing miss-then-populate (single-flight)

Single-flight:
    The first caller for a path runs the load function while holding that
    path's lock. Concurrent callers for the same path block on the lock and
    then find the entry already stored. Callers for other paths are not
    blocked. A load that raises stores nothing, so the next caller retries.
    A per-path lock lives only while some caller holds or awaits it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock

from localedata.resources.types import ParsedValue, ResourcePath

__all__ = ["ResourceCache"]

logger = logging.getLogger(__name__)

type _CacheValue = ParsedValue


class _PathLock:
    """Per-path lock plus the number of callers currently holding or awaiting it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = Lock()
        self.users = 0


class ResourceCache:
    """Unbounded, identity-preserving cache of loaded resources.

    Owned by a single Loader; never shared through module state.

    Attributes:
        hits: Number of lookups answered from the cache
        misses: Number of lookups that found no entry
        loads: Number of load functions that completed successfully
    """

    __slots__ = ("_entries", "_hits", "_loads", "_lock", "_misses", "_path_locks")

    def __init__(self) -> None:
        self._entries: dict[ResourcePath, _CacheValue] = {}
        self._path_locks: dict[ResourcePath, _PathLock] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0
        self._loads = 0

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"ResourceCache(size={len(self)}, hits={self._hits}, misses={self._misses})"

    def keys(self) -> tuple[ResourcePath, ...]:
        """Snapshot of cached paths in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def _acquire_path_lock(self, path: ResourcePath) -> _PathLock:
        with self._lock:
            path_lock = self._path_locks.get(path)
            if path_lock is None:
                path_lock = self._path_locks[path] = _PathLock()
            path_lock.users += 1
            return path_lock

    def _release_path_lock(self, path: ResourcePath, path_lock: _PathLock) -> None:
        # The last user drops the lock, whether the load stored an entry or raised.
        with self._lock:
            path_lock.users -= 1
            if path_lock.users == 0:
                del self._path_locks[path]

    def get_or_load(
        self, path: ResourcePath, load: Callable[[], _CacheValue]
    ) -> _CacheValue:
        """Return the cached value for a path, loading it at most once.

        Args:
            path: Resolved resource path (the cache key)
            load: Zero-argument function producing the value on a miss

        Returns:
            The stored value; identical object on every call for this path

        Raises:
            Exception: Whatever ``load`` raises. Nothing is cached in that case,
                and no per-path lock is left behind.
        """
        # Fast path: entry already stored
        with self._lock:
            if path in self._entries:
                self._hits += 1
                return self._entries[path]

        path_lock = self._acquire_path_lock(path)
        try:
            with path_lock.lock:
                # Double-check: another thread may have populated the entry while
                # we waited on the path lock.
                with self._lock:
                    if path in self._entries:
                        self._hits += 1
                        return self._entries[path]
                    self._misses += 1

                value = load()

                with self._lock:
                    self._entries[path] = value
                    self._loads += 1
                logger.debug("Cached resource: %s", path)
                return value
        finally:
            self._release_path_lock(path, path_lock)

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dict with 'size', 'hits', 'misses', and 'loads'
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "loads": self._loads,
            }

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        return self._misses

    @property
    def loads(self) -> int:
        """Number of successful loads."""
        return self._loads
