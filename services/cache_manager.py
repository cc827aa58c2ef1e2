"""In-memory TTL cache for read-mostly configuration.

Structure: {namespace: {key: (value, expires_at)}}. Used by the bonus
targets repository so stats requests do not hit the database for a row
that changes a few times a month.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional, Tuple
from threading import Lock

logger = logging.getLogger(__name__)


class CacheManager:
    """Thread-safe namespace/key cache with per-entry TTL."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """Initialize cache manager.

        Args:
            clock: Source of the current time in seconds (swappable in tests)
        """
        self._cache: Dict[str, Dict[str, Tuple[Any, float]]] = {}
        self._clock = clock
        self._lock = Lock()
        self._stats = {"hits": 0, "misses": 0, "sets": 0, "invalidations": 0}

    def get(self, namespace: str, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            entry = self._cache.get(namespace, {}).get(key)
            if entry is None:
                self._stats["misses"] += 1
                return None

            value, expires_at = entry
            if expires_at <= self._clock():
                del self._cache[namespace][key]
                self._stats["misses"] += 1
                logger.debug(f"Cache EXPIRED: {namespace}[{key}]")
                return None

            self._stats["hits"] += 1
            return value

    def set(self, namespace: str, key: str, value: Any, ttl: int = 300) -> None:
        """Store value for ttl seconds."""
        with self._lock:
            self._cache.setdefault(namespace, {})[key] = (value, self._clock() + ttl)
            self._stats["sets"] += 1
            logger.debug(f"Cache SET: {namespace}[{key}] (TTL: {ttl}s)")

    def invalidate_namespace(self, namespace: str) -> None:
        """Drop every entry of a namespace."""
        with self._lock:
            removed = self._cache.pop(namespace, {})
            self._stats["invalidations"] += len(removed)
            if removed:
                logger.debug(f"Cache INVALIDATED: {namespace} ({len(removed)} entries)")

    def clear(self) -> None:
        with self._lock:
            total = sum(len(entries) for entries in self._cache.values())
            self._cache.clear()
            self._stats["invalidations"] += total
            logger.info(f"Cache CLEARED: {total} entries removed")

    def get_stats(self) -> Dict[str, Any]:
        """Hits, misses, hit rate and entry counts."""
        with self._lock:
            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = self._stats["hits"] / total_requests * 100 if total_requests else 0.0
            return {
                **self._stats,
                "hit_rate": f"{hit_rate:.1f}%",
                "total_entries": sum(len(entries) for entries in self._cache.values()),
                "namespaces": sorted(self._cache.keys()),
            }
