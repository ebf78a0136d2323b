"""
Named in-memory caches for service results.

A CacheManager owns one TTLCache per cache name. Service methods opt in
with decorators that read the manager from ``self.caches``::

    class TaskService:
        def __init__(self, repository, caches):
            self.caches = caches

        @cacheable("tasks", key=lambda email: email)
        async def find_all(self, email): ...

        @cache_evict("tasks")
        async def add(self, task): ...

Entries are keyed by (method name, key), so several methods can share one
named cache without colliding.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional
import copy
import functools
import logging
import time

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class CacheEntry:
    value: Any
    expires_at: float | None = None
    created_at: float = field(default_factory=time.monotonic)

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        return time.monotonic() >= self.expires_at


class TTLCache:
    """Insertion-ordered map with per-entry expiry and a size bound."""

    def __init__(self, name: str, ttl_seconds: float | None = 300, max_entries: int = 1024):
        self.name = name
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._entries: dict[Hashable, CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable, default: Any = None) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return default
        if entry.is_expired:
            del self._entries[key]
            self.misses += 1
            return default
        self.hits += 1
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        if key in self._entries:
            del self._entries[key]
        elif len(self._entries) >= self.max_entries:
            # Oldest first
            oldest = next(iter(self._entries))
            del self._entries[oldest]

        expires_at = None
        if self.ttl_seconds is not None:
            expires_at = time.monotonic() + self.ttl_seconds
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def clear(self) -> int:
        """Drop every entry. Returns count removed."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def cleanup_expired(self) -> int:
        """Remove all expired entries. Returns count removed."""
        expired = [k for k, v in self._entries.items() if v.is_expired]
        for k in expired:
            del self._entries[k]
        return len(expired)


class CacheManager:
    """Registry of named caches sharing one TTL / size policy."""

    def __init__(
        self,
        enabled: bool = True,
        ttl_seconds: float | None = 300,
        max_entries: int = 1024,
    ):
        self.enabled = enabled
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._caches: dict[str, TTLCache] = {}

    def get_cache(self, name: str) -> Optional[TTLCache]:
        """Return the named cache, creating it on first use. None when disabled."""
        if not self.enabled:
            return None
        cache = self._caches.get(name)
        if cache is None:
            cache = TTLCache(name, self.ttl_seconds, self.max_entries)
            self._caches[name] = cache
        return cache

    @property
    def cache_names(self) -> list[str]:
        return list(self._caches)


def cacheable(cache_name: str, key: Optional[Callable[..., Hashable]] = None):
    """Cache the result of an async method in ``self.caches[cache_name]``.

    ``key`` receives the method arguments (without self) and returns a
    hashable key; by default the positional arguments are used as-is.

    Values are deep-copied into and out of the cache, so callers may mutate
    what they get back.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            cache = self.caches.get_cache(cache_name)
            if cache is None:
                return await func(self, *args, **kwargs)

            cache_key = (func.__name__, key(*args, **kwargs) if key else args)
            value = cache.get(cache_key, _MISSING)
            if value is not _MISSING:
                logger.debug("Cache hit %s%r", cache_name, cache_key)
                return copy.deepcopy(value)

            value = await func(self, *args, **kwargs)
            cache.put(cache_key, copy.deepcopy(value))
            return value

        return wrapper

    return decorator


def cache_evict(cache_name: str):
    """Clear ``self.caches[cache_name]`` after the async method succeeds.

    A method that raises leaves the cache untouched. Eviction runs when the
    method returns, which is before the request session commits: a read in
    another session during that window can still cache the pre-commit rows,
    and those entries live until ``ttl_seconds`` expires.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            result = await func(self, *args, **kwargs)
            cache = self.caches.get_cache(cache_name)
            if cache is not None:
                removed = cache.clear()
                if removed:
                    logger.debug("Evicted %d entries from cache %s", removed, cache_name)
            return result

        return wrapper

    return decorator
