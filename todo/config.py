"""Dataclass-based configuration for the todo service.

Paging limits and cache policy are frozen dataclasses with sensible
defaults, overridable from TODO_* environment variables.
"""

import os
from dataclasses import dataclass, field

from core.cache import CacheManager


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchConfig:
    """Paging defaults for task searches."""

    default_page_size: int = 10
    max_page_size: int = 100


@dataclass(frozen=True)
class CacheConfig:
    """Policy for the service result caches."""

    enabled: bool = True
    ttl_seconds: float = 300.0
    max_entries: int = 1024

    def create_manager(self) -> CacheManager:
        return CacheManager(
            enabled=self.enabled,
            ttl_seconds=self.ttl_seconds,
            max_entries=self.max_entries,
        )


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TodoConfig:
    """Complete configuration for the task service.

    Usage::

        config = TodoConfig.from_env()
        service = TaskService(repository, config=config)
    """

    search: SearchConfig = field(default_factory=SearchConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    @classmethod
    def default(cls) -> "TodoConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "TODO_") -> "TodoConfig":
        """Create config from environment variables.

        Example: TODO_DEFAULT_PAGE_SIZE=20 TODO_CACHE_ENABLED=false
        """
        search_overrides = {}
        default_page_size = os.getenv(f"{prefix}DEFAULT_PAGE_SIZE")
        if default_page_size:
            search_overrides["default_page_size"] = int(default_page_size)
        max_page_size = os.getenv(f"{prefix}MAX_PAGE_SIZE")
        if max_page_size:
            search_overrides["max_page_size"] = int(max_page_size)

        cache_overrides = {}
        enabled = os.getenv(f"{prefix}CACHE_ENABLED")
        if enabled:
            cache_overrides["enabled"] = enabled.lower() == "true"
        ttl = os.getenv(f"{prefix}CACHE_TTL_SECONDS")
        if ttl:
            cache_overrides["ttl_seconds"] = float(ttl)
        max_entries = os.getenv(f"{prefix}CACHE_MAX_ENTRIES")
        if max_entries:
            cache_overrides["max_entries"] = int(max_entries)

        return cls(
            search=SearchConfig(**search_overrides),
            cache=CacheConfig(**cache_overrides),
        )


# Process-wide configuration instance
config = TodoConfig.from_env()
