#!/usr/bin/env python3
"""LRU cache for compiled path assertions.

Compiling a path check parses a glob pattern, which is the only non-trivial
cost in FileMatch. This module memoises those compile results:
- LRU eviction with an entry limit
- Thread-safe operations
- Hit/miss/eviction statistics
- Process-wide instance configured from ConfigManager

Cached values are immutable assertions, so a hit never changes match
behaviour.

Example:
    >>> cache = LRUCache(CacheConfig(max_entries=128))
    >>> cache.set("*.md", assertion)
    >>> cache.get("*.md") is assertion
    True
"""

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Optional

from filematch.core.constants import CONFIG_CACHE_ENABLED, CONFIG_CACHE_MAX_ENTRIES
from filematch.infrastructure.config_manager import ConfigError, ConfigManager, get_config_manager
from filematch.infrastructure.logger import get_logger

logger = get_logger("filematch.cache")

DEFAULT_MAX_ENTRIES = 256


@dataclass
class CacheConfig:
    """Configuration for the compile cache."""

    max_entries: int = DEFAULT_MAX_ENTRIES
    enabled: bool = True

    def validate(self) -> None:
        """Validate cache configuration."""
        if not isinstance(self.max_entries, int) or self.max_entries <= 0:
            raise ValueError(f"max_entries must be positive: {self.max_entries}")


class LRUCache:
    """Thread-safe LRU cache with an entry limit."""

    def __init__(self, config: Optional[CacheConfig] = None):
        """Initialize LRU cache.

        Args:
            config: Cache configuration
        """
        self.config = config or CacheConfig()
        self.config.validate()
        self._cache: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.RLock()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        with self._lock:
            if not self.config.enabled or key not in self._cache:
                self._misses += 1
                return None

            self._cache.move_to_end(key)
            self._hits += 1
            return self._cache[key]

    def set(self, key: Hashable, value: Any) -> None:
        """Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
        """
        if not self.config.enabled:
            return

        with self._lock:
            if key in self._cache:
                del self._cache[key]

            while len(self._cache) >= self.config.max_entries:
                self._cache.popitem(last=False)
                self._evictions += 1

            self._cache[key] = value

    def clear(self) -> None:
        """Clear all cache entries and statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary of statistics
        """
        with self._lock:
            total = self._hits + self._misses
            return {
                "entries": len(self._cache),
                "max_entries": self.config.max_entries,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": self._hits / total if total else 0.0,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._cache


def cache_config_from(config: ConfigManager) -> CacheConfig:
    """Build the cache settings of a configuration.

    Args:
        config: Configuration manager

    Returns:
        Validated cache configuration

    Raises:
        ConfigError: If enabled is not a boolean or max_entries is not a
            positive integer
    """
    enabled = config.get(CONFIG_CACHE_ENABLED, True)
    if not isinstance(enabled, bool):
        raise ConfigError(f"{CONFIG_CACHE_ENABLED} must be a boolean, got {enabled!r}")

    max_entries = config.get(CONFIG_CACHE_MAX_ENTRIES, DEFAULT_MAX_ENTRIES)
    if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0:
        raise ConfigError(
            f"{CONFIG_CACHE_MAX_ENTRIES} must be a positive integer, got {max_entries!r}"
        )

    return CacheConfig(max_entries=max_entries, enabled=enabled)


# Global compile cache instance
_global_cache: Optional[LRUCache] = None
_global_lock = threading.Lock()


def get_compile_cache() -> LRUCache:
    """Get or create the process-wide compile cache.

    The first call reads its settings from the global configuration manager.
    Invalid settings are logged and replaced by the defaults, so compiling a
    check never fails because of the environment.

    Returns:
        Global compile cache
    """
    global _global_cache
    with _global_lock:
        if _global_cache is None:
            try:
                cache_config = cache_config_from(get_config_manager())
            except ConfigError as e:
                logger.warning("Invalid cache configuration, using defaults", error=e.message)
                cache_config = CacheConfig()
            _global_cache = LRUCache(cache_config)
        return _global_cache


def set_global_cache(cache: Optional[LRUCache]) -> None:
    """Set the process-wide compile cache.

    Args:
        cache: Cache to use globally, or None to rebuild from configuration
    """
    global _global_cache
    with _global_lock:
        _global_cache = cache
