"""FileMatch Infrastructure.

Services used by the compiler:
- ConfigManager: Layered YAML/environment configuration
- LRUCache: Cache of compiled path assertions
- Logger: Structured logging
"""

from .cache_manager import (
    CacheConfig,
    LRUCache,
    cache_config_from,
    get_compile_cache,
    set_global_cache,
)
from .config_manager import (
    ConfigError,
    ConfigManager,
    ConfigSource,
    get_config_manager,
    set_global_config,
)
from .logger import Logger, LogLevel, get_logger, set_level

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "get_logger",
    "set_level",
    # Cache exports
    "CacheConfig",
    "LRUCache",
    "cache_config_from",
    "get_compile_cache",
    "set_global_cache",
    # ConfigManager exports
    "ConfigSource",
    "ConfigError",
    "ConfigManager",
    "get_config_manager",
    "set_global_config",
]
