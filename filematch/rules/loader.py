#!/usr/bin/env python3
"""Named checks from configuration.

Pipelines usually declare their filters in YAML next to the rest of their
settings:

    filematch:
      logging:
        level: DEBUG
      checks:
        markdown: "*.md"
        readme: {stem: {prefix: readme}}
        sources: ["*.py", "*.{js,jsx}"]

load_checks() validates every entry eagerly and compiles it. Predicates
cannot be written in YAML, every other check kind can. A mapping of named
checks may be passed instead of a file, and it may hold predicates.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional, Union

from filematch.core.constants import CONFIG_CHECKS, CONFIG_LOG_LEVEL
from filematch.core.validators import CheckError
from filematch.infrastructure import logger as logging_
from filematch.infrastructure.cache_manager import LRUCache, cache_config_from, set_global_cache
from filematch.infrastructure.config_manager import ConfigError, ConfigManager
from filematch.rules.assertions import Assertion
from filematch.rules.engine import convert

logger = logging_.get_logger("filematch.rules")

ConfigLike = Union[ConfigManager, Mapping[str, Any], str, Path]


def _as_config(source: ConfigLike) -> ConfigManager:
    if isinstance(source, ConfigManager):
        return source
    if isinstance(source, Mapping):
        # A bare mapping of named checks
        config = ConfigManager(load_env=False)
        config.set(CONFIG_CHECKS, dict(source))
        return config
    return ConfigManager(source)


def apply_config(config: ConfigManager) -> None:
    """Apply logging and cache settings from a configuration.

    Args:
        config: Configuration manager

    Raises:
        ConfigError: If the cache settings are invalid
    """
    cache_config = cache_config_from(config)
    logging_.set_level(config.get(CONFIG_LOG_LEVEL, "WARNING"))
    set_global_cache(LRUCache(cache_config))


def load_checks(source: ConfigLike) -> Dict[str, Assertion]:
    """Compile every named check of a configuration.

    Args:
        source: ConfigManager, path to a YAML configuration file, or a
            mapping of check name to check description

    Returns:
        Mapping of check name to compiled assertion

    Raises:
        ConfigError: If the file cannot be read or checks is not a mapping
        InvalidCheckKind: If an entry has no supported shape
        InvalidFieldSpecKind: If an entry holds an invalid field spec
    """
    config = _as_config(source)
    checks = config.get(CONFIG_CHECKS, {})

    if not isinstance(checks, dict):
        raise ConfigError(f"{CONFIG_CHECKS} must be a mapping, got {type(checks).__name__}")

    compiled: Dict[str, Assertion] = {}
    for name, check in checks.items():
        try:
            compiled[name] = convert(check, strict=True)
        except CheckError as e:
            e.add_note(f"In named check {name!r}")
            raise

    logger.info("Loaded named checks", count=len(compiled))
    return compiled


def get_check(source: ConfigLike, name: str) -> Optional[Assertion]:
    """Compile a single named check.

    Args:
        source: ConfigManager, path to a YAML configuration file, or a
            mapping of check name to check description
        name: Check name

    Returns:
        Compiled assertion, or None if no check has that name
    """
    config = _as_config(source)
    checks = config.get(CONFIG_CHECKS, {})
    if not isinstance(checks, dict) or name not in checks:
        return None
    return convert(checks[name], strict=True)
