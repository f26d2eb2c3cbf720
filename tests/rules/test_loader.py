#!/usr/bin/env python3
"""Tests for named checks loaded from configuration."""

import pytest
import yaml

from filematch.core.validators import InvalidCheckKind, InvalidFieldSpecKind
from filematch.infrastructure.cache_manager import get_compile_cache
from filematch.infrastructure.config_manager import ConfigError, ConfigManager
from filematch.infrastructure.logger import LogLevel, get_logger
from filematch.rules.loader import apply_config, get_check, load_checks


def write_config(path, checks):
    with open(path, "w") as f:
        yaml.dump({"filematch": {"checks": checks}}, f)
    return path


class TestLoadChecks:
    """Tests for load_checks."""

    def test_from_file(self, config_file, index_file, readme_file, make_file):
        """Every named check is compiled."""
        checks = load_checks(config_file)
        assert set(checks) == {"markdown", "readme", "sources", "everything"}
        assert checks["markdown"](readme_file)
        assert not checks["markdown"](index_file)
        assert checks["readme"](readme_file)
        assert checks["sources"](index_file)
        assert checks["sources"](make_file("setup.py"))
        assert not checks["sources"](readme_file)
        assert checks["everything"](index_file)

    def test_from_config_manager(self, index_file):
        """A ConfigManager can be passed directly."""
        config = ConfigManager(load_env=False)
        config.set("filematch.checks", {"js": ".js"})
        assert load_checks(config)["js"](index_file)

    def test_from_mapping(self, index_file, readme_file):
        """A mapping of named checks is compiled directly, predicates included."""
        checks = load_checks({"js": ".js", "index": lambda file: file.stem == "index"})
        assert checks["js"](index_file)
        assert checks["index"](index_file)
        assert not checks["index"](readme_file)

    def test_mapping_validated(self):
        """Mapping entries are validated like file entries."""
        with pytest.raises(InvalidFieldSpecKind):
            load_checks({"broken": {"stem": {"prefix": 1}}})

    def test_no_checks(self):
        """Default configuration has no named checks."""
        assert load_checks(ConfigManager(load_env=False)) == {}

    def test_invalid_field_spec(self, temp_dir):
        """Invalid field specs are reported at load time with the check name."""
        path = write_config(temp_dir / "bad.yaml", {"broken": {"stem": 1}})
        with pytest.raises(InvalidFieldSpecKind) as exc_info:
            load_checks(path)
        assert "In named check 'broken'" in exc_info.value.__notes__

    def test_invalid_kind(self, temp_dir):
        """Invalid kinds are reported at load time."""
        path = write_config(temp_dir / "bad.yaml", {"number": 3})
        with pytest.raises(InvalidCheckKind):
            load_checks(path)

    def test_checks_not_mapping(self, temp_dir):
        """checks must be a mapping."""
        path = write_config(temp_dir / "bad.yaml", ["*.md"])
        with pytest.raises(ConfigError):
            load_checks(path)

    def test_missing_file(self, temp_dir):
        """Missing files raise ConfigError."""
        with pytest.raises(ConfigError):
            load_checks(temp_dir / "missing.yaml")


class TestGetCheck:
    """Tests for get_check."""

    def test_found(self, config_file, readme_file):
        """Named checks compile on demand."""
        assert get_check(config_file, "markdown")(readme_file)

    def test_not_found(self, config_file):
        """Unknown names return None."""
        assert get_check(config_file, "unknown") is None


class TestApplyConfig:
    """Tests for apply_config."""

    def test_cache_settings(self, config_file):
        """Cache limits come from configuration."""
        apply_config(ConfigManager(config_file))
        cache = get_compile_cache()
        assert cache.config.max_entries == 16
        assert cache.config.enabled is True

    def test_log_level(self, config_file):
        """Existing loggers take the configured level."""
        logger = get_logger("filematch.rules")
        apply_config(ConfigManager(config_file))
        assert logger.logger.level == LogLevel.DEBUG
        apply_config(ConfigManager(load_env=False))
        assert logger.logger.level == LogLevel.WARNING

    @pytest.mark.parametrize(
        "key, value",
        [
            ("filematch.cache.max_entries", 0),
            ("filematch.cache.max_entries", "lots"),
            ("filematch.cache.max_entries", True),
            ("filematch.cache.enabled", "sometimes"),
        ],
    )
    def test_invalid_cache_settings(self, key, value):
        """Invalid cache settings raise ConfigError and leave the cache alone."""
        cache = get_compile_cache()
        config = ConfigManager(load_env=False)
        config.set(key, value)
        with pytest.raises(ConfigError):
            apply_config(config)
        assert get_compile_cache() is cache
