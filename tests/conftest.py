"""Shared pytest fixtures for FileMatch tests."""
import os
import posixpath
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Generator, Optional

import pytest
import yaml

from filematch.infrastructure.cache_manager import set_global_cache
from filematch.infrastructure.config_manager import set_global_config
from filematch.infrastructure.logger import LogLevel, set_level


def build_file(path: Optional[str] = None, **fields: Any) -> SimpleNamespace:
    """Build an attribute-style file record the way a file layer would."""
    basename = posixpath.basename(path) if path else None
    stem, extname = posixpath.splitext(basename) if basename else (None, None)
    record = SimpleNamespace(
        messages=[],
        history=[path] if path else [],
        path=path,
        dirname=posixpath.dirname(path) if path else None,
        basename=basename,
        stem=stem,
        extname=extname,
    )
    for key, value in fields.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def make_file() -> Callable[..., SimpleNamespace]:
    """Factory for attribute-style file records."""
    return build_file


@pytest.fixture
def make_dict_file() -> Callable[..., Dict[str, Any]]:
    """Factory for mapping-style file records."""

    def factory(path: Optional[str] = None, **fields: Any) -> Dict[str, Any]:
        return {**vars(build_file(path)), **fields}

    return factory


@pytest.fixture
def empty_file() -> SimpleNamespace:
    """File record without a path."""
    return build_file()


@pytest.fixture
def index_file() -> SimpleNamespace:
    """Record for index.js."""
    return build_file("index.js")


@pytest.fixture
def readme_file() -> SimpleNamespace:
    """Record for readme.md."""
    return build_file("readme.md")


@pytest.fixture
def gitignore_file() -> SimpleNamespace:
    """Record for .gitignore."""
    return build_file(".gitignore")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Provide a sample FileMatch configuration."""
    return {
        "filematch": {
            "cache": {"enabled": True, "max_entries": 16},
            "logging": {"level": "DEBUG"},
            "checks": {
                "markdown": "*.md",
                "readme": {"stem": {"prefix": "read"}},
                "sources": ["*.py", "*.{js,jsx}"],
                "everything": None,
            },
        }
    }


@pytest.fixture
def config_file(temp_dir: Path, sample_config: Dict[str, Any]) -> Path:
    """Create a configuration file."""
    config_path = temp_dir / "filematch.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset global config, compile cache and log levels between tests."""
    for key in list(os.environ):
        if key.startswith("FILEMATCH_"):
            monkeypatch.delenv(key)
    set_global_config(None)
    set_global_cache(None)
    yield
    set_global_config(None)
    set_global_cache(None)
    set_level(LogLevel.WARNING)
