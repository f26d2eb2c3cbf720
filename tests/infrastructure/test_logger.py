#!/usr/bin/env python3
"""Tests for the Logger module."""

import io
import logging
import threading

import pytest

from filematch.infrastructure.logger import (
    LogLevel,
    Logger,
    get_logger,
    set_level,
)


def make_logger(name="filematch.test", level=LogLevel.DEBUG):
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    return Logger(name=name, level=level, handlers=[handler]), stream


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_log_levels(self):
        """Log level values match Python logging."""
        assert LogLevel.DEBUG == logging.DEBUG
        assert LogLevel.INFO == logging.INFO
        assert LogLevel.WARNING == logging.WARNING
        assert LogLevel.ERROR == logging.ERROR
        assert LogLevel.CRITICAL == logging.CRITICAL


class TestLogger:
    """Tests for Logger."""

    def test_default_level(self):
        """Loggers default to WARNING."""
        assert Logger(name="filematch.default").logger.level == LogLevel.WARNING

    def test_string_level(self):
        """Levels may be given by name."""
        logger, _ = make_logger(level="info")
        assert logger.logger.level == LogLevel.INFO
        logger.set_level("error")
        assert logger.logger.level == LogLevel.ERROR

    def test_invalid_level(self):
        """Unknown level names raise KeyError."""
        with pytest.raises(KeyError):
            make_logger(level="verbose")

    def test_context_in_message(self):
        """Keyword context is appended to the message."""
        logger, stream = make_logger()
        logger.debug("Compiled path check", pattern="*.md")
        assert stream.getvalue().strip() == "DEBUG Compiled path check | pattern=*.md"

    def test_plain_message(self):
        """Messages without context are unchanged."""
        logger, stream = make_logger()
        logger.info("Loaded")
        assert stream.getvalue().strip() == "INFO Loaded"

    def test_level_filtering(self):
        """Messages below the level are dropped."""
        logger, stream = make_logger(level=LogLevel.WARNING)
        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")
        assert "hidden" not in stream.getvalue()
        assert stream.getvalue().strip() == "WARNING shown"

    def test_add_context(self):
        """Block context applies until the block ends."""
        logger, stream = make_logger()
        with logger.add_context(pipeline="docs"):
            logger.info("inside", count=2)
        logger.info("outside")
        lines = stream.getvalue().strip().splitlines()
        assert lines[0] == "INFO inside | pipeline=docs count=2"
        assert lines[1] == "INFO outside"

    def test_context_is_thread_local(self):
        """Context pushed in one thread is invisible in another."""
        logger, stream = make_logger()

        def worker():
            logger.info("worker")

        with logger.add_context(owner="main"):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert stream.getvalue().strip() == "INFO worker"

    def test_is_enabled_for(self):
        """Level checks accept enums and names."""
        logger, _ = make_logger(level=LogLevel.INFO)
        assert logger.is_enabled_for("info")
        assert not logger.is_enabled_for(LogLevel.DEBUG)


class TestGlobalLoggers:
    """Tests for module-level logger registry."""

    def test_get_logger_shared(self):
        """Loggers are shared per name."""
        assert get_logger("filematch.a") is get_logger("filematch.a")
        assert get_logger("filematch.a") is not get_logger("filematch.b")

    def test_set_level(self):
        """set_level updates every registered logger."""
        logger = get_logger("filematch.levels")
        set_level("ERROR")
        assert logger.logger.level == LogLevel.ERROR
        set_level(LogLevel.WARNING)
        assert logger.logger.level == LogLevel.WARNING
