"""
FileMatch Core: Constants and Type Definitions

This module provides package-wide constants, error codes, the check
description kinds and the type aliases shared by the compiler modules.
"""
from enum import Enum, IntEnum
from typing import Any, Callable, Mapping, Optional, Sequence, TypeAlias, Union

# Version information
FILEMATCH_VERSION = "1.0.0"


class ErrorCode(IntEnum):
    """Standardized error codes for FileMatch operations."""

    INVALID_INPUT = 1  # Bad check description or configuration
    NOT_FOUND = 2  # Configuration file doesn't exist
    INTERNAL_ERROR = 6  # Bug in FileMatch


class CheckKind(Enum):
    """Variants of a check description."""

    ABSENT = "absent"  # None, matches every file
    PATH = "path"  # Name, extension, dotfile or glob string
    PREDICATE = "predicate"  # Caller supplied callable
    FIELDS = "fields"  # Mapping of field name to field check
    LIST = "list"  # Any-of over nested check descriptions


class FieldCheckKind(Enum):
    """Variants of a single field check inside a field spec."""

    IGNORE = "ignore"  # None, always passes
    EXISTS = "exists"  # True/False, field present or absent
    EQUALS = "equals"  # Exact string value
    AFFIX = "affix"  # Prefix and/or suffix of a string value


class SegmentType(Enum):
    """Segment classification inside a compiled glob match set."""

    LITERAL = "literal"
    MAGIC = "magic"


# Names of the two markers every file-like record exposes
MESSAGES_FIELD = "messages"
HISTORY_FIELD = "history"

# Field names read by path checks
PATH_FIELD = "path"
BASENAME_FIELD = "basename"
EXTNAME_FIELD = "extname"

# Accepted field check kinds, as reported in error messages
FIELD_SPEC_KINDS = ("boolean", "string", "object")

# Configuration keys
CONFIG_ROOT = "filematch"
CONFIG_CACHE_ENABLED = "filematch.cache.enabled"
CONFIG_CACHE_MAX_ENTRIES = "filematch.cache.max_entries"
CONFIG_LOG_LEVEL = "filematch.logging.level"
CONFIG_CHECKS = "filematch.checks"
ENV_PREFIX = "FILEMATCH_"

# Type aliases for clarity
FieldCheck: TypeAlias = Optional[Union[bool, str, Mapping[str, Optional[str]], Any]]
CheckFields: TypeAlias = Mapping[str, FieldCheck]
Check: TypeAlias = Optional[Union[CheckFields, Callable[[Any], Any], str, Sequence[Any]]]
