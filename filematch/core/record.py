"""
FileMatch Core: File-like record access.

A value counts as a file when it exposes both a ``messages`` and a ``history``
marker. Only presence matters, never content. Records come in two shapes:

- objects exposing the markers (and every other field) as attributes
- mappings holding them as keys

The helpers in this module read fields uniformly across both shapes so that
the matchers never need to know which one they were handed.
"""
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from filematch.core.constants import HISTORY_FIELD, MESSAGES_FIELD


class _Missing:
    """Sentinel for fields a record does not have."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@runtime_checkable
class FileLike(Protocol):
    """Capability required of a file record: a message list and a history list."""

    messages: Any
    history: Any


def has_field(record: Any, name: str) -> bool:
    """Check whether a record exposes a field.

    Args:
        record: Object or mapping record
        name: Field name

    Returns:
        True if the field is present, regardless of its value
    """
    if isinstance(record, Mapping):
        return name in record
    return hasattr(record, name)


def get_field(record: Any, name: str, default: Any = MISSING) -> Any:
    """Read a field from a record.

    Args:
        record: Object or mapping record
        name: Field name
        default: Value returned when the field is absent

    Returns:
        Field value or default
    """
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def is_file(value: Any) -> bool:
    """Check if value looks like a file record.

    Args:
        value: Value of unknown type

    Returns:
        True if value exposes both the messages and history markers
    """
    if value is None or isinstance(value, (str, bytes, int, float)):
        return False
    if isinstance(value, Mapping):
        return MESSAGES_FIELD in value and HISTORY_FIELD in value
    return isinstance(value, FileLike)
