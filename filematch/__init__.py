"""FileMatch - compile file check descriptions into reusable assertions.

A check description is one of:
- None: any file record
- str: a file name, extension, dotfile or glob pattern
- callable: a custom predicate
- mapping: a field spec (existence, exact value, prefix/suffix)
- list: any of the above, matching if any element matches

Example:
    >>> from filematch import convert, match
    >>> is_markdown = convert("*.md")
    >>> is_markdown(record)
    True
    >>> match(record, {"stem": {"prefix": "read"}})
    True
"""

from filematch.core.constants import FILEMATCH_VERSION, CheckKind, ErrorCode, FieldCheckKind
from filematch.core.record import MISSING, FileLike, get_field, has_field, is_file
from filematch.core.validators import (
    CheckError,
    InvalidCheckKind,
    InvalidFieldSpecKind,
    classify_check,
    validate_check,
)
from filematch.rules.assertions import Assertion
from filematch.rules.engine import convert, match
from filematch.rules.fields import FieldPartial
from filematch.rules.loader import apply_config, get_check, load_checks

__version__ = FILEMATCH_VERSION

__all__ = [
    # Compiler
    "convert",
    "match",
    "Assertion",
    "FieldPartial",
    # Records
    "FileLike",
    "MISSING",
    "is_file",
    "has_field",
    "get_field",
    # Errors and classification
    "CheckError",
    "InvalidCheckKind",
    "InvalidFieldSpecKind",
    "CheckKind",
    "FieldCheckKind",
    "ErrorCode",
    "classify_check",
    "validate_check",
    # Configuration
    "apply_config",
    "load_checks",
    "get_check",
]
