#!/usr/bin/env python3
"""Check compiler.

This module turns a check description into a reusable Assertion:
- None: matches every file record
- str: name, extension, dotfile or glob pattern (see patterns)
- callable: custom predicate, result coerced to bool
- mapping: field spec (see fields)
- list or tuple: matches if any element matches

List elements are compiled eagerly, so an unsupported element raises
InvalidCheckKind from convert() rather than when a record is tested.

Example:
    >>> is_docs = convert(["*.md", {"data": True}])
    >>> [record for record in records if is_docs(record)]
    >>> match(record, ".gitignore")
    False
"""

from typing import Any

from filematch.core.constants import Check, CheckKind
from filematch.core.validators import classify_check, validate_check
from filematch.infrastructure.cache_manager import get_compile_cache
from filematch.infrastructure.logger import LogLevel, get_logger
from filematch.rules.assertions import (
    AnyFileAssertion,
    AnyOfAssertion,
    Assertion,
    PredicateAssertion,
)
from filematch.rules.fields import FieldsAssertion
from filematch.rules.patterns import create_path_assert

logger = get_logger("filematch.rules")

ANY_FILE = AnyFileAssertion()


def convert(check: Check = None, strict: bool = False) -> Assertion:
    """Create an assertion from a check description.

    Args:
        check: Check description
        strict: Validate every nested field spec now instead of when a
            record reaches it

    Returns:
        Compiled assertion

    Raises:
        InvalidCheckKind: If check (or a list element) has no supported shape
        InvalidFieldSpecKind: With strict=True, if any field spec is invalid
    """
    if strict:
        validate_check(check)

    kind = classify_check(check)

    if kind == CheckKind.ABSENT:
        return ANY_FILE

    if kind == CheckKind.PATH:
        return _convert_path(check)

    if kind == CheckKind.PREDICATE:
        return PredicateAssertion(check)

    if kind == CheckKind.LIST:
        logger.debug("Compiling any-of check", items=len(check))
        return AnyOfAssertion([convert(item) for item in check])

    # CheckKind.FIELDS
    if logger.is_enabled_for(LogLevel.DEBUG):
        logger.debug("Compiling field check", fields=",".join(map(str, check)))
    return FieldsAssertion(check)


def _convert_path(pattern: str) -> Assertion:
    cache = get_compile_cache()
    assertion = cache.get(pattern)
    if assertion is not None:
        logger.debug("Path check cache hit", pattern=pattern)
        return assertion

    assertion = create_path_assert(pattern)
    logger.debug("Compiled path check", pattern=pattern, type=type(assertion).__name__)
    cache.set(pattern, assertion)
    return assertion


def match(file: Any, check: Check = None, strict: bool = False) -> bool:
    """Check if a value is a file record matching a check.

    Compiles check and calls the assertion with file. When testing many
    records against the same check, compile it once with convert().

    Args:
        file: Value to check (typically a file record)
        check: Check description
        strict: See convert()

    Returns:
        True if file is a file record and matches check
    """
    return convert(check, strict=strict)(file)
