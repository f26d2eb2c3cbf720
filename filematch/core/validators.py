"""
FileMatch Core: Check classification and validation.

This module owns the error taxonomy of the compiler and the type inspection
that maps a check description onto its variant:

- classify_check: top-level description -> CheckKind
- classify_field_check: single field spec -> FieldCheckKind
- validate_check: eager, recursive validation of a whole description
"""
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from filematch.core.constants import (
    FIELD_SPEC_KINDS,
    CheckKind,
    ErrorCode,
    FieldCheckKind,
)


class CheckError(Exception):
    """Base exception for invalid check descriptions."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize CheckError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidCheckKind(CheckError):
    """Check description is not None, a string, a callable, a list or a mapping."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            "Expected function, string, array, or object as test, "
            f"got {type(value).__name__}"
        )


class InvalidFieldSpecKind(CheckError):
    """Field spec is not None, a boolean, a string or a prefix/suffix object."""

    def __init__(self, value: Any, field: Optional[str] = None):
        self.value = value
        self.field = field
        kinds = ", ".join(f"`{kind}`" for kind in FIELD_SPEC_KINDS[:-1])
        location = f" for field `{field}`" if field is not None else ""
        super().__init__(
            f"Invalid spec `{value!r}`{location}, "
            f"expected {kinds}, or `{FIELD_SPEC_KINDS[-1]}`"
        )


def classify_check(check: Any) -> CheckKind:
    """Determine which variant a check description belongs to.

    Only the outer shape is inspected; nested values are left to the
    sub-compilers.

    Args:
        check: Check description

    Returns:
        Variant of the description

    Raises:
        InvalidCheckKind: If the description has no supported shape
    """
    if check is None:
        return CheckKind.ABSENT
    if isinstance(check, str):
        return CheckKind.PATH
    if callable(check):
        return CheckKind.PREDICATE
    if isinstance(check, Mapping):
        return CheckKind.FIELDS
    if isinstance(check, Sequence) and not isinstance(check, (bytes, bytearray)):
        return CheckKind.LIST
    raise InvalidCheckKind(check)


def affix_part(value: Any, name: str) -> Any:
    """Read the prefix or suffix of an affix spec.

    Args:
        value: Mapping or object with prefix/suffix attributes
        name: "prefix" or "suffix"

    Returns:
        The part, or None if not given
    """
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def is_affix(value: Any) -> bool:
    """Check if a field spec is a prefix/suffix object.

    Both parts must be strings or None.

    Args:
        value: Field spec

    Returns:
        True for mappings and objects carrying prefix/suffix attributes
    """
    # FieldPartial and look-alikes
    if not isinstance(value, Mapping) and not (
        hasattr(value, "prefix") and hasattr(value, "suffix")
    ):
        return False
    return all(
        part is None or isinstance(part, str)
        for part in (affix_part(value, "prefix"), affix_part(value, "suffix"))
    )


def classify_field_check(value: Any, field: Optional[str] = None) -> FieldCheckKind:
    """Determine which variant a single field spec belongs to.

    Args:
        value: Field spec
        field: Field name, reported in errors

    Returns:
        Variant of the field spec

    Raises:
        InvalidFieldSpecKind: If the spec has no supported shape
    """
    if value is None:
        return FieldCheckKind.IGNORE
    if isinstance(value, bool):
        return FieldCheckKind.EXISTS
    if isinstance(value, str):
        return FieldCheckKind.EQUALS
    if is_affix(value):
        return FieldCheckKind.AFFIX
    raise InvalidFieldSpecKind(value, field)


def validate_check(check: Any) -> bool:
    """Validate a check description and everything nested in it.

    Unlike compilation, which only inspects field specs when a record
    reaches them, this walks every list element and every field spec.

    Args:
        check: Check description

    Returns:
        True if valid

    Raises:
        InvalidCheckKind: If any description has no supported shape
        InvalidFieldSpecKind: If any field spec has no supported shape
    """
    kind = classify_check(check)

    if kind == CheckKind.LIST:
        for item in check:
            validate_check(item)
    elif kind == CheckKind.FIELDS:
        for field, value in check.items():
            classify_field_check(value, field)

    return True
