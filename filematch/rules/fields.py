#!/usr/bin/env python3
"""Field spec checks over file records.

A field spec maps field names to field checks. A record matches when every
field check passes (logical AND, short-circuiting in key order):

- None: ignored
- True: field must be present (its value does not matter)
- False: field must be absent
- str: field value must be a string equal to it
- prefix/suffix object: field value must be a string starting with prefix
  and ending with suffix, each when given

Field checks are inspected only when evaluation reaches their key, so an
invalid field check raises InvalidFieldSpecKind at match time.

Example:
    >>> assertion = FieldsAssertion({"stem": {"prefix": "re"}, "data": True})
    >>> assertion(readme_record)
    True
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from filematch.core.constants import CheckFields, FieldCheckKind
from filematch.core.record import MISSING, get_field, has_field
from filematch.core.validators import affix_part, classify_field_check
from filematch.rules.assertions import Assertion


@dataclass(frozen=True)
class FieldPartial:
    """Prefix and/or suffix a string field must have."""

    prefix: Optional[str] = None
    suffix: Optional[str] = None


def check_field(file: Any, name: str, spec: Any) -> bool:
    """Evaluate one field check against a record.

    Args:
        file: File record
        name: Field name
        spec: Field check

    Returns:
        True if the field passes

    Raises:
        InvalidFieldSpecKind: If spec is not a supported field check
    """
    kind = classify_field_check(spec, name)

    if kind == FieldCheckKind.IGNORE:
        return True

    if kind == FieldCheckKind.EXISTS:
        return spec == has_field(file, name)

    value = get_field(file, name, MISSING)

    if kind == FieldCheckKind.EQUALS:
        return isinstance(value, str) and value == spec

    # FieldCheckKind.AFFIX
    if not isinstance(value, str):
        return False

    prefix = affix_part(spec, "prefix")
    if prefix and not value.startswith(prefix):
        return False

    suffix = affix_part(spec, "suffix")
    if suffix and not value.endswith(suffix):
        return False

    return True


class FieldsAssertion(Assertion):
    """Matches records passing every field check of a field spec."""

    __slots__ = ("checks",)

    def __init__(self, checks: CheckFields):
        # Shallow snapshot of the caller's mapping
        self.checks: Dict[str, Any] = dict(checks)

    def test(self, file: Any) -> bool:
        for name, spec in self.checks.items():
            if not check_field(file, name, spec):
                return False
        return True

    def __repr__(self) -> str:
        return f"FieldsAssertion({self.checks!r})"
