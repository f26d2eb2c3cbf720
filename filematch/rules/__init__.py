"""FileMatch Rules - check compilation.

This package turns check descriptions into assertions:
- Assertion and combinators (any file, predicate, any-of)
- Path checks: name/extension comparison or glob matching
- Field spec checks: existence, equality, prefix/suffix
- The compiler dispatching between them
- Named checks loaded from configuration
"""

from .assertions import AnyFileAssertion, AnyOfAssertion, Assertion, PredicateAssertion
from .engine import convert, match
from .fields import FieldPartial, FieldsAssertion, check_field
from .loader import apply_config, get_check, load_checks
from .patterns import (
    CompiledPattern,
    GlobAssertion,
    MatchSet,
    NameAssertion,
    compile_pattern,
    create_path_assert,
)

__all__ = [
    # Assertions
    "Assertion",
    "AnyFileAssertion",
    "PredicateAssertion",
    "AnyOfAssertion",
    # Path checks
    "MatchSet",
    "CompiledPattern",
    "NameAssertion",
    "GlobAssertion",
    "compile_pattern",
    "create_path_assert",
    # Field checks
    "FieldPartial",
    "FieldsAssertion",
    "check_field",
    # Compiler
    "convert",
    "match",
    # Configuration
    "apply_config",
    "load_checks",
    "get_check",
]
