#!/usr/bin/env python3
"""Path checks: plain names and extensions versus glob patterns.

A path check string is compiled once and classified:
- Plain: no wildcard syntax and a single alternative. Matches when the string
  equals the record's basename or its extname, which covers whole file
  names ("index.js"), bare extensions (".js") and dotfiles (".gitignore").
- Magic: contains wildcards, closed character classes, extended globs, a
  leading "!" negation or braces expanding to several alternatives. Matches
  the record's full path with glob semantics.

Brace expansion is done by bracex and matching by wcmatch. Characters that
only look like glob syntax, such as "foo(bar).js" or "a[b.js", keep a
name plain. Errors raised by either library propagate unchanged.

Example:
    >>> compile_pattern("*.{js,jsx}").is_magic
    True
    >>> create_path_assert(".gitignore")(gitignore_record)
    True
"""

import re
from dataclasses import dataclass
from typing import Any, Tuple

import bracex
from wcmatch import glob

from filematch.core.constants import (
    BASENAME_FIELD,
    EXTNAME_FIELD,
    PATH_FIELD,
    SegmentType,
)
from filematch.core.record import get_field
from filematch.rules.assertions import Assertion

# Flags used for matching full paths. NEGATEALL lets a lone "!pattern"
# match everything the pattern does not.
GLOB_FLAGS = glob.BRACE | glob.GLOBSTAR | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL

# Backslash escapes, removed before looking for glob syntax
ESCAPE_RE = re.compile(r"\\.")

# Wildcards, a closed character class or an extglob group
MAGIC_RE = re.compile(r"[*?]|\[[!^]?.[^\]]*\]|[+@!]\([^)]*\)")


@dataclass(frozen=True)
class MatchSet:
    """One alternative of a pattern after brace expansion."""

    segments: Tuple[str, ...]
    types: Tuple[SegmentType, ...]

    @property
    def is_literal(self) -> bool:
        """True if every segment is a plain literal."""
        return all(t == SegmentType.LITERAL for t in self.types)


class CompiledPattern:
    """A glob pattern parsed into match sets, with its wcmatch matcher."""

    __slots__ = ("pattern", "negated", "sets", "_matcher")

    def __init__(self, pattern: str):
        """Parse pattern.

        A single leading "!" (other than an extglob "!(...)") negates the
        pattern. The match sets describe the pattern without it.

        Args:
            pattern: Glob pattern, name or extension

        Raises:
            bracex.ExpansionLimitException: If brace expansion is too large
        """
        self.pattern = pattern
        self.negated = pattern.startswith("!") and not pattern.startswith("!(")
        body = pattern[1:] if self.negated else pattern
        self.sets: Tuple[MatchSet, ...] = tuple(
            _match_set(alternative) for alternative in bracex.expand(body, keep_escapes=True)
        )
        self._matcher = glob.compile(pattern, flags=GLOB_FLAGS)

    @property
    def is_magic(self) -> bool:
        """True if the pattern needs glob matching rather than name comparison."""
        if self.negated or len(self.sets) != 1:
            return True
        return not self.sets[0].is_literal

    def match(self, path: str) -> bool:
        """Match a full path against the pattern.

        Args:
            path: Path to test

        Returns:
            True if the path matches
        """
        return self._matcher.match(path)

    def __repr__(self) -> str:
        return f"CompiledPattern({self.pattern!r}, sets={len(self.sets)})"


def _match_set(alternative: str) -> MatchSet:
    segments = tuple(alternative.split("/"))
    types = tuple(
        SegmentType.MAGIC if _is_magic_segment(segment) else SegmentType.LITERAL
        for segment in segments
    )
    return MatchSet(segments=segments, types=types)


def _is_magic_segment(segment: str) -> bool:
    # Unclosed brackets and bare parentheses stay literal
    return MAGIC_RE.search(ESCAPE_RE.sub("", segment)) is not None


def compile_pattern(pattern: str) -> CompiledPattern:
    """Parse a path check string into its match sets.

    Args:
        pattern: Glob pattern, name or extension

    Returns:
        Compiled pattern
    """
    return CompiledPattern(pattern)


class NameAssertion(Assertion):
    """Matches records whose basename or extname equals a plain string."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def test(self, file: Any) -> bool:
        return self.name == get_field(file, BASENAME_FIELD) or self.name == get_field(
            file, EXTNAME_FIELD
        )

    def __repr__(self) -> str:
        return f"NameAssertion({self.name!r})"


class GlobAssertion(Assertion):
    """Matches records whose full path matches a glob pattern."""

    __slots__ = ("compiled",)

    def __init__(self, compiled: CompiledPattern):
        self.compiled = compiled

    def test(self, file: Any) -> bool:
        path = get_field(file, PATH_FIELD)
        if not isinstance(path, str):
            return False
        return self.compiled.match(path)

    def __repr__(self) -> str:
        return f"GlobAssertion({self.compiled.pattern!r})"


def create_path_assert(pattern: str) -> Assertion:
    """Compile a path check string into an assertion.

    Args:
        pattern: Glob pattern, name or extension

    Returns:
        GlobAssertion for magic patterns, NameAssertion otherwise
    """
    compiled = compile_pattern(pattern)
    if compiled.is_magic:
        return GlobAssertion(compiled)
    return NameAssertion(pattern)
