#!/usr/bin/env python3
"""Compiled assertions over file records.

Every compiled check is an Assertion: a callable taking one value of unknown
type and returning a bool. The base class runs the file-like gate before any
check-specific logic, so invalid inputs never match whatever the check is.

This module also holds the combinators:
- AnyFileAssertion: gate only, used for absent checks
- PredicateAssertion: wraps a caller supplied callable
- AnyOfAssertion: logical OR over compiled assertions

Example:
    >>> assertion = AnyOfAssertion([PredicateAssertion(is_index), AnyFileAssertion()])
    >>> assertion(record)
    True
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Tuple

from filematch.core.record import is_file


class Assertion(ABC):
    """Abstract base class for compiled checks.

    Subclasses implement test(), which is only ever called with values that
    passed the file-like gate.
    """

    __slots__ = ()

    def __call__(self, file: Any = None) -> bool:
        """Check that file is a file record and passes this assertion.

        Args:
            file: Value to check (typically a file record)

        Returns:
            True if file is a file record and matches
        """
        return is_file(file) and bool(self.test(file))

    @abstractmethod
    def test(self, file: Any) -> bool:
        """Apply the check to a value that passed the file-like gate.

        Args:
            file: File record

        Returns:
            True if the record matches
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AnyFileAssertion(Assertion):
    """Matches every file record."""

    __slots__ = ()

    def test(self, file: Any) -> bool:
        return True


class PredicateAssertion(Assertion):
    """Wraps a caller supplied predicate.

    Any truthy return value counts as a match.
    """

    __slots__ = ("predicate",)

    def __init__(self, predicate: Callable[[Any], Any]):
        self.predicate = predicate

    def test(self, file: Any) -> bool:
        return bool(self.predicate(file))

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"PredicateAssertion({name})"


class AnyOfAssertion(Assertion):
    """Matches if any of its compiled assertions matches.

    Assertions are tried in order and evaluation stops at the first match.
    An empty AnyOfAssertion never matches.
    """

    __slots__ = ("assertions",)

    def __init__(self, assertions: Iterable[Assertion]):
        self.assertions: Tuple[Assertion, ...] = tuple(assertions)

    def test(self, file: Any) -> bool:
        # Gate already passed in __call__
        for assertion in self.assertions:
            if assertion.test(file):
                return True
        return False

    def __repr__(self) -> str:
        return f"AnyOfAssertion({list(self.assertions)!r})"
