"""
================================================================================
Browser Matcher
================================================================================

Turns author-supplied browser patterns into predicates over browser ids.

A pattern is either:
    - a plain string, matched by strict equality ("chrome" matches only "chrome")
    - a compiled regular expression, matched anywhere in the id
      (re.compile("ie1") matches "ie11")

Several patterns are combined by BrowserSetPredicate:
    - inclusion mode: the id matches at least one pattern
    - exclusion mode: the id matches none of the patterns

Usage:
    >>> predicate = BrowserSetPredicate.build([re.compile("ie.+"), "chrome"])
    >>> [b for b in ["ie8", "opera", "chrome"] if predicate(b)]
    ['ie8', 'chrome']

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Sequence, Tuple, Union

from .errors import InvalidArgument


BrowserPattern = Union[str, "re.Pattern[str]"]
BrowserMatcher = Callable[[str], bool]

# Matches every browser id
UNIVERSAL_PATTERN = re.compile(".*")

PATTERNS_ERROR_MESSAGE = (
    "Browsers must be a non-empty list of strings and compiled regular expressions"
)


# ================================================================================
# Pattern Variants
# ================================================================================

@dataclass(frozen=True)
class ExactPattern:
    """Browser pattern matched by strict equality."""
    value: str

    def matches(self, browser_id: str) -> bool:
        return browser_id == self.value


@dataclass(frozen=True)
class RegexPattern:
    """Browser pattern matched anywhere in the browser id."""
    regex: "re.Pattern[str]"

    def matches(self, browser_id: str) -> bool:
        return self.regex.search(browser_id) is not None


CompiledPattern = Union[ExactPattern, RegexPattern]


def is_browser_pattern(value: Any) -> bool:
    """Return True if value is a string or a compiled text regular expression."""
    return isinstance(value, str) or (
        isinstance(value, re.Pattern) and isinstance(value.pattern, str)
    )


def compile_pattern(pattern: BrowserPattern) -> CompiledPattern:
    """
    Choose the pattern variant once, at construction time.

    Raises:
        InvalidArgument: If pattern is neither a string nor a text regex
    """
    if isinstance(pattern, str):
        return ExactPattern(pattern)
    if isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
        return RegexPattern(pattern)
    raise InvalidArgument(PATTERNS_ERROR_MESSAGE)


# ================================================================================
# Argument Normalization
# ================================================================================

def flatten_patterns(args: Iterable[Any]) -> List[Any]:
    """
    Flatten one level of list/tuple nesting.

    Used for variadic call forms, so that ``in_("a", ["b", "c"])`` and
    ``in_(["a", "b", "c"])`` produce the same sequence.
    """
    flat: List[Any] = []
    for arg in args:
        if isinstance(arg, (list, tuple)):
            flat.extend(arg)
        else:
            flat.append(arg)
    return flat


def wrap_patterns(patterns: Any) -> List[Any]:
    """Wrap a single-argument pattern into a list (a list/tuple is copied)."""
    if isinstance(patterns, (list, tuple)):
        return list(patterns)
    return [patterns]


def validate_patterns(patterns: Sequence[Any]) -> None:
    """
    Ensure patterns is a non-empty sequence of strings and regexes.

    Raises:
        InvalidArgument: On an empty sequence or any element of another type
    """
    if not patterns or not all(is_browser_pattern(p) for p in patterns):
        raise InvalidArgument(PATTERNS_ERROR_MESSAGE)


# ================================================================================
# Set Predicate
# ================================================================================

@dataclass(frozen=True)
class BrowserSetPredicate:
    """
    Predicate over a browser id built from several patterns.

    Attributes:
        patterns: Compiled patterns, in author order
        negate: Exclusion mode when True, inclusion mode otherwise
    """
    patterns: Tuple[CompiledPattern, ...]
    negate: bool = False

    @classmethod
    def build(cls, patterns: Sequence[Any], negate: bool = False) -> "BrowserSetPredicate":
        """
        Validate raw patterns and compile them into a predicate.

        Raises:
            InvalidArgument: If patterns is empty or holds unsupported values
        """
        validate_patterns(patterns)
        return cls(tuple(compile_pattern(p) for p in patterns), negate)

    def matchers(self) -> List[BrowserMatcher]:
        """Per-pattern matchers, each already negated in exclusion mode."""
        if self.negate:
            return [_negated(pattern.matches) for pattern in self.patterns]
        return [pattern.matches for pattern in self.patterns]

    def __call__(self, browser_id: str) -> bool:
        combine = all if self.negate else any
        return combine(matcher(browser_id) for matcher in self.matchers())


def _negated(matcher: BrowserMatcher) -> BrowserMatcher:
    return lambda browser_id: not matcher(browser_id)


__all__ = [
    "BrowserPattern",
    "BrowserMatcher",
    "BrowserSetPredicate",
    "CompiledPattern",
    "ExactPattern",
    "RegexPattern",
    "PATTERNS_ERROR_MESSAGE",
    "UNIVERSAL_PATTERN",
    "compile_pattern",
    "flatten_patterns",
    "is_browser_pattern",
    "validate_patterns",
    "wrap_patterns",
]
