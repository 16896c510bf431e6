"""
================================================================================
Skip Builder
================================================================================

Conditional skipping of browsers within a suite.

A skip never removes a browser from the suite. It records a predicate and a
human-readable reason, consulted later by whoever executes the suite:

    builder.skip.in_("ie8", "flexbox is not supported")
    builder.skip.not_in(re.compile("chrome"), "only chrome renders fonts stably")
    builder.skip()                  # skip everywhere
    builder.skip([])                # records nothing

When several entries match the same browser, the comment of the entry
registered last is reported.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from loguru import logger

from .browser_matcher import (
    UNIVERSAL_PATTERN,
    BrowserMatcher,
    BrowserSetPredicate,
    wrap_patterns,
)

if TYPE_CHECKING:
    from .suite import Suite


# ================================================================================
# Skip Registry
# ================================================================================

@dataclass(frozen=True)
class SkipEntry:
    """A single skip condition with its reason."""
    matches: BrowserMatcher
    comment: Optional[str] = None


class SkipRegistry:
    """
    Append-only, ordered list of skip entries owned by one suite.

    Usage:
        >>> registry = SkipRegistry()
        >>> _ = registry.add(lambda b: b == "ie8", "legacy")
        >>> registry.should_skip("ie8"), registry.comment_for("ie8")
        (True, 'legacy')
    """

    def __init__(self) -> None:
        self._entries: List[SkipEntry] = []

    def add(self, matches: BrowserMatcher, comment: Optional[str] = None) -> SkipEntry:
        entry = SkipEntry(matches=matches, comment=comment)
        self._entries.append(entry)
        return entry

    def should_skip(self, browser_id: str) -> bool:
        """Return True if at least one entry matches browser_id."""
        return any(entry.matches(browser_id) for entry in self._entries)

    def comment_for(self, browser_id: str) -> Optional[str]:
        """
        Return the comment of the last registered entry matching browser_id.

        All entries are scanned in registration order; a later match
        overrides an earlier one. Returns None when nothing matches.
        """
        comment = None
        for entry in self._entries:
            if entry.matches(browser_id):
                comment = entry.comment
        return comment

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SkipEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> SkipEntry:
        return self._entries[index]


# ================================================================================
# Skip Builder
# ================================================================================

class SkipBuilder:
    """
    Registers skip entries on a suite.

    ``in_`` skips browsers matching any of the patterns, ``not_in`` skips
    browsers matching none of them. Both accept a single pattern or a
    list of patterns and are chainable.
    """

    def __init__(self, suite: "Suite"):
        self._suite = suite

    @classmethod
    def create(cls, suite: "Suite") -> "SkipBuilder":
        return cls(suite)

    def in_(self, patterns: Any = None, comment: Optional[str] = None) -> "SkipBuilder":
        return self._process(patterns, comment, negate=False)

    def not_in(self, patterns: Any = None, comment: Optional[str] = None) -> "SkipBuilder":
        return self._process(patterns, comment, negate=True)

    def _process(self, patterns: Any, comment: Optional[str], negate: bool) -> "SkipBuilder":
        predicate = BrowserSetPredicate.build(wrap_patterns(patterns), negate=negate)
        self._suite.add_skip(predicate, comment)

        logger.debug(
            f"Suite '{self._suite.full_name}': skip "
            f"{'not in' if negate else 'in'} {list(predicate.patterns)} "
            f"(comment={comment!r})"
        )
        return self

    def build_api(self, context: Any) -> "SkipApi":
        """Build the author-facing skip capability returning ``context``."""
        return SkipApi(self, context)


class SkipApi:
    """
    Author-facing skip capability.

    Callable itself (bare ``skip``) and exposing ``in_`` / ``not_in``.
    Every call returns the owning context so calls can be chained:

        builder.skip.in_("ie8").skip.not_in("chrome", "flaky elsewhere")
    """

    def __init__(self, builder: SkipBuilder, context: Any):
        self._builder = builder
        self._context = context

    def __call__(self, patterns: Any = None, comment: Optional[str] = None) -> Any:
        if isinstance(patterns, (list, tuple)) and not patterns:
            return self._context
        if _is_falsy_scalar(patterns):
            patterns = UNIVERSAL_PATTERN

        self._builder.in_(patterns, comment)
        return self._context

    def in_(self, patterns: Any = None, comment: Optional[str] = None) -> Any:
        self._builder.in_(patterns, comment)
        return self._context

    def not_in(self, patterns: Any = None, comment: Optional[str] = None) -> Any:
        self._builder.not_in(patterns, comment)
        return self._context


def _is_falsy_scalar(value: Any) -> bool:
    return value is None or (isinstance(value, (str, int, float)) and not value)


__all__ = [
    "SkipApi",
    "SkipBuilder",
    "SkipEntry",
    "SkipRegistry",
]
