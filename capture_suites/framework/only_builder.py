"""
================================================================================
Only Builder
================================================================================

Narrowing of a suite's browser set.

Unlike skipping, narrowing removes browsers from ``suite.browsers`` at
definition time. The result keeps the original relative order and is the
seed for any child suite created afterwards.

    builder.only.in_(re.compile("ie.+"), "chrome")   # keep matching browsers
    builder.only.not_in("opera")                     # drop matching browsers
    builder.browsers("chrome", "firefox")            # same as only.in_
    builder.browsers()                               # drop every browser

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Sequence

from loguru import logger

from .browser_matcher import (
    UNIVERSAL_PATTERN,
    BrowserSetPredicate,
    flatten_patterns,
)

if TYPE_CHECKING:
    from .suite import Suite


def narrow_browsers(browsers: Sequence[str], predicate: Callable[[str], bool]) -> List[str]:
    """Return a new list with the browsers satisfying predicate, order kept."""
    return [browser for browser in browsers if predicate(browser)]


class OnlyBuilder:
    """
    Narrows ``suite.browsers`` in place.

    Both methods accept patterns as varargs, as one list, or as a mix of
    the two (one level of nesting is flattened).
    """

    def __init__(self, suite: "Suite"):
        self._suite = suite

    @classmethod
    def create(cls, suite: "Suite") -> "OnlyBuilder":
        return cls(suite)

    def in_(self, *patterns: Any) -> "OnlyBuilder":
        return self._process(patterns, negate=False)

    def not_in(self, *patterns: Any) -> "OnlyBuilder":
        return self._process(patterns, negate=True)

    def _process(self, patterns: Sequence[Any], negate: bool) -> "OnlyBuilder":
        predicate = BrowserSetPredicate.build(flatten_patterns(patterns), negate=negate)

        before = self._suite.browsers
        self._suite.browsers = narrow_browsers(before, predicate)

        logger.debug(
            f"Suite '{self._suite.full_name}': only "
            f"{'not in' if negate else 'in'} {list(predicate.patterns)}: "
            f"{before} -> {self._suite.browsers}"
        )
        return self

    def build_api(self, context: Any) -> "OnlyApi":
        """Build the author-facing ``only`` capability returning ``context``."""
        return OnlyApi(self, context)


class OnlyApi:
    """Author-facing ``only.in_`` / ``only.not_in`` plus the ``browsers`` shorthand."""

    def __init__(self, builder: OnlyBuilder, context: Any):
        self._builder = builder
        self._context = context

    def in_(self, *patterns: Any) -> Any:
        self._builder.in_(*patterns)
        return self._context

    def not_in(self, *patterns: Any) -> Any:
        self._builder.not_in(*patterns)
        return self._context

    def browsers(self, *patterns: Any) -> Any:
        """
        Shorthand for ``in_``.

        An empty call, ``browsers()`` or ``browsers([])``, excludes every
        browser instead of failing validation.
        """
        if _is_empty_call(patterns):
            return self.not_in(UNIVERSAL_PATTERN)
        return self.in_(*patterns)


def _is_empty_call(args: Sequence[Any]) -> bool:
    if not args:
        return True
    return len(args) == 1 and isinstance(args[0], (list, tuple)) and not args[0]


__all__ = [
    "OnlyApi",
    "OnlyBuilder",
    "narrow_browsers",
]
