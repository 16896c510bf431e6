"""
================================================================================
Suite Tree
================================================================================

Entry point for declaring suites.

    tree = SuiteTree(browsers=["ie8", "ie9", "chrome"])

    def header(suite):
        suite.set_url("/").set_capture_elements(".header").capture("plain")
        tree.suite("search", lambda s: s.only.in_("chrome").capture("focused"))

    tree.suite("header", header)

    for run in tree.plan():
        print(run.suite.full_name, run.browser_id, run.skipped, run.comment)

The root suite is seeded with the configured browser ids unless an explicit
list is given. Nested ``tree.suite`` calls create children of the suite
whose callback is currently running.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from loguru import logger

from .config_loader import ConfigLoader
from .errors import InvalidArgument, SuiteDefinitionError
from .suite import State, Suite
from .suite_builder import SuiteBuilder


@dataclass(frozen=True)
class PlannedRun:
    """One suite/browser pair the execution runtime will visit."""
    suite: Suite
    browser_id: str
    states: List[State]
    skipped: bool
    comment: Optional[str] = None


class SuiteTree:
    """Owns the root suite and tracks which suite is being defined."""

    def __init__(self, browsers: Optional[Sequence[str]] = None):
        self.root = Suite.create("")
        if browsers is None:
            browsers = ConfigLoader().get_browser_ids()
        self.root.browsers = list(dict.fromkeys(browsers))
        self._current = self.root

        logger.debug(f"Suite tree created for browsers {self.root.browsers}")

    def suite(self, name: str, callback: Callable[[SuiteBuilder], object]) -> Suite:
        """
        Declare a child of the suite currently being defined.

        Raises:
            InvalidArgument: If name is not a non-empty string or callback
                             is not callable
            SuiteDefinitionError: On duplicate sibling names, or if the suite
                                  captures states without url or capture elements

        A suite whose definition raises is detached from its parent.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgument("Suite name should be a non-empty string")
        if not callable(callback):
            raise InvalidArgument("Second argument of suite must be a function")

        parent = self._current
        if parent.has_child_named(name):
            where = f'suite "{parent.full_name}"' if not parent.is_root else "root"
            raise SuiteDefinitionError(f'Suite "{name}" already exists in {where}')

        child = Suite.create(name, parent)
        self._current = child
        try:
            callback(SuiteBuilder(child))
            self._check_capturing(child)
        except Exception:
            parent.remove_child(child)
            raise
        finally:
            self._current = parent

        logger.info(f"Defined suite '{child.full_name}' for browsers {child.browsers}")
        return child

    @staticmethod
    def _check_capturing(suite: Suite) -> None:
        if not suite.has_states:
            return
        if not suite.url:
            raise SuiteDefinitionError(
                f'Suite "{suite.full_name}" has states, but url is not specified'
            )
        if not suite.capture_selectors:
            raise SuiteDefinitionError(
                f'Suite "{suite.full_name}" has states, but capture elements are not specified'
            )

    def walk(self) -> Iterator[Suite]:
        """Depth-first iteration over every suite except the root."""
        stack = list(reversed(self.root.children))
        while stack:
            suite = stack.pop()
            yield suite
            stack.extend(reversed(suite.children))

    def plan(self) -> List[PlannedRun]:
        """Resolve every capturing suite against its own browsers and skips."""
        runs = []
        for suite in self.walk():
            if not suite.has_states:
                continue
            for browser_id in suite.browsers:
                runs.append(
                    PlannedRun(
                        suite=suite,
                        browser_id=browser_id,
                        states=list(suite.states),
                        skipped=suite.should_skip(browser_id),
                        comment=suite.skip_comment,
                    )
                )
        return runs


__all__ = [
    "PlannedRun",
    "SuiteTree",
]
