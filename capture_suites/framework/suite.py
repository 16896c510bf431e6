"""
================================================================================
Suite Tree
================================================================================

Hierarchical container for capture definitions.

Each suite owns:
    - browsers: ordered browser ids the suite targets
    - skipped: skip entries consulted at execution time
    - states: named captures with their recorded actions
    - children: nested suites

A child copies its parent's browsers, before/after actions, url, tolerance
and selectors when it is created. Later changes on either side never leak
into the other. Skip entries are not inherited.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from .browser_matcher import BrowserMatcher
from .skip_builder import SkipEntry, SkipRegistry


Selector = Union[str, Dict[str, str]]


@dataclass
class State:
    """A named capture inside a suite."""
    name: str
    suite: "Suite"
    actions: List[Dict[str, Any]] = field(default_factory=list)
    tolerance: Optional[float] = None

    @property
    def full_name(self) -> str:
        return f"{self.suite.full_name} {self.name}".strip()


class Suite:
    """
    A node of the suite tree.

    Usage:
        >>> root = Suite.create("")
        >>> root.browsers = ["ie8", "ie9", "chrome"]
        >>> child = Suite.create("header", root)
        >>> child.browsers
        ['ie8', 'ie9', 'chrome']
    """

    def __init__(self, name: str, parent: Optional["Suite"] = None):
        self.name = name
        self.parent = parent
        self.children: List["Suite"] = []
        self.states: List[State] = []

        self.skipped = SkipRegistry()
        self.skip_comment: Optional[str] = None

        if parent is None:
            self.browsers: List[str] = []
            self.before_actions: List[Dict[str, Any]] = []
            self.after_actions: List[Dict[str, Any]] = []
            self.url: Optional[str] = None
            self.tolerance: Optional[float] = None
            self.capture_selectors: List[str] = []
            self.ignore_selectors: List[Selector] = []
        else:
            self.browsers = list(parent.browsers)
            self.before_actions = list(parent.before_actions)
            self.after_actions = list(parent.after_actions)
            self.url = parent.url
            self.tolerance = parent.tolerance
            self.capture_selectors = list(parent.capture_selectors)
            self.ignore_selectors = list(parent.ignore_selectors)

    @classmethod
    def create(cls, name: str, parent: Optional["Suite"] = None) -> "Suite":
        """Create a suite and attach it to parent, if any."""
        suite = cls(name, parent)
        if parent is not None:
            parent.add_child(suite)
        logger.debug(f"Created suite '{suite.full_name}' for browsers {suite.browsers}")
        return suite

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def path(self) -> List[str]:
        """Names from the topmost non-root ancestor down to this suite."""
        if self.parent is None:
            return []
        return self.parent.path + [self.name]

    @property
    def full_name(self) -> str:
        return " ".join(self.path)

    def add_child(self, child: "Suite") -> None:
        self.children.append(child)

    def remove_child(self, child: "Suite") -> None:
        self.children.remove(child)

    def has_child_named(self, name: str) -> bool:
        return any(child.name == name for child in self.children)

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    @property
    def has_states(self) -> bool:
        return bool(self.states)

    def add_state(self, state: State) -> None:
        self.states.append(state)

    def has_state_named(self, name: str) -> bool:
        return any(state.name == name for state in self.states)

    # ------------------------------------------------------------------
    # Skipping
    # ------------------------------------------------------------------

    def add_skip(self, matches: BrowserMatcher, comment: Optional[str] = None) -> SkipEntry:
        return self.skipped.add(matches, comment)

    def should_skip(self, browser_id: str) -> bool:
        """
        Check this suite's own skip entries for browser_id.

        Also stores the comment of the last matching entry in
        ``skip_comment`` (None when nothing matches).
        """
        self.skip_comment = self.skipped.comment_for(browser_id)
        return self.skipped.should_skip(browser_id)

    def comment_for(self, browser_id: str) -> Optional[str]:
        return self.skipped.comment_for(browser_id)

    def __repr__(self) -> str:
        return f"Suite(name={self.name!r}, browsers={self.browsers!r})"


__all__ = [
    "Selector",
    "State",
    "Suite",
]
