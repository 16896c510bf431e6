"""
================================================================================
Suite Builder
================================================================================

The fluent object handed to suite-definition callbacks.

Example:
    def define(suite):
        (suite
            .set_url("/catalog")
            .set_capture_elements(".catalog")
            .only.in_(re.compile("chrome|firefox"))
            .skip.in_("firefox", "animated banner")
            .capture("plain")
            .capture("hovered", lambda actions, find: actions.focus(find(".item"))))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from loguru import logger

from .actions_builder import ActionsBuilder, find
from .browser_matcher import flatten_patterns
from .errors import InvalidArgument, SuiteDefinitionError
from .only_builder import OnlyBuilder
from .skip_builder import SkipBuilder
from .suite import State, Suite


Hook = Callable[..., Any]


class SuiteBuilder:
    """
    Author-facing builder for one suite.

    Attributes:
        skip: Callable skip capability with ``in_`` / ``not_in``
        only: Narrowing capability with ``in_`` / ``not_in``
    """

    def __init__(self, suite: Suite):
        self._suite = suite

        self.skip = SkipBuilder.create(suite).build_api(self)
        self.only = OnlyBuilder.create(suite).build_api(self)

    @property
    def suite(self) -> Suite:
        return self._suite

    def browsers(self, *patterns: Any) -> "SuiteBuilder":
        return self.only.browsers(*patterns)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_url(self, url: str) -> "SuiteBuilder":
        if not isinstance(url, str):
            raise InvalidArgument("URL must be a string")
        self._suite.url = url
        return self

    def set_tolerance(self, tolerance: float) -> "SuiteBuilder":
        if not _is_number(tolerance):
            raise InvalidArgument("tolerance must be a number")
        self._suite.tolerance = tolerance
        return self

    def set_capture_elements(self, *selectors: Any) -> "SuiteBuilder":
        flat = flatten_patterns(selectors)
        if not all(isinstance(selector, str) for selector in flat):
            raise InvalidArgument("set_capture_elements accepts only strings or lists of strings")
        self._suite.capture_selectors = flat
        return self

    def ignore_elements(self, *selectors: Any) -> "SuiteBuilder":
        flat = flatten_patterns(selectors)
        if not all(_is_ignore_selector(selector) for selector in flat):
            raise InvalidArgument(
                'ignore_elements accepts strings, dicts with an "every" string, or lists of them'
            )
        self._suite.ignore_selectors = flat
        return self

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def before(self, hook: Hook) -> "SuiteBuilder":
        """Append actions to the inherited before-actions."""
        if not callable(hook):
            raise InvalidArgument("before hook must be a function")

        actions = list(self._suite.before_actions)
        hook(ActionsBuilder.create(actions), find)
        self._suite.before_actions = actions
        return self

    def after(self, hook: Hook) -> "SuiteBuilder":
        """Prepend actions to the inherited after-actions."""
        if not callable(hook):
            raise InvalidArgument("after hook must be a function")

        actions = []
        hook(ActionsBuilder.create(actions), find)
        self._suite.after_actions = actions + self._suite.after_actions
        return self

    def capture(
        self,
        name: str,
        options: Optional[Any] = None,
        callback: Optional[Hook] = None,
    ) -> "SuiteBuilder":
        """
        Declare a named capture.

        Args:
            name: State name, unique within the suite
            options: Optional dict; supports "tolerance". May be replaced
                     by the callback: ``capture("name", callback)``
            callback: Optional hook recording the capture actions
        """
        if not isinstance(name, str):
            raise InvalidArgument("State name should be a string")

        if callback is None and not isinstance(options, dict):
            callback, options = options, None

        options = options or {}
        if callback is not None and not callable(callback):
            raise InvalidArgument("Second argument of capture must be a function")

        if self._suite.has_state_named(name):
            raise SuiteDefinitionError(
                f'State "{name}" already exists in suite "{self._suite.full_name}". '
                f"Choose a different name"
            )

        if "tolerance" in options and not _is_number(options["tolerance"]):
            raise InvalidArgument("Tolerance should be a number")

        state = State(name=name, suite=self._suite, tolerance=options.get("tolerance"))
        if callback is not None:
            callback(ActionsBuilder.create(state.actions), find)

        self._suite.add_state(state)
        logger.debug(f"Suite '{self._suite.full_name}': captured state '{name}'")
        return self


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_ignore_selector(selector: Any) -> bool:
    if isinstance(selector, str):
        return True
    return isinstance(selector, dict) and isinstance(selector.get("every"), str)


__all__ = [
    "SuiteBuilder",
]
