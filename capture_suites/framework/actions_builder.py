"""
================================================================================
Actions Builder
================================================================================

Records the page actions a suite performs before, after and during a
capture. Nothing is executed here: each call appends an action descriptor
(a dict with a ``type`` key) to the list the builder was created with.

Hooks receive the builder and the ``find`` helper:

    def before(actions, find):
        actions.wait_for_element_to_show(".menu")
        actions.click(find(".menu__toggle"))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from .errors import InvalidArgument


@dataclass(frozen=True)
class FoundElement:
    """Lazy element reference returned by ``find``."""
    selector: str


Element = Union[str, FoundElement]


def find(selector: str) -> FoundElement:
    if not isinstance(selector, str):
        raise InvalidArgument("find() accepts only a CSS selector string")
    return FoundElement(selector)


class ActionsBuilder:
    """Chainable recorder of action descriptors."""

    def __init__(self, actions: List[Dict[str, Any]]):
        self._actions = actions

    @classmethod
    def create(cls, actions: List[Dict[str, Any]]) -> "ActionsBuilder":
        return cls(actions)

    @property
    def actions(self) -> List[Dict[str, Any]]:
        return self._actions

    def wait(self, milliseconds: Union[int, float]) -> "ActionsBuilder":
        if not _is_number(milliseconds):
            raise InvalidArgument("wait() accepts only a number of milliseconds")
        return self._push("wait", milliseconds=milliseconds)

    def wait_for_element_to_show(self, selector: str, timeout: int = 1000) -> "ActionsBuilder":
        if not isinstance(selector, str):
            raise InvalidArgument("wait_for_element_to_show() accepts only a CSS selector string")
        if not _is_number(timeout):
            raise InvalidArgument("timeout must be a number")
        return self._push("wait_for_element_to_show", selector=selector, timeout=timeout)

    def click(self, element: Element) -> "ActionsBuilder":
        return self._push("click", selector=_selector_of(element, "click"))

    def focus(self, element: Element) -> "ActionsBuilder":
        return self._push("focus", selector=_selector_of(element, "focus"))

    def send_keys(self, element: Element, keys: str) -> "ActionsBuilder":
        if not isinstance(keys, str):
            raise InvalidArgument("send_keys() accepts only a string of keys")
        return self._push("send_keys", selector=_selector_of(element, "send_keys"), keys=keys)

    def set_window_size(self, width: int, height: int) -> "ActionsBuilder":
        if not (_is_number(width) and _is_number(height)):
            raise InvalidArgument("set_window_size() accepts only numeric width and height")
        return self._push("set_window_size", width=width, height=height)

    def execute_js(self, script: str) -> "ActionsBuilder":
        if not isinstance(script, str):
            raise InvalidArgument("execute_js() accepts only a script string")
        return self._push("execute_js", script=script)

    def _push(self, action_type: str, **params: Any) -> "ActionsBuilder":
        self._actions.append({"type": action_type, **params})
        return self


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _selector_of(element: Any, action: str) -> str:
    if isinstance(element, FoundElement):
        return element.selector
    if isinstance(element, str):
        return element
    raise InvalidArgument(f"{action}() accepts only a CSS selector or a find() result")


__all__ = [
    "ActionsBuilder",
    "Element",
    "FoundElement",
    "find",
]
