"""
================================================================================
Suite Definition Framework
================================================================================

Declarative suite tree with browser narrowing and conditional skipping.

Modules:
    - browser_matcher: Browser patterns and set predicates
    - skip_builder: Skip entries, registry and the ``skip`` capability
    - only_builder: Browser set narrowing (``only`` / ``browsers``)
    - suite: Suite tree nodes and capture states
    - suite_builder: Fluent builder handed to suite definitions
    - suite_tree: Entry point for declaring suites
    - actions_builder: Action recording for hooks and captures
    - config_loader: YAML configuration management

Author: Automation Team
License: MIT
================================================================================
"""

from .actions_builder import ActionsBuilder, FoundElement, find
from .browser_matcher import UNIVERSAL_PATTERN, BrowserSetPredicate, compile_pattern
from .config_loader import ConfigLoader, ConfigurationError
from .errors import InvalidArgument, SuiteDefinitionError
from .only_builder import OnlyBuilder, narrow_browsers
from .skip_builder import SkipBuilder, SkipEntry, SkipRegistry
from .suite import State, Suite
from .suite_builder import SuiteBuilder
from .suite_tree import PlannedRun, SuiteTree

__all__ = [
    "ActionsBuilder",
    "BrowserSetPredicate",
    "ConfigLoader",
    "ConfigurationError",
    "FoundElement",
    "InvalidArgument",
    "OnlyBuilder",
    "PlannedRun",
    "SkipBuilder",
    "SkipEntry",
    "SkipRegistry",
    "State",
    "Suite",
    "SuiteBuilder",
    "SuiteDefinitionError",
    "SuiteTree",
    "UNIVERSAL_PATTERN",
    "compile_pattern",
    "find",
    "narrow_browsers",
]
