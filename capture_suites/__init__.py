"""
================================================================================
Capture Suites
================================================================================

Authoring layer for visual-regression suites: which browsers a suite runs
in, which of them are skipped and why, and how nested suites inherit that.

Modules:
    - common: Logging setup
    - framework: Suite tree, builders and configuration

Example:
    import re
    from capture_suites.framework import SuiteTree

    tree = SuiteTree(browsers=["ie8", "ie9", "opera", "chrome"])
    tree.suite("menu", lambda suite: suite.only.in_(re.compile("ie.+"), "chrome"))

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "framework",
]
