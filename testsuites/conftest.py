"""
================================================================================
Root Pytest Configuration
================================================================================

Registers project markers and provides suite fixtures shared by unit tests.

================================================================================
"""

import pytest

from capture_suites.framework import Suite


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Area markers
    config.addinivalue_line(
        "markers", "matcher: Browser pattern matching"
    )
    config.addinivalue_line(
        "markers", "skip_rules: Skip registration and queries"
    )
    config.addinivalue_line(
        "markers", "narrowing: only / browsers narrowing"
    )
    config.addinivalue_line(
        "markers", "suite_tree: Suite tree definition and inheritance"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add area markers based on the test module name."""
    area_by_module = {
        "test_browser_matcher": pytest.mark.matcher,
        "test_skip_builder": pytest.mark.skip_rules,
        "test_only_builder": pytest.mark.narrowing,
        "test_suite_tree": pytest.mark.suite_tree,
        "test_suite": pytest.mark.suite_tree,
        "test_suite_builder": pytest.mark.suite_tree,
    }
    for item in items:
        marker = area_by_module.get(item.module.__name__.rsplit(".", 1)[-1])
        if marker is not None:
            item.add_marker(marker)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Capture Suites - Suite Definition Tests",
        "=" * 60,
        "",
    ]


# ================================================================================
# Suite Fixtures
# ================================================================================

@pytest.fixture
def root_suite() -> Suite:
    """Root suite with an empty browser set; tests assign what they need."""
    return Suite.create("")


@pytest.fixture
def suite(root_suite: Suite) -> Suite:
    """A suite nested directly under root_suite."""
    return Suite.create("some-suite", root_suite)


@pytest.fixture
def make_suite(root_suite: Suite):
    """Create a child of root_suite after seeding root with the given browsers."""
    def _make(browsers, name="some-suite"):
        root_suite.browsers = list(browsers)
        return Suite.create(name, root_suite)
    return _make

