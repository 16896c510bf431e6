"""
Test suites package.

Kept importable so that `run_tests.py` and IDEs can address test modules
by dotted path.
"""
