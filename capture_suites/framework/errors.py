"""
================================================================================
Suite Definition Errors
================================================================================

Exceptions raised while a suite tree is being declared.

Author: Automation Team
License: MIT
================================================================================
"""


class InvalidArgument(TypeError):
    """Raised when a builder call receives an argument of the wrong shape."""
    pass


class SuiteDefinitionError(Exception):
    """Raised when the suite tree itself is declared inconsistently."""
    pass


__all__ = [
    "InvalidArgument",
    "SuiteDefinitionError",
]
