"""Build mode for the assertion surface.

The mode is fixed when the interpreter compiles this module: ``__debug__``
is a compile-time constant, False only under ``python -O``.
"""

from enum import Enum


class AssertionMode(str, Enum):
    """Which assertion surface is installed.

    ACTIVE (default): checks run; failures terminate the process
    STRIPPED (``python -O``): checks and lazy producers are never evaluated
    """
    ACTIVE = "active"
    STRIPPED = "stripped"


BUILD_MODE = AssertionMode.ACTIVE if __debug__ else AssertionMode.STRIPPED
