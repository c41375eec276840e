"""Assertion surface: fatal checks selected by build mode.

The active checks are installed by default. Under ``python -O`` the
stripped no-op checks are installed instead, chosen once at import from
the compile-time ``__debug__`` constant. ``panic_always`` and
``unimplemented`` are fatal in both modes.
"""

from hardassert.assertions.mode import AssertionMode, BUILD_MODE
from hardassert.assertions.panic import panic_always, unimplemented
from hardassert.assertions.surface import ALWAYS_FATAL, CHECKS

if __debug__:
    from hardassert.assertions.active import (
        assert_,
        assert_none,
        assert_err_is,
        assert_err_is_not,
        maybe,
        unreachable,
        xassert,
        xassert_none,
        xassert_err_is,
        xassert_err_is_not,
    )
else:
    from hardassert.assertions.stripped import (
        assert_,
        assert_none,
        assert_err_is,
        assert_err_is_not,
        maybe,
        unreachable,
        xassert,
        xassert_none,
        xassert_err_is,
        xassert_err_is_not,
    )

__all__ = [
    "AssertionMode",
    "BUILD_MODE",
    *CHECKS,
    *ALWAYS_FATAL,
]
