"""`hardassert` - assertions that end the process instead of raising.

A failed check prints the offending value, a stack trace labelled with the
literal source line of each frame, and exits with status 1 through
``os._exit``. No ``except``, ``finally`` or ``atexit`` hook can intercept it.

Subpackages:
- assertions: eager and lazy checks, always-fatal markers
- schemas: terminator configuration and frame records
"""

import logging

from hardassert.assertions import (
    AssertionMode,
    BUILD_MODE,
    assert_,
    assert_none,
    assert_err_is,
    assert_err_is_not,
    maybe,
    xassert,
    xassert_none,
    xassert_err_is,
    xassert_err_is_not,
    panic_always,
    unimplemented,
    unreachable,
)
from hardassert.categories import ErrorCategory, matches
from hardassert.schemas import StackFrame, TerminatorConfig
from hardassert.terminator import EXIT_STATUS, Terminator, terminate

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AssertionMode",
    "BUILD_MODE",
    "EXIT_STATUS",
    "ErrorCategory",
    "StackFrame",
    "Terminator",
    "TerminatorConfig",
    "assert_",
    "assert_none",
    "assert_err_is",
    "assert_err_is_not",
    "matches",
    "maybe",
    "panic_always",
    "terminate",
    "unimplemented",
    "unreachable",
    "xassert",
    "xassert_none",
    "xassert_err_is",
    "xassert_err_is_not",
]
