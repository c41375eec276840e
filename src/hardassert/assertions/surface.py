"""Names making up the assertion surface.

Both ``active`` and ``stripped`` implement every name in ``CHECKS`` with the
same signature. ``ALWAYS_FATAL`` names live in ``panic`` and terminate in
every build mode.
"""

EAGER_CHECKS = (
    "assert_",
    "assert_none",
    "assert_err_is",
    "assert_err_is_not",
    "maybe",
    "unreachable",
)

LAZY_CHECKS = (
    "xassert",
    "xassert_none",
    "xassert_err_is",
    "xassert_err_is_not",
)

CHECKS = EAGER_CHECKS + LAZY_CHECKS

ALWAYS_FATAL = (
    "panic_always",
    "unimplemented",
)
