"""Active assertion surface.

Checks run synchronously on the calling thread. On failure the offending
value (if any) is printed and the process ends through the fatal
terminator; the trace starts at the line that called the check.
"""

from typing import Any, Callable, NoReturn, Optional

from hardassert.categories import Target, matches
from hardassert.assertions.panic import panic_with
from hardassert.terminator import describe_value, terminate

# Frames between terminate() and the caller of a public check.
_CALLER = 1


def assert_(cond: bool) -> None:
    """Crash if ``cond`` is false.

    For ``assert_(x is None)`` use ``assert_none(x)``, which also prints x.
    """
    if not cond:
        terminate(_CALLER)


def assert_none(x: Any) -> None:
    """Crash if ``x`` is not None, printing it first."""
    if x is not None:
        terminate(_CALLER, describe_value(x))


def assert_err_is(actual: Optional[BaseException], *targets: Target) -> None:
    """Crash unless ``actual`` is, or wraps, one of ``targets``.

    At least one target is required and none may be None.
    """
    _check_targets(targets)
    if _first_match(actual, targets) is None:
        terminate(_CALLER, describe_value(actual))


def assert_err_is_not(actual: Optional[BaseException], *targets: Target) -> None:
    """Crash if ``actual`` is, or wraps, any of ``targets``.

    At least one target is required and none may be None.
    """
    _check_targets(targets)
    if _first_match(actual, targets) is not None:
        terminate(_CALLER, describe_value(actual))


def maybe(cond: bool) -> None:
    """Document that ``cond`` is sometimes true and sometimes false. Never fails."""


def unreachable() -> NoReturn:
    """Signal that control reached code that must never run and crash.

    A no-op in stripped builds; use ``panic_always`` to crash regardless.
    """
    panic_with("reached unreachable code", _CALLER)


def xassert(fn: Callable[[], bool]) -> None:
    """Evaluate ``fn`` once and crash if it returns a false value.

    Meant for expensive validation that ``python -O`` removes entirely:
    in a stripped build ``fn`` is never called.
    """
    if not fn():
        terminate(_CALLER)


def xassert_none(fn: Callable[[], Any]) -> None:
    x = fn()
    if x is not None:
        terminate(_CALLER, describe_value(x))


def xassert_err_is(fn: Callable[[], Optional[BaseException]], *targets: Target) -> None:
    _check_targets(targets)
    actual = fn()
    if _first_match(actual, targets) is None:
        terminate(_CALLER, describe_value(actual))


def xassert_err_is_not(fn: Callable[[], Optional[BaseException]], *targets: Target) -> None:
    _check_targets(targets)
    actual = fn()
    if _first_match(actual, targets) is not None:
        terminate(_CALLER, describe_value(actual))


def _check_targets(targets: tuple) -> None:
    # Misuse of a classification check is itself fatal; the trace starts
    # at the caller of that check.
    if len(targets) == 0:
        terminate(_CALLER + 1)
    for target in targets:
        if target is None:
            terminate(_CALLER + 1)


def _first_match(actual: Optional[BaseException], targets: tuple) -> Optional[Target]:
    for target in targets:
        if matches(actual, target):
            return target
    return None
