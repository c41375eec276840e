"""Stripped assertion surface, installed under ``python -O``.

Every check is a no-op: conditions are ignored and lazy producers are
never called. To keep eager arguments from being evaluated at all, guard
the call with ``if __debug__:``, which the compiler removes under ``-O``.
"""

from typing import Any, Callable, Optional

from hardassert.categories import Target


def assert_(cond: bool) -> None:
    pass


def assert_none(x: Any) -> None:
    pass


def assert_err_is(actual: Optional[BaseException], *targets: Target) -> None:
    pass


def assert_err_is_not(actual: Optional[BaseException], *targets: Target) -> None:
    pass


def maybe(cond: bool) -> None:
    pass


def unreachable() -> None:
    pass


def xassert(fn: Callable[[], bool]) -> None:
    pass


def xassert_none(fn: Callable[[], Any]) -> None:
    pass


def xassert_err_is(fn: Callable[[], Optional[BaseException]], *targets: Target) -> None:
    pass


def xassert_err_is_not(fn: Callable[[], Optional[BaseException]], *targets: Target) -> None:
    pass
