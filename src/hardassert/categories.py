"""Error categories and the wrap-chain-aware matching relation.

Classification assertions compare an exception against caller-supplied
targets. A target matches when the exception itself, or anything it wraps
(``__cause__``, ``__context__``, exception group members), matches it:

- an exception class matches instances of that class;
- an exception instance matches itself, or anything comparing equal;
- an ``ErrorCategory`` matches exceptions whose ``category`` attribute is it.
"""

from typing import Any, Iterator, Optional, Union

__all__ = ['ErrorCategory', 'Target', 'iter_chain', 'matches']


class ErrorCategory:
    """A named classification carried by exceptions.

    Examples
    --------
    >>> NOT_FOUND = ErrorCategory("not found")
    >>> class RecordMissing(LookupError):
    ...     category = NOT_FOUND
    >>> matches(RecordMissing("id 7"), NOT_FOUND)
    True
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __str__(self) -> str:
        return self.name


Target = Union[type[BaseException], BaseException, ErrorCategory]


def iter_chain(actual: Optional[Any]) -> Iterator[Any]:
    """Yield ``actual`` and everything it wraps, depth first, each object once.

    Order per link: the link, its ``__cause__``, its ``__context__`` (unless
    suppressed with ``raise ... from``), then exception group members.
    """
    seen = set()
    stack = [actual]
    while stack:
        link = stack.pop()
        if link is None or id(link) in seen:
            continue
        seen.add(id(link))
        yield link

        children = [getattr(link, "__cause__", None)]
        if not getattr(link, "__suppress_context__", False):
            children.append(getattr(link, "__context__", None))
        if isinstance(link, BaseExceptionGroup):
            children.extend(link.exceptions)
        stack.extend(reversed(children))


def _link_matches(link: Any, target: Target) -> bool:
    if isinstance(target, ErrorCategory):
        return getattr(link, "category", None) is target
    if isinstance(target, type):
        return isinstance(link, target)
    return link is target or link == target


def matches(actual: Optional[Any], target: Target) -> bool:
    """True if ``actual`` or anything in its wrap chain matches ``target``.

    ``matches(None, target)`` is always False.
    """
    return any(_link_matches(link, target) for link in iter_chain(actual))
