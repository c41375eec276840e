"""Markers that terminate in every build mode.

Unlike ``raise``, none of these can be caught: the process ends with
status 1 after printing the message and a trace.
"""

from typing import NoReturn

from hardassert.terminator import terminate

_CALLER = 1


def panic_always(msg: str) -> NoReturn:
    """Crash with ``msg``, whatever the build mode."""
    panic_with(msg, _CALLER)


def unimplemented() -> NoReturn:
    """Signal that a scope is unimplemented and crash, whatever the build mode."""
    panic_with("reached unimplemented code", _CALLER)


def panic_with(msg: str, skip_frames: int) -> NoReturn:
    """Print ``panic: <msg>`` and terminate, skipping ``skip_frames`` above the caller."""
    terminate(skip_frames + 1, f"panic: {msg}\n")
