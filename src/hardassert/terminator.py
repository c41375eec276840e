"""Fatal terminator: print a source-annotated stack trace and end the process.

The exit goes through ``os._exit``, not ``SystemExit``. No ``except`` clause,
``finally`` block, context manager or ``atexit`` hook in the calling code
runs once a trace has started.

Output format, innermost frame first::

    <optional message>
    <file>:<line>
    \t<source line or function name>

"""

import os
import sys
import logging
import tokenize
import traceback
from typing import Any, NoReturn, Optional, TextIO, Union

from hardassert.schemas import StackFrame, TerminatorConfig

__all__ = ['EXIT_STATUS', 'Terminator', 'terminate', 'describe_value']

logger = logging.getLogger(__name__)

EXIT_STATUS = 1

# Extra recursion depth granted while rendering a trace.
_RENDER_HEADROOM = 200


def describe_value(value: Any) -> str:
    """Render a failed value for the diagnostic stream.

    Exceptions are rendered the way a traceback ends (``ValueError: boom``),
    everything else with ``str()``.
    """
    if isinstance(value, BaseException):
        return "".join(traceback.format_exception_only(value)).rstrip("\n")
    return str(value)


class Terminator:
    """Captures, renders and exits.

    Parameters
    ----------
    config : TerminatorConfig or dict, optional
        Capture and rendering settings. Defaults to ``TerminatorConfig()``.
    stream : file-like, optional
        Explicit output stream. When omitted, ``config.stream`` names the
        ``sys`` stream, looked up at failure time.

    Usage
    -----
        Terminator({"max_frames": 5}).terminate(message="index out of sync")
    """

    def __init__(
        self,
        config: Optional[Union[dict, TerminatorConfig]] = None,
        stream: Optional[TextIO] = None,
    ):
        if config is None:
            config = TerminatorConfig()
        elif not isinstance(config, TerminatorConfig):
            config = TerminatorConfig.model_validate(config)
        self.config = config
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        if self.config.stream == "stdout":
            return sys.stdout
        return sys.stderr

    def capture(self, skip_frames: int = 0) -> list[StackFrame]:
        """Resolve the stack, starting ``skip_frames`` above the caller of capture."""
        return self._collect(sys._getframe(1), skip_frames)

    def terminate(self, skip_frames: int = 0, message: Optional[str] = None) -> NoReturn:
        """Print ``message`` and the trace, then exit with status 1.

        ``skip_frames`` counts frames above the function that called
        terminate: a wrapper passes 1 so the trace starts at its own caller.
        Never returns, and never raises: a failure while rendering still
        ends in the exit.
        """
        try:
            # The check may have fired at the recursion limit.
            sys.setrecursionlimit(sys.getrecursionlimit() + _RENDER_HEADROOM)
            stream = self.stream
            if message is not None:
                stream.write(f"{message}\n")
            for frame in self._walk(sys._getframe(1), skip_frames):
                stream.write(self._render(frame))
            logger.debug("Fatal assertion: exiting with status %d", EXIT_STATUS)
            _flush_all(stream)
        finally:
            os._exit(EXIT_STATUS)

    def _walk(self, frame, skip_frames: int) -> list:
        for _ in range(skip_frames):
            if frame is None:
                break
            frame = frame.f_back

        frames = []
        while frame is not None and len(frames) < self.config.max_frames:
            frames.append(frame)
            frame = frame.f_back
        return frames

    def _collect(self, frame, skip_frames: int) -> list[StackFrame]:
        return [self._resolve(f) for f in self._walk(frame, skip_frames)]

    def _render(self, frame) -> str:
        try:
            return self._resolve(frame).render()
        except Exception as exc:
            # Keep the location even when resolving the frame fails.
            code = frame.f_code
            logger.debug("Could not resolve frame %s: %s", code.co_name, exc)
            return f"{code.co_filename}:{frame.f_lineno}\n\t{code.co_name}\n\n"

    def _resolve(self, frame) -> StackFrame:
        code = frame.f_code
        file = code.co_filename or ""
        line = frame.f_lineno or 0
        function = getattr(code, "co_qualname", code.co_name)

        label = function
        if self.config.show_source and file and line >= 1:
            label = self._source_line(file, line, fallback=function)

        return StackFrame(file=file, line=line, function=function, label=label)

    def _open_source(self, file: str):
        if self.config.source_encoding is None:
            return tokenize.open(file)
        return open(file, encoding=self.config.source_encoding)

    def _source_line(self, file: str, line: int, fallback: str) -> str:
        # Best effort: any read failure keeps the function name.
        try:
            with self._open_source(file) as f:
                for number, text in enumerate(f, start=1):
                    if number == line:
                        return text.strip()
        except (OSError, SyntaxError, UnicodeDecodeError) as exc:
            logger.debug("Source unavailable for %s:%d: %s", file, line, exc)
            return fallback

        logger.debug("%s has fewer than %d lines", file, line)
        return fallback


def _flush_all(stream: TextIO) -> None:
    # os._exit skips interpreter shutdown, so buffered output is flushed here.
    for s in (stream, sys.stdout, sys.stderr):
        if s is None:
            continue
        try:
            s.flush()
        except (OSError, ValueError):
            continue

    for handler in logging.getLogger().handlers:
        handler.flush()


_default = Terminator()


def terminate(skip_frames: int = 0, message: Optional[str] = None) -> NoReturn:
    """Module-level terminator with default settings.

    Parameters
    ----------
    skip_frames : int, optional
        Frames to skip above the caller of terminate (default 0: the trace
        starts at the caller).
    message : str, optional
        Printed before the trace.
    """
    _default.terminate(skip_frames + 1, message)
