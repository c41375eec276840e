"""Root-level pytest fixtures for the hardassert test suite.

Failed checks call ``os._exit``, which would kill the test runner. In-process
tests use ``fatal_exit`` to turn the exit into a catchable exception;
integration tests use ``run_script`` to fail inside a real child interpreter.
"""

import os
import sys
import subprocess
import textwrap
from pathlib import Path

import pytest

from hardassert import Terminator, TerminatorConfig

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


class ProcessExited(BaseException):
    """Raised by the fake ``os._exit`` installed by ``fatal_exit``."""

    def __init__(self, status):
        super().__init__(status)
        self.status = status


# =============================================================================
# Exit Fixtures
# =============================================================================

@pytest.fixture
def fatal_exit(monkeypatch):
    """Replace ``os._exit`` so a fatal failure raises ProcessExited instead.

    Yields the exception class for use with ``pytest.raises``; the
    recursion limit raised while rendering is restored afterwards.

    Examples
    --------
    >>> def test_fails(fatal_exit):
    ...     with pytest.raises(fatal_exit) as info:
    ...         assert_(False)
    ...     assert info.value.status == 1
    """
    def _fake_exit(status):
        raise ProcessExited(status)

    limit = sys.getrecursionlimit()
    monkeypatch.setattr(os, "_exit", _fake_exit)
    yield ProcessExited
    sys.setrecursionlimit(limit)


@pytest.fixture
def make_terminator():
    """Factory for terminators with custom TerminatorConfig overrides."""
    def _make(output=None, **overrides):
        return Terminator(TerminatorConfig(**overrides), stream=output)

    return _make


# =============================================================================
# Child Process Fixtures
# =============================================================================

@pytest.fixture
def run_script(tmp_path):
    """Write ``source`` to a file and run it in a fresh interpreter.

    Extra positional arguments are interpreter flags (e.g. ``"-O"``).
    Returns the CompletedProcess with text stdout/stderr; the script path
    is available as ``result.script``.
    """
    def _run(source, *flags, name="script.py", encoding="utf-8"):
        script = tmp_path / name
        script.write_text(textwrap.dedent(source), encoding=encoding)

        env = dict(os.environ)
        env.pop("PYTHONOPTIMIZE", None)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p
        )

        result = subprocess.run(
            [sys.executable, *flags, str(script)],
            capture_output=True,
            text=True,
            env=env,
            timeout=60,
        )
        result.script = script
        return result

    return _run
