"""Pydantic schemas for hardassert.

Exports
-------
TerminatorConfig : class
    Trace capture and rendering defaults
StackFrame : class
    One resolved frame of a fatal trace
"""

from hardassert.schemas.base import HardAssertBaseModel
from hardassert.schemas.config import TerminatorConfig
from hardassert.schemas.frame import StackFrame

__all__ = [
    'HardAssertBaseModel',
    'TerminatorConfig',
    'StackFrame',
]
