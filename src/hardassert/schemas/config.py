"""TerminatorConfig: expert defaults for the fatal terminator.

This is the single source of truth for how a trace is captured and
rendered. The module-level terminator is built from these defaults once,
at import, and is never mutated afterwards.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field, field_validator
from hardassert.schemas.base import HardAssertBaseModel


class TerminatorConfig(HardAssertBaseModel):
    """Trace capture and rendering settings.

    ``source_encoding`` of None reads each source file the way the
    interpreter does: from its PEP 263 coding cookie, else UTF-8.

    Usage
    -----
        config = TerminatorConfig(max_frames=10)
        Terminator(config).terminate(message="state corrupted")
    """

    max_frames: int = Field(50, ge=1, description="Maximum frames captured per trace")
    show_source: bool = Field(True, description="Label frames with their source line")
    source_encoding: Optional[str] = Field(None, description="Forced source encoding; None detects it")
    stream: Literal["stderr", "stdout"] = "stderr"

    model_config = ConfigDict(frozen=True)  # Immutable after construction

    @field_validator("stream", mode="before")
    @classmethod
    def normalize_stream(cls, v):
        """Accept any case for the stream name."""
        if isinstance(v, str):
            return v.lower().strip()
        return v
