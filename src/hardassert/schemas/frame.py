"""Transient stack frame record produced by one trace walk."""

from pydantic import ConfigDict
from hardassert.schemas.base import HardAssertBaseModel


class StackFrame(HardAssertBaseModel):
    """One resolved call-stack entry.

    ``label`` is the stripped source text at ``line`` when it could be read,
    otherwise the function name.
    """

    file: str
    line: int
    function: str
    label: str

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return f"{self.file}:{self.line}\n\t{self.label}\n\n"
