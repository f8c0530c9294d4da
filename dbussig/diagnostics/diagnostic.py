"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic attached to every signature lexing/parsing error."""

    code: str
    message: str
    offset: int | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def render(self) -> str:
        location = f" at offset {self.offset}" if self.offset is not None else ""
        text = f"{self.code}{location}: {self.message}"
        if self.hint:
            text += f" ({self.hint})"
        return text
