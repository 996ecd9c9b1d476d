"""Diagnostic model: findings about a parsed diagram, located by source line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """How much a finding matters when the diagram is drawn."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """One finding from a validation rule.

    ``line`` is the 1-based source line of the statement the finding is
    about.  It is None for records built by hand rather than parsed.
    """

    rule: str
    severity: Severity
    message: str
    set_id: str | None = None
    line: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        text = f"{self.severity.value}: {self.message}"
        if self.line is not None:
            text = f"line {self.line}: {text}"
        if self.fix:
            text += f" ({self.fix})"
        return text
