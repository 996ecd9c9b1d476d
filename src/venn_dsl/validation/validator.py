"""Run the validation rules over a diagram and collect what they report."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Sequence

from venn_dsl.model.diagnostic import Diagnostic, Severity
from venn_dsl.model.records import Record
from venn_dsl.parser import parse_venn
from venn_dsl.validation.rules import ALL_RULES

logger = logging.getLogger(__name__)

RuleFunc = Callable[[Sequence[Record]], list[Diagnostic]]


class ValidationError(Exception):
    """A diagram has findings of ERROR severity."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        lines = "\n".join(f"  {d}" for d in diagnostics)
        super().__init__(f"{count_by_severity(diagnostics)}\n{lines}")


def _line_key(diagnostic: Diagnostic) -> int:
    # Findings without a line go last.
    return diagnostic.line if diagnostic.line is not None else 0x7FFFFFFF


def count_by_severity(diagnostics: Sequence[Diagnostic]) -> str:
    """Summarize *diagnostics* as e.g. ``1 error, 2 warnings``.

    Severities with no findings are left out; an empty list gives
    ``no problems``.
    """
    counts = Counter(d.severity for d in diagnostics)
    parts = []
    for severity in Severity:
        n = counts[severity]
        if not n:
            continue
        noun = severity.value
        if n != 1 and severity is not Severity.INFO:
            noun += "s"
        parts.append(f"{n} {noun}")
    return ", ".join(parts) or "no problems"


def validate(
    records: Sequence[Record], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run every rule against *records*.

    Diagnostics come back ordered by source line.  Findings on the same line
    keep the order the rules ran in.
    """
    rules: list[RuleFunc] = [*ALL_RULES, *(extra_rules or [])]
    diagnostics = [d for rule in rules for d in rule(records)]
    diagnostics.sort(key=_line_key)
    logger.debug("Validation: %s", count_by_severity(diagnostics))
    return diagnostics


def validate_source(
    source: str, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Parse *source* and validate the records it yields.

    Parse errors propagate as :class:`~venn_dsl.parser.errors.ParseError`.
    """
    return validate(parse_venn(source), extra_rules=extra_rules)


def validate_or_raise(
    records: Sequence[Record], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on any error.

    Only the ERROR findings are carried by the exception.  Without errors the
    remaining warnings and info findings are returned.
    """
    diagnostics = validate(records, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
