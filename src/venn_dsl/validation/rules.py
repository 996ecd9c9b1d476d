"""Validation rules for parsed Venn diagrams.

The parser accepts any well-formed statement without checking that the
identifiers refer to each other.  Each rule here is a function taking the
record list and returning a list of Diagnostic objects describing any
issues found.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from venn_dsl.model.diagnostic import Diagnostic, Severity
from venn_dsl.model.records import Intersection, Record, SetDecl, StyleDecl


# Style properties whose numeric values must lie in [0, 1].
UNIT_INTERVAL_PROPERTIES = frozenset({
    "opacity",
    "fill-opacity",
    "stroke-opacity",
})


def _declared_sets(records: Sequence[Record]) -> set[str]:
    return {r.id for r in records if isinstance(r, SetDecl)}


# ---------------------------------------------------------------------------
# ERROR severity
# ---------------------------------------------------------------------------


def check_negative_size(records: Sequence[Record]) -> list[Diagnostic]:
    """Sizes are relative area weights and cannot be negative."""
    diagnostics: list[Diagnostic] = []
    for record in records:
        if isinstance(record, SetDecl) and record.size is not None and record.size < 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_negative_size",
                    severity=Severity.ERROR,
                    message=f"Set '{record.id}' has negative size {record.size}.",
                    set_id=record.id,
                    line=record.line,
                    fix="Use a size of zero or more.",
                )
            )
        elif isinstance(record, Intersection) and record.size is not None and record.size < 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_negative_size",
                    severity=Severity.ERROR,
                    message=(
                        f"Intersection {' & '.join(record.sets)} has negative size "
                        f"{record.size}."
                    ),
                    line=record.line,
                    fix="Use a size of zero or more.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# WARNING severity
# ---------------------------------------------------------------------------


def check_duplicate_sets(records: Sequence[Record]) -> list[Diagnostic]:
    """Each set id should be declared once.

    Reported once per id, at the first repeated declaration.
    """
    decls = [r for r in records if isinstance(r, SetDecl)]
    counts = Counter(r.id for r in decls)
    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()
    reported: set[str] = set()
    for record in decls:
        if record.id not in seen:
            seen.add(record.id)
            continue
        if record.id in reported:
            continue
        reported.add(record.id)
        diagnostics.append(
            Diagnostic(
                rule="check_duplicate_sets",
                severity=Severity.WARNING,
                message=f"Set '{record.id}' is declared {counts[record.id]} times.",
                set_id=record.id,
                line=record.line,
                fix="Remove the extra 'set' statements.",
            )
        )
    return diagnostics


def check_intersection_sets_declared(records: Sequence[Record]) -> list[Diagnostic]:
    """Every set named by an intersection should have a 'set' statement."""
    declared = _declared_sets(records)
    diagnostics: list[Diagnostic] = []
    reported: set[str] = set()
    for record in records:
        if not isinstance(record, Intersection):
            continue
        for set_id in record.sets:
            if set_id in declared or set_id in reported:
                continue
            reported.add(set_id)
            diagnostics.append(
                Diagnostic(
                    rule="check_intersection_sets_declared",
                    severity=Severity.WARNING,
                    message=f"Intersection references undeclared set '{set_id}'.",
                    set_id=set_id,
                    line=record.line,
                    fix=f"Add 'set {set_id}'.",
                )
            )
    return diagnostics


def check_intersection_repeats(records: Sequence[Record]) -> list[Diagnostic]:
    """An intersection should not name the same set twice."""
    diagnostics: list[Diagnostic] = []
    for record in records:
        if not isinstance(record, Intersection):
            continue
        repeated = sorted(s for s, n in Counter(record.sets).items() if n > 1)
        for set_id in repeated:
            diagnostics.append(
                Diagnostic(
                    rule="check_intersection_repeats",
                    severity=Severity.WARNING,
                    message=f"Intersection names set '{set_id}' more than once.",
                    set_id=set_id,
                    line=record.line,
                )
            )
    return diagnostics


def check_style_numbers(records: Sequence[Record]) -> list[Diagnostic]:
    """Opacity-like properties take numbers between 0 and 1."""
    diagnostics: list[Diagnostic] = []
    for record in records:
        if not isinstance(record, StyleDecl):
            continue
        for attribute in record.attributes:
            if attribute.key not in UNIT_INTERVAL_PROPERTIES:
                continue
            value = attribute.value
            if isinstance(value, str) or not 0 <= value <= 1:
                diagnostics.append(
                    Diagnostic(
                        rule="check_style_numbers",
                        severity=Severity.WARNING,
                        message=(
                            f"Style '{attribute.key}' for '{record.id}' should be a "
                            f"number between 0 and 1, got {value!r}."
                        ),
                        set_id=record.id,
                        line=record.line,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# INFO severity
# ---------------------------------------------------------------------------


def check_style_target(records: Sequence[Record]) -> list[Diagnostic]:
    """A style for an id with no matching set has no effect when drawn."""
    declared = _declared_sets(records)
    diagnostics: list[Diagnostic] = []
    for record in records:
        if isinstance(record, StyleDecl) and record.id not in declared:
            diagnostics.append(
                Diagnostic(
                    rule="check_style_target",
                    severity=Severity.INFO,
                    message=f"Style targets '{record.id}', which is not a declared set.",
                    set_id=record.id,
                    line=record.line,
                )
            )
    return diagnostics


ALL_RULES = [
    check_negative_size,
    check_duplicate_sets,
    check_intersection_sets_declared,
    check_intersection_repeats,
    check_style_numbers,
    check_style_target,
]
