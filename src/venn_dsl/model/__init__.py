"""Venn model layer -- public type re-exports."""

from venn_dsl.model.diagnostic import Diagnostic, Severity
from venn_dsl.model.records import (
    Intersection,
    Number,
    Record,
    SetDecl,
    StyleAttribute,
    StyleDecl,
    StyleValue,
    Title,
)

__all__ = [
    # records
    "Title",
    "SetDecl",
    "Intersection",
    "StyleAttribute",
    "StyleDecl",
    "Record",
    "Number",
    "StyleValue",
    # diagnostic
    "Severity",
    "Diagnostic",
]
