"""Write records back out as Venn diagram source.

Output example:
    vennDiagram
        title Fruit
        set A size:30
        intersect A B : "Both" size:10
        style A fill:#ff0000,opacity:0.5

Parsing the output of :func:`to_text` gives back an equal record list.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Iterable

from venn_dsl.model.records import (
    Intersection,
    Number,
    Record,
    SetDecl,
    StyleDecl,
    StyleValue,
    Title,
)
from venn_dsl.parser.lexer import NUMBER_RE

__all__ = ["to_text"]

INDENT = "    "

# Mirror the ID, PROPERTY and VALUE terminals of the grammar.
_ID_RE = re.compile(r"[A-Za-z0-9_]+")
_PROPERTY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_VALUE_RE = re.compile(r"#?(?:[A-Za-z0-9_.+/-]|%(?!%))+")


def _format_number(value: Number) -> str:
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot write non-finite number {value!r}")
    text = repr(value)
    if "e" in text or "E" in text:
        # Scientific notation is not part of the grammar.
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


def _check_id(value: str) -> str:
    if not _ID_RE.fullmatch(value):
        raise ValueError(f"Invalid set identifier: {value!r}")
    return value


def _format_value(value: StyleValue) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _format_number(value)
    text = str(value)
    if not _VALUE_RE.fullmatch(text):
        raise ValueError(f"Style value cannot be written: {text!r}")
    if NUMBER_RE.fullmatch(text):
        # Would read back as a number, not a string.
        raise ValueError(f"Numeric-looking string style value: {text!r}")
    return text


def _title(record: Title) -> str:
    if "\n" in record.text or "\r" in record.text:
        raise ValueError("Title text must be a single line")
    if record.text != record.text.strip():
        raise ValueError(f"Title text has surrounding whitespace: {record.text!r}")
    if "%%" in record.text:
        raise ValueError(f"Title text would be read as a comment: {record.text!r}")
    return f"title {record.text}".rstrip()


def _set(record: SetDecl) -> str:
    parts = ["set", _check_id(record.id)]
    if record.size is not None:
        parts.append(f"size:{_format_number(record.size)}")
    return " ".join(parts)


def _intersect(record: Intersection) -> str:
    parts = ["intersect"]
    parts.extend(_check_id(s) for s in record.sets)
    if record.label is not None:
        if '"' in record.label or "\n" in record.label or "\r" in record.label:
            raise ValueError(f"Label cannot be quoted: {record.label!r}")
        parts.append(f': "{record.label}"')
    if record.size is not None:
        parts.append(f"size:{_format_number(record.size)}")
    return " ".join(parts)


def _style(record: StyleDecl) -> str:
    pairs = []
    for attribute in record.attributes:
        if not _PROPERTY_RE.fullmatch(attribute.key):
            raise ValueError(f"Invalid style property: {attribute.key!r}")
        pairs.append(f"{attribute.key}:{_format_value(attribute.value)}")
    return f"style {_check_id(record.id)} {','.join(pairs)}"


_WRITERS = {
    Title: _title,
    SetDecl: _set,
    Intersection: _intersect,
    StyleDecl: _style,
}


def to_text(records: Iterable[Record]) -> str:
    """Serialize *records* as a ``vennDiagram`` definition.

    Raises ValueError for records the grammar cannot express.
    """
    lines = ["vennDiagram"]
    for record in records:
        writer = _WRITERS.get(type(record))
        if writer is None:
            raise ValueError(f"Unknown record type: {type(record).__name__}")
        lines.append(INDENT + writer(record))  # type: ignore[operator]
    return "\n".join(lines) + "\n"
