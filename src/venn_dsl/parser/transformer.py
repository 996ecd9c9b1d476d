"""Lark Transformer that converts a Venn parse tree into a list of records."""

from __future__ import annotations

import logging

from lark import Token, Transformer
from lark.exceptions import UnexpectedInput

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
from venn_dsl.parser.errors import translate_lark_error
from venn_dsl.parser.lexer import NUMBER_RE, get_parser, parse_number

logger = logging.getLogger(__name__)

_TITLE_KEYWORD = "title"


def _coerce_style_value(raw: str) -> StyleValue:
    """Numbers become int/float only when the whole value is numeric."""
    if NUMBER_RE.fullmatch(raw):
        return parse_number(raw)
    return raw


class _Sentinel:
    """Marker objects returned by modifier rules."""


class _Label(_Sentinel):
    def __init__(self, text: str):
        self.text = text


class _Size(_Sentinel):
    def __init__(self, value: Number):
        self.value = value


class VennTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into record objects, one per statement."""

    # ---- modifiers ----

    def label(self, items: list[Token]) -> _Label:
        raw = str(items[0])
        # Strip surrounding quotes; contents are taken verbatim.
        return _Label(raw[1:-1])

    def size(self, items: list[Token]) -> _Size:
        # items[0] is the size: marker
        return _Size(parse_number(str(items[1])))

    def attribute(self, items: list[Token]) -> StyleAttribute:
        return StyleAttribute(key=str(items[0]), value=_coerce_style_value(str(items[1])))

    # ---- statements ----

    def title_stmt(self, items: list[Token]) -> Title:
        raw = str(items[0])
        return Title(text=raw[len(_TITLE_KEYWORD):].strip(), line=items[0].line)

    def set_stmt(self, items: list[object]) -> SetDecl:
        set_id = str(items[1])
        size = None
        for item in items[2:]:
            if isinstance(item, _Size):
                size = item.value
        return SetDecl(id=set_id, size=size, line=items[0].line)  # type: ignore[attr-defined]

    def intersect_stmt(self, items: list[object]) -> Intersection:
        # Items are: keyword, id, id, ..., optional label/size in any order
        sets: list[str] = []
        label: str | None = None
        size: Number | None = None
        for item in items[1:]:
            if isinstance(item, _Label):
                label = item.text
            elif isinstance(item, _Size):
                size = item.value
            else:
                sets.append(str(item))
        return Intersection(
            sets=tuple(sets), label=label, size=size, line=items[0].line  # type: ignore[attr-defined]
        )

    def style_stmt(self, items: list[object]) -> StyleDecl:
        style_id = str(items[1])
        attributes = [item for item in items[2:] if isinstance(item, StyleAttribute)]
        return StyleDecl(
            id=style_id, attributes=tuple(attributes), line=items[0].line  # type: ignore[attr-defined]
        )

    def start(self, items: list[object]) -> list[Record]:
        # First item is the header token.
        return [
            item
            for item in items
            if isinstance(item, (Title, SetDecl, Intersection, StyleDecl))
        ]


def parse_venn(source: str) -> list[Record]:
    """Parse Venn diagram source into records, in statement order.

    Raises a :class:`~venn_dsl.parser.errors.ParseError` subclass on the
    first malformed statement; no partial result is returned.
    """
    parser = get_parser()
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        raise translate_lark_error(e, source) from e
    records: list[Record] = VennTransformer().transform(tree)
    logger.debug("Parsed %d venn record(s)", len(records))
    return records
