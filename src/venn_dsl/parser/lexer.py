"""Lexer for the Venn diagram language.

Terminals are declared in ``grammar.lark`` and scanned by Lark's contextual
lexer, which only tries the terminals the parser can accept at the current
position.  That is what lets ``title`` swallow the rest of its line while
``set``, ``intersect`` and ``style`` lines are split into identifiers,
numbers, labels and style pairs.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token
from lark.exceptions import UnexpectedInput

from venn_dsl.parser.errors import translate_lark_error

__all__ = ["GRAMMAR_PATH", "get_parser", "tokenize", "parse_number", "NUMBER_RE"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Same shape as the NUMBER terminal.
NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    """Build the LALR parser once; parse state lives per call, not on the instance."""
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start="start",
    )


def parse_number(raw: str) -> int | float:
    """Convert numeric text to ``int`` when it has no decimal point, else ``float``."""
    if "." in raw:
        return float(raw)
    return int(raw)


def tokenize(source: str) -> list[Token]:
    """Scan *source* into tokens, in order, newline terminators included.

    Raises :class:`~venn_dsl.parser.errors.LexError` for a character that
    matches no token rule.  Because scanning is driven by the grammar, a token
    the grammar cannot accept at its position, or input that ends inside a
    statement, raises the matching
    :class:`~venn_dsl.parser.errors.VennSyntaxError` instead.
    """
    interactive = get_parser().parse_interactive(source)
    tokens: list[Token] = []
    try:
        for token in interactive.iter_parse():
            tokens.append(token)
        interactive.feed_eof(tokens[-1] if tokens else None)
    except UnexpectedInput as e:
        raise translate_lark_error(e, source) from e
    return tokens
