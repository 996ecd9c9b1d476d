from venn_dsl.parser.errors import LexError, MissingHeaderError, ParseError, VennSyntaxError
from venn_dsl.parser.lexer import tokenize
from venn_dsl.parser.transformer import parse_venn

__all__ = [
    "parse_venn",
    "tokenize",
    "ParseError",
    "LexError",
    "VennSyntaxError",
    "MissingHeaderError",
]
