"""venn-dsl: parser for the vennDiagram text language."""

__version__ = "0.1.0"

from venn_dsl.model import (  # noqa: E402
    Intersection,
    Record,
    SetDecl,
    StyleAttribute,
    StyleDecl,
    Title,
)
from venn_dsl.parser import (  # noqa: E402
    LexError,
    MissingHeaderError,
    ParseError,
    VennSyntaxError,
    parse_venn,
    tokenize,
)

parse = parse_venn

__all__ = [
    "__version__",
    "parse",
    "parse_venn",
    "tokenize",
    "Title",
    "SetDecl",
    "Intersection",
    "StyleAttribute",
    "StyleDecl",
    "Record",
    "ParseError",
    "LexError",
    "VennSyntaxError",
    "MissingHeaderError",
]
