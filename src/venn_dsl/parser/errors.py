"""Parser error types and translation from Lark exceptions."""

from __future__ import annotations

from lark import Token
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken


class ParseError(Exception):
    """Raised when Venn diagram source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        snippet: str | None = None,
    ):
        self.line = line
        self.column = column
        self.snippet = snippet
        super().__init__(message)


class LexError(ParseError):
    """A character in the source matches no token rule."""

    def __init__(
        self,
        message: str,
        char: str,
        line: int | None = None,
        column: int | None = None,
        snippet: str | None = None,
    ):
        self.char = char
        super().__init__(message, line=line, column=column, snippet=snippet)


class VennSyntaxError(ParseError):
    """A token sequence matches no statement, or a statement has the wrong shape."""

    def __init__(
        self,
        message: str,
        expected: list[str] | None = None,
        line: int | None = None,
        column: int | None = None,
        snippet: str | None = None,
    ):
        self.expected = expected or []
        super().__init__(message, line=line, column=column, snippet=snippet)


class MissingHeaderError(VennSyntaxError):
    """The source is blank or does not start with ``vennDiagram``."""


# Human-readable names for grammar terminals.
TERMINAL_DESCRIPTIONS: dict[str, str] = {
    "HEADER": "the 'vennDiagram' header",
    "TITLE": "'title'",
    "SET": "'set'",
    "INTERSECT": "'intersect'",
    "STYLE": "'style'",
    "SIZE": "'size:'",
    "ID": "a set identifier",
    "PROPERTY": "a style property name",
    "VALUE": "a style value",
    "NUMBER": "a number",
    "STRING": "a quoted label",
    "COLON": "':'",
    "COMMA": "','",
    "_NL": "end of line",
    "$END": "end of input",
}

_STATEMENT_KEYWORDS = frozenset({"TITLE", "SET", "INTERSECT", "STYLE"})


def describe_expected(names: set[str] | frozenset[str] | list[str]) -> list[str]:
    """Turn a set of terminal names into sorted, readable descriptions."""
    remaining = set(names)
    described: list[str] = []
    if _STATEMENT_KEYWORDS <= remaining:
        remaining -= _STATEMENT_KEYWORDS
        described.append("a statement (title, set, intersect or style)")
    described.extend(sorted(TERMINAL_DESCRIPTIONS.get(n, n) for n in remaining))
    return described


def _describe_token(token: Token) -> str:
    if token.type == "_NL":
        return "end of line"
    if token.type == "$END":
        return "end of input"
    return repr(str(token))


def _source_line(source: str, line: int | None) -> str | None:
    if line is None or line < 1:
        return None
    lines = source.splitlines()
    if line > len(lines):
        return None
    return lines[line - 1].strip() or None


def _format(message: str, line: int | None, column: int | None, snippet: str | None) -> str:
    location = ""
    if line is not None and line > 0:
        location = f"line {line}"
        if column is not None and column > 0:
            location += f", column {column}"
        location += ": "
    text = f"{location}{message}"
    if snippet:
        text += f" in {snippet!r}"
    return text


def _join(descriptions: list[str]) -> str:
    if not descriptions:
        return "nothing"
    if len(descriptions) == 1:
        return descriptions[0]
    return ", ".join(descriptions[:-1]) + " or " + descriptions[-1]


def translate_lark_error(exc: UnexpectedInput, source: str) -> ParseError:
    """Map a Lark parsing exception onto the parser error taxonomy."""
    if isinstance(exc, UnexpectedCharacters):
        expected_names = set(exc.allowed or ())
        line, column = exc.line, exc.column
        if "HEADER" in expected_names:
            snippet = _source_line(source, line)
            return MissingHeaderError(
                _format("expected the 'vennDiagram' header first", line, column, snippet),
                expected=describe_expected(expected_names),
                line=line,
                column=column,
                snippet=snippet,
            )
        snippet = _source_line(source, line)
        return LexError(
            _format(f"unexpected character {exc.char!r}", line, column, snippet),
            char=exc.char,
            line=line,
            column=column,
            snippet=snippet,
        )

    if isinstance(exc, UnexpectedToken):
        token = exc.token
        expected_names = set(exc.expected or ())
        if token.type == "$END":
            line = getattr(token, "end_line", None) or token.line
            column = getattr(token, "end_column", None) or token.column
        else:
            line, column = token.line, token.column
        got = _describe_token(token)
    elif isinstance(exc, UnexpectedEOF):
        expected_names = set(exc.expected or ())
        line = column = None
        got = "end of input"
    else:
        return ParseError(str(exc))

    if line is not None and line < 1:
        line = column = None
    snippet = _source_line(source, line)
    expected = describe_expected(expected_names)
    if "HEADER" in expected_names:
        return MissingHeaderError(
            _format(f"expected the 'vennDiagram' header first, got {got}", line, column, snippet),
            expected=expected,
            line=line,
            column=column,
            snippet=snippet,
        )
    return VennSyntaxError(
        _format(f"expected {_join(expected)}, got {got}", line, column, snippet),
        expected=expected,
        line=line,
        column=column,
        snippet=snippet,
    )
