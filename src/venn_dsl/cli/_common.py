"""Helpers shared by the venn subcommands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, TypeVar

import click

from venn_dsl.parser import ParseError, parse_venn

T = TypeVar("T")

vennfile_argument = click.argument(
    "vennfile", type=click.Path(exists=True, dir_okay=False)
)


def load(vennfile: str, reader: Callable[[str], T] = parse_venn) -> T:  # type: ignore[assignment]
    """Read *vennfile* and pass its text to *reader*.

    A parse error is printed as ``Parse error: ...`` on stderr and ends the
    command with exit status 1.
    """
    source = Path(vennfile).read_text(encoding="utf-8")
    try:
        return reader(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
