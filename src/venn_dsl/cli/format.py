"""CLI command: venn format -- print the canonical form of a diagram file."""

from __future__ import annotations

import click

from venn_dsl.cli._common import load, vennfile_argument
from venn_dsl.serializer import to_text


@click.command(name="format")
@vennfile_argument
def format_source(vennfile: str) -> None:
    """Re-print a diagram file with one normalized statement per line."""
    click.echo(to_text(load(vennfile)), nl=False)
