"""CLI command: venn parse -- print the parsed records as JSON."""

from __future__ import annotations

import json

import click

from venn_dsl.cli._common import load, vennfile_argument


@click.command()
@vennfile_argument
@click.option("--indent", default=2, type=int, help="JSON indentation (0 for compact)")
def parse(vennfile: str, indent: int) -> None:
    """Parse a diagram file and print its records as a JSON array."""
    records = load(vennfile)
    payload = [record.to_dict() for record in records]
    click.echo(json.dumps(payload, indent=indent or None))
