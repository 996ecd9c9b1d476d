"""CLI command: venn inspect -- display diagram structure."""

from __future__ import annotations

import click

from venn_dsl.cli._common import load, vennfile_argument
from venn_dsl.diagram import prepare


@click.command()
@vennfile_argument
def inspect(vennfile: str) -> None:
    """Parse a diagram file and display its sets, intersections and styles."""
    data = load(vennfile, prepare)

    if data.title:
        click.echo(f"Title: {data.title}")
    click.echo(f"Sets: {len(data.sets)}")
    click.echo(f"Intersections: {len(data.intersections)}")
    click.echo()

    click.echo("Sets:")
    for area in data.sets:
        click.echo(f"  {area.sets[0]}  size={area.size}")
    click.echo()

    click.echo("Intersections:")
    for area in data.intersections:
        parts = [f"  {' & '.join(area.sets)}", f"size={area.size}"]
        if area.label:
            parts.append(f'label="{area.label}"')
        click.echo("  ".join(parts))

    if data.styles:
        click.echo()
        click.echo("Styles:")
        for set_id, style in data.styles.items():
            pairs = ", ".join(f"{k}={v}" for k, v in style.items())
            click.echo(f"  {set_id}  {pairs}")
