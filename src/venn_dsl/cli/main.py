"""Venn CLI entry point: Click group with subcommands."""

import logging

import click

from venn_dsl import __version__


@click.group()
@click.version_option(version=__version__, prog_name="venn")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Venn - parse and check vennDiagram definitions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from venn_dsl.cli.parse import parse  # noqa: E402
from venn_dsl.cli.validate import validate  # noqa: E402
from venn_dsl.cli.inspect import inspect  # noqa: E402
from venn_dsl.cli.format import format_source  # noqa: E402

cli.add_command(parse)
cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(format_source)
