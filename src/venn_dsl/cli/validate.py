"""CLI command: venn validate -- report problems in a diagram file."""

from __future__ import annotations

import sys

import click

from venn_dsl.cli._common import load, vennfile_argument
from venn_dsl.model.diagnostic import Severity
from venn_dsl.validation import count_by_severity, validate_source


@click.command()
@vennfile_argument
@click.option("--strict", is_flag=True, help="Treat warnings as errors")
def validate(vennfile: str, strict: bool) -> None:
    """Parse and validate a diagram file.

    Each finding is printed as ``FILE:LINE: severity: message``.  Exits
    with status 1 when there are errors, or warnings under --strict.
    """
    diagnostics = load(vennfile, validate_source)

    for diag in diagnostics:
        location = vennfile if diag.line is None else f"{vennfile}:{diag.line}"
        message = diag.message
        if diag.fix:
            message += f" ({diag.fix})"
        click.echo(f"{location}: {diag.severity.value}: {message}")

    click.echo(f"{vennfile}: {count_by_severity(diagnostics)}")

    failing = {Severity.ERROR, Severity.WARNING} if strict else {Severity.ERROR}
    if any(d.severity in failing for d in diagnostics):
        sys.exit(1)
