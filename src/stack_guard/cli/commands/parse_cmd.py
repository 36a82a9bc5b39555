"""stack-guard parse <version> - Show the parsed fields of a version."""

from __future__ import annotations

import typer

from stack_guard.cli.errors import parse_or_exit
from stack_guard.cli.options import OutputOption
from stack_guard.output.formatters import output_version


def parse_version(
    version: str = typer.Argument(help="Version string, e.g. 8.5.1 or 7.17.0-SNAPSHOT"),
    output: str = OutputOption,
) -> None:
    """Parse a version string and show its fields."""
    v = parse_or_exit(version)
    output_version(version, v, output)
